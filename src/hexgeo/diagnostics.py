from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .geometry import outer_ring_level, triangle_count, vertex_count
from .models import HexMesh


@dataclass(frozen=True)
class EdgeStats:
    boundary: int
    interior: int
    non_manifold: int
    duplicate_directed: int

    @property
    def total(self) -> int:
        return self.boundary + self.interior + self.non_manifold


def triangle_signed_areas(vertices: Sequence[float], indices: Sequence[int]) -> List[float]:
    """Signed area of each triangle projected on the XY plane.

    Positive for counter-clockwise winding.
    """
    areas: List[float] = []
    for t in range(0, len(indices), 3):
        a, b, c = indices[t], indices[t + 1], indices[t + 2]
        ax, ay = vertices[a * 3], vertices[a * 3 + 1]
        bx, by = vertices[b * 3], vertices[b * 3 + 1]
        cx, cy = vertices[c * 3], vertices[c * 3 + 1]
        areas.append(((bx - ax) * (cy - ay) - (by - ay) * (cx - ax)) / 2.0)
    return areas


def min_triangle_signed_area(vertices: Sequence[float], indices: Sequence[int]) -> float:
    areas = triangle_signed_areas(vertices, indices)
    return min(areas) if areas else 0.0


def max_triangle_signed_area(vertices: Sequence[float], indices: Sequence[int]) -> float:
    areas = triangle_signed_areas(vertices, indices)
    return max(areas) if areas else 0.0


def index_errors(vertices: Sequence[float], indices: Sequence[int]) -> List[str]:
    """Out-of-range indices and triangles that repeat a vertex."""
    errors: List[str] = []
    n_vertices = len(vertices) // 3
    if len(indices) % 3 != 0:
        errors.append(f"Index buffer length {len(indices)} is not a multiple of 3")
        return errors
    for t in range(0, len(indices), 3):
        tri = tuple(indices[t:t + 3])
        for idx in tri:
            if not 0 <= idx < n_vertices:
                errors.append(f"Triangle {t // 3} references missing vertex {idx}")
        if len(set(tri)) != 3:
            errors.append(f"Triangle {t // 3} repeats a vertex: {tri}")
    return errors


def edge_usage(indices: Sequence[int]) -> EdgeStats:
    """Classify undirected edges by how many triangles use them."""
    directed: Counter[Tuple[int, int]] = Counter()
    for t in range(0, len(indices), 3):
        a, b, c = indices[t], indices[t + 1], indices[t + 2]
        for edge in ((a, b), (b, c), (c, a)):
            directed[edge] += 1

    undirected: Counter[Tuple[int, int]] = Counter()
    for (a, b), count in directed.items():
        undirected[(min(a, b), max(a, b))] += count

    return EdgeStats(
        boundary=sum(1 for n in undirected.values() if n == 1),
        interior=sum(1 for n in undirected.values() if n == 2),
        non_manifold=sum(1 for n in undirected.values() if n > 2),
        duplicate_directed=sum(1 for n in directed.values() if n > 1),
    )


def euler_characteristic(vertices: Sequence[float], indices: Sequence[int]) -> int:
    """``V - E + F``; a gap-free disk gives 1."""
    stats = edge_usage(indices)
    return len(vertices) // 3 - stats.total + len(indices) // 3


def mesh_quality_gates(mesh: HexMesh, area_tol: float = 1e-9) -> Dict[str, float | bool]:
    """Pass/fail checks for a generated hexagon.

    Counts are compared to the closed-form ring formulas, front faces
    must all wind counter-clockwise and back faces clockwise in XY.
    """
    segment = mesh.params.segment if mesh.params else _segment_from(mesh)
    edges = edge_usage(mesh.indices)
    front_min = min_triangle_signed_area(mesh.vertices, mesh.indices)
    back_max = max_triangle_signed_area(mesh.vertices, mesh.inverted_indices)

    counts_ok = (
        mesh.vertex_count() == vertex_count(segment)
        and mesh.triangle_count() == triangle_count(segment)
        and len(mesh.inverted_indices) == len(mesh.indices)
        and len(mesh.normals) == len(mesh.vertices)
        and len(mesh.uvs) == 2 * mesh.vertex_count()
    )
    indices_ok = not index_errors(mesh.vertices, mesh.indices)
    front_ok = front_min > area_tol
    back_ok = back_max < -area_tol
    manifold_ok = edges.non_manifold == 0 and edges.duplicate_directed == 0
    boundary_ok = edges.boundary == 6 * segment
    euler = euler_characteristic(mesh.vertices, mesh.indices)

    return {
        "counts_ok": counts_ok,
        "indices_ok": indices_ok,
        "front_min_area": front_min,
        "front_ok": front_ok,
        "back_max_area": back_max,
        "back_ok": back_ok,
        "manifold_ok": manifold_ok,
        "boundary_ok": boundary_ok,
        "euler_characteristic": euler,
        "euler_ok": euler == 1,
        "passed": (
            counts_ok and indices_ok and front_ok and back_ok
            and manifold_ok and boundary_ok and euler == 1
        ),
    }


def diagnostics_report(mesh: HexMesh) -> Dict[str, object]:
    """Build a structured diagnostics report suitable for JSON export."""
    edges = edge_usage(mesh.indices)
    return {
        "vertex_count": mesh.vertex_count(),
        "triangle_count": mesh.triangle_count(),
        "edges": {
            "boundary": edges.boundary,
            "interior": edges.interior,
            "non_manifold": edges.non_manifold,
            "duplicate_directed": edges.duplicate_directed,
        },
        "index_errors": index_errors(mesh.vertices, mesh.indices),
        "quality": mesh_quality_gates(mesh),
    }


def _segment_from(mesh: HexMesh) -> int:
    return outer_ring_level(max(mesh.vertex_count(), 1))
