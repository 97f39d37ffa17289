from __future__ import annotations

import logging
from typing import Any, List

from .geometry import DEGREE_60, ring_offset, rotate_vector, sum_vector
from .models import HexMesh
from .transforms import compute_inverted_indices, compute_normals, rotate_all
from .uv import compute_uv
from .validation import InvalidParameter, check_params, report

logger = logging.getLogger(__name__)


def generate(
    size: Any = None,
    segment: Any = None,
    rotate_angle: Any = None,
    texture_fit: Any = None,
) -> HexMesh | None:
    """Build a subdivided hexagon mesh.

    Omitted inputs take their defaults (``size=10``, ``segment=1``,
    ``rotate_angle=0``, ``texture_fit=COVER``).  Invalid inputs are
    logged and ``None`` is returned; no exception escapes.
    """
    try:
        return build_hexagon(size, segment, rotate_angle, texture_fit)
    except InvalidParameter as exc:
        report(exc)
        return None


def build_hexagon(
    size: Any = None,
    segment: Any = None,
    rotate_angle: Any = None,
    texture_fit: Any = None,
) -> HexMesh:
    """Like :func:`generate` but raises :class:`InvalidParameter`."""
    params = check_params(size, segment, rotate_angle, texture_fit)

    vertices: List[float] = [0.0, 0.0, 0.0]
    indices: List[int] = []
    for level in range(1, params.segment + 1):
        generate_ring(vertices, indices, params.size, level, params.segment)

    # Normals stay on +Z even when the positions are rotated.
    normals = compute_normals(vertices)

    if params.rotate_angle != 0 and not rotate_all(vertices, params.rotate_angle):
        raise InvalidParameter("generate", "rotate_angle", "a finite number", params.rotate_angle)

    uvs = compute_uv(vertices, params.texture_fit)
    inverted_indices = compute_inverted_indices(indices)

    mesh = HexMesh(
        vertices=vertices,
        indices=indices,
        inverted_indices=inverted_indices,
        normals=normals,
        uvs=uvs,
        params=params,
    )
    logger.debug(
        "hexgeo: generated segment=%d hexagon with %d vertices and %d triangles",
        params.segment, mesh.vertex_count(), mesh.triangle_count(),
    )
    return mesh


def generate_ring(
    vertices: List[float],
    indices: List[int],
    size: float,
    level: int,
    segment: int,
) -> None:
    """Append ring *level* and the triangles joining it to ring ``level - 1``.

    Each of the six sectors starts at a hexagon corner and walks
    ``level - 1`` steps along the ring edge.  Current-ring indices wrap
    modulo ``6 * level``; previous-ring indices wrap modulo
    ``6 * (level - 1)``, and collapse to the centre (index 0) for ring 1.
    """
    low = level - 1
    level_amount = level * 6
    low_amount = low * 6
    level_shift = ring_offset(level)
    low_shift = ring_offset(low)

    def cur(k: int) -> int:
        return k % level_amount + level_shift

    def prev(k: int) -> int:
        if low == 0:
            return 0
        return k % low_amount + low_shift

    for i in range(6):
        step = rotate_vector((-size / segment, 0.0), (i + 3) * -DEGREE_60)
        point = rotate_vector((-size * level / segment, 0.0), (i + 1) * -DEGREE_60)
        vertices.extend((point[0], point[1], 0.0))
        indices.extend((cur(i * level), prev(i * low), cur(i * level + 1)))

        for j in range(level - 1):
            point = sum_vector(point, step)
            vertices.extend((point[0], point[1], 0.0))
            indices.extend((
                cur(i * level + j + 1), prev(i * low + j), prev(i * low + j + 1),
                cur(i * level + j + 1), prev(i * low + j + 1), cur(i * level + j + 2),
            ))
