"""Vector helpers and ring bookkeeping shared across the package.

Rings are numbered from 1 (innermost) to ``segment`` (outermost).  Ring
0 is the centre vertex alone, stored at flat index 0.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

DEGREE_60 = math.pi / 3

Vec2 = Tuple[float, float]


def rotate_vector(point: Sequence[float], angle: float) -> Vec2:
    """Rotate a 2D point counter-clockwise by *angle* radians."""
    sin_a = math.sin(angle)
    cos_a = math.cos(angle)
    return (
        point[0] * cos_a - point[1] * sin_a,
        point[0] * sin_a + point[1] * cos_a,
    )


def sum_vector(a: Sequence[float], b: Sequence[float]) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def triangular_number(n: int) -> int:
    """``T(n) = n(n+1)/2``; zero for ``n <= 0``."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


def ring_vertex_count(level: int) -> int:
    """Vertices contributed by ring *level* (the centre counts for ring 0)."""
    if level < 0:
        raise ValueError("level must be >= 0")
    return 6 * level if level else 1


def ring_offset(level: int) -> int:
    """Flat vertex index of the first vertex of ring *level*."""
    if level < 0:
        raise ValueError("level must be >= 0")
    if level == 0:
        return 0
    return 6 * triangular_number(level - 1) + 1


def ring_triangle_count(level: int) -> int:
    """Triangles joining ring *level* to ring ``level - 1``."""
    if level < 1:
        raise ValueError("level must be >= 1")
    return 6 * (2 * level - 1)


def vertex_count(segment: int) -> int:
    if segment < 0:
        raise ValueError("segment must be >= 0")
    return 1 + 3 * segment * (segment + 1)


def triangle_count(segment: int) -> int:
    if segment < 0:
        raise ValueError("segment must be >= 0")
    return 6 * segment * segment


def index_count(segment: int) -> int:
    return 3 * triangle_count(segment)


def outer_ring_level(n_vertices: int) -> int:
    """Outermost ring of a hexagon holding *n_vertices* vertices.

    Inverse of :func:`vertex_count`, rounded down for partial buffers.
    """
    if n_vertices < 1:
        raise ValueError("n_vertices must be >= 1")
    return math.isqrt((n_vertices - 1) // 3)
