"""UV projection for hexagon vertex buffers.

The bounding box is taken from the six corner vertices of the outermost
ring only.  That is exact for an unrotated hexagon; after a rotation the
box is still read from the same six corners, so UVs are approximate.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from .geometry import outer_ring_level
from .models import TextureFit
from .validation import (
    InvalidParameter,
    coerce_texture_fit,
    report,
    require_vertex_buffer,
)

Extents = Tuple[float, float, float, float]


def compute_uv(vertices: Any, texture_fit: Any) -> List[float] | None:
    """Return one ``(u, v)`` pair per vertex, flattened.

    *texture_fit* picks the box the hexagon is projected into:
    ``COVER`` uses the larger extent for both axes, ``CONTAIN`` the
    smaller, and ``FILL`` keeps width and height independent.  Returns
    ``None`` (after logging) for an invalid buffer or strategy.
    """
    try:
        width, height = uv_box(vertices, texture_fit)
    except InvalidParameter as exc:
        report(exc)
        return None

    uvs: List[float] = []
    for i in range(0, len(vertices), 3):
        x = vertices[i]
        y = vertices[i + 1]
        uvs.extend(((x + width / 2) / width, (y + height / 2) / height))
    return uvs


def uv_box(vertices: Any, texture_fit: Any, *, where: str = "compute_uv") -> Tuple[float, float]:
    """Width and height of the UV box after applying *texture_fit*."""
    require_vertex_buffer(vertices, where=where, min_vertices=7)
    fit = coerce_texture_fit(texture_fit, where=where)

    min_x, max_x, min_y, max_y = corner_extents(vertices)
    width = max_x - min_x
    height = max_y - min_y

    if fit is TextureFit.COVER:
        width = height = max(width, height)
    elif fit is TextureFit.CONTAIN:
        width = height = min(width, height)
    # Only the divisors that survive the fit matter.
    if width <= 0 or height <= 0:
        raise InvalidParameter(
            where, "vertices", f"a buffer with non-zero extents under {fit.value}", vertices
        )
    return width, height


def corner_extents(vertices: Sequence[float]) -> Extents:
    """``(min_x, max_x, min_y, max_y)`` over the outer ring's six corners."""
    n_vertices = len(vertices) // 3
    level = outer_ring_level(n_vertices)
    xs: List[float] = []
    ys: List[float] = []
    for k in range(1, 7):
        vid = n_vertices - level * k
        xs.append(vertices[vid * 3])
        ys.append(vertices[vid * 3 + 1])
    return min(xs), max(xs), min(ys), max(ys)
