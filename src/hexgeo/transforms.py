"""Post-processing on flat vertex and index buffers.

These work on any flat buffers, not only those built by
:func:`~builders.generate`.

Functions
---------
- :func:`rotate_all`: rotate (x, y) of every vertex **in place**
- :func:`rotated`: same rotation, returned as a new list
- :func:`compute_inverted_indices`: back-face index buffer
- :func:`compute_normals`: flat +Z normals
"""

from __future__ import annotations

import math
from typing import Any, List, MutableSequence, Sequence

from .geometry import rotate_vector
from .validation import (
    InvalidParameter,
    is_number,
    report,
    require_index_buffer,
    require_vertex_buffer,
)


def rotate_all(vertices: Any, angle: Any) -> bool:
    """Rotate every vertex about the Z axis by *angle* radians, in place.

    ``z`` is left untouched.  Returns ``False`` (after logging, without
    touching *vertices*) if the buffer or the angle is invalid.
    """
    try:
        _check_angle(angle, where="rotate_all")
        require_vertex_buffer(vertices, where="rotate_all", mutable=True)
    except InvalidParameter as exc:
        report(exc)
        return False
    _rotate_in_place(vertices, angle)
    return True


def rotated(vertices: Sequence[float], angle: float) -> List[float]:
    """Return a rotated copy of *vertices*; raises :class:`InvalidParameter`."""
    _check_angle(angle, where="rotated")
    require_vertex_buffer(vertices, where="rotated")
    out = list(vertices)
    _rotate_in_place(out, angle)
    return out


def compute_inverted_indices(indices: Any) -> List[int] | None:
    """Swap the 2nd and 3rd index of every triangle (reverse winding)."""
    try:
        require_index_buffer(indices, where="compute_inverted_indices")
    except InvalidParameter as exc:
        report(exc)
        return None

    inverted: List[int] = []
    for i in range(0, len(indices), 3):
        inverted.extend((indices[i], indices[i + 2], indices[i + 1]))
    return inverted


def compute_normals(vertices: Any) -> List[float] | None:
    """One ``(0, 0, 1)`` normal per vertex, whatever the positions are."""
    try:
        require_vertex_buffer(vertices, where="compute_normals")
    except InvalidParameter as exc:
        report(exc)
        return None
    return [0.0, 0.0, 1.0] * (len(vertices) // 3)


def _check_angle(angle: Any, *, where: str) -> None:
    if not is_number(angle) or not math.isfinite(angle):
        raise InvalidParameter(where, "angle", "a finite number", angle)


def _rotate_in_place(vertices: MutableSequence[float], angle: float) -> None:
    for i in range(0, len(vertices), 3):
        x, y = rotate_vector((vertices[i], vertices[i + 1]), angle)
        vertices[i] = x
        vertices[i + 1] = y
