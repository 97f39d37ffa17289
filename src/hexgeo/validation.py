"""Parameter and buffer validation.

Every public entry point funnels its inputs through these checks.  A
violated contract raises :class:`InvalidParameter`; the log-and-return
entry points catch it and hand it to :func:`report`.
"""

from __future__ import annotations

import logging
import math
import numbers
import reprlib
from collections.abc import MutableSequence
from typing import Any, Sequence

from .models import (
    DEFAULT_ROTATE_ANGLE,
    DEFAULT_SEGMENT,
    DEFAULT_SIZE,
    DEFAULT_TEXTURE_FIT,
    HexParams,
    TextureFit,
)

logger = logging.getLogger(__name__)

_FIT_NAMES = "'COVER', 'CONTAIN' or 'FILL'"


class InvalidParameter(ValueError):
    """An input violated its type, shape or range contract."""

    def __init__(self, where: str, field: str, expected: str, value: Any) -> None:
        self.where = where
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(
            f"hexgeo: {where}: {field} must be {expected}, "
            f"instead of {type(value).__name__} with value {reprlib.repr(value)}"
        )


def report(exc: InvalidParameter) -> None:
    """Emit *exc* on the package's diagnostic channel."""
    logger.error("%s", exc)


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_params(
    size: Any = None,
    segment: Any = None,
    rotate_angle: Any = None,
    texture_fit: Any = None,
    *,
    where: str = "generate",
) -> HexParams:
    """Apply defaults to omitted inputs and validate the rest.

    Raises :class:`InvalidParameter` on the first violated field.
    """
    size = DEFAULT_SIZE if size is None else size
    segment = DEFAULT_SEGMENT if segment is None else segment
    rotate_angle = DEFAULT_ROTATE_ANGLE if rotate_angle is None else rotate_angle
    texture_fit = DEFAULT_TEXTURE_FIT if texture_fit is None else texture_fit

    if not is_number(size) or not math.isfinite(size) or size <= 0:
        raise InvalidParameter(where, "size", "a positive number", size)
    if not _is_positive_integer(segment):
        raise InvalidParameter(where, "segment", "a positive integer", segment)
    if not is_number(rotate_angle) or not math.isfinite(rotate_angle):
        raise InvalidParameter(where, "rotate_angle", "a finite number", rotate_angle)
    fit = coerce_texture_fit(texture_fit, where=where)

    return HexParams(
        size=float(size),
        segment=int(segment),
        rotate_angle=float(rotate_angle),
        texture_fit=fit,
    )


def coerce_texture_fit(value: Any, *, where: str, field: str = "texture_fit") -> TextureFit:
    if isinstance(value, str):
        try:
            return TextureFit(value)
        except ValueError:
            pass
    raise InvalidParameter(where, field, f"either {_FIT_NAMES}", value)


def require_vertex_buffer(
    vertices: Any,
    *,
    where: str,
    mutable: bool = False,
    min_vertices: int = 0,
) -> Sequence[float]:
    """Check *vertices* is a flat (x, y, z) buffer.

    *mutable* demands an in-place writable sequence.  Every element is
    checked before the caller gets to write anything.
    """
    if mutable:
        ok = isinstance(vertices, MutableSequence)
        expected = "a mutable flat sequence of (x, y, z) triples"
    else:
        ok = isinstance(vertices, (list, tuple))
        expected = "a flat sequence of (x, y, z) triples"
    if not ok or len(vertices) % 3 != 0:
        raise InvalidParameter(where, "vertices", expected, vertices)
    if not all(is_number(v) for v in vertices):
        raise InvalidParameter(where, "vertices", "a buffer of numbers", vertices)
    if len(vertices) // 3 < min_vertices:
        raise InvalidParameter(
            where, "vertices", f"a buffer of at least {min_vertices} vertices", vertices
        )
    return vertices


def require_index_buffer(indices: Any, *, where: str) -> Sequence[int]:
    if not isinstance(indices, (list, tuple)) or len(indices) % 3 != 0:
        raise InvalidParameter(where, "indices", "a flat sequence of index triples", indices)
    return indices


def _is_positive_integer(value: Any) -> bool:
    if not is_number(value) or value <= 0:
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()
