from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TextureFit(str, Enum):
    """How a non-square bounding box is mapped into UV space."""

    COVER = "COVER"
    CONTAIN = "CONTAIN"
    FILL = "FILL"


COVER = TextureFit.COVER
CONTAIN = TextureFit.CONTAIN
FILL = TextureFit.FILL

DEFAULT_SIZE = 10.0
DEFAULT_SEGMENT = 1
DEFAULT_ROTATE_ANGLE = 0.0
DEFAULT_TEXTURE_FIT = TextureFit.COVER


@dataclass(frozen=True)
class HexParams:
    """Normalized generator parameters.

    *size* is the hexagon edge length, *segment* the number of rings,
    *rotate_angle* a rotation about Z in radians and *texture_fit* the
    UV fitting strategy.
    """

    size: float = DEFAULT_SIZE
    segment: int = DEFAULT_SEGMENT
    rotate_angle: float = DEFAULT_ROTATE_ANGLE
    texture_fit: TextureFit = DEFAULT_TEXTURE_FIT

    @classmethod
    def defaults(cls) -> "HexParams":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "segment": self.segment,
            "rotate_angle": self.rotate_angle,
            "texture_fit": self.texture_fit.value,
        }


@dataclass
class HexMesh:
    """Flat buffers describing a subdivided hexagon.

    ``vertices`` and ``normals`` hold (x, y, z) triples, ``uvs`` holds
    (u, v) pairs, and ``indices`` / ``inverted_indices`` hold one
    triangle per triple with opposite winding.
    """

    vertices: List[float]
    indices: List[int]
    inverted_indices: List[int]
    normals: List[float]
    uvs: List[float]
    params: Optional[HexParams] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertices": list(self.vertices),
            "indices": list(self.indices),
            "inverted_indices": list(self.inverted_indices),
            "normals": list(self.normals),
            "uvs": list(self.uvs),
            "params": self.params.to_dict() if self.params else None,
            "metadata": dict(self.metadata),
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def as_arrays(self) -> Dict[str, Any]:
        """Return the buffers as shaped numpy arrays.

        Positions and normals are ``float32`` of shape ``(n, 3)``, UVs
        ``float32`` of shape ``(n, 2)`` and both index buffers ``uint32``
        of shape ``(t, 3)``.
        """
        import numpy as np

        return {
            "vertices": np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3),
            "indices": np.asarray(self.indices, dtype=np.uint32).reshape(-1, 3),
            "inverted_indices": np.asarray(self.inverted_indices, dtype=np.uint32).reshape(-1, 3),
            "normals": np.asarray(self.normals, dtype=np.float32).reshape(-1, 3),
            "uvs": np.asarray(self.uvs, dtype=np.float32).reshape(-1, 2),
        }
