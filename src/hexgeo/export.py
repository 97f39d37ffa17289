"""Mesh export payload: a JSON-serialisable description of a hexagon.

The payload is what a downstream renderer or asset pipeline would store
or send over the wire.  Writing it anywhere is left to the caller.

Functions
---------
- :func:`mesh_payload`: build the export dict
- :func:`validate_mesh_payload`: validate against :data:`MESH_PAYLOAD_SCHEMA`
"""

from __future__ import annotations

from typing import Any, Dict, List

import jsonschema

from .models import HexMesh

_EXPORT_VERSION = "1.0"

_NUMBER_ARRAY = {"type": "array", "items": {"type": "number"}}
_INDEX_ARRAY = {"type": "array", "items": {"type": "integer", "minimum": 0}}

MESH_PAYLOAD_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "hexgeo mesh payload",
    "type": "object",
    "required": ["metadata", "buffers"],
    "properties": {
        "metadata": {
            "type": "object",
            "required": ["version", "generator", "vertex_count", "triangle_count"],
            "properties": {
                "version": {"type": "string"},
                "generator": {"type": "string"},
                "vertex_count": {"type": "integer", "minimum": 1},
                "triangle_count": {"type": "integer", "minimum": 0},
                "params": {
                    "type": ["object", "null"],
                    "required": ["size", "segment", "rotate_angle", "texture_fit"],
                    "properties": {
                        "size": {"type": "number", "exclusiveMinimum": 0},
                        "segment": {"type": "integer", "minimum": 1},
                        "rotate_angle": {"type": "number"},
                        "texture_fit": {"enum": ["COVER", "CONTAIN", "FILL"]},
                    },
                },
            },
        },
        "buffers": {
            "type": "object",
            "required": ["vertices", "indices", "inverted_indices", "normals", "uvs"],
            "properties": {
                "vertices": _NUMBER_ARRAY,
                "indices": _INDEX_ARRAY,
                "inverted_indices": _INDEX_ARRAY,
                "normals": _NUMBER_ARRAY,
                "uvs": _NUMBER_ARRAY,
            },
        },
    },
}


def mesh_payload(mesh: HexMesh) -> Dict[str, Any]:
    """Build a JSON-serialisable export of *mesh*.

    The returned dict has two top-level keys:

    ``metadata``
        Export version, generator, counts and the generator params.
    ``buffers``
        The five flat buffers, unchanged.
    """
    metadata = {
        "version": _EXPORT_VERSION,
        "generator": "hexgeo.export",
        "vertex_count": mesh.vertex_count(),
        "triangle_count": mesh.triangle_count(),
        "params": mesh.params.to_dict() if mesh.params else None,
    }
    return {
        "metadata": metadata,
        "buffers": {
            "vertices": list(mesh.vertices),
            "indices": list(mesh.indices),
            "inverted_indices": list(mesh.inverted_indices),
            "normals": list(mesh.normals),
            "uvs": list(mesh.uvs),
        },
    }


def validate_mesh_payload(payload: Dict[str, Any]) -> List[str]:
    """Validate an export payload.

    Returns a list of error messages (empty = valid).  Schema errors
    come first, followed by buffer-length cross-checks.
    """
    validator = jsonschema.Draft7Validator(MESH_PAYLOAD_SCHEMA)
    errors: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path]):
        location = "/".join(str(p) for p in error.path) or "<root>"
        errors.append(f"{location}: {error.message}")
    if errors:
        return errors

    meta = payload["metadata"]
    buffers = payload["buffers"]
    n_vertices = meta["vertex_count"]
    n_triangles = meta["triangle_count"]

    if len(buffers["vertices"]) != 3 * n_vertices:
        errors.append(
            f"vertex_count mismatch: metadata says {n_vertices}, "
            f"got {len(buffers['vertices']) / 3:g}"
        )
    if len(buffers["normals"]) != len(buffers["vertices"]):
        errors.append("'normals' must have one (x, y, z) triple per vertex")
    if len(buffers["uvs"]) != 2 * n_vertices:
        errors.append("'uvs' must have one (u, v) pair per vertex")
    for key in ("indices", "inverted_indices"):
        if len(buffers[key]) != 3 * n_triangles:
            errors.append(
                f"triangle_count mismatch in '{key}': metadata says {n_triangles}, "
                f"got {len(buffers[key]) / 3:g}"
            )
        out_of_range = [i for i in buffers[key] if i >= n_vertices]
        if out_of_range:
            errors.append(f"'{key}' references missing vertex {out_of_range[0]}")
    return errors
