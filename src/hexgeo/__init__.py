"""hexgeo: subdivided hexagon mesh generator.

Public API is organised into layers:

- **Core**: parameter record, result bundle, validation
- **Building**: ring generator and the top-level generator
- **Post-processing**: rotation, UVs, back faces, normals
- **Diagnostics**: mesh quality checks and reports
- **Export**: JSON payload and schema validation
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ── Core ────────────────────────────────────────────────────────────
from .models import (
    COVER,
    CONTAIN,
    FILL,
    HexMesh,
    HexParams,
    TextureFit,
)
from .validation import InvalidParameter, check_params
from .geometry import (
    index_count,
    outer_ring_level,
    ring_offset,
    ring_triangle_count,
    ring_vertex_count,
    triangle_count,
    triangular_number,
    vertex_count,
)

# ── Building ────────────────────────────────────────────────────────
from .builders import build_hexagon, generate, generate_ring

# ── Post-processing ─────────────────────────────────────────────────
from .transforms import compute_inverted_indices, compute_normals, rotate_all, rotated
from .uv import compute_uv

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import (
    diagnostics_report,
    edge_usage,
    euler_characteristic,
    index_errors,
    mesh_quality_gates,
    min_triangle_signed_area,
    triangle_signed_areas,
)

# ── Export ──────────────────────────────────────────────────────────
from .export import MESH_PAYLOAD_SCHEMA, mesh_payload, validate_mesh_payload

__all__ = [
    # Core
    "COVER",
    "CONTAIN",
    "FILL",
    "HexMesh",
    "HexParams",
    "TextureFit",
    "InvalidParameter",
    "check_params",
    "index_count",
    "outer_ring_level",
    "ring_offset",
    "ring_triangle_count",
    "ring_vertex_count",
    "triangle_count",
    "triangular_number",
    "vertex_count",
    # Building
    "build_hexagon",
    "generate",
    "generate_ring",
    # Post-processing
    "compute_inverted_indices",
    "compute_normals",
    "compute_uv",
    "rotate_all",
    "rotated",
    # Diagnostics
    "diagnostics_report",
    "edge_usage",
    "euler_characteristic",
    "index_errors",
    "mesh_quality_gates",
    "min_triangle_signed_area",
    "triangle_signed_areas",
    # Export
    "MESH_PAYLOAD_SCHEMA",
    "mesh_payload",
    "validate_mesh_payload",
]
