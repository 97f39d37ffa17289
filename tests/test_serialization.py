import json

import numpy as np

from hexgeo import CONTAIN, generate
from hexgeo.export import MESH_PAYLOAD_SCHEMA, mesh_payload, validate_mesh_payload


def test_payload_is_valid():
    payload = mesh_payload(generate(10, 3, 0.5, CONTAIN))
    assert validate_mesh_payload(payload) == []
    assert payload["metadata"]["vertex_count"] == 37
    assert payload["metadata"]["triangle_count"] == 54
    assert payload["metadata"]["params"]["texture_fit"] == "CONTAIN"


def test_payload_survives_json():
    mesh = generate(10, 2)
    payload = mesh_payload(mesh)
    loaded = json.loads(json.dumps(payload))
    assert loaded == payload
    assert validate_mesh_payload(loaded) == []
    assert loaded["buffers"]["indices"] == mesh.indices


def test_schema_errors_reported():
    payload = mesh_payload(generate(10, 1))
    del payload["buffers"]["uvs"]
    payload["metadata"]["params"]["texture_fit"] = "STRETCH"
    errors = validate_mesh_payload(payload)
    assert any("'uvs' is a required property" in e for e in errors)
    assert any(e.startswith("metadata/params/texture_fit") for e in errors)


def test_count_mismatch_reported():
    payload = mesh_payload(generate(10, 1))
    payload["buffers"]["indices"] = payload["buffers"]["indices"][:-3]
    payload["buffers"]["inverted_indices"].extend([0, 1, 99])
    errors = validate_mesh_payload(payload)
    assert any("triangle_count mismatch in 'indices'" in e for e in errors)
    assert any("references missing vertex 99" in e for e in errors)


def test_schema_draft():
    assert MESH_PAYLOAD_SCHEMA["$schema"].startswith("http://json-schema.org/draft-07")


def test_mesh_to_json():
    mesh = generate(10, 1)
    data = json.loads(mesh.to_json())
    assert data["vertices"] == mesh.vertices
    assert data["inverted_indices"] == mesh.inverted_indices
    assert data["params"] == {"size": 10.0, "segment": 1, "rotate_angle": 0.0, "texture_fit": "COVER"}


def test_as_arrays():
    mesh = generate(10, 2)
    arrays = mesh.as_arrays()
    assert arrays["vertices"].shape == (19, 3)
    assert arrays["vertices"].dtype == np.float32
    assert arrays["indices"].shape == (24, 3)
    assert arrays["indices"].dtype == np.uint32
    assert arrays["inverted_indices"].shape == (24, 3)
    assert arrays["normals"].shape == (19, 3)
    assert arrays["uvs"].shape == (19, 2)
    assert np.array_equal(arrays["inverted_indices"][:, 1], arrays["indices"][:, 2])
    assert np.all(arrays["normals"][:, 2] == 1.0)
