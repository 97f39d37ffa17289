"""Tests for rotation, back-face indices and normals."""

import math

import pytest

from hexgeo import (
    InvalidParameter,
    compute_inverted_indices,
    compute_normals,
    generate,
    rotate_all,
    rotated,
)


class TestInvertedIndices:
    def test_single_triangle(self):
        assert compute_inverted_indices([0, 1, 2]) == [0, 2, 1]

    def test_is_an_involution(self):
        mesh = generate(10, 3)
        twice = compute_inverted_indices(compute_inverted_indices(mesh.indices))
        assert twice == mesh.indices

    def test_returns_new_list(self):
        indices = [0, 1, 2, 0, 2, 3]
        inverted = compute_inverted_indices(indices)
        assert inverted is not indices
        assert indices == [0, 1, 2, 0, 2, 3]

    def test_accepts_tuple(self):
        assert compute_inverted_indices((3, 4, 5)) == [3, 5, 4]

    def test_mesh_back_faces(self):
        mesh = generate(10, 2)
        assert mesh.inverted_indices == compute_inverted_indices(mesh.indices)

    @pytest.mark.parametrize("bad", [[0, 1], "012", None, {0: 1}])
    def test_invalid(self, bad, caplog):
        assert compute_inverted_indices(bad) is None
        assert "compute_inverted_indices" in caplog.text


class TestRotateAll:
    def test_zero_angle_is_noop(self):
        mesh = generate(10, 3)
        vertices = list(mesh.vertices)
        assert rotate_all(vertices, 0) is True
        assert vertices == mesh.vertices

    def test_quarter_turn(self):
        vertices = [1.0, 0.0, 5.0]
        assert rotate_all(vertices, math.pi / 2)
        assert vertices == pytest.approx([0.0, 1.0, 5.0], abs=1e-12)

    def test_round_trip_restores_positions(self):
        mesh = generate(10, 3)
        vertices = list(mesh.vertices)
        rotate_all(vertices, 0.7)
        rotate_all(vertices, -0.7)
        assert vertices == pytest.approx(mesh.vertices, abs=1e-9)

    def test_z_untouched(self):
        vertices = [1.0, 2.0, 3.0, -4.0, 5.0, -6.0]
        rotate_all(vertices, 1.0)
        assert vertices[2] == 3.0
        assert vertices[5] == -6.0

    def test_mutates_in_place(self):
        vertices = [1.0, 0.0, 0.0]
        ref = vertices
        rotate_all(vertices, math.pi)
        assert ref is vertices
        assert vertices[0] == pytest.approx(-1.0)

    @pytest.mark.parametrize("angle", ["1", None, float("nan"), float("inf"), True])
    def test_invalid_angle_leaves_buffer(self, angle, caplog):
        vertices = [1.0, 2.0, 0.0]
        assert rotate_all(vertices, angle) is False
        assert vertices == [1.0, 2.0, 0.0]
        assert "angle must be a finite number" in caplog.text

    @pytest.mark.parametrize("bad", [[1.0, 2.0], (1.0, 2.0, 0.0), "abc", None])
    def test_invalid_buffer(self, bad, caplog):
        assert rotate_all(bad, 1.0) is False
        assert "rotate_all" in caplog.text

    @pytest.mark.parametrize("bad", ["a", None, True, [1.0]])
    def test_non_numeric_element_leaves_buffer(self, bad, caplog):
        vertices = [1.0, 0.0, 0.0, bad, 2.0, 0.0]
        before = list(vertices)
        assert rotate_all(vertices, 1.0) is False
        assert vertices == before
        assert "rotate_all: vertices must be a buffer of numbers" in caplog.text


class TestRotated:
    def test_returns_copy(self):
        vertices = (1.0, 0.0, 0.0)
        out = rotated(vertices, math.pi / 2)
        assert vertices == (1.0, 0.0, 0.0)
        assert out == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)

    def test_raises(self):
        with pytest.raises(InvalidParameter):
            rotated([1.0, 0.0], 1.0)
        with pytest.raises(InvalidParameter):
            rotated([1.0, 0.0, 0.0], "x")


class TestNormals:
    @pytest.mark.parametrize("size,segment,angle", [(10, 1, 0), (3.5, 4, 1.1), (1, 2, -math.pi / 2)])
    def test_always_plus_z(self, size, segment, angle):
        mesh = generate(size, segment, angle)
        assert mesh.normals == [0.0, 0.0, 1.0] * mesh.vertex_count()

    def test_compute_normals_any_buffer(self):
        assert compute_normals([5.0, 6.0, 7.0, 1.0, 1.0, 1.0]) == [0.0, 0.0, 1.0, 0.0, 0.0, 1.0]

    def test_compute_normals_invalid(self, caplog):
        assert compute_normals([1.0]) is None
        assert "compute_normals" in caplog.text
