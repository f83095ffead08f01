"""Tests for RelativeBuffers concatenation and transforms."""

from __future__ import annotations

import numpy as np
import pytest

from wallmesh.conversion.mesh_buffers import Attribute, RelativeBuffers
from wallmesh.conversion.transforms import rotation_y, translation


def _tri(origin: float, tex: float = 0.0) -> RelativeBuffers:
    """A single triangle with vertices offset by origin."""
    return RelativeBuffers.from_attributes(
        [
            Attribute((origin, 0.0, 0.0), (tex, 0.0)),
            Attribute((origin + 1.0, 0.0, 0.0), (tex, 1.0)),
            Attribute((origin, 0.0, 1.0), (tex, 2.0)),
        ],
        [0, 1, 2],
    )


def _quad(origin: float) -> RelativeBuffers:
    return RelativeBuffers(
        [(origin, 0, 0), (origin, 1, 0), (origin + 1, 1, 0), (origin + 1, 0, 0)],
        [(0, 0), (0, 1), (1, 1), (1, 0)],
        [0, 1, 2, 0, 2, 3],
    )


@pytest.fixture
def abc():
    return _tri(0.0), _quad(10.0), _tri(20.0, tex=5.0)


class TestConstruction:
    def test_dtypes_and_shapes(self):
        b = _quad(0.0)
        assert b.positions.dtype == np.float32 and b.positions.shape == (4, 3)
        assert b.tex_coords.dtype == np.float32 and b.tex_coords.shape == (4, 2)
        assert b.indices.dtype == np.uint32 and b.indices.shape == (6,)

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            RelativeBuffers([(0, 0, 0)], [(0, 0), (1, 1)], [])

    def test_dangling_index_rejected(self):
        with pytest.raises(ValueError, match="beyond count 1"):
            RelativeBuffers([(0, 0, 0)], [(0, 0)], [0, 1, 2])

    def test_indices_without_vertices_rejected(self):
        with pytest.raises(ValueError):
            RelativeBuffers.from_attributes([], [0])

    def test_arrays_are_read_only(self):
        b = _tri(0.0)
        with pytest.raises(ValueError):
            b.positions[0, 0] = 5.0

    def test_empty(self):
        b = RelativeBuffers.empty()
        assert b.is_empty
        assert b.vertex_count == 0 and b.index_count == 0

    def test_attributes_round_trip(self):
        b = _tri(3.0)
        assert RelativeBuffers.from_attributes(b.attributes, b.indices) == b
        assert b.attributes[1] == Attribute((4.0, 0.0, 0.0), (0.0, 1.0))


class TestConcat:
    def test_offsets_second_buffer_indices(self):
        a, b = _tri(0.0), _quad(10.0)
        merged = a.concat(b)
        assert merged.vertex_count == 7
        assert merged.indices.tolist() == [0, 1, 2, 3, 4, 5, 3, 5, 6]
        assert np.array_equal(merged.positions[3:], b.positions)

    def test_inputs_unchanged(self):
        a, b = _tri(0.0), _quad(10.0)
        a_indices = a.indices.copy()
        b_indices = b.indices.copy()
        a.concat(b)
        assert np.array_equal(a.indices, a_indices)
        assert np.array_equal(b.indices, b_indices)

    def test_associative(self, abc):
        a, b, c = abc
        left = (a + b) + c
        right = a + (b + c)
        assert left == right
        assert left.attributes == right.attributes
        assert left.resolved_triangles() == right.resolved_triangles()

    def test_empty_is_identity(self, abc):
        a = abc[0]
        assert RelativeBuffers.empty() + a == a
        assert a + RelativeBuffers.empty() == a

    def test_concat_all_matches_pairwise(self, abc):
        a, b, c = abc
        assert RelativeBuffers.concat_all([a, b, c]) == a.concat(b).concat(c)

    def test_concat_all_accepts_generators(self, abc):
        assert RelativeBuffers.concat_all(x for x in abc) == RelativeBuffers.concat_all(abc)

    def test_concat_all_empty(self):
        assert RelativeBuffers.concat_all([]).is_empty

    def test_merged_indices_stay_in_range(self, abc):
        merged = RelativeBuffers.concat_all(list(abc) * 5)
        assert merged.indices.max() < merged.vertex_count
        assert merged.index_count == 5 * sum(x.index_count for x in abc)


class TestTransform:
    def test_translation_moves_positions(self):
        b = _tri(0.0)
        moved = b.transform(translation((1.0, 2.0, 3.0)))
        assert np.allclose(moved.positions, b.positions + [1.0, 2.0, 3.0])

    def test_indices_byte_identical(self):
        b = _quad(0.0)
        moved = b.transform(translation((5.0, 0.0, 0.0)) @ rotation_y(1.0))
        assert moved.indices.tobytes() == b.indices.tobytes()
        assert moved.indices.dtype == b.indices.dtype

    def test_tex_coords_unchanged(self):
        b = _quad(0.0)
        moved = b.transform(rotation_y(2.0))
        assert np.array_equal(moved.tex_coords, b.tex_coords)

    def test_original_unchanged(self):
        b = _tri(0.0)
        before = b.positions.copy()
        b.transform(translation((9.0, 9.0, 9.0)))
        assert np.array_equal(b.positions, before)

    def test_rejects_non_4x4(self):
        with pytest.raises(ValueError):
            _tri(0.0).transform(np.identity(3))


class TestViews:
    def test_bounds(self):
        lo, hi = _quad(2.0).bounds()
        assert lo == (2.0, 0.0, 0.0)
        assert hi == (3.0, 1.0, 0.0)

    def test_counts(self):
        b = _quad(0.0)
        assert b.triangle_count == 2
        assert "vertices=4" in repr(b)
