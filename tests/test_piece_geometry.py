"""Tests for local piece geometry."""

from __future__ import annotations

import numpy as np
import pytest

from wallmesh.generators.autotile.piece_geometry import (
    BASE_TOP_ALTERNATING_INDICES_1,
    BASE_TOP_ALTERNATING_INDICES_2,
    make_edge_base,
    make_faces,
    make_geometry,
    make_top,
)
from wallmesh.generators.autotile.pieces import Piece

# (vertices, indices) per piece: top + faces
EXPECTED_COUNTS = {
    Piece.INNER: (6 + 6, 12 + 12),
    Piece.OUTER: (4 + 6, 6 + 12),
    Piece.LEFT: (4 + 4, 6 + 6),
    Piece.RIGHT: (4 + 4, 6 + 6),
}


@pytest.mark.parametrize("piece", list(Piece))
class TestEveryPiece:
    def test_counts(self, piece, style, config):
        mesh = make_geometry(piece, style, config)
        assert (mesh.vertex_count, mesh.index_count) == EXPECTED_COUNTS[piece]

    def test_indices_in_range(self, piece, style, config):
        mesh = make_geometry(piece, style, config)
        assert mesh.indices.max() < mesh.vertex_count
        assert mesh.index_count % 3 == 0

    def test_top_first_then_faces(self, piece, style, config):
        top = make_top(piece, style, config)
        faces = make_faces(piece, style, config)
        mesh = make_geometry(piece, style, config)

        assert np.array_equal(mesh.indices[:top.index_count], top.indices)
        assert np.array_equal(mesh.indices[top.index_count:],
                              faces.indices + top.vertex_count)
        assert np.array_equal(mesh.positions[:top.vertex_count], top.positions)

    def test_top_is_flat_at_wall_height(self, piece, style, config):
        top = make_top(piece, style, config)
        assert np.all(top.positions[:, 1] == style.height_px)

    def test_faces_alternate_base_and_top(self, piece, style, config):
        faces = make_faces(piece, style, config)
        assert np.all(faces.positions[0::2, 1] == 0.0)
        assert np.all(faces.positions[1::2, 1] == style.height_px)
        # base and top share x/z
        assert np.array_equal(faces.positions[0::2, [0, 2]], faces.positions[1::2, [0, 2]])

    def test_deterministic(self, piece, style, config):
        assert make_geometry(piece, style, config) == make_geometry(piece, style, config)


class TestEdgeBase:
    def test_inner_profile(self, style, config):
        base, indices = make_edge_base(Piece.INNER, style, config)
        assert [b.space_coord_px for b in base] == [(16.0, 8.0), (8.0, 8.0), (8.0, 16.0)]
        assert [b.face_tex_offset_px_x for b in base] == [0.0, 8.0, 16.0]
        assert indices == BASE_TOP_ALTERNATING_INDICES_2

    def test_outer_profile(self, style, config):
        base, indices = make_edge_base(Piece.OUTER, style, config)
        assert [b.space_coord_px for b in base] == [(0.0, 8.0), (8.0, 8.0), (0.0, 8.0)]
        assert [b.face_tex_offset_px_x for b in base] == [0.0, 8.0, 16.0]
        assert indices == BASE_TOP_ALTERNATING_INDICES_2

    def test_left_profile(self, style, config):
        base, indices = make_edge_base(Piece.LEFT, style, config)
        assert [b.space_coord_px for b in base] == [(16.0, 8.0), (0.0, 8.0)]
        assert indices == BASE_TOP_ALTERNATING_INDICES_1

    def test_right_profile(self, style, config):
        base, indices = make_edge_base(Piece.RIGHT, style, config)
        assert [b.space_coord_px for b in base] == [(8.0, 0.0), (8.0, 16.0)]
        assert [b.face_tex_offset_px_x for b in base] == [0.0, 16.0]
        assert indices == BASE_TOP_ALTERNATING_INDICES_1


class TestTextureCoordinates:
    def test_face_rows(self, style, config):
        faces = make_faces(Piece.LEFT, style, config)
        # base row at style.height, top row at 0, shifted by the face atlas origin
        assert faces.tex_coords.tolist() == [
            [32.0, 32.0], [32.0, 0.0],
            [48.0, 32.0], [48.0, 0.0],
        ]

    def test_rect_top_atlas_offsets(self, style, config):
        assert make_top(Piece.OUTER, style, config).tex_coords[0].tolist() == [0.0, 32.0]
        assert make_top(Piece.LEFT, style, config).tex_coords[0].tolist() == [16.0, 32.0]
        assert make_top(Piece.RIGHT, style, config).tex_coords[0].tolist() == [0.0, 16.0]

    def test_rect_top_v_runs_against_z(self, style, config):
        top = make_top(Piece.RIGHT, style, config)
        # second corner is (0, 16) in x/z -> v decreases by 16
        assert top.positions[1].tolist() == [0.0, 32.0, 16.0]
        assert top.tex_coords[1].tolist() == [0.0, 0.0]

    def test_inner_top_fan(self, style, config):
        top = make_top(Piece.INNER, style, config)
        assert top.positions[:, [0, 2]].tolist() == [
            [0.0, 16.0], [8.0, 16.0], [8.0, 8.0], [0.0, 0.0], [16.0, 0.0], [16.0, 8.0],
        ]
        assert top.tex_coords[0].tolist() == [16.0, 0.0]
        assert top.tex_coords[3].tolist() == [16.0, 16.0]

    def test_top_atlas_origin_is_applied(self, config):
        from wallmesh.generators.profiles import Style
        shifted = Style(width_px=8.0, height_px=32.0,
                        face_tex_top_left_px=(32.0, 0.0), top_tex_top_left_px=(100.0, 200.0))
        top = make_top(Piece.OUTER, shifted, config)
        assert top.tex_coords[0].tolist() == [100.0, 232.0]
