"""
Local geometry for the four autotile pieces.

Every piece is built in a quadrant frame: the cell centre is the origin,
X and Z span the quadrant (in pixels) and Y is up. A piece has two parts:

- top: the flat bevel surface at height ``style.height_px``
- faces: the vertical wall strip under the bevel edge, from 0 to
  ``style.height_px``

The face strip follows an edge profile (a polyline in XZ). Each profile
point becomes a base vertex and a top vertex, alternating, so the strip
triangulates with a fixed index pattern per quad.

Parameter names used below: ``s`` is ``config.cell_size_px`` and ``w`` is
``style.width_px``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from wallmesh.conversion.mesh_buffers import Attribute, RelativeBuffers
from wallmesh.generators.autotile.pieces import Piece
from wallmesh.generators.profiles.wall_profile import Config, Style

Vec2 = Tuple[float, float]

# Face strip patterns over alternating base/top vertices
BASE_TOP_ALTERNATING_INDICES_1 = (0, 1, 2, 1, 3, 2)
BASE_TOP_ALTERNATING_INDICES_2 = (0, 1, 2, 1, 3, 2, 2, 3, 4, 3, 5, 4)

RECT_TOP_INDICES = (0, 1, 2, 0, 2, 3)
INNER_TOP_INDICES = (0, 1, 2, 0, 2, 3, 2, 4, 3, 2, 5, 4)


def _add2(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


@dataclass(frozen=True)
class BaseAttribute:
    """Point on a piece's edge profile.

    Attributes:
        face_tex_offset_px_x: Distance along the profile, used as the face texture u
        space_coord_px: (x, z) position in the quadrant frame
    """
    face_tex_offset_px_x: float
    space_coord_px: Vec2


@dataclass(frozen=True)
class TopAttribute:
    """Top-surface vertex with its texture offset inside the top atlas region."""
    tex_offset_px: Vec2
    space_coord_px: Vec2

    @classmethod
    def at(cls, piece_tex_offset_px: Vec2, space_coord_px: Vec2) -> 'TopAttribute':
        x, z = space_coord_px
        return cls(tex_offset_px=_add2(piece_tex_offset_px, (x, -z)),
                   space_coord_px=space_coord_px)


def make_edge_base(piece: Piece, style: Style,
                   config: Config) -> Tuple[List[BaseAttribute], Sequence[int]]:
    """Edge profile and face strip indices for a piece."""
    s = config.cell_size_px
    w = style.width_px

    if piece == Piece.INNER:
        return [
            BaseAttribute(0.0, (s, w)),
            # XXX Inner and Outer edges only line up with neighbouring pieces when s == 2 * w
            BaseAttribute(s - w, (w, w)),
            BaseAttribute(2.0 * (s - w), (w, s)),
        ], BASE_TOP_ALTERNATING_INDICES_2
    if piece == Piece.OUTER:
        return [
            BaseAttribute(0.0, (0.0, w)),
            BaseAttribute(w, (w, w)),
            BaseAttribute(2.0 * w, (0.0, w)),
        ], BASE_TOP_ALTERNATING_INDICES_2
    if piece == Piece.LEFT:
        return [
            BaseAttribute(0.0, (s, w)),
            BaseAttribute(s, (0.0, w)),
        ], BASE_TOP_ALTERNATING_INDICES_1
    if piece == Piece.RIGHT:
        return [
            BaseAttribute(0.0, (w, 0.0)),
            BaseAttribute(s, (w, s)),
        ], BASE_TOP_ALTERNATING_INDICES_1
    raise ValueError(f"Unknown piece: {piece!r}")


def make_faces(piece: Piece, style: Style, config: Config) -> RelativeBuffers:
    """Vertical wall strip under a piece's bevel edge."""
    edge_base, indices = make_edge_base(piece, style, config)
    h = style.height_px

    attributes = []
    for a in edge_base:
        x, z = a.space_coord_px
        u = a.face_tex_offset_px_x
        attributes.append(Attribute(
            space_coord_px=(x, 0.0, z),
            tex_coord_px=_add2((u, h), style.face_tex_top_left_px),
        ))
        attributes.append(Attribute(
            space_coord_px=(x, h, z),
            tex_coord_px=_add2((u, 0.0), style.face_tex_top_left_px),
        ))

    return RelativeBuffers.from_attributes(attributes, indices)


def make_rect_top(size: Vec2,
                  piece_tex_offset_px: Vec2) -> Tuple[List[TopAttribute], Sequence[int]]:
    sx, sz = size
    attributes = [
        TopAttribute.at(piece_tex_offset_px, (0.0, 0.0)),
        TopAttribute.at(piece_tex_offset_px, (0.0, sz)),
        TopAttribute.at(piece_tex_offset_px, (sx, sz)),
        TopAttribute.at(piece_tex_offset_px, (sx, 0.0)),
    ]
    return attributes, RECT_TOP_INDICES


def make_top(piece: Piece, style: Style, config: Config) -> RelativeBuffers:
    """Flat bevel surface of a piece."""
    s = config.cell_size_px
    w = style.width_px

    if piece == Piece.INNER:
        offset = (s, s)
        top_attributes = [
            TopAttribute.at(offset, (0.0, s)),
            TopAttribute.at(offset, (w, s)),
            TopAttribute.at(offset, (w, w)),
            TopAttribute.at(offset, (0.0, 0.0)),
            TopAttribute.at(offset, (s, 0.0)),
            TopAttribute.at(offset, (s, w)),
        ]
        indices = INNER_TOP_INDICES
    elif piece == Piece.OUTER:
        top_attributes, indices = make_rect_top((w, w), (0.0, 2.0 * s))
    elif piece == Piece.LEFT:
        top_attributes, indices = make_rect_top((s, w), (s, 2.0 * s))
    elif piece == Piece.RIGHT:
        top_attributes, indices = make_rect_top((w, s), (0.0, s))
    else:
        raise ValueError(f"Unknown piece: {piece!r}")

    attributes = [
        Attribute(
            space_coord_px=(a.space_coord_px[0], style.height_px, a.space_coord_px[1]),
            tex_coord_px=_add2(a.tex_offset_px, style.top_tex_top_left_px),
        )
        for a in top_attributes
    ]
    return RelativeBuffers.from_attributes(attributes, indices)


def make_geometry(piece: Piece, style: Style, config: Config) -> RelativeBuffers:
    """Top surface followed by the face strip, in the local quadrant frame."""
    return make_top(piece, style, config).concat(make_faces(piece, style, config))
