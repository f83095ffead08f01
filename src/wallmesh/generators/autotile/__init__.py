"""
Autotile pieces: classification of wall-cell quarters and their local geometry.
"""

from .pieces import (
    AutotileInvariantError,
    Piece,
    Quarter,
    CellDetail,
    choose_piece,
)
from .piece_geometry import (
    make_edge_base,
    make_faces,
    make_top,
    make_geometry,
)

__all__ = [
    'AutotileInvariantError',
    'Piece',
    'Quarter',
    'CellDetail',
    'choose_piece',
    'make_edge_base',
    'make_faces',
    'make_top',
    'make_geometry',
]
