"""
Layout module for the wall grid.

This module provides the wall/floor cell grid, grid coordinates and the
cardinal/ordinal directions used to look up neighbouring cells.
"""

from .directions import (
    CardinalDirection,
    OrdinalDirection,
    ORDINAL_DIRECTIONS,
)
from .layout_types import (
    CellType,
    CellCoord,
    WallGrid,
    GridParseError,
    TERRAIN_CHARS,
    parse_terrain,
)

__all__ = [
    'CardinalDirection',
    'OrdinalDirection',
    'ORDINAL_DIRECTIONS',
    'CellType',
    'CellCoord',
    'WallGrid',
    'GridParseError',
    'TERRAIN_CHARS',
    'parse_terrain',
]
