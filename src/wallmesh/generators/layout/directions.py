"""
Grid directions used by the autotile resolver.

Grid coordinates follow the terrain text: x grows to the east (along a row)
and y grows to the south (one text row further down). North is therefore
the -Y direction.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class CardinalDirection(Enum):
    """Axis-aligned neighbour direction."""
    NORTH = "north"  # -Y direction
    EAST = "east"    # +X direction
    SOUTH = "south"  # +Y direction
    WEST = "west"    # -X direction

    @property
    def offset(self) -> Tuple[int, int]:
        """Grid (dx, dy) step towards the neighbour in this direction."""
        return _CARDINAL_OFFSETS[self]

    def right90(self) -> 'CardinalDirection':
        """Return the direction rotated 90 degrees clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def left90(self) -> 'CardinalDirection':
        """Return the direction rotated 90 degrees counter-clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]


class OrdinalDirection(Enum):
    """Diagonal quadrant of a cell."""
    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"

    def to_cardinals(self) -> Tuple[CardinalDirection, CardinalDirection]:
        """Split the quadrant into its two adjacent cardinal directions.

        The pair is ordered clockwise, e.g. NORTH_EAST -> (NORTH, EAST).
        """
        return _ORDINAL_CARDINALS[self]


_CLOCKWISE = (
    CardinalDirection.NORTH,
    CardinalDirection.EAST,
    CardinalDirection.SOUTH,
    CardinalDirection.WEST,
)

_CARDINAL_OFFSETS = {
    CardinalDirection.NORTH: (0, -1),
    CardinalDirection.EAST: (1, 0),
    CardinalDirection.SOUTH: (0, 1),
    CardinalDirection.WEST: (-1, 0),
}

_ORDINAL_CARDINALS = {
    OrdinalDirection.NORTH_EAST: (CardinalDirection.NORTH, CardinalDirection.EAST),
    OrdinalDirection.SOUTH_EAST: (CardinalDirection.EAST, CardinalDirection.SOUTH),
    OrdinalDirection.SOUTH_WEST: (CardinalDirection.SOUTH, CardinalDirection.WEST),
    OrdinalDirection.NORTH_WEST: (CardinalDirection.WEST, CardinalDirection.NORTH),
}

# Iteration order for per-cell quarters and their geometry
ORDINAL_DIRECTIONS = (
    OrdinalDirection.NORTH_EAST,
    OrdinalDirection.SOUTH_EAST,
    OrdinalDirection.SOUTH_WEST,
    OrdinalDirection.NORTH_WEST,
)
