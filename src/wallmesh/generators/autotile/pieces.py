"""
Autotile piece classification.

Each wall cell is split into four quarters, one per ordinal direction. The
shape of the bevel in a quarter depends only on the two cardinal
neighbours adjacent to that quarter:

    Inner:    Outer:    Left:     Right:
    #.        ..        ..        #.
    ##        #.        ##        #.

(the bottom-left cell is the wall cell being classified, the quarter points
up and to the right).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from wallmesh.generators.layout.directions import (
    CardinalDirection,
    OrdinalDirection,
    ORDINAL_DIRECTIONS,
)
from wallmesh.generators.layout.layout_types import CellCoord, CellType, WallGrid


class AutotileInvariantError(RuntimeError):
    """Raised when two quarter neighbours are not 90 degrees apart.

    This can only happen if the ordinal -> cardinal decomposition is broken,
    so it is never caught by the library.
    """


class Piece(Enum):
    """Bevel shape for one quarter of a wall cell."""
    INNER = "inner"  # Concave corner, both neighbours are wall
    OUTER = "outer"  # Convex corner, both neighbours are floor
    LEFT = "left"
    RIGHT = "right"


Neighbour = Tuple[CellType, CardinalDirection]


def choose_piece(neigh_a: Neighbour, neigh_b: Neighbour) -> Piece:
    """Pick the piece for a quarter from its two cardinal neighbours.

    The result does not depend on argument order: the wall and floor
    directions are picked out by cell type.

    Args:
        neigh_a: (cell type, direction) of the first neighbour
        neigh_b: (cell type, direction) of the second neighbour

    Returns:
        The Piece for the quarter between the two neighbours

    Raises:
        AutotileInvariantError: If a wall/floor pair is not 90 degrees apart
    """
    type_a, dir_a = neigh_a
    type_b, dir_b = neigh_b

    if type_a == CellType.FLOOR and type_b == CellType.FLOOR:
        return Piece.OUTER
    if type_a == CellType.WALL and type_b == CellType.WALL:
        return Piece.INNER

    if type_a == CellType.WALL:
        wall_direction, floor_direction = dir_a, dir_b
    else:
        wall_direction, floor_direction = dir_b, dir_a

    if wall_direction.right90() == floor_direction:
        return Piece.RIGHT
    if wall_direction.left90() == floor_direction:
        return Piece.LEFT

    raise AutotileInvariantError(
        f"Neighbours {wall_direction.value} (wall) and {floor_direction.value} (floor) "
        f"are not adjacent cardinal directions"
    )


@dataclass(frozen=True)
class Quarter:
    """Resolved piece for one (cell, ordinal direction) pair."""
    piece: Piece

    @classmethod
    def from_grid(cls, grid: WallGrid, coord: CellCoord,
                  direction: OrdinalDirection) -> 'Quarter':
        card_a, card_b = direction.to_cardinals()
        cell_type_a = grid[coord.neighbor(card_a)]
        cell_type_b = grid[coord.neighbor(card_b)]
        return cls(piece=choose_piece((cell_type_a, card_a), (cell_type_b, card_b)))


@dataclass(frozen=True)
class CellDetail:
    """The four quarters of a wall cell, in ORDINAL_DIRECTIONS order."""
    quarters: Tuple[Quarter, Quarter, Quarter, Quarter]

    @classmethod
    def outer(cls) -> 'CellDetail':
        """Detail of an isolated wall cell."""
        quarter = Quarter(piece=Piece.OUTER)
        return cls(quarters=(quarter, quarter, quarter, quarter))

    @classmethod
    def from_grid(cls, grid: WallGrid, coord: CellCoord) -> Optional['CellDetail']:
        """Resolve every quarter of the cell at coord.

        Returns:
            None for floor cells, otherwise the cell's four quarters
        """
        if grid[coord] == CellType.FLOOR:
            return None
        return cls(quarters=tuple(
            Quarter.from_grid(grid, coord, direction) for direction in ORDINAL_DIRECTIONS
        ))

    def quarter(self, direction: OrdinalDirection) -> Quarter:
        return self.quarters[ORDINAL_DIRECTIONS.index(direction)]

    def items(self):
        """Yield (direction, quarter) pairs."""
        return zip(ORDINAL_DIRECTIONS, self.quarters)
