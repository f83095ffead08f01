"""
Layout types for the wall grid.

This module defines the 2D grid of wall/floor cells that the autotile
builder turns into beveled wall geometry, plus the parser for the plain
text terrain format:

    ##.
    #..

where ``#`` is a wall cell and ``.`` is a floor cell, one row per line.

Lookups outside the grid always answer FLOOR. Boundary cells can then
resolve their corner pieces without any edge special-casing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Tuple

import numpy as np

from wallmesh.generators.layout.directions import CardinalDirection


class CellType(Enum):
    """Types of cells in the wall grid"""
    FLOOR = 0  # Open space
    WALL = 1   # Solid wall


# Terrain text characters
TERRAIN_CHARS = {
    '.': CellType.FLOOR,
    '#': CellType.WALL,
}


class GridParseError(ValueError):
    """Raised when terrain text cannot be turned into a grid."""


@dataclass(frozen=True)
class CellCoord:
    """Grid cell coordinate."""
    x: int
    y: int

    def __add__(self, other: 'CellCoord') -> 'CellCoord':
        return CellCoord(self.x + other.x, self.y + other.y)

    def neighbor(self, direction: CardinalDirection) -> 'CellCoord':
        """Get the neighboring cell in the given direction."""
        return self + CellCoord(*direction.offset)

    def to_world(self, cell_size: float) -> Tuple[float, float]:
        """Convert to world coordinates (center of cell)."""
        return (self.x * cell_size + cell_size / 2,
                self.y * cell_size + cell_size / 2)


@dataclass(eq=False)
class WallGrid:
    """
    Fixed-size grid of wall/floor cells.

    Cells are stored row-major in a ``(height, width)`` int8 array, origin
    at the top-left (first text row).
    """

    width: int  # Width in cells
    height: int  # Height in cells
    grid: np.ndarray = field(init=False, repr=False)  # 2D array of CellType values

    def __post_init__(self):
        """Initialize the grid after dataclass initialization"""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid size must be non-negative, got {self.width}x{self.height}")
        self.grid = np.full((self.height, self.width), CellType.FLOOR.value, dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, cell_type: CellType):
        """Set a cell in the grid (out-of-range writes are ignored)"""
        if self.in_bounds(x, y):
            self.grid[y, x] = cell_type.value

    def get_cell(self, x: int, y: int) -> CellType:
        """Get cell type at position, FLOOR for anything outside the grid"""
        if self.in_bounds(x, y):
            return CellType(int(self.grid[y, x]))
        return CellType.FLOOR

    def __getitem__(self, coord: CellCoord) -> CellType:
        return self.get_cell(coord.x, coord.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WallGrid):
            return NotImplemented
        return (self.width == other.width and self.height == other.height
                and np.array_equal(self.grid, other.grid))

    __hash__ = None

    def cells(self) -> Iterator[Tuple[CellCoord, CellType]]:
        """Iterate over all cells in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield CellCoord(x, y), CellType(int(self.grid[y, x]))

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.grid == cell_type.value))

    @classmethod
    def from_rows(cls, rows) -> 'WallGrid':
        """Build a grid from rows of CellType values (all rows equal width)."""
        rows = [list(row) for row in rows]
        width = len(rows[0]) if rows else 0
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Inconsistent width: row {y} has {len(row)} cells, expected {width}"
                )
        grid = cls(width=width, height=len(rows))
        for y, row in enumerate(rows):
            for x, cell_type in enumerate(row):
                grid.set_cell(x, y, cell_type)
        return grid

    @classmethod
    def from_text(cls, text: str) -> 'WallGrid':
        return parse_terrain(text)

    def to_text(self) -> str:
        """Render the grid back into terrain text."""
        chars = {cell_type: char for char, cell_type in TERRAIN_CHARS.items()}
        return "\n".join(
            "".join(chars[self.get_cell(x, y)] for x in range(self.width))
            for y in range(self.height)
        )


def parse_terrain(text: str) -> WallGrid:
    """Parse terrain text into a WallGrid.

    Blank lines are skipped. Every remaining line is one grid row.

    Args:
        text: Terrain text using '#' for walls and '.' for floor

    Returns:
        WallGrid with one cell per character

    Raises:
        GridParseError: On an unknown character, an empty terrain or rows of
            inconsistent width
    """
    lines = [line.rstrip("\r") for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        raise GridParseError("Terrain is empty")

    width = len(lines[0])
    rows = []
    for y, line in enumerate(lines):
        if len(line) != width:
            raise GridParseError(
                f"Inconsistent width: row {y} has {len(line)} cells, expected {width}"
            )
        row = []
        for x, char in enumerate(line):
            cell_type = TERRAIN_CHARS.get(char)
            if cell_type is None:
                raise GridParseError(f"Unknown terrain character {char!r} at row {y}, column {x}")
            row.append(cell_type)
        rows.append(row)

    return WallGrid.from_rows(rows)
