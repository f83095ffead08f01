"""
4x4 affine matrices for placing wall pieces.

Matrices act on column vectors ``(x, y, z, 1)``; Y is up and the grid lies
in the XZ plane (grid x -> world X, grid y -> world Z).
"""

from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from wallmesh.generators.layout.directions import OrdinalDirection
from wallmesh.generators.layout.layout_types import CellCoord
from wallmesh.generators.profiles.wall_profile import Config

Vec3 = Tuple[float, float, float]

# Rotation about +Y that turns the north-east quarter into each quadrant
QUARTER_ANGLES = {
    OrdinalDirection.NORTH_EAST: 0.0,
    OrdinalDirection.SOUTH_EAST: math.pi / 2,
    OrdinalDirection.SOUTH_WEST: math.pi,
    OrdinalDirection.NORTH_WEST: -math.pi / 2,
}


def translation(offset: Vec3) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = offset
    return m


def rotation_y(angle: float) -> np.ndarray:
    """Right-handed rotation about the Y axis by angle radians.

    x' = cos * x + sin * z
    z' = -sin * x + cos * z
    """
    c = math.cos(angle)
    s = math.sin(angle)
    return np.array([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def move_to_cell_centre(coord: CellCoord, config: Config) -> np.ndarray:
    """Translation from the local piece origin to the centre of a cell."""
    x, z = coord.to_world(config.cell_size_px)
    return translation((x, 0.0, z))


def rotate_to_direction(direction: OrdinalDirection) -> np.ndarray:
    return rotation_y(QUARTER_ANGLES[direction])


def quarter_transform(coord: CellCoord, direction: OrdinalDirection,
                      config: Config) -> np.ndarray:
    """Rotate into the quadrant first, then move to the cell centre."""
    return move_to_cell_centre(coord, config) @ rotate_to_direction(direction)
