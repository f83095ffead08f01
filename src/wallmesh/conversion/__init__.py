"""
Grid to 3D mesh conversion package.

Holds the indexed buffer type and the affine transforms used to place wall
pieces. The compositor lives in ``wallmesh.conversion.mesh_compositor``.
"""

from .mesh_buffers import Attribute, RelativeBuffers
from .transforms import (
    translation,
    rotation_y,
    move_to_cell_centre,
    rotate_to_direction,
    quarter_transform,
)

__all__ = [
    'Attribute',
    'RelativeBuffers',
    'translation',
    'rotation_y',
    'move_to_cell_centre',
    'rotate_to_direction',
    'quarter_transform',
]
