"""
wallmesh - beveled autotile wall meshes from wall/floor grids.

Usage:
    from wallmesh import WallGrid, PROFILE_CATALOG, build_mesh

    grid = WallGrid.from_text("##\\n.#")
    profile = PROFILE_CATALOG.get_default_profile()
    mesh = build_mesh(grid, profile.style, profile.config)
"""

from wallmesh.conversion.mesh_buffers import Attribute, RelativeBuffers
from wallmesh.conversion.mesh_compositor import build_mesh
from wallmesh.generators.layout import CellType, CellCoord, WallGrid, parse_terrain
from wallmesh.generators.autotile import Piece, Quarter, CellDetail
from wallmesh.generators.profiles import Config, Style, WallProfile, PROFILE_CATALOG

__version__ = '1.0.0'

__all__ = [
    'Attribute',
    'RelativeBuffers',
    'build_mesh',
    'CellType',
    'CellCoord',
    'WallGrid',
    'parse_terrain',
    'Piece',
    'Quarter',
    'CellDetail',
    'Config',
    'Style',
    'WallProfile',
    'PROFILE_CATALOG',
]
