"""
Wall grid to mesh conversion.

For every wall cell the four quarters are resolved, each quarter's piece
geometry is generated in its local frame, rotated into its quadrant and
moved to the cell centre. All quarters of all cells are then merged into a
single indexed mesh.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from wallmesh.conversion.mesh_buffers import RelativeBuffers
from wallmesh.conversion.transforms import quarter_transform
from wallmesh.generators.autotile.piece_geometry import make_geometry
from wallmesh.generators.autotile.pieces import CellDetail
from wallmesh.generators.layout.layout_types import CellCoord, CellType, WallGrid
from wallmesh.generators.profiles.wall_profile import Config, Style
from wallmesh.validation.checks import validate_mesh, validate_style
from wallmesh.validation.core import ValidationError

# Configure module logger
logger = logging.getLogger(__name__)


def build_detail_grid(grid: WallGrid) -> List[Tuple[CellCoord, Optional[CellDetail]]]:
    """Resolve the optional CellDetail of every cell, in row-major order."""
    return [(coord, CellDetail.from_grid(grid, coord)) for coord, _ in grid.cells()]


def make_cell_geometry(detail: CellDetail, coord: CellCoord, style: Style,
                       config: Config) -> List[RelativeBuffers]:
    """Place the four quarters of one wall cell in world space.

    Returns:
        One buffer per quarter, in ORDINAL_DIRECTIONS order
    """
    return [
        make_geometry(quarter.piece, style, config).transform(
            quarter_transform(coord, direction, config)
        )
        for direction, quarter in detail.items()
    ]


def iter_grid_geometry(grid: WallGrid, style: Style,
                       config: Config) -> Iterator[RelativeBuffers]:
    """Yield every placed quarter buffer of the grid, cell by cell."""
    for coord, detail in build_detail_grid(grid):
        if detail is None:
            continue
        yield from make_cell_geometry(detail, coord, style, config)


def build_mesh(grid: WallGrid, style: Style, config: Config,
               validate: bool = False) -> RelativeBuffers:
    """Build the merged wall mesh for a grid.

    Args:
        grid: Wall/floor cell grid
        style: Bevel and texture parameters
        config: Cell size
        validate: Run mesh and style checks and raise on FAIL issues

    Returns:
        RelativeBuffers holding every wall piece in world space

    Raises:
        ValidationError: If validate is set and a check fails
    """
    logger.info(
        "Generating wall mesh from grid: %dx%d cells, %d wall",
        grid.width, grid.height, grid.count(CellType.WALL),
    )

    if not style.is_seamless_with(config):
        logger.warning(
            "cell_size_px=%s is not twice width_px=%s; inner/outer corners will show seams",
            config.cell_size_px, style.width_px,
        )

    mesh = RelativeBuffers.concat_all(iter_grid_geometry(grid, style, config))

    logger.info(
        "Generated %d vertices, %d indices, %d triangles",
        mesh.vertex_count, mesh.index_count, mesh.triangle_count,
    )

    if validate:
        result = validate_style(style, config).merge(validate_mesh(mesh))
        for issue in result.warnings:
            logger.warning("Validation: %s: %s", issue.code, issue.message)
        if result.failed:
            raise ValidationError(result)

    return mesh
