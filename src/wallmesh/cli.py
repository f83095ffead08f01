"""
Command line interface: terrain text in, wall mesh buffers out.

    wallmesh TERRAIN_FILE [--profile NAME | --profile-file PATH] [--dump] [--validate] [-v]

Reads a '#'/'.' terrain file (or stdin for '-'), builds the wall mesh and
prints either a summary or the full attribute list.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wallmesh.conversion.mesh_buffers import RelativeBuffers
from wallmesh.conversion.mesh_compositor import build_mesh
from wallmesh.generators.layout.layout_types import CellType, GridParseError, parse_terrain
from wallmesh.generators.profiles import (
    PROFILE_CATALOG,
    load_profile_from_path,
    reload_custom_profiles,
)
from wallmesh.validation.core import ValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallmesh",
        description="Build a beveled autotile wall mesh from a '#'/'.' terrain grid.",
    )
    parser.add_argument("terrain", help="Terrain text file, or '-' for stdin")
    profile_group = parser.add_mutually_exclusive_group()
    profile_group.add_argument("--profile", default=None,
                               help="Built-in or saved profile name (default: Default)")
    profile_group.add_argument("--profile-file", type=Path, default=None,
                               help="Load style/config from a JSON profile file")
    parser.add_argument("--dump", action="store_true",
                        help="Print every vertex attribute and the index list")
    parser.add_argument("--validate", action="store_true",
                        help="Run mesh/style checks; exit 1 on failures")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser


def format_summary(mesh: RelativeBuffers, wall_cells: int) -> str:
    lo, hi = mesh.bounds()
    return "\n".join([
        f"wall cells: {wall_cells}",
        f"vertices:   {mesh.vertex_count}",
        f"indices:    {mesh.index_count}",
        f"triangles:  {mesh.triangle_count}",
        f"bounds:     {lo} .. {hi}",
    ])


def format_dump(mesh: RelativeBuffers) -> str:
    lines = []
    for i, a in enumerate(mesh.attributes):
        x, y, z = a.space_coord_px
        u, v = a.tex_coord_px
        lines.append(f"v{i}: pos=({x:.3f}, {y:.3f}, {z:.3f}) tex=({u:.3f}, {v:.3f})")
    indices = mesh.indices.tolist()
    for t in range(0, len(indices), 3):
        lines.append(f"tri{t // 3}: {indices[t:t + 3]}")
    return "\n".join(lines)


def _read_terrain(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.profile_file is not None:
        profile = load_profile_from_path(args.profile_file)
        if profile is None:
            logger.error("Could not load profile file %s", args.profile_file)
            return 1
    elif args.profile is not None:
        reload_custom_profiles()
        profile = PROFILE_CATALOG.get_profile(args.profile)
        if profile is None:
            logger.error("Unknown profile '%s' (available: %s)",
                         args.profile, ", ".join(PROFILE_CATALOG.list_profiles()))
            return 1
    else:
        profile = PROFILE_CATALOG.get_default_profile()

    try:
        grid = parse_terrain(_read_terrain(args.terrain))
    except (OSError, GridParseError) as e:
        logger.error("Cannot read terrain: %s", e)
        return 1

    try:
        mesh = build_mesh(grid, profile.style, profile.config, validate=args.validate)
    except ValidationError as e:
        print(e.result.report(), file=sys.stderr)
        return 1

    if args.dump:
        print(format_dump(mesh))
    else:
        print(format_summary(mesh, grid.count(CellType.WALL)))
    return 0
