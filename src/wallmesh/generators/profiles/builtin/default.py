"""
Default wall profile: 16px cells with an 8px bevel and 32px tall walls.

The face texture sits to the right of the 32px wide top atlas region.
"""

from wallmesh.generators.profiles.wall_profile import Config, Style, WallProfile


DEFAULT_PROFILE = WallProfile(
    name="Default",
    description="16px cells, 8px bevel, 32px walls",
    style=Style(
        width_px=8.0,
        height_px=32.0,
        face_tex_top_left_px=(32.0, 0.0),
        top_tex_top_left_px=(0.0, 0.0),
    ),
    config=Config(cell_size_px=16.0),
)
