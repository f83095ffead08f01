"""
Large wall profile: the default profile with every length doubled.
"""

from wallmesh.generators.profiles.wall_profile import Config, Style, WallProfile


LARGE_PROFILE = WallProfile(
    name="Large",
    description="32px cells, 16px bevel, 64px walls",
    style=Style(
        width_px=16.0,
        height_px=64.0,
        face_tex_top_left_px=(64.0, 0.0),
        top_tex_top_left_px=(0.0, 0.0),
    ),
    config=Config(cell_size_px=32.0),
)
