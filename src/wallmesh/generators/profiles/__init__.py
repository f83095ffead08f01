"""
Wall profile system.

A profile is a named Style + Config pair controlling bevel width, wall
height, texture atlas layout and cell size.

Usage:
    from wallmesh.generators.profiles import PROFILE_CATALOG

    profile = PROFILE_CATALOG.get_profile("Default")
    mesh = build_mesh(grid, profile.style, profile.config)

    # Create and save a custom profile
    from wallmesh.generators.profiles import save_profile, reload_custom_profiles
    save_profile(WallProfile(name="Tall", description="...", style=..., config=...))
    reload_custom_profiles()  # Refresh catalog with new profile
"""

from pathlib import Path
from typing import Optional

from .wall_profile import Config, Style, WallProfile, ProfileCatalog
from .profile_storage import (
    get_profiles_dir,
    save_profile,
    load_profile,
    load_profile_from_path,
    load_all_saved_profiles,
    delete_profile,
)
from .builtin import DEFAULT_PROFILE, LARGE_PROFILE

# Global catalog singleton
PROFILE_CATALOG = ProfileCatalog()

# Built-in profile names (protected from replacement)
BUILTIN_PROFILE_NAMES = {DEFAULT_PROFILE.name, LARGE_PROFILE.name}

PROFILE_CATALOG.register(DEFAULT_PROFILE)
PROFILE_CATALOG.register(LARGE_PROFILE)


def reload_custom_profiles(profiles_dir: Optional[Path] = None) -> int:
    """
    Reload custom profiles from disk into the catalog.

    Clears all non-builtin profiles, then registers every saved profile
    whose name does not clash with a builtin.

    Returns:
        Number of custom profiles loaded
    """
    for name in list(PROFILE_CATALOG.list_profiles()):
        if name not in BUILTIN_PROFILE_NAMES:
            PROFILE_CATALOG.unregister(name)

    loaded = 0
    for profile in load_all_saved_profiles(profiles_dir):
        if profile.name in BUILTIN_PROFILE_NAMES:
            continue
        PROFILE_CATALOG.register(profile)
        loaded += 1

    return loaded


def is_builtin_profile(name: str) -> bool:
    return name in BUILTIN_PROFILE_NAMES


__all__ = [
    'Config',
    'Style',
    'WallProfile',
    'ProfileCatalog',
    'PROFILE_CATALOG',
    'DEFAULT_PROFILE',
    'LARGE_PROFILE',
    'BUILTIN_PROFILE_NAMES',
    'get_profiles_dir',
    'save_profile',
    'load_profile',
    'load_profile_from_path',
    'load_all_saved_profiles',
    'delete_profile',
    'reload_custom_profiles',
    'is_builtin_profile',
]
