"""
Style, Config and WallProfile dataclasses plus the ProfileCatalog registry.

A profile bundles everything the mesh builder needs besides the grid:
- Style: bevel width, wall height and texture atlas origins (pixels)
- Config: the size of one grid cell (pixels / world units)

Note: the Inner and Outer bevels only meet neighbouring pieces without
seams when ``cell_size_px == 2 * width_px``. Other values still produce
valid geometry, see ``Style.is_seamless_with``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Style:
    """
    Render-style parameters for wall pieces.

    Attributes:
        width_px: Bevel inset width (how far the wall top insets from the cell edge)
        height_px: Wall height; also the row height of the face texture
        face_tex_top_left_px: Atlas origin of the side face texture
        top_tex_top_left_px: Atlas origin of the top texture region
    """

    width_px: float
    height_px: float
    face_tex_top_left_px: Vec2 = (0.0, 0.0)
    top_tex_top_left_px: Vec2 = (0.0, 0.0)

    def is_seamless_with(self, config: 'Config') -> bool:
        """Check the Inner/Outer seam precondition against a config."""
        return abs(config.cell_size_px - 2.0 * self.width_px) < 1e-6


@dataclass(frozen=True)
class Config:
    """Geometry parameters shared by every piece."""
    cell_size_px: float


@dataclass(frozen=True)
class WallProfile:
    """
    Named Style + Config pair.

    Attributes:
        name: Display name (e.g., "Default")
        description: Human-readable description
        style: Style used for piece generation
        config: Config used for piece generation and placement
    """

    name: str
    description: str
    style: Style
    config: Config


class ProfileCatalog:
    """
    Registry of wall profiles.

    Provides case-insensitive lookup and default profile selection.
    """

    def __init__(self):
        self._profiles: Dict[str, WallProfile] = {}

    def register(self, profile: WallProfile) -> None:
        self._profiles[profile.name] = profile

    def get_profile(self, name: str) -> Optional[WallProfile]:
        """
        Get a profile by name (case-insensitive).

        Args:
            name: Profile name to look up

        Returns:
            WallProfile if found, None otherwise
        """
        if name in self._profiles:
            return self._profiles[name]

        name_lower = name.lower()
        for pname, profile in self._profiles.items():
            if pname.lower() == name_lower:
                return profile

        return None

    def list_profiles(self) -> List[str]:
        return sorted(self._profiles.keys())

    def get_default_profile(self) -> WallProfile:
        """Get the "Default" profile, or the first registered one."""
        return self.get_profile("Default") or next(iter(self._profiles.values()))

    def unregister(self, name: str) -> bool:
        """
        Unregister a profile from the catalog.

        Returns:
            True if removed, False if not found
        """
        profile = self.get_profile(name)
        if profile is None:
            return False
        del self._profiles[profile.name]
        return True

    def is_registered(self, name: str) -> bool:
        return self.get_profile(name) is not None
