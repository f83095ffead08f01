"""
Profile persistence layer for custom wall profiles.

Handles save/load of custom profiles to ~/.config/wallmesh/profiles/
(or any directory passed explicitly).
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import List, Optional, Dict, Any

from .wall_profile import Config, Style, WallProfile

logger = logging.getLogger(__name__)


def get_profiles_dir() -> Path:
    """
    Get the directory for storing custom profiles.

    Returns:
        Path to ~/.config/wallmesh/profiles/
        Creates the directory if it doesn't exist.
    """
    config_dir = Path.home() / ".config" / "wallmesh" / "profiles"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def _profile_to_dict(profile: WallProfile) -> Dict[str, Any]:
    """Convert a WallProfile to a JSON-serializable dictionary."""
    style = profile.style
    return {
        "name": profile.name,
        "description": profile.description,
        "style": {
            "width_px": style.width_px,
            "height_px": style.height_px,
            "face_tex_top_left_px": list(style.face_tex_top_left_px),
            "top_tex_top_left_px": list(style.top_tex_top_left_px),
        },
        "config": {
            "cell_size_px": profile.config.cell_size_px,
        },
    }


def _vec2(value) -> tuple:
    x, y = value
    return (float(x), float(y))


def _dict_to_profile(data: Dict[str, Any]) -> WallProfile:
    """Create a WallProfile from a dictionary.

    Raises:
        KeyError, TypeError, ValueError: If required fields are missing or malformed
    """
    style = data["style"]
    config = data["config"]
    return WallProfile(
        name=data.get("name", "Unknown"),
        description=data.get("description", ""),
        style=Style(
            width_px=float(style["width_px"]),
            height_px=float(style["height_px"]),
            face_tex_top_left_px=_vec2(style.get("face_tex_top_left_px", (0.0, 0.0))),
            top_tex_top_left_px=_vec2(style.get("top_tex_top_left_px", (0.0, 0.0))),
        ),
        config=Config(cell_size_px=float(config["cell_size_px"])),
    )


def _sanitize_filename(name: str) -> str:
    """
    Sanitize a profile name for use as a filename.

    Returns:
        A safe filename (lowercase, spaces replaced with underscores, special chars removed)
    """
    safe = name.lower().replace(" ", "_")
    safe = "".join(c for c in safe if c.isalnum() or c in "_-")
    return safe or "profile"


def save_profile(profile: WallProfile, profiles_dir: Optional[Path] = None) -> Path:
    """
    Save a profile to the profiles directory.

    Args:
        profile: The WallProfile to save
        profiles_dir: Target directory (defaults to get_profiles_dir())

    Returns:
        Path to the saved file

    Raises:
        OSError: If the file cannot be written
    """
    profiles_dir = profiles_dir or get_profiles_dir()
    file_path = Path(profiles_dir) / (_sanitize_filename(profile.name) + ".json")

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(_profile_to_dict(profile), f, indent=2, ensure_ascii=False)

    logger.info("Saved profile '%s' to %s", profile.name, file_path)
    return file_path


def load_profile_from_path(file_path: Path) -> Optional[WallProfile]:
    """
    Load a profile from a specific file path.

    Args:
        file_path: Path to the JSON profile file

    Returns:
        WallProfile if valid, None otherwise
    """
    file_path = Path(file_path)
    if not file_path.exists():
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return _dict_to_profile(data)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.warning("Ignoring malformed profile %s: %s", file_path, e)
        return None


def load_profile(name: str, profiles_dir: Optional[Path] = None) -> Optional[WallProfile]:
    """Load a profile by name from the profiles directory."""
    profiles_dir = profiles_dir or get_profiles_dir()
    return load_profile_from_path(Path(profiles_dir) / (_sanitize_filename(name) + ".json"))


def load_all_saved_profiles(profiles_dir: Optional[Path] = None) -> List[WallProfile]:
    """
    Load all saved custom profiles.

    Returns:
        List of WallProfile instances from saved files, in filename order
    """
    profiles_dir = profiles_dir or get_profiles_dir()
    profiles = []

    for file_path in sorted(Path(profiles_dir).glob("*.json")):
        profile = load_profile_from_path(file_path)
        if profile:
            profiles.append(profile)

    return profiles


def delete_profile(name: str, profiles_dir: Optional[Path] = None) -> bool:
    """
    Delete a saved profile by name.

    Returns:
        True if deleted, False if not found
    """
    profiles_dir = profiles_dir or get_profiles_dir()
    file_path = Path(profiles_dir) / (_sanitize_filename(name) + ".json")

    if file_path.exists():
        file_path.unlink()
        return True

    # Also try to find by iterating (in case filename doesn't match)
    for fp in Path(profiles_dir).glob("*.json"):
        profile = load_profile_from_path(fp)
        if profile and profile.name == name:
            fp.unlink()
            return True

    return False
