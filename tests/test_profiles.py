"""Tests for wall profiles, the catalog and JSON storage."""

from __future__ import annotations

import dataclasses
import json

import pytest

from wallmesh.generators.profiles import (
    BUILTIN_PROFILE_NAMES,
    DEFAULT_PROFILE,
    LARGE_PROFILE,
    PROFILE_CATALOG,
    Config,
    ProfileCatalog,
    Style,
    WallProfile,
    delete_profile,
    is_builtin_profile,
    load_all_saved_profiles,
    load_profile,
    load_profile_from_path,
    reload_custom_profiles,
    save_profile,
)


@pytest.fixture
def custom_profile() -> WallProfile:
    return WallProfile(
        name="Tall Walls",
        description="16px cells with 64px walls",
        style=Style(width_px=8.0, height_px=64.0,
                    face_tex_top_left_px=(32.0, 0.0), top_tex_top_left_px=(0.0, 64.0)),
        config=Config(cell_size_px=16.0),
    )


@pytest.fixture
def restore_catalog(tmp_path):
    yield
    reload_custom_profiles(tmp_path / "nothing-here")


class TestBuiltins:
    def test_default_values(self):
        assert DEFAULT_PROFILE.style.width_px == 8.0
        assert DEFAULT_PROFILE.style.height_px == 32.0
        assert DEFAULT_PROFILE.style.face_tex_top_left_px == (32.0, 0.0)
        assert DEFAULT_PROFILE.config.cell_size_px == 16.0

    @pytest.mark.parametrize("profile", [DEFAULT_PROFILE, LARGE_PROFILE])
    def test_builtins_are_seamless(self, profile):
        assert profile.style.is_seamless_with(profile.config)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_PROFILE.config.cell_size_px = 3.0

    def test_builtin_names(self):
        assert is_builtin_profile("Default")
        assert BUILTIN_PROFILE_NAMES == {"Default", "Large"}


class TestCatalog:
    def test_case_insensitive_lookup(self):
        assert PROFILE_CATALOG.get_profile("large") is LARGE_PROFILE
        assert PROFILE_CATALOG.get_profile("missing") is None

    def test_default_profile(self):
        assert PROFILE_CATALOG.get_default_profile() is DEFAULT_PROFILE

    def test_register_unregister(self, custom_profile):
        catalog = ProfileCatalog()
        catalog.register(custom_profile)
        assert catalog.is_registered("tall walls")
        assert catalog.list_profiles() == ["Tall Walls"]
        assert catalog.unregister("TALL WALLS")
        assert not catalog.unregister("Tall Walls")

    def test_default_falls_back_to_first(self, custom_profile):
        catalog = ProfileCatalog()
        catalog.register(custom_profile)
        assert catalog.get_default_profile() is custom_profile


class TestStorage:
    def test_save_and_load(self, tmp_path, custom_profile):
        path = save_profile(custom_profile, tmp_path)
        assert path.name == "tall_walls.json"
        assert load_profile("Tall Walls", tmp_path) == custom_profile
        assert load_profile_from_path(path) == custom_profile

    def test_missing_file(self, tmp_path):
        assert load_profile_from_path(tmp_path / "nope.json") is None

    def test_malformed_file_is_skipped(self, tmp_path, caplog):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"name": "Bad", "style": {"width_px": 8}}))
        assert load_profile_from_path(bad) is None
        assert "malformed" in caplog.text

    def test_invalid_json(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        assert load_profile_from_path(bad) is None

    def test_load_all(self, tmp_path, custom_profile):
        save_profile(custom_profile, tmp_path)
        (tmp_path / "junk.json").write_text("[]")
        assert load_all_saved_profiles(tmp_path) == [custom_profile]

    def test_delete(self, tmp_path, custom_profile):
        save_profile(custom_profile, tmp_path)
        assert delete_profile("Tall Walls", tmp_path)
        assert not delete_profile("Tall Walls", tmp_path)

    def test_reload_registers_custom_profiles(self, tmp_path, custom_profile, restore_catalog):
        save_profile(custom_profile, tmp_path)
        shadow = dataclasses.replace(custom_profile, name="Default")
        (tmp_path / "shadow.json").write_text(json.dumps({
            "name": shadow.name,
            "style": {"width_px": 1, "height_px": 1},
            "config": {"cell_size_px": 2},
        }))

        assert reload_custom_profiles(tmp_path) == 1
        assert PROFILE_CATALOG.get_profile("Tall Walls") == custom_profile
        assert PROFILE_CATALOG.get_profile("Default") is DEFAULT_PROFILE
