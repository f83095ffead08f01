"""Shared fixtures for wallmesh tests."""

from __future__ import annotations

import pytest

from wallmesh.generators.layout.layout_types import WallGrid
from wallmesh.generators.profiles import DEFAULT_PROFILE, Config, Style


@pytest.fixture
def style() -> Style:
    return DEFAULT_PROFILE.style


@pytest.fixture
def config() -> Config:
    return DEFAULT_PROFILE.config


@pytest.fixture
def corner_grid() -> WallGrid:
    """Three walls around one floor cell at (0, 1)."""
    return WallGrid.from_text("##\n.#")


@pytest.fixture
def solid_grid() -> WallGrid:
    return WallGrid.from_text("###\n###\n###")


@pytest.fixture
def island_grid() -> WallGrid:
    return WallGrid.from_text("...\n.#.\n...")
