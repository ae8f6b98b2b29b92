"""Shared fixtures for the map navigator tests."""

from __future__ import annotations

import pytest

from map_navigator.config import reset_config
from map_navigator.container import reset_container
from map_navigator.graph.store import Graph
from map_navigator.sample_map import create_map


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from MAPNAV_* variables and cached singletons."""
    for var in (
        "MAPNAV_LOG_LEVEL",
        "MAPNAV_LOG_FORMAT",
        "MAPNAV_DISPLAY_PATH_PREFIX",
        "MAPNAV_DISPLAY_SEPARATOR",
        "MAPNAV_DISPLAY_NO_PATH_MESSAGE",
        "MAPNAV_DISPLAY_INVALID_NODES_MESSAGE",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def sample_map() -> Graph:
    """A -> B (1), A -> C (4), B -> C (2), B -> D (5), C -> D (1), D -> E (7)."""
    return create_map()
