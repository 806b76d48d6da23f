"""Tests for ArenaSettings."""

import pytest
from pydantic import ValidationError

from arenazone.config import ArenaSettings
from arenazone.core.types import Vec3


def test_defaults_match_builtin_arena(monkeypatch):
    for key in ("ARENA_RADIUS", "ARENA_CENTER_X", "ARENA_CENTER_Z", "ARENA_SPAWN_X"):
        monkeypatch.delenv(key, raising=False)
    settings = ArenaSettings(_env_file=None)

    assert settings.center == Vec3(-1000.0, 0.0, 500.0)
    assert settings.radius == 300.0
    assert settings.cell_size == 10.0
    assert settings.grid_index == 500
    assert settings.region_tag == 5
    assert settings.spawn_point == settings.center


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ARENA_RADIUS", "120")
    monkeypatch.setenv("ARENA_REGION_TAG", "9")
    settings = ArenaSettings(_env_file=None)

    assert settings.radius == 120.0
    assert settings.region_tag == 9


@pytest.mark.parametrize("field", ["radius", "cell_size"])
def test_non_positive_geometry_rejected(field):
    with pytest.raises(ValidationError):
        ArenaSettings(_env_file=None, **{field: 0})


def test_partial_spawn_point_rejected():
    with pytest.raises(ValidationError, match="must be set together"):
        ArenaSettings(_env_file=None, spawn_x=1.0)
