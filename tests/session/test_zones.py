"""Tests for ZoneLayout."""

import pytest

from arenazone.config import ArenaSettings
from arenazone.core.types import Vec3
from arenazone.session.zones import DEFAULT_MARKER_RADIUS, Zone, ZoneLayout


@pytest.fixture
def layout():
    return ZoneLayout(arena=Zone(Vec3(0.0, 0.0, 0.0), 50.0))


def test_defaults_follow_arena_centre(layout):
    assert layout.spawn_point == Vec3(0.0, 0.0, 0.0)
    assert layout.entry.center == layout.arena.center
    assert layout.exit.radius == DEFAULT_MARKER_RADIUS


def test_set_arena_zone_moves_spawn_to_centre(layout):
    layout.set_spawn_point(Vec3(1.0, 1.0, 1.0))
    layout.set_arena_zone(Vec3(100.0, 0.0, 100.0), 25.0)

    assert layout.arena == Zone(Vec3(100.0, 0.0, 100.0), 25.0)
    assert layout.spawn_point == Vec3(100.0, 0.0, 100.0)


def test_set_spawn_point_keeps_arena(layout):
    layout.set_spawn_point(Vec3(3.0, 4.0, 5.0))
    assert layout.spawn_point == Vec3(3.0, 4.0, 5.0)
    assert layout.arena.center == Vec3(0.0, 0.0, 0.0)


def test_entry_and_exit_zone_checks_use_exact_distance(layout):
    layout.set_entry_point(Vec3(100.0, 0.0, 0.0), 10.0)
    layout.set_exit_point(Vec3(-100.0, 0.0, 0.0))

    assert layout.in_entry_zone(Vec3(110.0, 0.0, 0.0))
    assert not layout.in_entry_zone(Vec3(110.01, 0.0, 0.0))
    assert layout.in_exit_zone(Vec3(-95.0, 0.0, 0.0))
    assert not layout.in_exit_zone(Vec3(100.0, 0.0, 0.0))


def test_arena_zone_check(layout):
    assert layout.in_arena_zone(Vec3(30.0, 0.0, 40.0))
    assert not layout.in_arena_zone(Vec3(30.0, 0.0, 40.1))


def test_zone_rejects_non_positive_radius():
    with pytest.raises(ValueError, match="radius must be positive"):
        Zone(Vec3(0.0, 0.0, 0.0), 0.0)


def test_from_settings_uses_configured_spawn():
    settings = ArenaSettings(_env_file=None, spawn_x=1.0, spawn_y=2.0, spawn_z=3.0)
    layout = ZoneLayout.from_settings(settings)
    assert layout.spawn_point == Vec3(1.0, 2.0, 3.0)
    assert layout.arena.center == settings.center
    assert layout.arena.radius == settings.radius


@pytest.mark.parametrize("radius", [float("nan"), float("inf")])
def test_zone_rejects_non_finite_radius(radius):
    with pytest.raises(ValueError, match="positive and finite"):
        Zone(Vec3(0.0, 0.0, 0.0), radius)
