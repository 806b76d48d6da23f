"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from arenazone import ArenaContext, ArenaSettings, InMemoryWorld, Vec3

ARENA_CENTER = Vec3(-1000.0, 0.0, 500.0)
FAR_AWAY = Vec3(10000.0, 0.0, 10000.0)


@pytest.fixture
def settings():
    """Default geometry, isolated from ARENA_* environment."""
    return ArenaSettings(_env_file=None)


@pytest.fixture
def world():
    """Fresh in-memory host world."""
    return InMemoryWorld()


@pytest.fixture
def ctx(world, settings):
    return ArenaContext(world, settings=settings)


@pytest.fixture
def player(world):
    """Connected player character handle standing far from the arena."""
    character, _user = world.spawn_player(76561198000000001, "Vlad", FAR_AWAY)
    return character
