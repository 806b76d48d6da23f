"""Tests for PositionCache."""

from arenazone.core.identity import ActorHandle
from arenazone.core.types import Vec3
from arenazone.session.positions import PositionCache


def test_unknown_handle_is_absent():
    cache = PositionCache()
    assert cache.last_known_position(ActorHandle(7, 0)) is None
    assert ActorHandle(7, 0) not in cache


def test_second_record_overwrites_first():
    cache = PositionCache()
    handle = ActorHandle(7, 0)
    cache.record_position(handle, Vec3(1.0, 2.0, 3.0))
    cache.record_position(handle, Vec3(4.0, 5.0, 6.0))

    assert cache.last_known_position(handle) == Vec3(4.0, 5.0, 6.0)
    assert len(cache) == 1


def test_generations_are_distinct_keys():
    cache = PositionCache()
    cache.record_position(ActorHandle(7, 0), Vec3(1.0, 0.0, 1.0))
    assert cache.last_known_position(ActorHandle(7, 1)) is None


def test_null_handle_is_accepted_without_validation():
    cache = PositionCache()
    cache.record_position(ActorHandle.NULL, Vec3(0.0, 0.0, 0.0))
    assert ActorHandle.NULL in cache


def test_clear_drops_everything():
    cache = PositionCache()
    cache.record_position(ActorHandle(1, 0), Vec3(0.0, 0.0, 0.0))
    cache.clear()
    assert len(cache) == 0
