"""Tests for the operator command layer."""

import pytest

from arenazone import ArenaCommands, ArenaContext, InMemoryWorld, Outcome, Vec3
from arenazone.core.identity import ActorHandle

ARENA_CENTER = Vec3(-1000.0, 0.0, 500.0)
FAR_AWAY = Vec3(10000.0, 0.0, 10000.0)


class FailingTeleport:
    def __init__(self, world):
        self.world = world

    def teleport(self, handle, point):
        raise RuntimeError("blocked")

    def grant_privilege_unlock_set(self, handle):
        self.world.grant_privilege_unlock_set(handle)


class BrokenPositionWorld(InMemoryWorld):
    def get_position(self, handle):
        raise RuntimeError("translation read failed")


@pytest.fixture
def commands(ctx):
    return ArenaCommands(ctx)


def test_enter_outcomes_render_distinct_messages(commands, player):
    first = commands.execute("enter", player)
    second = commands.execute("enter", player)
    invalid = commands.execute("enter", ActorHandle.NULL)

    assert (first.ok, first.outcome) == (True, Outcome.SUCCESS)
    assert (second.ok, second.outcome) == (True, Outcome.ALREADY_IN_STATE)
    assert (invalid.ok, invalid.outcome) == (False, Outcome.INVALID_ACTOR)
    assert len({first.message, second.message, invalid.message}) == 3


def test_internal_error_renders_its_own_message(settings):
    world = BrokenPositionWorld()
    player, _ = world.spawn_player(1, "Vlad", FAR_AWAY)
    commands = ArenaCommands(ArenaContext(world, settings=settings))

    reply = commands.execute("enter", player)

    assert reply.outcome is Outcome.INTERNAL_ERROR
    assert not reply.ok
    assert "Internal error" in reply.message


def test_side_effect_failures_are_mentioned(world, settings, player):
    ctx = ArenaContext(world, effects=FailingTeleport(world), settings=settings)
    reply = ArenaCommands(ctx).execute("enter", player)

    assert reply.outcome is Outcome.SUCCESS
    assert "teleport" in reply.message
    assert ctx.is_in_arena(player)


def test_exit_outcomes(commands, player):
    assert commands.execute("exit", player).outcome is Outcome.ALREADY_IN_STATE
    commands.execute("enter", player)
    reply = commands.execute("exit", player)
    assert reply.outcome is Outcome.SUCCESS
    assert reply.message == "Left the arena."
    assert not commands.execute("exit", ActorHandle.NULL).ok


def test_status_and_where(commands, ctx, player):
    assert commands.execute("status", player).message == "You are not in the arena."
    assert commands.execute("where", player).message == "Not inside any territory."

    commands.execute("enter", player)

    assert commands.execute("status", player).message == "You are in the arena."
    assert commands.execute("where", player).message == "Inside territory 5 (grid index 500)."


def test_setzone_moves_spawn(commands, ctx, player):
    reply = commands.execute("setzone -950 0 450 40", player)

    assert reply.ok
    assert ctx.layout.arena.radius == 40.0
    assert ctx.layout.spawn_point == Vec3(-950.0, 0.0, 450.0)


def test_setentry_setexit_setspawn(commands, ctx, player):
    assert commands.execute("setentry 1 2 3", player).ok
    assert commands.execute("setexit 4 5 6 15", player).ok
    assert commands.execute("setspawn -1000 0 520", player).ok

    assert ctx.layout.entry.center == Vec3(1.0, 2.0, 3.0)
    assert ctx.layout.exit.radius == 15.0
    assert ctx.layout.spawn_point == Vec3(-1000.0, 0.0, 520.0)


@pytest.mark.parametrize(
    "line",
    [
        "setzone 1 2 3",
        "setzone a b c 4",
        "setentry 1 2 3 -5",
        "setspawn 1 2",
        'setspawn "1 2 3',
        "setzone 0 0 0 nan",
        "setentry 1 2 3 inf",
        "setspawn nan 0 0",
    ],
)
def test_malformed_arguments_are_reported(commands, player, line):
    reply = commands.execute(line, player)
    assert not reply.ok
    assert reply.message.startswith("Usage error")


def test_unknown_and_empty_commands(commands, player):
    assert "Unknown command" in commands.execute("dance", player).message
    assert not commands.execute("   ", player).ok


def test_blocks_reports_each_territory(commands, ctx, player):
    (region,) = ctx.registry.regions
    reply = commands.execute("blocks", player)
    assert reply.message == f"territory 5: {region.grid.block_count} blocks"


def test_commands_are_case_insensitive(commands, player):
    assert commands.execute("ENTER", player).outcome is Outcome.SUCCESS


def test_unbalanced_quote_leaves_layout_untouched(commands, ctx, player):
    spawn = ctx.layout.spawn_point
    reply = commands.execute('setspawn "1 2 3', player)
    assert not reply.ok
    assert ctx.layout.spawn_point == spawn


def test_where_reports_tag_and_grid_index_from_same_region(commands, ctx, world):
    player, user = world.spawn_player(2, "Other", ARENA_CENTER)
    ctx.record_position(player, ARENA_CENTER)
    world.set_connected(user, False)

    assert commands.execute("where", player).message == "Inside territory 5 (grid index 500)."
