"""Operator command layer.

Parses text commands and renders each session outcome as a distinct
message.

Usage:
    commands = ArenaCommands(ctx)
    reply = commands.execute("enter", handle)
    print(reply.message)   # "Entered the arena."

Commands:
    enter | exit | status | where
    setzone X Y Z RADIUS | setentry X Y Z [RADIUS] | setexit X Y Z [RADIUS]
    setspawn X Y Z | blocks
"""

from __future__ import annotations

import logging
import math
import shlex
from collections.abc import Callable
from dataclasses import dataclass

from arenazone.context import ArenaContext
from arenazone.core.identity import ActorHandle
from arenazone.core.types import Vec3
from arenazone.session.result import Outcome, SessionResult

logger = logging.getLogger(__name__)

_ENTER_MESSAGES: dict[Outcome, str] = {
    Outcome.SUCCESS: "Entered the arena.",
    Outcome.ALREADY_IN_STATE: "Already in the arena.",
    Outcome.INVALID_ACTOR: "Invalid target: actor not found, not a player, or disconnected.",
    Outcome.INTERNAL_ERROR: "Internal error while entering the arena; nothing was changed.",
}

_EXIT_MESSAGES: dict[Outcome, str] = {
    Outcome.SUCCESS: "Left the arena.",
    Outcome.ALREADY_IN_STATE: "Not in the arena.",
    Outcome.INVALID_ACTOR: "Invalid target: actor not found, not a player, or disconnected.",
    Outcome.INTERNAL_ERROR: "Internal error while leaving the arena.",
}


@dataclass(frozen=True, slots=True)
class CommandReply:
    """Rendered reply for one command."""

    ok: bool
    message: str
    outcome: Outcome | None = None


class CommandError(ValueError):
    """Raised for unknown commands or malformed arguments."""

    pass


def render_enter(result: SessionResult) -> CommandReply:
    message = _ENTER_MESSAGES[result.outcome]
    if result.side_effect_failures:
        failed = ", ".join(f.step for f in result.side_effect_failures)
        message = f"{message} Some arena effects failed: {failed}."
    return CommandReply(result.ok, message, result.outcome)


def render_exit(result: SessionResult) -> CommandReply:
    return CommandReply(result.ok, _EXIT_MESSAGES[result.outcome], result.outcome)


def _parse_point(args: list[str]) -> Vec3:
    try:
        x, y, z = (float(a) for a in args[:3])
    except ValueError as e:
        raise CommandError(f"Expected numeric coordinates, got {args[:3]}") from e
    if not all(math.isfinite(c) for c in (x, y, z)):
        raise CommandError(f"Coordinates must be finite, got {args[:3]}")
    return Vec3(x, y, z)


def _parse_radius(args: list[str], default: float | None = None) -> float:
    if len(args) < 4:
        if default is None:
            raise CommandError("Missing radius")
        return default
    try:
        radius = float(args[3])
    except ValueError as e:
        raise CommandError(f"Expected numeric radius, got {args[3]!r}") from e
    if not math.isfinite(radius) or radius <= 0:
        raise CommandError("Radius must be a positive finite number")
    return radius


class ArenaCommands:
    """Dispatches operator commands against an ArenaContext."""

    def __init__(self, ctx: ArenaContext) -> None:
        self._ctx = ctx
        self._handlers: dict[str, Callable[[list[str], ActorHandle], CommandReply]] = {
            "enter": self._enter,
            "exit": self._exit,
            "status": self._status,
            "where": self._where,
            "setzone": self._set_zone,
            "setentry": self._set_entry,
            "setexit": self._set_exit,
            "setspawn": self._set_spawn,
            "blocks": self._blocks,
        }

    @property
    def names(self) -> list[str]:
        return sorted(self._handlers)

    def execute(self, line: str, actor: ActorHandle) -> CommandReply:
        """Run one command line on behalf of actor.

        Malformed input is reported as a failed reply, not raised.
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            logger.info("Rejected command %r: %s", line, e)
            return CommandReply(False, f"Usage error: {e}")
        if not parts:
            return CommandReply(False, "Empty command.")
        name, args = parts[0].lower(), parts[1:]
        handler = self._handlers.get(name)
        if handler is None:
            return CommandReply(False, f"Unknown command {name!r}. Try: {', '.join(self.names)}")
        try:
            return handler(args, actor)
        except CommandError as e:
            logger.info("Rejected command %r: %s", line, e)
            return CommandReply(False, f"Usage error: {e}")

    # -- session --

    def _enter(self, args: list[str], actor: ActorHandle) -> CommandReply:
        return render_enter(self._ctx.enter_arena(actor))

    def _exit(self, args: list[str], actor: ActorHandle) -> CommandReply:
        return render_exit(self._ctx.exit_arena(actor))

    def _status(self, args: list[str], actor: ActorHandle) -> CommandReply:
        if self._ctx.is_in_arena(actor):
            return CommandReply(True, "You are in the arena.")
        return CommandReply(True, "You are not in the arena.")

    def _where(self, args: list[str], actor: ActorHandle) -> CommandReply:
        region = self._ctx.region_of(actor)
        if region is None:
            return CommandReply(True, "Not inside any territory.")
        return CommandReply(
            True, f"Inside territory {region.region_tag} (grid index {region.grid_index})."
        )

    # -- layout --

    def _set_zone(self, args: list[str], actor: ActorHandle) -> CommandReply:
        if len(args) < 4:
            raise CommandError("setzone X Y Z RADIUS")
        center, radius = _parse_point(args), _parse_radius(args)
        self._ctx.layout.set_arena_zone(center, radius)
        return CommandReply(True, f"Arena zone set to {center} radius {radius:g}; spawn moved to centre.")

    def _set_entry(self, args: list[str], actor: ActorHandle) -> CommandReply:
        if len(args) < 3:
            raise CommandError("setentry X Y Z [RADIUS]")
        point = _parse_point(args)
        radius = _parse_radius(args, default=self._ctx.layout.entry.radius)
        self._ctx.layout.set_entry_point(point, radius)
        return CommandReply(True, f"Entry point set to {point} radius {radius:g}.")

    def _set_exit(self, args: list[str], actor: ActorHandle) -> CommandReply:
        if len(args) < 3:
            raise CommandError("setexit X Y Z [RADIUS]")
        point = _parse_point(args)
        radius = _parse_radius(args, default=self._ctx.layout.exit.radius)
        self._ctx.layout.set_exit_point(point, radius)
        return CommandReply(True, f"Exit point set to {point} radius {radius:g}.")

    def _set_spawn(self, args: list[str], actor: ActorHandle) -> CommandReply:
        if len(args) < 3:
            raise CommandError("setspawn X Y Z")
        point = _parse_point(args)
        self._ctx.layout.set_spawn_point(point)
        return CommandReply(True, f"Spawn point set to {point}.")

    def _blocks(self, args: list[str], actor: ActorHandle) -> CommandReply:
        parts = [
            f"territory {r.region_tag}: {r.grid.block_count} blocks" for r in self._ctx.registry
        ]
        return CommandReply(True, "; ".join(parts) or "No territories registered.")
