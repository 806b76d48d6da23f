"""Arena session state machine.

Each Actor Identity is either Outside or InArena. Membership is keyed by
identity, never by handle, so it survives reconnects that reissue the
actor handle.

Usage:
    tracker = SessionTracker(world, effects, registry, positions, layout)
    result = tracker.enter(handle)   # teleport + privilege grant on success
    tracker.is_in_arena(handle)      # True
    tracker.exit(handle)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from arenazone.core.identity import ActorHandle, ActorIdentity
from arenazone.session.positions import PositionCache
from arenazone.session.result import (
    InvalidActorError,
    Outcome,
    ResolutionFailure,
    SessionResult,
    SideEffectFailure,
)
from arenazone.session.zones import ZoneLayout
from arenazone.territory.registry import NO_GRID_INDEX, Region, TerritoryRegistry
from arenazone.world.protocol import ComponentKind, SideEffects, WorldQuery

logger = logging.getLogger(__name__)


class SessionTracker:
    """Owns arena membership and the enter/exit transitions.

    Args:
        world: Read access to live actor state.
        effects: Services applied on successful enter.
        registry: Territory index used by territory_of().
        positions: Last-known positions, shared with the driving layer.
        layout: Zone layout providing the spawn point.
    """

    def __init__(
        self,
        world: WorldQuery,
        effects: SideEffects,
        registry: TerritoryRegistry,
        positions: PositionCache,
        layout: ZoneLayout,
    ) -> None:
        self._world = world
        self._effects = effects
        self._registry = registry
        self._positions = positions
        self._layout = layout
        self._members: set[ActorIdentity] = set()
        self._handles: dict[ActorIdentity, ActorHandle] = {}

    # -- resolution --

    def is_valid_actor(self, handle: ActorHandle) -> bool:
        """Check the shared validity rule.

        A handle is valid if it is non-null, alive and has a position. If it
        carries a player marker, its user linkage must also resolve to a
        live, connected user.
        """
        valid, _user = self._validate(handle)
        return valid

    def _validate(self, handle: ActorHandle) -> tuple[bool, ActorHandle | None]:
        """Apply the validity rule, returning the linked user of a valid player.

        The user is None for valid actors without a player marker.
        """
        if handle.is_null():
            logger.warning("Actor handle is null")
            return False, None
        if not self._world.exists(handle):
            logger.warning("Actor %s does not exist", handle)
            return False, None
        if not self._world.has_component(handle, ComponentKind.POSITION):
            logger.warning("No position component on actor %s", handle)
            return False, None
        if not self._world.has_component(handle, ComponentKind.PLAYER):
            return True, None

        user = self._world.resolve_user_linkage(handle)
        if user is None or user.is_null() or not self._world.exists(user):
            logger.warning("Invalid or missing user linkage for player %s", handle)
            return False, None
        if not self._world.is_connected(user):
            logger.warning("User %s of player %s is not connected", user, handle)
            return False, None
        return True, user

    def resolve_identity(self, handle: ActorHandle) -> ActorIdentity | None:
        """Stable identity for a valid player actor, else None.

        Exceptions from the host world propagate; callers decide whether
        that fails closed or surfaces.
        """
        valid, user = self._validate(handle)
        if not valid:
            return None
        if user is None:
            logger.warning("Actor %s has no player marker; no identity", handle)
            return None
        return self._world.get_identity(user)

    # -- transitions --

    def enter(self, handle: ActorHandle) -> SessionResult:
        """Put the actor in the arena, then teleport and grant privileges.

        Membership is registered before side effects run. Side-effect
        failures are logged and reported on the result but leave the actor
        in the arena. A failure while resolving the actor rolls back any
        membership already written and yields INTERNAL_ERROR.
        """
        identity: ActorIdentity | None = None
        registered = False
        try:
            identity = self.resolve_identity(handle)
            if identity is None:
                logger.warning("Cannot enter arena: invalid actor %s", handle)
                return SessionResult(Outcome.INVALID_ACTOR, handle)

            if identity in self._members:
                logger.info("Identity %d is already in the arena", identity)
                return SessionResult(Outcome.ALREADY_IN_STATE, handle, identity)

            self._members.add(identity)
            self._handles[identity] = handle
            registered = True
            logger.info("Added identity %d (%s) to arena tracking", identity, handle)

            self._positions.record_position(handle, self._world.get_position(handle))
        except Exception as exc:
            if registered and identity is not None:
                self._forget(identity)
                logger.warning("Rolled back arena state for identity %d after error", identity)
            logger.error("Failed to resolve actor %s on arena entry", handle, exc_info=True)
            return SessionResult(Outcome.INTERNAL_ERROR, handle, identity, error=exc)

        failures = self._apply_entry_effects(handle)
        logger.info(
            "Identity %d entered arena (%d side-effect failure(s))", identity, len(failures)
        )
        return SessionResult(Outcome.SUCCESS, handle, identity, side_effect_failures=failures)

    def enter_or_raise(self, handle: ActorHandle) -> SessionResult:
        """Like enter(), but raise for invalid actors and resolution failures.

        Raises:
            InvalidActorError: If the handle does not resolve to a player.
            ResolutionFailure: If resolution failed unexpectedly.
        """
        result = self.enter(handle)
        if result.outcome is Outcome.INVALID_ACTOR:
            raise InvalidActorError(handle)
        if result.outcome is Outcome.INTERNAL_ERROR:
            raise ResolutionFailure(handle, result.error) from result.error
        return result

    def exit(self, handle: ActorHandle) -> SessionResult:
        """Take the actor out of the arena. Never raises."""
        try:
            identity = self.resolve_identity(handle)
        except Exception as exc:
            logger.error("Failed to resolve actor %s on arena exit", handle, exc_info=True)
            return SessionResult(Outcome.INTERNAL_ERROR, handle, error=exc)

        if identity is None:
            logger.warning("Cannot exit arena: invalid actor %s", handle)
            return SessionResult(Outcome.INVALID_ACTOR, handle)

        if identity not in self._members:
            logger.info("Identity %d was not in arena but exit was requested", identity)
            return SessionResult(Outcome.ALREADY_IN_STATE, handle, identity)

        self._forget(identity)
        logger.info("Identity %d exited arena", identity)
        return SessionResult(Outcome.SUCCESS, handle, identity)

    def evict(self, identity: ActorIdentity) -> bool:
        """Remove an identity without resolving a handle.

        For cleanup of actors that can no longer be resolved, e.g. after a
        disconnect. Returns True if the identity was in the arena.
        """
        if identity not in self._members:
            return False
        self._forget(identity)
        logger.info("Evicted identity %d from arena", identity)
        return True

    # -- queries --

    def is_in_arena(self, handle: ActorHandle) -> bool:
        """Membership for the actor's identity. False if unresolvable."""
        try:
            identity = self.resolve_identity(handle)
        except Exception:
            logger.error("Error checking arena membership for %s", handle, exc_info=True)
            return False
        return identity is not None and identity in self._members

    def region_of(self, handle: ActorHandle) -> Region | None:
        """Region at the actor's last known position, or None."""
        position = self._positions.last_known_position(handle)
        if position is None:
            return None
        return self._registry.region_at(position)

    def territory_of(self, handle: ActorHandle) -> int | None:
        """Region tag at the actor's last known position, or None."""
        region = self.region_of(handle)
        return region.region_tag if region is not None else None

    def grid_index_of(self, handle: ActorHandle) -> int:
        """Grid index at the actor's last known position.

        Returns -1 for invalid actors, unknown positions, or positions
        outside every region.
        """
        if not self.is_valid_actor(handle):
            return NO_GRID_INDEX
        position = self._positions.last_known_position(handle)
        if position is None:
            return NO_GRID_INDEX
        return self._registry.resolve_grid_index(position)

    @property
    def members(self) -> frozenset[ActorIdentity]:
        return frozenset(self._members)

    def handle_for(self, identity: ActorIdentity) -> ActorHandle | None:
        """Handle cached when the identity entered, if still in arena."""
        return self._handles.get(identity)

    def reset(self) -> None:
        self._members.clear()
        self._handles.clear()

    # -- internals --

    def _forget(self, identity: ActorIdentity) -> None:
        self._members.discard(identity)
        self._handles.pop(identity, None)

    def _apply_entry_effects(self, handle: ActorHandle) -> list[SideEffectFailure]:
        spawn = self._layout.spawn_point

        def teleport() -> None:
            self._effects.teleport(handle, spawn)
            self._positions.record_position(handle, spawn)

        def grant() -> None:
            self._effects.grant_privilege_unlock_set(handle)

        steps: list[tuple[str, Callable[[], None]]] = [
            ("teleport", teleport),
            ("privilege_unlock", grant),
        ]
        failures: list[SideEffectFailure] = []
        for step, run in steps:
            try:
                run()
            except Exception as exc:
                logger.error("Arena entry step %r failed for %s", step, handle, exc_info=True)
                failures.append(SideEffectFailure(step, exc))
        return failures
