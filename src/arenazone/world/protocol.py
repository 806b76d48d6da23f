"""Capability interfaces consumed from the host world.

The tracker never touches host internals. Hosts implement these protocols
with an adapter over their own entity/component runtime.

Usage:
    class HostAdapter:
        def exists(self, handle: ActorHandle) -> bool: ...
        ...

    tracker = SessionTracker(world=HostAdapter(), effects=HostAdapter(), ...)
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from arenazone.core.identity import ActorHandle, ActorIdentity
from arenazone.core.types import Vec3


class ComponentKind(Enum):
    """Component kinds the tracker needs to probe for."""

    POSITION = "position"
    """World translation; required on every valid actor."""

    PLAYER = "player"
    """Player marker; implies a user linkage that must resolve and be connected."""


@runtime_checkable
class WorldQuery(Protocol):
    """Read-only view of live actor state."""

    def exists(self, handle: ActorHandle) -> bool:
        """Check if handle refers to a live actor (not despawned or recycled)."""
        ...

    def has_component(self, handle: ActorHandle, kind: ComponentKind) -> bool:
        """Check if actor carries a component of the given kind."""
        ...

    def get_position(self, handle: ActorHandle) -> Vec3:
        """Current world position. Only valid if has POSITION."""
        ...

    def resolve_user_linkage(self, handle: ActorHandle) -> ActorHandle | None:
        """User entity linked to a player actor, or None if not linked."""
        ...

    def is_connected(self, user: ActorHandle) -> bool:
        """Check if the user entity is currently connected."""
        ...

    def get_identity(self, user: ActorHandle) -> ActorIdentity:
        """Stable platform identity of a user entity."""
        ...


@runtime_checkable
class SideEffects(Protocol):
    """Mutating services invoked when an actor enters the arena."""

    def teleport(self, handle: ActorHandle, point: Vec3) -> None:
        """Move actor to point."""
        ...

    def grant_privilege_unlock_set(self, handle: ActorHandle) -> None:
        """Grant the arena privilege-unlock set to actor."""
        ...
