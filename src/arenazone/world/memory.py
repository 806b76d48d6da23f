"""In-memory host world implementing WorldQuery and SideEffects.

Simple dict-based actor store suitable for single-process use, tests and
the CLI demo. Real hosts adapt their own runtime to the protocols instead.

Structure:
    _components[handle][component_type] = component_instance

Usage:
    world = InMemoryWorld()
    character, user = world.spawn_player(76561198000000001, "Vlad", Vec3(0, 0, 0))
    world.exists(character)  # True
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeVar, cast

from arenazone.core.identity import ActorHandle, ActorIdentity
from arenazone.core.types import Vec3
from arenazone.world.allocator import HandleAllocator
from arenazone.world.protocol import ComponentKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class Translation:
    """World position of an actor."""

    value: Vec3


@dataclass(slots=True)
class PlayerCharacter:
    """Marks an actor as a player's character and links it to its user."""

    user: ActorHandle
    name: str = ""


@dataclass(slots=True)
class User:
    """Connection-level user entity for a player."""

    platform_id: int
    character_name: str = ""
    is_connected: bool = True


_KIND_TYPES: dict[ComponentKind, type] = {
    ComponentKind.POSITION: Translation,
    ComponentKind.PLAYER: PlayerCharacter,
}


class InMemoryWorld:
    """Dict-backed host world with generational actor handles.

    Also records the side effects applied by the tracker so callers can
    observe them: teleports move the actor's Translation, privilege grants
    are remembered per handle.
    """

    def __init__(self) -> None:
        self._allocator = HandleAllocator()
        self._components: dict[ActorHandle, dict[type, Any]] = {}
        self._unlocked: set[ActorHandle] = set()

    # -- actor lifecycle --

    def spawn(self, *components: Any) -> ActorHandle:
        """Create an actor carrying the given components."""
        handle = self._allocator.allocate()
        self._components[handle] = {type(comp): comp for comp in components}
        return handle

    def spawn_player(
        self,
        platform_id: int,
        name: str,
        position: Vec3,
        connected: bool = True,
    ) -> tuple[ActorHandle, ActorHandle]:
        """Create a user entity and a linked player character.

        Returns:
            (character handle, user handle).
        """
        user = self.spawn(User(platform_id=platform_id, character_name=name, is_connected=connected))
        character = self.spawn(Translation(position), PlayerCharacter(user=user, name=name))
        return character, user

    def destroy(self, handle: ActorHandle) -> None:
        """Despawn an actor. Its handle becomes stale."""
        if handle in self._components:
            del self._components[handle]
            self._unlocked.discard(handle)
            self._allocator.deallocate(handle)

    def set_connected(self, user: ActorHandle, connected: bool) -> None:
        comp = self.get(user, User)
        if comp is None:
            raise ValueError(f"{user} is not a user entity")
        comp.is_connected = connected

    def set_position(self, handle: ActorHandle, position: Vec3) -> None:
        self.set(handle, Translation(position))

    # -- raw component access --

    def get(self, handle: ActorHandle, component_type: type[T]) -> T | None:
        if not self._allocator.is_alive(handle):
            return None
        return cast(T | None, self._components.get(handle, {}).get(component_type))

    def set(self, handle: ActorHandle, component: Any) -> None:
        if not self.exists(handle):
            raise ValueError(f"{handle} does not exist")
        self._components[handle][type(component)] = component

    def remove(self, handle: ActorHandle, component_type: type) -> bool:
        if not self.exists(handle):
            return False
        return self._components[handle].pop(component_type, None) is not None

    def all_actors(self) -> Iterator[ActorHandle]:
        for handle in self._components:
            if self._allocator.is_alive(handle):
                yield handle

    # -- WorldQuery --

    def exists(self, handle: ActorHandle) -> bool:
        return handle in self._components and self._allocator.is_alive(handle)

    def has_component(self, handle: ActorHandle, kind: ComponentKind) -> bool:
        return self.get(handle, _KIND_TYPES[kind]) is not None

    def get_position(self, handle: ActorHandle) -> Vec3:
        translation = self.get(handle, Translation)
        if translation is None:
            raise LookupError(f"{handle} has no Translation")
        return translation.value

    def resolve_user_linkage(self, handle: ActorHandle) -> ActorHandle | None:
        player = self.get(handle, PlayerCharacter)
        if player is None or player.user.is_null():
            return None
        return player.user

    def is_connected(self, user: ActorHandle) -> bool:
        comp = self.get(user, User)
        return comp is not None and comp.is_connected

    def get_identity(self, user: ActorHandle) -> ActorIdentity:
        comp = self.get(user, User)
        if comp is None:
            raise LookupError(f"{user} has no User component")
        return ActorIdentity(comp.platform_id)

    # -- SideEffects --

    def teleport(self, handle: ActorHandle, point: Vec3) -> None:
        translation = self.get(handle, Translation)
        if translation is None:
            raise LookupError(f"Cannot teleport {handle}: no Translation")
        translation.value = point
        logger.debug("Teleported %s to %s", handle, point)

    def grant_privilege_unlock_set(self, handle: ActorHandle) -> None:
        if not self.exists(handle):
            raise LookupError(f"Cannot unlock privileges for missing actor {handle}")
        self._unlocked.add(handle)
        logger.debug("Granted privilege unlock set to %s", handle)

    def has_unlocks(self, handle: ActorHandle) -> bool:
        return handle in self._unlocked
