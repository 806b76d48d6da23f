"""Host world capability interfaces and an in-memory implementation.

Architecture Note:
    protocol.py is all the session layer depends on. memory.py is a
    reference host used by tests and the CLI; production hosts provide
    their own adapter.
"""

from arenazone.world.allocator import HandleAllocator
from arenazone.world.memory import InMemoryWorld, PlayerCharacter, Translation, User
from arenazone.world.protocol import ComponentKind, SideEffects, WorldQuery

__all__ = [
    "ComponentKind",
    "WorldQuery",
    "SideEffects",
    "HandleAllocator",
    "InMemoryWorld",
    "Translation",
    "PlayerCharacter",
    "User",
]
