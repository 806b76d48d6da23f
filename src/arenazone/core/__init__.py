"""Core primitives: geometry and actor identity.

Architecture Note:
    core/ holds stateless value types. Stateful services live in
    territory/ and session/.
"""

from arenazone.core.identity import ActorHandle, ActorIdentity
from arenazone.core.types import BlockCoord, Vec3

__all__ = [
    "ActorHandle",
    "ActorIdentity",
    "BlockCoord",
    "Vec3",
]
