"""arenazone: grid-indexed territory membership and arena session tracking.

Usage:
    from arenazone import ArenaContext, InMemoryWorld, Vec3

    world = InMemoryWorld()
    player, _user = world.spawn_player(76561198000000001, "Vlad", Vec3(0, 0, 0))

    ctx = ArenaContext(world)
    ctx.enter_arena(player)          # teleports to spawn, grants unlocks
    ctx.territory_of(player)         # 5: spawn is inside the arena territory
    ctx.exit_arena(player)
"""

__version__ = "0.1.0"

# Core primitives
from arenazone.core import ActorHandle, ActorIdentity, BlockCoord, Vec3

# Configuration
from arenazone.config import ArenaSettings

# Driving surface
from arenazone.context import ArenaContext
from arenazone.commands import ArenaCommands, CommandReply

# Session
from arenazone.session import (
    ArenaError,
    InvalidActorError,
    Outcome,
    PositionCache,
    ResolutionFailure,
    SessionResult,
    SessionTracker,
    SideEffectFailure,
    ZoneLayout,
)

# Territory
from arenazone.territory import GridIndex, Region, TerritoryRegistry

# World adapters
from arenazone.world import ComponentKind, InMemoryWorld, SideEffects, WorldQuery

__all__ = [
    # Version
    "__version__",
    # Core
    "ActorHandle",
    "ActorIdentity",
    "BlockCoord",
    "Vec3",
    # Config
    "ArenaSettings",
    # Driving surface
    "ArenaContext",
    "ArenaCommands",
    "CommandReply",
    # Session
    "SessionTracker",
    "PositionCache",
    "ZoneLayout",
    "Outcome",
    "SessionResult",
    "SideEffectFailure",
    "ArenaError",
    "InvalidActorError",
    "ResolutionFailure",
    # Territory
    "GridIndex",
    "Region",
    "TerritoryRegistry",
    # World
    "ComponentKind",
    "WorldQuery",
    "SideEffects",
    "InMemoryWorld",
]
