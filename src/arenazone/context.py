"""ArenaContext: the single owned entry point for a host.

Holds the territory registry, position cache, zone layout and session
tracker. Create one per world and hand it to the command layer.

Usage:
    world = InMemoryWorld()
    ctx = ArenaContext(world)
    ctx.record_position(handle, Vec3(-1000, 0, 500))
    ctx.territory_of(handle)  # 5
    ctx.enter_arena(handle)
"""

from __future__ import annotations

import logging
from typing import cast

from arenazone.config import ArenaSettings
from arenazone.core.identity import ActorHandle
from arenazone.core.types import Vec3
from arenazone.session.positions import PositionCache
from arenazone.session.result import SessionResult
from arenazone.session.tracker import SessionTracker
from arenazone.session.zones import ZoneLayout
from arenazone.territory.registry import Region, TerritoryRegistry
from arenazone.world.protocol import SideEffects, WorldQuery

logger = logging.getLogger(__name__)


class ArenaContext:
    """Driving surface over the arena subsystems.

    Args:
        world: Host world query adapter.
        effects: Side-effect adapter. Defaults to world when it also
            implements SideEffects.
        settings: Geometry and spawn configuration. Defaults to
            ArenaSettings() (constants + ARENA_* environment).
        registry: Prebuilt registry, e.g. with several regions. Built from
            settings when omitted.
    """

    def __init__(
        self,
        world: WorldQuery,
        effects: SideEffects | None = None,
        settings: ArenaSettings | None = None,
        registry: TerritoryRegistry | None = None,
    ) -> None:
        if effects is None:
            if not isinstance(world, SideEffects):
                raise TypeError("effects is required when world does not implement SideEffects")
            effects = cast(SideEffects, world)

        self.settings = settings or ArenaSettings()
        self.registry = registry or TerritoryRegistry.from_settings(self.settings)
        self.layout = ZoneLayout.from_settings(self.settings)
        self.positions = PositionCache()
        self.tracker = SessionTracker(world, effects, self.registry, self.positions, self.layout)
        self._world = world

    def enter_arena(self, handle: ActorHandle) -> SessionResult:
        return self.tracker.enter(handle)

    def exit_arena(self, handle: ActorHandle) -> SessionResult:
        return self.tracker.exit(handle)

    def is_in_arena(self, handle: ActorHandle) -> bool:
        return self.tracker.is_in_arena(handle)

    def territory_of(self, handle: ActorHandle) -> int | None:
        return self.tracker.territory_of(handle)

    def region_of(self, handle: ActorHandle) -> Region | None:
        return self.tracker.region_of(handle)

    def grid_index_of(self, handle: ActorHandle) -> int:
        return self.tracker.grid_index_of(handle)

    def record_position(self, handle: ActorHandle, position: Vec3) -> None:
        """Unconditionally store the latest position for handle."""
        self.positions.record_position(handle, position)

    def check_player_zones(self, handle: ActorHandle, position: Vec3) -> bool:
        """Per-tick position report from a world scan.

        Records the position only for valid actors. Crossing entry/exit
        zones does not move anyone in or out of the arena; only explicit
        enter/exit commands do.

        Returns:
            True if the position was recorded.
        """
        if not self.tracker.is_valid_actor(handle):
            return False
        self.positions.record_position(handle, position)
        return True

    def sync_positions(self, handles: list[ActorHandle]) -> int:
        """Refresh cached positions from the world for each valid handle.

        Returns:
            Number of positions recorded.
        """
        recorded = 0
        for handle in handles:
            if not self.tracker.is_valid_actor(handle):
                continue
            self.positions.record_position(handle, self._world.get_position(handle))
            recorded += 1
        return recorded

    def reset(self) -> None:
        """Drop all membership and cached positions. Geometry is kept."""
        self.tracker.reset()
        self.positions.clear()
        logger.info("Arena context reset")
