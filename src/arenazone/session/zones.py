"""Arena zone layout: arena circle, entry/exit markers and spawn point.

Zone checks here use exact distance, unlike the grid-rasterized
territory index.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from arenazone.core.types import Vec3

if TYPE_CHECKING:
    from arenazone.config import ArenaSettings

logger = logging.getLogger(__name__)

DEFAULT_MARKER_RADIUS = 10.0


@dataclass(frozen=True, slots=True)
class Zone:
    """Sphere around a point."""

    center: Vec3
    radius: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ValueError(f"Zone radius must be positive and finite, got {self.radius}")

    def contains(self, position: Vec3) -> bool:
        return position.distance(self.center) <= self.radius


class ZoneLayout:
    """Operator-editable arena geometry used for spawn and zone checks."""

    def __init__(
        self,
        arena: Zone,
        entry: Zone | None = None,
        exit: Zone | None = None,
        spawn_point: Vec3 | None = None,
    ) -> None:
        self.arena = arena
        self.entry = entry or Zone(arena.center, DEFAULT_MARKER_RADIUS)
        self.exit = exit or Zone(arena.center, DEFAULT_MARKER_RADIUS)
        self.spawn_point = spawn_point if spawn_point is not None else arena.center

    @classmethod
    def from_settings(cls, settings: ArenaSettings) -> ZoneLayout:
        return cls(arena=Zone(settings.center, settings.radius), spawn_point=settings.spawn_point)

    def set_arena_zone(self, center: Vec3, radius: float) -> None:
        """Move the arena. The spawn point follows the arena centre."""
        self.arena = Zone(center, radius)
        self.spawn_point = center
        logger.info("Arena zone set: centre %s, radius %g; spawn point moved to centre", center, radius)

    def set_entry_point(self, point: Vec3, radius: float = DEFAULT_MARKER_RADIUS) -> None:
        self.entry = Zone(point, radius)
        logger.info("Entry point set: %s, radius %g", point, radius)

    def set_exit_point(self, point: Vec3, radius: float = DEFAULT_MARKER_RADIUS) -> None:
        self.exit = Zone(point, radius)
        logger.info("Exit point set: %s, radius %g", point, radius)

    def set_spawn_point(self, point: Vec3) -> None:
        self.spawn_point = point
        logger.info("Spawn point set: %s", point)

    def in_arena_zone(self, position: Vec3) -> bool:
        return self.arena.contains(position)

    def in_entry_zone(self, position: Vec3) -> bool:
        return self.entry.contains(position)

    def in_exit_zone(self, position: Vec3) -> bool:
        return self.exit.contains(position)
