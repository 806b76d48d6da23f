"""Territory registry: named circular regions resolved by point.

Usage:
    registry = TerritoryRegistry()
    registry.register(Region(center=Vec3(-1000, 0, 500), radius=300, region_tag=5, grid_index=500))
    registry.resolve_region(Vec3(-1000, 0, 500))      # 5
    registry.resolve_grid_index(Vec3(10000, 0, 10000))  # -1
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from arenazone.core.types import Vec3
from arenazone.territory.grid import CELL_SIZE, GridIndex

if TYPE_CHECKING:
    from arenazone.config import ArenaSettings

logger = logging.getLogger(__name__)

NO_GRID_INDEX = -1
"""Returned by resolve_grid_index() when no region contains the point."""


@dataclass(frozen=True, slots=True)
class Region:
    """A circular territory with its tag and grid index.

    The block set is rasterized on construction and never changes.
    """

    center: Vec3
    radius: float
    region_tag: int
    grid_index: int
    cell_size: float = CELL_SIZE
    grid: GridIndex = field(default_factory=GridIndex, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"Region {self.region_tag} radius must be positive, got {self.radius}")
        self.grid.initialize(self.center, self.radius, self.cell_size)

    def contains(self, position: Vec3) -> bool:
        return self.grid.contains_point(position)


class TerritoryRegistry:
    """Ordered collection of regions. Resolution returns the first match.

    Regions are checked in registration order, so overlapping regions
    resolve deterministically.
    """

    def __init__(self, regions: list[Region] | None = None) -> None:
        self._regions: list[Region] = []
        for region in regions or []:
            self.register(region)

    @classmethod
    def from_settings(cls, settings: ArenaSettings) -> TerritoryRegistry:
        """Build a single-region registry from settings."""
        return cls(
            [
                Region(
                    center=settings.center,
                    radius=settings.radius,
                    region_tag=settings.region_tag,
                    grid_index=settings.grid_index,
                    cell_size=settings.cell_size,
                )
            ]
        )

    def register(self, region: Region) -> None:
        """Add a region.

        Raises:
            ValueError: If a region with the same tag is already registered.
        """
        if any(r.region_tag == region.region_tag for r in self._regions):
            raise ValueError(f"Region tag {region.region_tag} already registered")
        self._regions.append(region)
        logger.info(
            "Registered region %d (grid index %d) at %s radius %g with %d blocks",
            region.region_tag,
            region.grid_index,
            region.center,
            region.radius,
            region.grid.block_count,
        )

    @property
    def regions(self) -> tuple[Region, ...]:
        return tuple(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def region_at(self, position: Vec3) -> Region | None:
        """Return the first region containing *position*, or None."""
        for region in self._regions:
            if region.contains(position):
                return region
        return None

    def resolve_region(self, position: Vec3) -> int | None:
        """Tag of the first region containing *position*, or None."""
        region = self.region_at(position)
        return region.region_tag if region is not None else None

    def resolve_grid_index(self, position: Vec3) -> int:
        """Grid index of the first region containing *position*, or -1."""
        region = self.region_at(position)
        return region.grid_index if region is not None else NO_GRID_INDEX

    def contains(self, position: Vec3) -> bool:
        return self.region_at(position) is not None
