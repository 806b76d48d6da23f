"""Spatial territory index: grid rasterization and region resolution."""

from arenazone.territory.grid import CELL_SIZE, GridIndex, block_center, to_block
from arenazone.territory.registry import NO_GRID_INDEX, Region, TerritoryRegistry

__all__ = [
    "CELL_SIZE",
    "GridIndex",
    "block_center",
    "to_block",
    "NO_GRID_INDEX",
    "Region",
    "TerritoryRegistry",
]
