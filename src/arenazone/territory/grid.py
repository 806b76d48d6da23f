"""Grid quantization and disk rasterization for O(1) territory checks.

A region is approximated by the union of grid cells whose *centres* fall
inside its circle. Cells that only clip the boundary are excluded, so a
point strictly inside the circle can still read as outside when its
cell centre lies beyond the radius.

Usage:
    grid = GridIndex()
    grid.initialize(Vec3(-1000, 0, 500), radius=300)
    grid.contains_point(Vec3(-1000, 0, 500))  # True
"""

from __future__ import annotations

import logging
import math

from arenazone.core.types import BlockCoord, Vec3

logger = logging.getLogger(__name__)

CELL_SIZE = 10.0
"""World units per grid cell."""


def to_block(position: Vec3, cell_size: float = CELL_SIZE) -> BlockCoord:
    """Quantize a world position to its block coordinate (Y ignored)."""
    return BlockCoord(
        math.floor(position.x / cell_size),
        math.floor(position.z / cell_size),
    )


def block_center(block: BlockCoord, cell_size: float = CELL_SIZE) -> Vec3:
    """World-space centre of a block, at height 0."""
    half = cell_size / 2
    return Vec3(block.bx * cell_size + half, 0.0, block.bz * cell_size + half)


class GridIndex:
    """Precomputed set of blocks covering one circular region.

    Built once by initialize(); immutable afterwards.
    """

    __slots__ = ("_blocks", "_cell_size", "_initialized")

    def __init__(self) -> None:
        self._blocks: frozenset[BlockCoord] = frozenset()
        self._cell_size = CELL_SIZE
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def initialize(self, center: Vec3, radius: float, cell_size: float = CELL_SIZE) -> None:
        """Rasterize the disk of *radius* around *center* onto the grid.

        Only the first call has any effect; repeated calls are no-ops so a
        double initialization can never grow or shrink the set.

        Args:
            center: Region centre in world space.
            radius: Region radius in world units. Must be positive.
            cell_size: World units per block. Must be positive.

        Raises:
            ValueError: If radius or cell_size is not positive.
        """
        if self._initialized:
            logger.debug("Grid already initialized with %d blocks", len(self._blocks))
            return
        if radius <= 0:
            raise ValueError(f"Region radius must be positive, got {radius}")
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}")

        center_block = to_block(center, cell_size)
        block_radius = math.ceil(radius / cell_size)

        blocks: set[BlockCoord] = set()
        for dx in range(-block_radius, block_radius + 1):
            for dz in range(-block_radius, block_radius + 1):
                block = BlockCoord(center_block.bx + dx, center_block.bz + dz)
                if block_center(block, cell_size).planar_distance(center) <= radius:
                    blocks.add(block)

        self._blocks = frozenset(blocks)
        self._cell_size = cell_size
        self._initialized = True
        logger.info(
            "Territory grid initialized with %d blocks (block radius %d)",
            len(self._blocks),
            block_radius,
        )

    def contains_point(self, position: Vec3) -> bool:
        """Check whether *position* falls in a member block."""
        return to_block(position, self._cell_size) in self._blocks

    def contains_block(self, block: BlockCoord) -> bool:
        return block in self._blocks

    def blocks(self) -> list[BlockCoord]:
        """Member blocks, sorted for stable output."""
        return sorted(self._blocks)
