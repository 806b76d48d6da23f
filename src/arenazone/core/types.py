"""Core geometric types for arenazone."""

from __future__ import annotations

import math
from typing import NamedTuple


class Vec3(NamedTuple):
    """World-space point. Y is height; territory math uses the XZ plane."""

    x: float
    y: float
    z: float

    def distance(self, other: Vec3) -> float:
        """Full 3D Euclidean distance."""
        return math.dist(self, other)

    def planar_distance(self, other: Vec3) -> float:
        """Euclidean distance on the XZ plane (Y ignored)."""
        return math.hypot(self.x - other.x, self.z - other.z)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


class BlockCoord(NamedTuple):
    """Integer grid cell a world position falls into."""

    bx: int
    bz: int
