"""Last-known position per actor handle."""

from __future__ import annotations

from arenazone.core.identity import ActorHandle
from arenazone.core.types import Vec3


class PositionCache:
    """Handle → last reported position.

    Entries are overwritten on every report and never evicted; handles of
    despawned actors linger until clear(). Liveness is the caller's
    concern.
    """

    __slots__ = ("_positions",)

    def __init__(self) -> None:
        self._positions: dict[ActorHandle, Vec3] = {}

    def record_position(self, handle: ActorHandle, position: Vec3) -> None:
        self._positions[handle] = position

    def last_known_position(self, handle: ActorHandle) -> Vec3 | None:
        return self._positions.get(handle)

    def __contains__(self, handle: object) -> bool:
        return handle in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def clear(self) -> None:
        self._positions.clear()
