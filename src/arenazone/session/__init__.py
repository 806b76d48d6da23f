"""Arena session management: membership, transitions and positions."""

from arenazone.session.positions import PositionCache
from arenazone.session.result import (
    ArenaError,
    InvalidActorError,
    Outcome,
    ResolutionFailure,
    SessionResult,
    SideEffectFailure,
)
from arenazone.session.tracker import SessionTracker
from arenazone.session.zones import Zone, ZoneLayout

__all__ = [
    "PositionCache",
    "SessionTracker",
    "Zone",
    "ZoneLayout",
    "Outcome",
    "SessionResult",
    "SideEffectFailure",
    "ArenaError",
    "InvalidActorError",
    "ResolutionFailure",
]
