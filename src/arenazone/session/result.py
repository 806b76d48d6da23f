"""Session transition outcomes and errors.

Usage:
    result = tracker.enter(handle)
    if result.outcome is Outcome.SUCCESS:
        ...
    for failure in result.side_effect_failures:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from arenazone.core.identity import ActorHandle, ActorIdentity


class Outcome(Enum):
    """Result of an enter/exit request, rendered distinctly to operators."""

    SUCCESS = auto()
    """State changed."""

    ALREADY_IN_STATE = auto()
    """Enter while in arena, or exit while outside. Not an error."""

    INVALID_ACTOR = auto()
    """Handle null, despawned, missing components, or user disconnected."""

    INTERNAL_ERROR = auto()
    """Unexpected failure while resolving the actor; partial state rolled back."""


@dataclass(frozen=True, slots=True)
class SideEffectFailure:
    """A best-effort side effect that failed during enter.

    Recorded on the result; never unwinds membership.
    """

    step: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.step}: {self.error}"


@dataclass(slots=True)
class SessionResult:
    """Outcome of a session transition."""

    outcome: Outcome
    handle: ActorHandle
    identity: ActorIdentity | None = None
    side_effect_failures: list[SideEffectFailure] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True for SUCCESS and ALREADY_IN_STATE."""
        return self.outcome in (Outcome.SUCCESS, Outcome.ALREADY_IN_STATE)

    @property
    def changed(self) -> bool:
        return self.outcome is Outcome.SUCCESS


class ArenaError(Exception):
    """Base class for arena session errors."""

    pass


class InvalidActorError(ArenaError):
    """Raised when an operation strictly requires a resolvable actor."""

    def __init__(self, handle: ActorHandle):
        super().__init__(f"Invalid actor {handle}")
        self.handle = handle


class ResolutionFailure(ArenaError):
    """Raised when resolving an actor failed unexpectedly during enter.

    Membership written before the failure has already been rolled back.
    """

    def __init__(self, handle: ActorHandle, cause: Exception | None):
        detail = cause if cause is not None else "unknown error"
        super().__init__(f"Failed to process arena entry for {handle}: {detail}")
        self.handle = handle
