"""Actor identity models.

Usage:
    handle = ActorHandle(index=1042, generation=1)
    null = ActorHandle.NULL
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, NewType

ActorIdentity = NewType("ActorIdentity", int)
"""Stable platform/account id. Survives reconnects, unlike ActorHandle."""


@dataclass(frozen=True, slots=True)
class ActorHandle:
    """Transient in-world actor handle with generation for safe reuse.

    A handle is invalidated when its actor is despawned; the host may
    reissue the same index with a bumped generation after a reconnect, so
    handles must never be the sole key for long-lived state.
    """

    index: int = 0
    generation: int = 0

    NULL: ClassVar[ActorHandle]

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def is_null(self) -> bool:
        """Check if this is the null handle.

        Returns:
            True if handle equals ActorHandle.NULL, False otherwise.
        """
        return self == ActorHandle.NULL

    def __str__(self) -> str:
        return f"Actor({self.index}:{self.generation})"


ActorHandle.NULL = ActorHandle(index=0, generation=0)
