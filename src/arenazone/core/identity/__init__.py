"""Actor identity: transient handles and stable account identities."""

from arenazone.core.identity.models import ActorHandle, ActorIdentity

__all__ = [
    "ActorHandle",
    "ActorIdentity",
]
