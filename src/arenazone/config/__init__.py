"""Configuration module using Pydantic Settings.

Usage:
    from arenazone.config import ArenaSettings

    settings = ArenaSettings(radius=150.0)
"""

from arenazone.config.settings import ArenaSettings

__all__ = [
    "ArenaSettings",
]
