"""Utilities shared by the CLI and host adapters."""

from arenazone.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
