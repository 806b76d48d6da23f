"""Logging configuration for hosts and the CLI."""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-28s | %(message)s"


def setup_logging(level: str | int = "INFO") -> None:
    """Configure the root logger once at startup.

    Library modules only call logging.getLogger(__name__); hosts embedding
    arenazone may skip this and wire their own handlers.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=DEFAULT_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
    logging.captureWarnings(True)
