"""Tests for the arenazone CLI."""

import logging

import pytest

from arenazone.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in ("ARENA_RADIUS", "ARENA_CENTER_X", "ARENA_CENTER_Z", "ARENA_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)


def test_info(capsys):
    assert main(["--log-level", "WARNING", "info"]) == 0
    out = capsys.readouterr().out
    assert "territory 5" in out
    assert "grid index  500" in out


def test_resolve_inside_and_outside(capsys):
    assert main(["--log-level", "WARNING", "resolve", "-1000", "0", "500"]) == 0
    assert "territory=5 grid_index=500" in capsys.readouterr().out

    assert main(["--log-level", "WARNING", "resolve", "10000", "0", "10000"]) == 1
    assert "territory=none grid_index=-1" in capsys.readouterr().out


def test_blocks_lists_member_cells(capsys):
    assert main(["--log-level", "WARNING", "blocks"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "5\t-100\t50" in lines


def test_demo_walks_through_outcomes(capsys):
    assert main(["--log-level", "WARNING", "demo"]) == 0
    out = capsys.readouterr().out
    assert "Entered the arena." in out
    assert "Already in the arena." in out
    assert "Left the arena." in out
    assert "Not in the arena." in out
    assert "Invalid target" in out
