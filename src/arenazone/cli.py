"""CLI entry point.

Usage:
    arenazone info                  # configured geometry and block count
    arenazone resolve X Y Z         # territory tag and grid index at a point
    arenazone blocks                # list member blocks
    arenazone demo                  # scripted session on an in-memory world
"""

from __future__ import annotations

import argparse
import sys

from arenazone.commands import ArenaCommands
from arenazone.config import ArenaSettings
from arenazone.context import ArenaContext
from arenazone.core.types import Vec3
from arenazone.territory.registry import TerritoryRegistry
from arenazone.utils.logging import setup_logging
from arenazone.world.memory import InMemoryWorld


def run_info(settings: ArenaSettings) -> int:
    registry = TerritoryRegistry.from_settings(settings)
    for region in registry:
        print(f"territory {region.region_tag}")
        print(f"  centre      {region.center}")
        print(f"  radius      {region.radius:g}")
        print(f"  grid index  {region.grid_index}")
        print(f"  cell size   {region.cell_size:g}")
        print(f"  blocks      {region.grid.block_count}")
    print(f"spawn point   {settings.spawn_point}")
    return 0


def run_resolve(settings: ArenaSettings, point: Vec3) -> int:
    registry = TerritoryRegistry.from_settings(settings)
    tag = registry.resolve_region(point)
    print(f"{point}: territory={tag if tag is not None else 'none'} grid_index={registry.resolve_grid_index(point)}")
    return 0 if tag is not None else 1


def run_blocks(settings: ArenaSettings) -> int:
    registry = TerritoryRegistry.from_settings(settings)
    for region in registry:
        for block in region.grid.blocks():
            print(f"{region.region_tag}\t{block.bx}\t{block.bz}")
    return 0


def run_demo(settings: ArenaSettings) -> int:
    """Scripted walk-through against an in-memory world."""
    world = InMemoryWorld()
    ctx = ArenaContext(world, settings=settings)
    commands = ArenaCommands(ctx)

    outside = Vec3(10000.0, 0.0, 10000.0)
    player, user = world.spawn_player(76561198000000001, "Vlad", outside)
    ctx.sync_positions([player])

    script = ["where", "enter", "enter", "where", "status", "exit", "exit"]
    for line in script:
        reply = commands.execute(line, player)
        print(f"> {line:<8} {reply.message}")

    world.set_connected(user, False)
    reply = commands.execute("enter", player)
    print(f"> {'enter':<8} {reply.message}  (after disconnect)")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="arenazone", description="Arena territory and session tools")
    parser.add_argument("--log-level", default=None, help="Override ARENA_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("info", help="Show configured territory")
    resolve = sub.add_parser("resolve", help="Resolve territory at a point")
    resolve.add_argument("x", type=float)
    resolve.add_argument("y", type=float)
    resolve.add_argument("z", type=float)
    sub.add_parser("blocks", help="List member blocks")
    sub.add_parser("demo", help="Run a scripted session on an in-memory world")
    args = parser.parse_args(argv)

    settings = ArenaSettings()
    setup_logging(args.log_level or settings.log_level)

    if args.command == "info":
        return run_info(settings)
    if args.command == "resolve":
        return run_resolve(settings, Vec3(args.x, args.y, args.z))
    if args.command == "blocks":
        return run_blocks(settings)
    return run_demo(settings)


if __name__ == "__main__":
    sys.exit(main())
