"""CLI for running bot-vs-bot arena matches.

Usage::

    python -m hexcapture.engine.arena_cli --p1 weighted --p2 random --games 50

    # Three-way game on a larger board without walls
    python -m hexcapture.engine.arena_cli --p1 weighted --p2 greedy --p3 random \\
        --radius 6 --walls 0 --games 100

    # Random spawn positions
    python -m hexcapture.engine.arena_cli --spawn random --games 50
"""

from __future__ import annotations

import argparse
import logging
import sys

from hexcapture.config import settings
from hexcapture.engine.arena import run_arena
from hexcapture.engine.bot_strategy import available_strategies, get_strategy
from hexcapture.engine.models import SpawnMode


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bot-vs-Bot Arena")
    parser.add_argument("--games", type=int, default=50)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--p1", default="weighted", help="Strategy for player 1")
    parser.add_argument("--p2", default="random", help="Strategy for player 2")
    parser.add_argument(
        "--p3", default=None, help="Strategy for an optional player 3"
    )
    parser.add_argument("--radius", type=int, default=settings.default_radius)
    parser.add_argument(
        "--walls",
        type=float,
        default=settings.default_wall_density,
        help="Probability that each tile starts as a wall",
    )
    parser.add_argument(
        "--spawn",
        choices=[m.value for m in SpawnMode],
        default=settings.default_spawn_mode,
    )
    parser.add_argument(
        "--no-alternate",
        action="store_true",
        help="Keep seat order fixed instead of rotating each game",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    choices = [name for name in (args.p1, args.p2, args.p3) if name is not None]
    for name in choices:
        if name not in available_strategies():
            print(
                f"Unknown strategy: {name!r}. "
                f"Available: {', '.join(available_strategies())}",
                file=sys.stderr,
            )
            sys.exit(1)

    # Handle same-label case
    strategies = {}
    for i, name in enumerate(choices):
        label = name if choices.count(name) == 1 else f"{name}_{i + 1}"
        strategies[label] = get_strategy(name, seed=args.seed + i)

    print(f"Arena: {' vs '.join(strategies.keys())}, {args.games} games")
    print(f"  Board: radius={args.radius}, walls={args.walls}, spawn={args.spawn}")
    print()

    result = run_arena(
        strategies=strategies,
        num_games=args.games,
        base_seed=args.seed,
        radius=args.radius,
        wall_density=args.walls,
        spawn_mode=SpawnMode(args.spawn),
        alternate_seats=not args.no_alternate,
        progress_callback=lambda done, total: print(
            f"\r  Game {done}/{total}", end="", flush=True
        ),
    )
    print()
    print()
    print(result.summary())


if __name__ == "__main__":
    main()
