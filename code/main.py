#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from dungeon_config import GenerationConfig
from dungeon_constants import (
    DEFAULT_DUNGEON_SIZE,
    DEFAULT_EMPTY_ROOM_TOLERANCE,
    DEFAULT_EXPORT_DIR,
    RANDOM_SEED,
)
from dungeon_export import save_dungeon
from dungeon_generator import DungeonGenerator, GenerationAttemptsExhausted


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a grid dungeon layout and print it to the console."
    )
    parser.add_argument("--height", type=int, default=DEFAULT_DUNGEON_SIZE, help="Number of rows")
    parser.add_argument("--width", type=int, default=DEFAULT_DUNGEON_SIZE, help="Number of columns")
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_EMPTY_ROOM_TOLERANCE,
        help="Percentage of cells allowed to stay empty (default: 25)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Random seed; a random one is picked and printed when omitted",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many rejected layouts (default: retry forever)",
    )
    parser.add_argument(
        "--save-dir",
        type=str,
        default=None,
        help=f"Directory to write the layout to as CSV (e.g. {DEFAULT_EXPORT_DIR})",
    )
    parser.add_argument(
        "--number",
        type=int,
        default=0,
        help="Dungeon number used in the saved file name (default: 0)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation attempt")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    seed = args.seed
    if seed is None:
        # Pick a random seed randomly and print it, so we can reproduce a layout by passing --seed next run.
        seed = random.randint(0, 1000000)
    print(f"Using random seed {seed}")

    try:
        config = GenerationConfig(
            height=args.height,
            width=args.width,
            empty_room_tolerance=args.tolerance,
            random_seed=seed,
            max_attempts=args.max_attempts,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    generator = DungeonGenerator(config)
    try:
        result = generator.generate()
    except GenerationAttemptsExhausted as exc:
        raise SystemExit(str(exc)) from exc

    print(result.render())
    print(result.starting_location_text())
    print(f"Accepted after {result.attempts} attempt(s), {result.empty_count()} empty cells")

    if args.save_dir is not None:
        try:
            path = save_dungeon(result, args.save_dir, args.number)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        print(f"Saved dungeon to {path}")


if __name__ == "__main__":
    main()
