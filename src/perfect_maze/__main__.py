"""Command line entry point printing a freshly generated maze."""

from __future__ import annotations

import argparse
import os
import sys

from .pipeline import MazeConfig, MazeGenerator


def _bounded_int(minimum: int):
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer value: '{text}'") from None
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {value}")
        return value

    return convert


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze and print it.")
    parser.add_argument(
        "width", type=_bounded_int(1), nargs="?", default=5, help="Number of rooms across (default: 5)"
    )
    parser.add_argument(
        "height", type=_bounded_int(1), nargs="?", default=5, help="Number of rooms down (default: 5)"
    )
    # A string default only goes through `type` when --seed is absent.
    parser.add_argument(
        "--seed",
        type=_bounded_int(0),
        default=os.getenv("MAZE_SEED") or None,
        help="Random seed (default: $MAZE_SEED)",
    )
    parser.add_argument(
        "--quiet",
        dest="verbose",
        action="store_false",
        help="Only print the maze, without stage messages",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    config = MazeConfig(
        width=args.width,
        height=args.height,
        seed=args.seed,
        verbose=args.verbose,
    )

    result = MazeGenerator(config).generate()
    print(result.maze)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
