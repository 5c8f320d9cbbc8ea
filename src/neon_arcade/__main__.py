#!/usr/bin/env python3
"""
Command line entry point: python -m neon_arcade {flappy,stars}
"""

import argparse
import logging

from .constants import DB_FILE


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="neon-arcade", description="Play Neon Flappy or Star Catcher.")
    parser.add_argument("game", choices=["flappy", "stars"], help="which game to launch")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file for the Star Catcher high score")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible spawns")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    # Imported late so --help works without a display
    from .client import ArcadeClient

    client = ArcadeClient(args.game, db_file=args.db, seed=args.seed)
    client.run()


if __name__ == "__main__":
    main()
