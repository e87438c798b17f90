"""Main entry point for the Starfall game."""

import argparse
import sys

from starfall.config import FPS
from starfall.game_loop import Game
from starfall.logger import get_logger, parse_log_level, setup_logger

# Get logger for this module
logger = get_logger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Starfall")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game")
    parser.add_argument("--mute", action="store_true", help="Run without sound")
    parser.add_argument("--fps", type=int, default=FPS, help="Target frames per second")
    parser.add_argument(
        "--log-level",
        type=parse_log_level,
        default=None,
        help="Override the configured log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Initializes and runs the game."""
    try:
        args = parse_args(argv)
        if args.log_level is not None:
            setup_logger(args.log_level)

        logger.info("Starting Starfall")
        game = Game(seed=args.seed, mute=args.mute, fps=args.fps)
        game.run()

    except Exception as e:
        logger.error("An error occurred: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
