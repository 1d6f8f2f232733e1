"""
Command-line interface for searching take-stones positions.
"""

import argparse
import logging
from typing import List, Optional

from stone_search.api import format_result, run
from stone_search.utils.config import Config, DEFAULT_DEPTH, LOG_FORMAT
from stone_search.utils.factory import create_game_from_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Alpha-beta search over the take-stones divisor game"
    )
    parser.add_argument(
        "size",
        type=int,
        help="Total number of stones",
    )
    parser.add_argument(
        "--taken", "-t",
        type=int,
        nargs="*",
        default=[],
        help="Stones already taken, in the order they were taken (e.g. -t 3 1)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=DEFAULT_DEPTH,
        help="Search depth in plies; 0 searches to the end (default: 0)",
    )
    parser.add_argument(
        "--no-pruning",
        action="store_true",
        help="Run plain minimax instead of alpha-beta",
    )
    parser.add_argument(
        "--board", "-b",
        action="store_true",
        help="Print the root position before the statistics",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        config = Config(
            size=args.size,
            depth=args.depth,
            taken=args.taken,
            pruning=not args.no_pruning,
        )
        game = create_game_from_config(config)
    except ValueError as e:
        parser.error(str(e))

    logger.debug("Running %r", config)

    if args.board:
        print(game.state_string())
    result = run(game, config.depth, pruning=config.pruning)
    print(format_result(result))


if __name__ == "__main__":
    main()
