"""Command-line entry point for pigsim.

Runs a round robin between Pig strategies and prints one line per strategy:

    Wins, losses Stay at 20: 612/1000 (61.2%), 388/1000 (38.8%)

Usage:
    pigsim                              # reference line-up, 10 games per series
    pigsim --games 100 --seed 7
    pigsim --strategies stay_at_20,stay_at_50,random --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from pigsim.config import load_settings
from pigsim.strategies import default_strategies, get_strategy_by_type
from pigsim.tournament import print_results_summary, round_robin

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pigsim",
        description="Compare Pig strategies in a round-robin tournament",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Number of games per pairing (default: 10)",
    )
    parser.add_argument(
        "--win",
        type=int,
        default=None,
        help="Winning score; the default line-up is Stay at 1..win plus Random (default: 100)",
    )
    parser.add_argument(
        "--strategies",
        type=str,
        default=None,
        help="Comma-separated strategies, e.g. 'stay_at_20,random' (default: reference line-up)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parallel worker processes (default: CPU count)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of text",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress at INFO level",
    )
    verbosity.add_argument(
        "--quiet",
        action="store_true",
        help="Only log errors",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line interface for running a tournament."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = None
    if args.verbose:
        log_level = "INFO"
    elif args.quiet:
        log_level = "ERROR"

    try:
        settings = load_settings(
            games_per_series=args.games,
            win_score=args.win,
            max_workers=args.workers,
            seed=args.seed,
            log_level=log_level,
        )
        if args.strategies:
            strategies = [get_strategy_by_type(s) for s in args.strategies.split(",") if s.strip()]
        else:
            strategies = default_strategies(settings.win_score)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger.info("Running %d strategies", len(strategies))

    try:
        result = round_robin(
            strategies,
            settings.games_per_series,
            max_workers=settings.max_workers,
            seed=settings.seed,
            win=settings.win_score,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print_results_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
