"""
Umbral Creation Cost Simulator - Command Line
=============================================
Usage:
    python -m umbral_creation <cluster_cost> <dream_matter_cost> [options]

Runs the simulation and prints the average cost in gp, the average and
median resource counts per umbral creation.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .constants import SIMULATION_COUNT, WORKER_COUNT
from .costs import parse_cost_table
from .engine import simulate
from .errors import CostTableError
from .logging_config import configure_logging
from .report import print_report
from .stats import summarize

logger = logging.getLogger(__name__)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="umbral-creation",
        description="Estimate the cost of an umbral creation by simulation",
    )
    parser.add_argument("cluster_cost", nargs="?", help="Price of one cluster of solace (gp)")
    parser.add_argument("dream_matter_cost", nargs="?", help="Price of one dream matter (gp)")
    parser.add_argument("--simulations", type=_positive_int, default=SIMULATION_COUNT,
                        help=f"Number of trials to run (default: {SIMULATION_COUNT:,})")
    parser.add_argument("--workers", type=_positive_int, default=WORKER_COUNT,
                        help=f"Worker threads (default: {WORKER_COUNT})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the per-worker random sources")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress to stderr")
    return parser

# Options that consume the following token as their value
_VALUE_OPTIONS = ("--simulations", "--workers", "--seed")
_FLAG_OPTIONS = ("-h", "--help", "-v", "--verbose")


def _is_option(token: str) -> bool:
    if token in _VALUE_OPTIONS or token in _FLAG_OPTIONS:
        return True
    return any(token.startswith(option + "=") for option in _VALUE_OPTIONS)


def split_prices(argv: List[str]) -> Tuple[List[str], List[str], List[str]]:
    """
    Separate the two price arguments from the options.

    The first two tokens that are not one of our own options are the prices,
    whatever they look like, so ``-abc`` is a bad price rather than an
    unknown option. Returns ``(prices, options, ignored)``.
    """
    prices: List[str] = []
    options: List[str] = []
    ignored: List[str] = []

    tokens = iter(argv)
    for token in tokens:
        if _is_option(token):
            options.append(token)
            if token in _VALUE_OPTIONS:
                value = next(tokens, None)
                if value is not None:
                    options.append(value)
        elif len(prices) < 2:
            prices.append(token)
        else:
            ignored.append(token)
    return prices, options, ignored


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    prices, options, ignored = split_prices(argv)
    args, extra = build_parser().parse_known_args(options)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if ignored or extra:
        logger.debug("Ignoring extra arguments: %s", ignored + extra)

    cluster_arg = prices[0] if len(prices) > 0 else None
    dream_matter_arg = prices[1] if len(prices) > 1 else None
    try:
        cost_table = parse_cost_table(cluster_arg, dream_matter_arg)
    except CostTableError as err:
        print(err)
        return 1

    trials = simulate(args.simulations, args.workers, seed=args.seed)
    print_report(summarize(trials), cost_table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
