# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .common import DENOMINATORS, ExperimentResult, format_report
from .logging_config import setup_logging
from .run import DEFAULT_TRIALS, run_experiment

from box_search.grid import DEFAULT_PLACEMENT, PLACEMENTS


# Keep the tool intentionally opinionated:
# - one experiment per invocation
# - seed is fixed unless given on the command line
DEFAULT_SEED = 42


def plot_result(r: ExperimentResult) -> None:
    """
    Bar chart of row-wise wins, column-wise wins and ties.
    """
    c = r.config
    labels = ["row-wise", "column-wise", "ties"]
    values = [r.row_wins, r.column_wins, r.ties]

    plt.figure(figsize=(6, 4))
    plt.bar(labels, values, color=["tab:blue", "tab:orange", "tab:gray"])
    plt.ylabel("Trials")
    plt.title(
        f"{c.rows} rows, {c.columns} columns, {c.coins} coins ({c.trials} trials)"
    )
    plt.tight_layout()
    plt.show()


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare row-wise and column-wise box search via Monte Carlo."
    )
    parser.add_argument("--rows", type=int, required=True, help="number of rows")
    parser.add_argument("--columns", type=int, required=True, help="number of columns")
    parser.add_argument("--coins", type=int, required=True, help="number of coins per grid")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of trials")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed")
    parser.add_argument(
        "--placement",
        choices=sorted(PLACEMENTS.keys()),
        default=DEFAULT_PLACEMENT,
        help="coin placement method",
    )
    parser.add_argument(
        "--denominator",
        choices=DENOMINATORS,
        default="decisive",
        help="percentages over decisive trials (reference) or all trials",
    )
    parser.add_argument("--log-level", default="WARNING", help="e.g. DEBUG | INFO | WARNING")
    parser.add_argument("--plot", action="store_true", help="show a bar chart of the outcome")

    args = parser.parse_args(argv)

    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"unknown log level '{args.log_level}'")
    setup_logging(level)

    try:
        result = run_experiment(
            trials=args.trials,
            rows=args.rows,
            columns=args.columns,
            coins=args.coins,
            seed=args.seed,
            placement=args.placement,
        )
    except ValueError as e:
        parser.error(str(e))

    print(format_report(result, denominator=args.denominator))

    if args.plot:
        plot_result(result)

    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
