# simulations/run.py

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Sequence

from .common import ExperimentConfig, ExperimentResult, format_report
from .logging_config import setup_logging
from .methods import simulate

from box_search.grid import DEFAULT_PLACEMENT


DEFAULT_TRIALS = 100_000

# Run in this order by main():
# - wider than high, two coins
# - higher than wide, two coins
# - square, two coins
# - square, four coins
DEFAULT_EXPERIMENTS = (
    ExperimentConfig(trials=DEFAULT_TRIALS, rows=2, columns=8, coins=2),
    ExperimentConfig(trials=DEFAULT_TRIALS, rows=8, columns=2, coins=2),
    ExperimentConfig(trials=DEFAULT_TRIALS, rows=8, columns=8, coins=2),
    ExperimentConfig(trials=DEFAULT_TRIALS, rows=8, columns=8, coins=4),
)


def run_experiment(
    trials: int,
    rows: int,
    columns: int,
    coins: int,
    seed: Optional[int] = None,
    placement: str = DEFAULT_PLACEMENT,
) -> ExperimentResult:
    """
    Run a single experiment and return an ExperimentResult.

    Parameters
    ----------
    trials:
        Number of independent trials.
    rows, columns:
        Grid dimensions.
    coins:
        Coins placed in each grid.
    seed:
        RNG seed. None gives a non-reproducible run.
    placement:
        Coin placement method ('rejection' or 'shuffle').

    Returns
    -------
    ExperimentResult
    """
    config = ExperimentConfig(trials=trials, rows=rows, columns=columns, coins=coins)
    return simulate(config, rng=random.Random(seed), placement=placement)


def iter_batch(
    configs: Sequence[ExperimentConfig],
    seed: Optional[int] = None,
    placement: str = DEFAULT_PLACEMENT,
) -> Iterator[ExperimentResult]:
    """
    Run several experiments in sequence from one random source, yielding
    each result as soon as its experiment finishes.
    """
    rng = random.Random(seed)
    for cfg in configs:
        yield simulate(cfg, rng=rng, placement=placement)


def run_batch(
    configs: Sequence[ExperimentConfig],
    seed: Optional[int] = None,
    placement: str = DEFAULT_PLACEMENT,
) -> List[ExperimentResult]:
    return list(iter_batch(configs, seed=seed, placement=placement))


def main() -> int:
    setup_logging(logging.WARNING)

    for result in iter_batch(DEFAULT_EXPERIMENTS):
        print(format_report(result), flush=True)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
