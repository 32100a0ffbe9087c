# simulations/methods.py

from __future__ import annotations

import logging
import random
from typing import Iterator, Optional

from .common import ExperimentConfig, ExperimentResult, Outcome, Timer

from box_search.grid import DEFAULT_PLACEMENT, Grid, generate
from box_search.scan import first_coin_index, iter_colwise, iter_rowwise


logger = logging.getLogger(__name__)


def run_trial(grid: Grid) -> Outcome:
    """
    Run both scans over the same grid; whichever reaches a coin in fewer
    steps wins. Equal steps (including no coin at all) is a tie.
    """
    row_index = first_coin_index(iter_rowwise(grid))
    col_index = first_coin_index(iter_colwise(grid))

    if row_index < col_index:
        return Outcome.ROW_WINS
    if col_index < row_index:
        return Outcome.COLUMN_WINS
    return Outcome.TIE


def iter_trials(
    config: ExperimentConfig,
    rng: random.Random,
    placement: str = DEFAULT_PLACEMENT,
) -> Iterator[Outcome]:
    """
    Yield one outcome per trial, each on a freshly generated grid.
    """
    for _ in range(config.trials):
        grid = generate(config.rows, config.columns, config.coins, rng=rng, method=placement)
        yield run_trial(grid)


def simulate(
    config: ExperimentConfig,
    rng: Optional[random.Random] = None,
    placement: str = DEFAULT_PLACEMENT,
) -> ExperimentResult:
    """
    Tally row-wise and column-wise wins over config.trials trials.
    Ties increment neither counter.
    """
    if rng is None:
        rng = random.Random()

    row_wins = 0
    column_wins = 0

    logger.debug("starting experiment %s (placement=%s)", config, placement)
    with Timer() as t:
        for outcome in iter_trials(config, rng, placement):
            if outcome is Outcome.ROW_WINS:
                row_wins += 1
            elif outcome is Outcome.COLUMN_WINS:
                column_wins += 1

    result = ExperimentResult(
        config=config,
        row_wins=row_wins,
        column_wins=column_wins,
        runtime_s=t.elapsed_s,
        meta={"placement": placement},
    )
    logger.debug(
        "finished %d trials in %.3fs: row=%d column=%d ties=%d",
        config.trials, t.elapsed_s or 0.0, result.row_wins, result.column_wins, result.ties,
    )
    return result
