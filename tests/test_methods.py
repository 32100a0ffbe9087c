import random

import pytest

from box_search.grid import BoxState, Grid, generate
from simulations.common import ExperimentConfig, Outcome
from simulations.methods import iter_trials, run_trial, simulate


def _grid_with_coins(rows: int, columns: int, *coins: int) -> Grid:
    boxes = [BoxState.EMPTY] * (rows * columns)
    for b in coins:
        boxes[b] = BoxState.COIN
    return Grid(rows, columns, tuple(boxes))


def test_run_trial_row_wins() -> None:
    # (0, 1): step 1 row-wise, step 2 column-wise
    assert run_trial(_grid_with_coins(2, 2, 1)) is Outcome.ROW_WINS


def test_run_trial_column_wins() -> None:
    # (1, 0): step 2 row-wise, step 1 column-wise
    assert run_trial(_grid_with_coins(2, 2, 2)) is Outcome.COLUMN_WINS


def test_run_trial_tie_on_shared_box() -> None:
    assert run_trial(_grid_with_coins(2, 2, 0)) is Outcome.TIE
    assert run_trial(_grid_with_coins(2, 2, 3)) is Outcome.TIE


def test_run_trial_tie_without_coins() -> None:
    assert run_trial(_grid_with_coins(3, 3)) is Outcome.TIE


def test_run_trial_first_coin_decides() -> None:
    # Row-wise hits (0, 2) at step 2; column-wise hits (1, 0) at step 1
    grid = _grid_with_coins(2, 3, 2, 3)
    assert run_trial(grid) is Outcome.COLUMN_WINS


@pytest.mark.parametrize(
    "rows,columns,coins",
    [(2, 8, 0), (3, 3, 9), (1, 8, 2), (8, 1, 3), (1, 1, 1)],
)
def test_degenerate_configs_always_tie(rows: int, columns: int, coins: int) -> None:
    cfg = ExperimentConfig(trials=200, rows=rows, columns=columns, coins=coins)
    outcomes = list(iter_trials(cfg, random.Random(11)))
    assert len(outcomes) == 200
    assert set(outcomes) == {Outcome.TIE}

    result = simulate(cfg, rng=random.Random(11))
    assert result.row_wins == 0
    assert result.column_wins == 0
    assert result.ties == 200


def test_scripted_randomness_gives_exact_outcomes(scripted_rng) -> None:
    # 2x2 grid, one coin per trial: one randrange draw per grid
    rng = scripted_rng([1, 2, 3, 0, 1])
    cfg = ExperimentConfig(trials=5, rows=2, columns=2, coins=1)
    assert list(iter_trials(cfg, rng, placement="rejection")) == [
        Outcome.ROW_WINS,
        Outcome.COLUMN_WINS,
        Outcome.TIE,
        Outcome.TIE,
        Outcome.ROW_WINS,
    ]
    assert rng.calls == 5


@pytest.mark.parametrize("placement", ["rejection", "shuffle"])
def test_same_seed_reproduces_outcome_sequence(placement: str) -> None:
    cfg = ExperimentConfig(trials=500, rows=8, columns=8, coins=4)
    a = list(iter_trials(cfg, random.Random(2024), placement))
    b = list(iter_trials(cfg, random.Random(2024), placement))
    assert a == b


def test_simulate_tally_adds_up_for_wide_grid() -> None:
    cfg = ExperimentConfig(trials=5000, rows=2, columns=8, coins=2)
    result = simulate(cfg, rng=random.Random(42))

    assert result.row_wins + result.column_wins + result.ties == cfg.trials
    assert result.row_wins > 0
    assert result.column_wins > 0
    assert result.runtime_s is not None
    assert result.meta == {"placement": "rejection"}

    pcts = result.percentages()
    assert pcts is not None
    assert pcts["row"] + pcts["column"] == pytest.approx(100.0)

    pcts_all = result.percentages("all")
    assert pcts_all["row"] + pcts_all["column"] + pcts_all["tie"] == pytest.approx(100.0)


def test_simulate_matches_iter_trials() -> None:
    cfg = ExperimentConfig(trials=300, rows=4, columns=6, coins=3)
    outcomes = list(iter_trials(cfg, random.Random(5)))
    result = simulate(cfg, rng=random.Random(5))
    assert result.row_wins == outcomes.count(Outcome.ROW_WINS)
    assert result.column_wins == outcomes.count(Outcome.COLUMN_WINS)
    assert result.ties == outcomes.count(Outcome.TIE)


def test_simulate_zero_trials() -> None:
    result = simulate(ExperimentConfig(trials=0, rows=2, columns=2, coins=1))
    assert (result.row_wins, result.column_wins, result.ties) == (0, 0, 0)


def test_generate_is_not_mutated_by_trial() -> None:
    grid = generate(3, 4, 5, rng=random.Random(9))
    before = grid.snapshot_boxes()
    run_trial(grid)
    assert grid.snapshot_boxes() == before
