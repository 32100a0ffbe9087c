# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import enum
import logging
import time


logger = logging.getLogger(__name__)

DENOMINATORS = ("decisive", "all")


class Outcome(enum.Enum):
    ROW_WINS = "row"
    COLUMN_WINS = "column"
    TIE = "tie"


@dataclass(frozen=True)
class ExperimentConfig:
    """
    Parameters shared by every trial of one experiment.
    """
    trials: int
    rows: int
    columns: int
    coins: int

    def __post_init__(self) -> None:
        if self.trials < 0:
            raise ValueError("trials must be >= 0")
        if self.rows <= 0:
            raise ValueError("rows must be > 0")
        if self.columns <= 0:
            raise ValueError("columns must be > 0")
        if self.coins < 0:
            raise ValueError("coins must be >= 0")
        if self.coins > self.rows * self.columns:
            raise ValueError(
                f"coins must be <= rows * columns ({self.rows * self.columns})"
            )


@dataclass
class ExperimentResult:
    """
    Tally of one experiment. Ties are derived, never counted directly.
    """
    config: ExperimentConfig
    row_wins: int
    column_wins: int

    ties: int = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.row_wins < 0 or self.column_wins < 0:
            raise ValueError("win counts must be >= 0")

        decisive = self.row_wins + self.column_wins
        if decisive > self.config.trials:
            raise ValueError(
                f"win count mismatch: {decisive} wins in {self.config.trials} trials"
            )
        self.ties = self.config.trials - decisive

    @property
    def decisive(self) -> int:
        return self.row_wins + self.column_wins

    def percentages(self, denominator: str = "decisive") -> Optional[Dict[str, float]]:
        """
        Row wins, column wins and ties as percentages.

        'decisive' divides by row_wins + column_wins, so ties can exceed 100%.
        'all' divides by trials. Returns None when the denominator is zero.
        """
        if denominator not in DENOMINATORS:
            raise ValueError(
                f"unknown denominator '{denominator}'. Available: {list(DENOMINATORS)}"
            )

        total = self.decisive if denominator == "decisive" else self.config.trials
        if total == 0:
            return None

        return {
            "row": 100.0 * self.row_wins / total,
            "column": 100.0 * self.column_wins / total,
            "tie": 100.0 * self.ties / total,
        }


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def _pct(pcts: Optional[Dict[str, float]], key: str) -> str:
    if pcts is None:
        return "n/a"
    return f"{pcts[key]:.2f}%"


def format_report(r: ExperimentResult, denominator: str = "decisive") -> str:
    """
    Four-line summary printed after each experiment.
    """
    c = r.config
    pcts = r.percentages(denominator)
    if pcts is None:
        logger.warning(
            "no %s trials for %d rows, %d columns, %d coins; percentages undefined",
            "decisive" if denominator == "decisive" else "completed",
            c.rows, c.columns, c.coins,
        )

    return "\n".join([
        f"Outcome after for {c.rows} rows, {c.columns} columns, {c.coins} coins ({c.trials} trials)",
        f"  row-wise wins:    {r.row_wins} ({_pct(pcts, 'row')})",
        f"  column-wise wins: {r.column_wins} ({_pct(pcts, 'column')})",
        f"  ties:             {r.ties} ({_pct(pcts, 'tie')})",
    ])
