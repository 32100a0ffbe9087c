import enum
import math
from typing import Iterator, NamedTuple, Tuple, Union

from .grid import BoxState, Grid


class PositionedBox(NamedTuple):
    row: int
    column: int
    state: BoxState

    def is_coin(self) -> bool:
        return self.state.is_coin()


class ScanOrder(enum.Enum):
    """
    Which coordinate advances fastest.

    ROW_MAJOR:    (0,0), (0,1), ..., (0,C-1), (1,0), ...
    COLUMN_MAJOR: (0,0), (1,0), ..., (R-1,0), (0,1), ...
    """
    ROW_MAJOR = "row"
    COLUMN_MAJOR = "column"

    def coordinate(self, step: int, rows: int, columns: int) -> Tuple[int, int]:
        """
        Map a 0-based step in this order to its (row, column).
        """
        if self is ScanOrder.ROW_MAJOR:
            return divmod(step, columns)
        column, row = divmod(step, rows)
        return row, column


class Scan:
    """
    Lazy, finite, single-pass traversal of a grid in one ScanOrder.

    Yields PositionedBox values and raises StopIteration after exactly
    rows * columns elements. Not restartable: build a new Scan to walk the
    grid again. The grid is only read.
    """

    def __init__(self, grid: Grid, order: Union[ScanOrder, str]):
        self._grid = grid
        self._order = ScanOrder(order)
        self._step = 0
        self._total = grid.rows * grid.columns

    @property
    def order(self) -> ScanOrder:
        return self._order

    def has_next(self) -> bool:
        return self._step < self._total

    def __iter__(self) -> Iterator[PositionedBox]:
        return self

    def __next__(self) -> PositionedBox:
        if not self.has_next():
            raise StopIteration

        row, column = self._order.coordinate(
            self._step, self._grid.rows, self._grid.columns
        )
        self._step += 1
        return PositionedBox(row, column, self._grid.box_at(row, column))


def iter_rowwise(grid: Grid) -> Scan:
    return Scan(grid, ScanOrder.ROW_MAJOR)


def iter_colwise(grid: Grid) -> Scan:
    return Scan(grid, ScanOrder.COLUMN_MAJOR)


def first_coin_index(scan: Iterator[PositionedBox]) -> float:
    """
    0-based position of the first coin in the scan, or math.inf if the scan
    is exhausted without finding one.
    """
    for i, b in enumerate(scan):
        if b.is_coin():
            return i
    return math.inf
