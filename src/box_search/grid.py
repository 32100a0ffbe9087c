import enum
import random
from typing import Callable, Dict, List, Optional, Tuple


class BoxState(enum.Enum):
    EMPTY = "empty"
    COIN = "coin"

    def is_coin(self) -> bool:
        return self is BoxState.COIN


class Grid:
    """
    Grid (immutable stack of boxes)

    A rows x columns arrangement of boxes stored as one flat tuple. Box
    (row, column) lives at linear index:

        row * columns + column

    A grid is built once per trial by generate() and never mutated
    afterwards. Both scan orders read the same grid.
    """

    def __init__(self, rows: int, columns: int, boxes: Tuple[BoxState, ...]):
        if rows <= 0:
            raise ValueError("must have at least one row")
        if columns <= 0:
            raise ValueError("must have at least one column")
        if len(boxes) != rows * columns:
            raise ValueError(
                f"expected {rows * columns} boxes, got {len(boxes)}"
            )

        self._rows = rows
        self._columns = columns
        self._boxes = tuple(boxes)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def box_at(self, row: int, column: int) -> BoxState:
        if row < 0 or row >= self._rows:
            raise IndexError("row index out of range")
        if column < 0 or column >= self._columns:
            raise IndexError("column index out of range")
        return self._boxes[row * self._columns + column]

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def num_boxes(self) -> int:
        return len(self._boxes)

    def num_coins(self) -> int:
        return sum(1 for b in self._boxes if b.is_coin())

    def snapshot_boxes(self) -> List[BoxState]:
        """
        Return a copy of the flat box list for inspection/debugging.
        """
        return list(self._boxes)

    def render(self) -> str:
        """
        Text picture of the grid, one line per row: X for a coin, O for an
        empty box.
        """
        lines = []
        for r in range(self._rows):
            start = r * self._columns
            row = self._boxes[start:start + self._columns]
            lines.append("".join("X" if b.is_coin() else "O" for b in row))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self._rows}, columns={self._columns}, "
            f"coins={self.num_coins()})"
        )


# --- Coin placement ----------------------------------------------------------

PlacementFn = Callable[[int, int, random.Random], List[BoxState]]


def place_rejection(num_boxes: int, coins: int, rng: random.Random) -> List[BoxState]:
    """
    Rejection sampling: draw a uniform box index, retry if it already holds
    a coin, stop once `coins` distinct boxes are marked.

    Expected extra draws stay small for sparse grids and grow as coins
    approaches num_boxes. The full grid is handled by generate() before
    this is called.
    """
    boxes = [BoxState.EMPTY] * num_boxes
    remaining = coins

    while remaining > 0:
        b = rng.randrange(num_boxes)
        if boxes[b].is_coin():
            continue

        boxes[b] = BoxState.COIN
        remaining -= 1

    return boxes


def place_shuffle(num_boxes: int, coins: int, rng: random.Random) -> List[BoxState]:
    """
    Exact sampling without replacement. Always terminates after one call to
    rng.sample, regardless of density.
    """
    boxes = [BoxState.EMPTY] * num_boxes
    for b in rng.sample(range(num_boxes), coins):
        boxes[b] = BoxState.COIN
    return boxes


def get_placement(name: str) -> PlacementFn:
    name = name.strip().lower()
    if name not in PLACEMENTS:
        raise ValueError(
            f"unknown placement '{name}'. Available: {sorted(PLACEMENTS.keys())}"
        )
    return PLACEMENTS[name]


PLACEMENTS: Dict[str, PlacementFn] = {
    "rejection": place_rejection,
    "shuffle": place_shuffle,
}

DEFAULT_PLACEMENT = "rejection"


def generate(
    rows: int,
    columns: int,
    coins: int,
    rng: Optional[random.Random] = None,
    method: str = DEFAULT_PLACEMENT,
) -> Grid:
    """
    Build a fresh grid with exactly `coins` coin boxes placed uniformly at
    random.

    Parameters
    ----------
    rows, columns:
        Grid dimensions, both >= 1.
    coins:
        Number of coin boxes, 0 <= coins <= rows * columns.
    rng:
        Random source. Pass a seeded random.Random for reproducible grids;
        None uses a fresh unseeded one.
    method:
        Placement method name (see PLACEMENTS).
    """
    if rows <= 0:
        raise ValueError("must have at least one row")
    if columns <= 0:
        raise ValueError("must have at least one column")

    num_boxes = rows * columns
    if coins < 0:
        raise ValueError("coins must be >= 0")
    if coins > num_boxes:
        raise ValueError(
            f"coins must be <= rows * columns ({num_boxes}), got {coins}"
        )

    place = get_placement(method)

    # Degenerate grids consume no randomness
    if coins == num_boxes:
        return Grid(rows, columns, (BoxState.COIN,) * num_boxes)
    if coins == 0:
        return Grid(rows, columns, (BoxState.EMPTY,) * num_boxes)

    if rng is None:
        rng = random.Random()

    return Grid(rows, columns, tuple(place(num_boxes, coins, rng)))
