"""
Box search: random coin grids and the row-major / column-major scans over them.
"""

from .grid import BoxState, Grid, generate
from .scan import PositionedBox, Scan, ScanOrder, first_coin_index, iter_colwise, iter_rowwise

__all__ = [
    "BoxState",
    "Grid",
    "generate",
    "PositionedBox",
    "Scan",
    "ScanOrder",
    "first_coin_index",
    "iter_colwise",
    "iter_rowwise",
]
