"""Pytest configuration.

Puts the project root (for 'simulations') and 'src' (for 'box_search') on
sys.path so the tests run from a plain checkout as well as an install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
for _p in (_root, _root / "src"):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))


class ScriptedRandom:
    """Stand-in random source whose randrange replays a fixed list of values."""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls = 0

    def randrange(self, *args, **kwargs) -> int:
        self.calls += 1
        return self._values.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
