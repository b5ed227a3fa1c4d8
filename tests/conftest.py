# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "flipsolver" and "api_proto" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flipsolver.types import LineTarget  # noqa: E402

# A hidden board used as ground truth: 0 = Voltorb, 1..3 = coins
SOLUTION = [
    [0, 1, 2, 0, 3],
    [1, 1, 0, 2, 1],
    [3, 0, 1, 1, 0],
    [0, 2, 1, 3, 1],
    [1, 1, 0, 0, 2],
]


def targets_for(solution):
    """Row/column LineTargets that a board would show for the given solution."""
    rows = [
        LineTarget("row", r, sum(line), line.count(0))
        for r, line in enumerate(solution)
    ]
    cols = []
    for c in range(len(solution)):
        line = [solution[r][c] for r in range(len(solution))]
        cols.append(LineTarget("col", c, sum(line), line.count(0)))
    return rows, cols


def uniform_targets(coin_sum, voltorbs):
    rows = [LineTarget("row", i, coin_sum, voltorbs) for i in range(5)]
    cols = [LineTarget("col", i, coin_sum, voltorbs) for i in range(5)]
    return rows, cols


@pytest.fixture
def solution():
    return [list(line) for line in SOLUTION]


@pytest.fixture
def solution_targets():
    return targets_for(SOLUTION)


@pytest.fixture
def cross_targets():
    # every line: coin sum 4 with three Voltorbs
    return uniform_targets(4, 3)


@pytest.fixture
def all_ones_targets():
    return uniform_targets(5, 0)
