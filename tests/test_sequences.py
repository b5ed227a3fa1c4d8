import itertools

import pytest

from flipsolver.csp.sequences import (
    build_initial_line_candidates,
    enumerate_sequences,
    find_unsatisfiable_lines,
)
from flipsolver.types import LineTarget


def brute_force(coin_sum, voltorbs):
    return sorted(
        seq for seq in itertools.product((0, 1, 2, 3), repeat=5)
        if sum(seq) == coin_sum and seq.count(0) == voltorbs
    )


@pytest.mark.parametrize("coin_sum", range(1, 16))
@pytest.mark.parametrize("voltorbs", range(0, 5))
def test_enumerate_matches_brute_force(coin_sum, voltorbs):
    seqs = enumerate_sequences(coin_sum, voltorbs)
    for seq in seqs:
        assert len(seq) == 5
        assert sum(seq) == coin_sum
        assert seq.count(0) == voltorbs
    assert seqs == brute_force(coin_sum, voltorbs)


def test_sum_four_with_three_voltorbs():
    seqs = enumerate_sequences(4, 3)
    # {1,3,0,0,0} in 20 orders and {2,2,0,0,0} in 10 orders
    assert len(seqs) == 30
    assert len(set(seqs)) == 30
    assert sum(1 for s in seqs if sorted(s) == [0, 0, 0, 1, 3]) == 20
    assert sum(1 for s in seqs if sorted(s) == [0, 0, 0, 2, 2]) == 10
    assert (0, 0, 0, 1, 3) in seqs
    assert (3, 0, 1, 0, 0) in seqs


def test_enumerate_is_deterministic():
    assert enumerate_sequences(8, 1) == enumerate_sequences(8, 1)


def test_enumerate_order_is_lexicographic():
    seqs = enumerate_sequences(7, 2)
    assert seqs == sorted(seqs)


def test_single_arrangements():
    assert enumerate_sequences(15, 0) == [(3, 3, 3, 3, 3)]
    assert enumerate_sequences(5, 0) == [(1, 1, 1, 1, 1)]


def test_unsatisfiable_returns_empty():
    # one non-zero cell can hold at most 3
    assert enumerate_sequences(15, 4) == []
    assert enumerate_sequences(4, 4) == []


def test_build_initial_line_candidates(cross_targets):
    rows, cols = build_initial_line_candidates(*cross_targets)
    assert [len(c) for c in rows] == [30] * 5
    assert [len(c) for c in cols] == [30] * 5


def test_find_unsatisfiable_lines():
    rows = [LineTarget("row", i, 4, 3) for i in range(5)]
    cols = [LineTarget("col", i, 4, 3) for i in range(5)]
    rows[2] = LineTarget("row", 2, 15, 4)

    warnings = find_unsatisfiable_lines(rows, cols)

    assert len(warnings) == 1
    w = warnings[0]
    assert (w.kind, w.index, w.coin_sum, w.voltorbs) == ("row", 2, 15, 4)
    assert "Row 2" in w.message


def test_find_unsatisfiable_lines_none(solution_targets):
    assert find_unsatisfiable_lines(*solution_targets) == []
