import pytest

from flipsolver.csp.domains import build_initial_state, fix, reveal
from flipsolver.csp.propagation import (
    filter_line_candidates,
    has_contradiction,
    propagate,
    union_by_position,
)
from flipsolver.errors import Contradiction
from flipsolver.types import LineTarget


def cells_of(state):
    return [[state.grid[r, c] for c in range(5)] for r in range(5)]


def assert_consistent(state):
    """Each cell equals the union of its row's and its column's candidates at that position."""
    for r in range(5):
        row_union = union_by_position(state.row_candidates[r])
        for c in range(5):
            assert state.grid[r, c] == row_union[c]
    for c in range(5):
        col_union = union_by_position(state.col_candidates[c])
        for r in range(5):
            assert state.grid[r, c] == col_union[r]


def assert_subset(before, after):
    for r in range(5):
        for c in range(5):
            assert after[r][c] <= before[r][c]


def test_filter_line_candidates_keeps_order():
    cands = [(0, 0, 0, 1, 3), (0, 0, 0, 3, 1), (1, 0, 0, 0, 3)]
    cells = [frozenset({0})] + [frozenset({0, 1, 2, 3})] * 4
    assert filter_line_candidates(cands, cells) == [(0, 0, 0, 1, 3), (0, 0, 0, 3, 1)]


def test_union_by_position():
    union = union_by_position([(0, 0, 0, 1, 3), (0, 0, 0, 3, 1)])
    assert union == [frozenset({0})] * 3 + [frozenset({1, 3})] * 2
    assert union_by_position([]) == [frozenset()] * 5


def test_cross_scenario_initial(cross_targets):
    state = propagate(build_initial_state(*cross_targets))

    assert state.row_counts() == [30] * 5
    assert state.col_counts() == [30] * 5
    assert state.rounds == 1
    assert all(cell == frozenset({0, 1, 2, 3}) for line in cells_of(state) for cell in line)


def test_cross_scenario_fix_shrinks_row_and_column(cross_targets):
    state = propagate(build_initial_state(*cross_targets))

    after = propagate(fix(state, 0, 0, 0))

    assert after.row_counts() == [18, 30, 30, 30, 30]
    assert after.col_counts() == [18, 30, 30, 30, 30]
    # the shrink itself is one round, confirming the fixpoint is another
    assert after.rounds == 2
    assert after.grid[0, 0] == frozenset({0})
    assert_consistent(after)


def test_propagate_is_idempotent(solution_targets):
    once = propagate(build_initial_state(*solution_targets))
    twice = propagate(once)

    assert twice.row_counts() == once.row_counts()
    assert twice.col_counts() == once.col_counts()
    assert twice.rounds == 1
    assert cells_of(twice) == cells_of(once)


def test_propagate_reaches_consistent_state(solution_targets):
    state = propagate(build_initial_state(*solution_targets))
    assert_consistent(state)


def test_propagate_is_monotonic(solution_targets):
    initial = build_initial_state(*solution_targets)
    state = propagate(initial)
    assert_subset(cells_of(initial), cells_of(state))

    fixed = fix(state, 1, 3, 2)
    after = propagate(fixed)
    assert_subset(cells_of(state), cells_of(after))
    for before_n, after_n in zip(state.row_counts() + state.col_counts(),
                                 after.row_counts() + after.col_counts()):
        assert after_n <= before_n


def test_propagate_is_sound(solution, solution_targets):
    state = propagate(build_initial_state(*solution_targets))
    for r in range(5):
        for c in range(5):
            assert solution[r][c] in state.grid[r, c]

    # flip every coin cell in reading order; the truth must survive each step
    for r in range(5):
        for c in range(5):
            if solution[r][c] == 0 or state.is_determined(r, c):
                continue
            state = reveal(state, r, c, solution[r][c])
            for rr in range(5):
                for cc in range(5):
                    assert solution[rr][cc] in state.grid[rr, cc]

    assert state.is_solved()


def test_propagate_does_not_mutate_input(cross_targets):
    state = propagate(build_initial_state(*cross_targets))
    fixed = fix(state, 0, 0, 0)
    grid_before = cells_of(fixed)
    rows_before = [list(c) for c in fixed.row_candidates]

    propagate(fixed)

    assert cells_of(fixed) == grid_before
    assert fixed.row_candidates == rows_before


def test_unsatisfiable_line_is_contradiction(cross_targets):
    rows, cols = cross_targets
    rows[2] = LineTarget("row", 2, 15, 4)
    state = build_initial_state(rows, cols)

    with pytest.raises(Contradiction) as excinfo:
        propagate(state)
    assert excinfo.value.line == "row"
    assert excinfo.value.index == 2
    assert has_contradiction(state)


def test_inconsistent_totals_contradiction(all_ones_targets):
    rows, _ = all_ones_targets
    cols = [LineTarget("col", i, 10, 0) for i in range(5)]

    with pytest.raises(Contradiction) as excinfo:
        propagate(build_initial_state(rows, cols))
    assert excinfo.value.line == "col"
    assert excinfo.value.index == 0


def test_contradiction_from_fixed_cells(cross_targets):
    state = propagate(build_initial_state(*cross_targets))
    # 2 + 3 already exceeds the row's coin sum of 4
    state = fix(fix(state, 0, 0, 2), 0, 1, 3)

    with pytest.raises(Contradiction) as excinfo:
        propagate(state)
    assert (excinfo.value.line, excinfo.value.index) == ("row", 0)


def test_empty_cell_is_contradiction(cross_targets):
    state = build_initial_state(*cross_targets)
    state.grid[3, 1] = frozenset()

    with pytest.raises(Contradiction) as excinfo:
        propagate(state)
    assert excinfo.value.index == 3


def test_has_contradiction_false(solution_targets):
    assert not has_contradiction(build_initial_state(*solution_targets))
