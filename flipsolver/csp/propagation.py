# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

1 ラウンドは次の 2 段階です。

1. 行パス
   各行 r について、候補並びのうち「全ての位置 c の値が
   マス (r, c) の可能値集合に入っているもの」だけを残し、
   残った並びの位置 c の値の和集合で、マス (r, c) を置き換えます。
2. 列パス
   行パスで更新したグリッドを使って、列について同じことを行います。

ラウンドの前後で、どのラインの候補数も、どのマスの可能値集合も
変わらなくなったら終了（不動点）です。候補数もマスも増えることはないので、
必ず有限回で止まります。

どこかの候補集合・可能値集合が空になったら、その時点で
Contradiction を送出します（空のまま黙って続けることはしません）。
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import GRID_SIZE
from ..errors import Contradiction
from ..logging_utils import get_logger
from ..types import PossibilitySet, PuzzleState, Sequence

logger = get_logger()


def filter_line_candidates(
    candidates: List[Sequence],
    cells: List[PossibilitySet],
) -> List[Sequence]:
    """
    ラインの候補並びを、そのラインに並ぶ 5 マスの可能値集合でフィルタします。

    元の順番は保ちます。
    """
    return [
        seq for seq in candidates
        if all(val in cell for val, cell in zip(seq, cells))
    ]


def union_by_position(candidates: List[Sequence]) -> List[PossibilitySet]:
    """
    候補並びの各位置について、現れる値の和集合を返します。

    候補が空なら、全位置が空集合になります。
    """
    acc: List[set] = [set() for _ in range(GRID_SIZE)]
    for seq in candidates:
        for pos, val in enumerate(seq):
            acc[pos].add(val)
    return [frozenset(s) for s in acc]


def _row_pass(grid: np.ndarray, row_candidates: List[List[Sequence]]) -> List[List[Sequence]]:
    new_row_candidates: List[List[Sequence]] = []
    for r in range(GRID_SIZE):
        filtered = filter_line_candidates(row_candidates[r], list(grid[r, :]))
        if not filtered:
            raise Contradiction("row", r)
        for c, poss in enumerate(union_by_position(filtered)):
            grid[r, c] = poss
        new_row_candidates.append(filtered)
    return new_row_candidates


def _col_pass(grid: np.ndarray, col_candidates: List[List[Sequence]]) -> List[List[Sequence]]:
    new_col_candidates: List[List[Sequence]] = []
    for c in range(GRID_SIZE):
        filtered = filter_line_candidates(col_candidates[c], list(grid[:, c]))
        if not filtered:
            raise Contradiction("col", c)
        for r, poss in enumerate(union_by_position(filtered)):
            grid[r, c] = poss
        new_col_candidates.append(filtered)
    return new_col_candidates


def _check_cells(grid: np.ndarray) -> None:
    # 候補が空でなければ和集合も空にならないが、fix 直後の盤面なども検査する
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if not grid[r, c]:
                raise Contradiction("row", r, f"Cell ({r}, {c}) has no possible value left")


def _same_grid(a: np.ndarray, b: np.ndarray) -> bool:
    return all(
        a[r, c] == b[r, c]
        for r in range(GRID_SIZE)
        for c in range(GRID_SIZE)
    )


def propagate(state: PuzzleState) -> PuzzleState:
    """
    行パスと列パスを不動点まで繰り返します。

    Parameters
    ----------
    state : PuzzleState
        現在の状態。変更されません。

    Returns
    -------
    PuzzleState
        伝播後の新しい状態。rounds に実行したラウンド数が入ります。

    Raises
    ------
    Contradiction
        いずれかのラインの候補、またはマスの可能値集合が空になった場合。
    """
    grid = state.grid.copy()
    row_candidates = [list(c) for c in state.row_candidates]
    col_candidates = [list(c) for c in state.col_candidates]

    _check_cells(grid)
    for r, cands in enumerate(row_candidates):
        if not cands:
            raise Contradiction("row", r)
    for c, cands in enumerate(col_candidates):
        if not cands:
            raise Contradiction("col", c)

    rounds = 0
    while True:
        rounds += 1
        sizes_before = [len(c) for c in row_candidates] + [len(c) for c in col_candidates]
        grid_before = grid.copy()

        row_candidates = _row_pass(grid, row_candidates)
        col_candidates = _col_pass(grid, col_candidates)
        _check_cells(grid)

        sizes_after = [len(c) for c in row_candidates] + [len(c) for c in col_candidates]
        logger.debug("Propagation round %d: sizes=%s", rounds, sizes_after)

        if sizes_after == sizes_before and _same_grid(grid, grid_before):
            break

    logger.debug("Fixpoint reached after %d round(s).", rounds)
    return PuzzleState(
        grid=grid,
        row_candidates=row_candidates,
        col_candidates=col_candidates,
        rounds=rounds,
    )


def has_contradiction(state: PuzzleState) -> bool:
    """
    state をそのまま伝播したときに矛盾が出るかを判定します。
    """
    try:
        propagate(state)
    except Contradiction:
        return True
    return False
