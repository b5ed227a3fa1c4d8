# -*- coding: utf-8 -*-
"""
盤面状態（マスごとの可能値集合 + ラインごとの候補並び）を扱うモジュールです。

- build_initial_state : ヒント数字から初期状態を作る
- fix                 : 1 マスの値を確定させる（伝播はしない）
- reveal              : fix のあと伝播まで行う（画面でマスをめくった時の操作）

PuzzleState 自体は受け身の入れ物で、
「マスの集合 = 候補並びのその位置の値の和集合」という関係は
propagation.propagate() が作ります。
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import GRID_SIZE, VALUES
from ..errors import InvalidFix
from ..logging_utils import get_logger
from ..types import LineTarget, PuzzleState
from .propagation import propagate
from .sequences import build_initial_line_candidates

logger = get_logger()

# 何も分かっていないマスの可能値集合
ALL_VALUES = frozenset(VALUES)


def build_initial_grid() -> np.ndarray:
    """全マスが {0, 1, 2, 3} の 5x5 グリッドを作ります。"""
    grid = np.empty((GRID_SIZE, GRID_SIZE), dtype=object)
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            grid[r, c] = ALL_VALUES
    return grid


def build_initial_state(
    row_targets: List[LineTarget],
    col_targets: List[LineTarget],
) -> PuzzleState:
    """
    ヒント数字から、まだ伝播していない初期状態を作ります。

    Parameters
    ----------
    row_targets, col_targets : list of LineTarget
        それぞれ長さ 5。

    Returns
    -------
    PuzzleState
        rounds = 0 の状態。続けて propagate() を呼ぶ想定です。
    """
    row_candidates, col_candidates = build_initial_line_candidates(row_targets, col_targets)
    return PuzzleState(
        grid=build_initial_grid(),
        row_candidates=row_candidates,
        col_candidates=col_candidates,
    )


def fix(state: PuzzleState, row: int, col: int, value: int) -> PuzzleState:
    """
    マス (row, col) の値を value に確定させた新しい状態を返します。

    value がそのマスの可能値集合に含まれていない場合は InvalidFix を送出します。
    元の state は変更しません。伝播は行わないので、続けて propagate() を呼んでください。
    """
    possible = state.grid[row, col]
    if value not in possible:
        raise InvalidFix(row, col, value, possible)

    new_state = state.copy()
    new_state.grid[row, col] = frozenset({value})
    new_state.rounds = 0
    return new_state


def reveal(state: PuzzleState, row: int, col: int, value: int) -> PuzzleState:
    """fix() してから propagate() まで行います。"""
    logger.info("Reveal cell (%d, %d) = %d", row, col, value)
    return propagate(fix(state, row, col, value))
