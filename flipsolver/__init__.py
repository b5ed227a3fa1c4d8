# flipsolver/__init__.py
# -*- coding: utf-8 -*-
"""
flipsolver パッケージの入口となるモジュールです。

api_proto/local_api.py などから:

    from flipsolver import solve

と呼び出されることを想定しています。

ここでは、ヒント数字の表（pandas.DataFrame）と、めくったマスの盤面を受け取り、
1. ヒント数字の検証と LineTarget への変換
2. 候補 0 件のラインの検出（警告）
3. 初期状態の構築と制約伝播
4. めくったマスを 1 つずつ確定させて再伝播
5. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd

from .csp.domains import build_initial_state, fix, reveal
from .csp.propagation import propagate
from .csp.sequences import enumerate_sequences, find_unsatisfiable_lines
from .errors import Contradiction, FlipSolverError, InvalidFix
from .eval.confidence import best_guesses, zero_probability
from .grid.parser import normalize_board, parse_targets, revealed_cells
from .logging_utils import get_logger
from .postprocess.render_result import build_result
from .types import LineTarget, PuzzleState, UnsatisfiableLine

__all__ = [
    "Contradiction",
    "FlipSolverError",
    "InvalidFix",
    "LineTarget",
    "PuzzleState",
    "UnsatisfiableLine",
    "best_guesses",
    "build_initial_state",
    "enumerate_sequences",
    "fix",
    "propagate",
    "reveal",
    "solve",
    "solve_state",
    "zero_probability",
]

logger = get_logger()


def solve_state(
    targets_df: pd.DataFrame,
    board_df: Optional[pd.DataFrame] = None,
):
    """
    solve() の計算部分だけを行い、(state, row_targets, col_targets) を返します。

    Contradiction / InvalidFix はそのまま呼び出し側に送出します。
    候補 0 件のラインがあった場合は、それら全てを Contradiction.unsatisfiable に載せます。
    """
    row_targets, col_targets = parse_targets(targets_df)

    warnings = find_unsatisfiable_lines(row_targets, col_targets)
    try:
        state = propagate(build_initial_state(row_targets, col_targets))
    except Contradiction as e:
        e.unsatisfiable = warnings
        raise
    logger.info(
        "Initial propagation: rounds=%d rows=%s cols=%s",
        state.rounds, state.row_counts(), state.col_counts(),
    )

    if board_df is not None:
        board = normalize_board(board_df)
        for (r, c), val in revealed_cells(board):
            # 伝播で既に確定しているマスは再伝播しない
            if state.grid[r, c] == frozenset({val}):
                continue
            state = reveal(state, r, c, val)

    return state, row_targets, col_targets


def solve(
    targets_df: pd.DataFrame,
    board_df: Optional[pd.DataFrame] = None,
) -> Dict[str, Any]:
    """
    ビリリダマ推理のメイン関数。

    Parameters
    ----------
    targets_df : pandas.DataFrame
        grid.parser.build_targets_frame() 形式のヒント数字表。
    board_df : pandas.DataFrame, optional
        5x5 のめくり済み盤面。空欄はまだめくっていないマス。

    Returns
    -------
    dict
        postprocess.render_result.build_result() の結果。
    """
    logger.info("=== solve() START ===")

    state, row_targets, col_targets = solve_state(targets_df, board_df)
    result = build_result(state, row_targets, col_targets)

    logger.info("Solved=%s, best guesses=%d", result["solved"], len(result["best_guesses"]))
    logger.info("=== solve() END ===")
    return result
