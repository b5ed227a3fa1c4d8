# flipsolver/eval/confidence.py
# -*- coding: utf-8 -*-
"""
各マスの「ビリリダマである確率」の目安を計算するモジュールです。

注意: ここでの値は、行の候補並びから見た割合と列の候補並びから見た割合を
混ぜただけの目安（ヒューリスティック）です。
盤面全体の同時分布から求めた正確な確率ではありません。
ヒートマップの色付けや「おすすめマス」の並べ替えにだけ使います。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..config import BEST_GUESS_LIMIT, GRID_SIZE, VOLTORB
from ..logging_utils import get_logger
from ..types import PuzzleState, Sequence

logger = get_logger()


def zero_probability(
    row: int,
    col: int,
    row_candidates: List[List[Sequence]],
    col_candidates: List[List[Sequence]],
) -> float:
    """
    マス (row, col) がビリリダマである確率の目安を返します。

    (Zr + Zc) / (Nr + Nc)
      Nr, Nc : 行 row / 列 col の候補並びの数
      Zr, Zc : そのうち、このマスの位置が 0 になっている並びの数

    候補が 1 つも無い場合（Nr + Nc == 0）は 0.0 を返し、警告ログを出します。
    ふつうは Contradiction と同時に起きる状態です。
    """
    row_cands = row_candidates[row]
    col_cands = col_candidates[col]

    zr = sum(1 for seq in row_cands if seq[col] == VOLTORB)
    zc = sum(1 for seq in col_cands if seq[row] == VOLTORB)
    denom = len(row_cands) + len(col_cands)

    if denom == 0:
        logger.warning("[WARNING] No candidates for cell (%d, %d); probability undefined.", row, col)
        return 0.0
    return (zr + zc) / denom


def zero_probability_matrix(state: PuzzleState) -> Tuple[np.ndarray, np.ndarray]:
    """
    全マスについて zero_probability を計算します。

    Returns
    -------
    probs : numpy.ndarray
        shape = (5, 5) の float 配列。
    degraded : numpy.ndarray
        shape = (5, 5) の bool 配列。候補が無く値が定義できなかったマスが True。
        propagate() を通った状態では候補が空のラインは残らない（Contradiction になる）ので、
        全て False になります。手で組み立てた状態を調べるためのものです。
    """
    probs = np.zeros((GRID_SIZE, GRID_SIZE), dtype=float)
    degraded = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if not state.row_candidates[r] and not state.col_candidates[c]:
                degraded[r, c] = True
            probs[r, c] = zero_probability(r, c, state.row_candidates, state.col_candidates)

    return probs, degraded


@dataclass(frozen=True)
class Guess:
    """おすすめマス 1 件分。"""

    row: int
    col: int
    zero_probability: float
    safe: bool  # 0 があり得ない（めくっても安全）


def best_guesses(state: PuzzleState, limit: int = BEST_GUESS_LIMIT) -> List[Guess]:
    """
    まだ値が確定していないマスを、ビリリダマ確率の低い順に並べて返します。

    同じ確率のマスは (row, col) の順です。
    0 が可能値集合に無いマスは safe=True になり、確率に関係なく先頭に来ます。
    """
    probs, _ = zero_probability_matrix(state)

    guesses: List[Guess] = []
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if state.is_determined(r, c):
                continue
            safe = VOLTORB not in state.grid[r, c]
            guesses.append(Guess(r, c, float(probs[r, c]), safe))

    guesses.sort(key=lambda g: (not g.safe, g.zero_probability, g.row, g.col))
    return guesses[:limit]
