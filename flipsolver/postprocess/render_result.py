# -*- coding: utf-8 -*-
"""
伝播結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np
import pandas as pd

from ..config import GRID_SIZE
from ..eval.confidence import best_guesses, zero_probability_matrix
from ..types import LineTarget, PuzzleState


def probability_to_rgb(probability: float) -> Tuple[int, int, int]:
    """
    ビリリダマ確率をヒートマップの色 (R, G, B) に変換します。

    0.0 → 緑、0.5 → 黄、1.0 → 赤。範囲外の値は 0〜1 に丸めます。
    """
    p = max(0.0, min(1.0, float(probability)))
    if p < 0.5:
        red = round(510 * p)
        green = 255
    else:
        red = 255
        green = round(255 - 510 * (p - 0.5))
    return (red, green, 0)


def rgb_to_css(rgb: Tuple[int, int, int]) -> str:
    return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"


def build_possible_values(state: PuzzleState) -> List[List[List[int]]]:
    """各マスの可能値集合を、JSON に出せるソート済みリストにします。"""
    return [
        [sorted(state.grid[r, c]) for c in range(GRID_SIZE)]
        for r in range(GRID_SIZE)
    ]


def build_line_table(
    state: PuzzleState,
    row_targets: List[LineTarget],
    col_targets: List[LineTarget],
) -> pd.DataFrame:
    """
    ラインごとのヒント数字と残り候補数の表を作ります。
    """
    records = []
    for t, n in zip(row_targets, state.row_counts()):
        records.append({"line": "row", "index": t.index, "coin_sum": t.coin_sum,
                        "voltorbs": t.voltorbs, "candidates": n})
    for t, n in zip(col_targets, state.col_counts()):
        records.append({"line": "col", "index": t.index, "coin_sum": t.coin_sum,
                        "voltorbs": t.voltorbs, "candidates": n})
    return pd.DataFrame.from_records(records)


def build_result(
    state: PuzzleState,
    row_targets: List[LineTarget],
    col_targets: List[LineTarget],
) -> Dict[str, Any]:

    probs, _ = zero_probability_matrix(state)
    guesses = best_guesses(state)
    lines_df = build_line_table(state, row_targets, col_targets)

    return {
        "possible_values": build_possible_values(state),
        "zero_probability": np.round(probs, 4).tolist(),  # ★ ndarray を返さない
        "colors": [
            [rgb_to_css(probability_to_rgb(probs[r, c])) for c in range(GRID_SIZE)]
            for r in range(GRID_SIZE)
        ],
        "lines": lines_df.to_dict(orient="records"),
        "row_candidates": state.row_counts(),
        "col_candidates": state.col_counts(),
        "best_guesses": [
            {"row": g.row, "col": g.col, "zero_probability": round(g.zero_probability, 4), "safe": g.safe}
            for g in guesses
        ],
        "rounds": state.rounds,
        "solved": state.is_solved(),
    }
