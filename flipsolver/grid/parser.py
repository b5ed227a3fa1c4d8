# -*- coding: utf-8 -*-
"""
入力（ヒント数字・めくったマス）を内部表現に正規化するモジュールです。

主な役割:
- 行・列のヒント数字を pandas.DataFrame にまとめ、範囲チェックして LineTarget に変換
- めくったマスの盤面（DataFrame）を numpy 配列に変換

範囲外の入力はここで ValueError として弾きます。
エンジン（csp）側は、範囲内の入力が来る前提で動きます。
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import (
    GRID_SIZE, MAX_COIN, MAX_COIN_SUM, MAX_VOLTORBS, MIN_COIN, MIN_COIN_SUM,
    MIN_VOLTORBS, VOLTORB,
)
from ..types import CellCoord, LineTarget

TARGET_COLUMNS = ["line", "index", "coin_sum", "voltorbs"]

# ビリリダマとして受け付ける表記
VOLTORB_MARKS = {"0", "o", "O", "v", "V"}


def build_targets_frame(
    row_sums: Sequence[Any],
    row_voltorbs: Sequence[Any],
    col_sums: Sequence[Any],
    col_voltorbs: Sequence[Any],
) -> pd.DataFrame:
    """
    行・列ごとのヒント数字のリストから、1 ライン 1 行の DataFrame を作ります。

    Returns
    -------
    pandas.DataFrame
        "line"（"row"/"col"）, "index", "coin_sum", "voltorbs" 列を持つ DataFrame。
    """
    records = []
    for i, (s, v) in enumerate(zip(row_sums, row_voltorbs)):
        records.append({"line": "row", "index": i, "coin_sum": s, "voltorbs": v})
    for i, (s, v) in enumerate(zip(col_sums, col_voltorbs)):
        records.append({"line": "col", "index": i, "coin_sum": s, "voltorbs": v})
    return pd.DataFrame.from_records(records, columns=TARGET_COLUMNS)


def _to_int(value: Any, what: str) -> int:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        raise ValueError(f"{what} is missing")
    s = str(value).strip()
    if not s:
        raise ValueError(f"{what} is missing")
    try:
        f = float(s)
    except ValueError:
        raise ValueError(f"{what} must be an integer, got {value!r}") from None
    if not f.is_integer():
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return int(f)


def parse_targets(df: pd.DataFrame) -> Tuple[List[LineTarget], List[LineTarget]]:
    """
    ヒント数字の DataFrame を検証し、行・列それぞれの LineTarget リストに変換します。

    Parameters
    ----------
    df : pandas.DataFrame
        :func:`build_targets_frame` が作る形式の DataFrame。

    Returns
    -------
    row_targets, col_targets : list of LineTarget
        どちらも index 順に並んだ長さ 5 のリスト。

    Raises
    ------
    ValueError
        列が足りない、ラインが 5 本ずつ揃っていない、値が範囲外、など。
    """
    missing = [c for c in TARGET_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Targets table must have columns {TARGET_COLUMNS}; missing {missing}")

    rows: List[Optional[LineTarget]] = [None] * GRID_SIZE
    cols: List[Optional[LineTarget]] = [None] * GRID_SIZE

    for rec in df.to_dict(orient="records"):
        kind = str(rec["line"]).strip().lower()
        if kind not in ("row", "col"):
            raise ValueError(f"line must be 'row' or 'col', got {rec['line']!r}")

        idx = _to_int(rec["index"], f"{kind} index")
        if not 0 <= idx < GRID_SIZE:
            raise ValueError(f"{kind} index {idx} is out of range 0..{GRID_SIZE - 1}")

        coin_sum = _to_int(rec["coin_sum"], f"{kind} {idx} coin sum")
        if not MIN_COIN_SUM <= coin_sum <= MAX_COIN_SUM:
            raise ValueError(
                f"{kind} {idx} coin sum {coin_sum} is out of range {MIN_COIN_SUM}..{MAX_COIN_SUM}"
            )

        voltorbs = _to_int(rec["voltorbs"], f"{kind} {idx} Voltorb count")
        if not MIN_VOLTORBS <= voltorbs <= MAX_VOLTORBS:
            raise ValueError(
                f"{kind} {idx} Voltorb count {voltorbs} is out of range {MIN_VOLTORBS}..{MAX_VOLTORBS}"
            )

        bucket = rows if kind == "row" else cols
        if bucket[idx] is not None:
            raise ValueError(f"{kind} {idx} is given more than once")
        bucket[idx] = LineTarget(kind, idx, coin_sum, voltorbs)

    for kind, bucket in (("row", rows), ("col", cols)):
        absent = [i for i, t in enumerate(bucket) if t is None]
        if absent:
            raise ValueError(f"Missing targets for {kind}(s) {absent}")

    return list(rows), list(cols)  # type: ignore[arg-type]


def normalize_cell(x: Any) -> Optional[int]:
    """
    めくったマス 1 つ分の値を内部表現に変換します。

    変換ルール
    ----------
    - 空欄 / None / NaN : None（まだめくっていない）
    - "0", "O", "V" など : 0（ビリリダマ）
    - "1"〜"3"          : その数値
    - それ以外          : ValueError
    """
    if x is None:
        return None
    if isinstance(x, float):
        if np.isnan(x):
            return None
        # JSON の数値が DataFrame 上で float になっている場合
        if x.is_integer():
            x = int(x)

    s = str(x).strip()
    if not s:
        return None

    if s in VOLTORB_MARKS:
        return VOLTORB

    if s.isdigit() and MIN_COIN <= int(s) <= MAX_COIN:
        return int(s)

    raise ValueError(f"Unrecognized cell value: {x!r}")


def normalize_board(df: pd.DataFrame) -> np.ndarray:
    """
    めくったマスの盤面 DataFrame を、5x5 の numpy 配列（object）に変換します。

    各要素は :func:`normalize_cell` の結果（None または 0〜3）です。
    """
    if df.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"Board must be {GRID_SIZE}x{GRID_SIZE}, got {df.shape[0]}x{df.shape[1]}")

    board = np.empty((GRID_SIZE, GRID_SIZE), dtype=object)
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            board[i, j] = normalize_cell(df.iat[i, j])
    return board


def revealed_cells(board: np.ndarray) -> List[Tuple[CellCoord, int]]:
    """盤面からめくり済みのマスを ((row, col), value) のリストで返します。"""
    out: List[Tuple[CellCoord, int]] = []
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            if board[i, j] is not None:
                out.append(((i, j), int(board[i, j])))
    return out
