# -*- coding: utf-8 -*-
"""
動作確認用のサンプル盤面（ヒント数字のみ）です。

画面の「Load default」ボタンや API の /api/presets から使います。
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from .grid.parser import build_targets_frame

PRESETS: List[Dict[str, List[int]]] = [
    {
        "row_voltorbs": [3, 2, 1, 3, 1],
        "col_voltorbs": [2, 3, 2, 1, 2],
        "row_sums": [4, 5, 6, 4, 10],
        "col_sums": [5, 4, 7, 8, 5],
    },
    {
        "row_voltorbs": [2, 2, 3, 0, 3],
        "col_voltorbs": [2, 2, 3, 2, 1],
        "row_sums": [6, 5, 5, 9, 3],
        "col_sums": [7, 5, 5, 5, 6],
    },
    {
        "row_voltorbs": [1, 1, 3, 3, 2],
        "col_voltorbs": [3, 2, 3, 2, 0],
        "row_sums": [6, 8, 4, 5, 4],
        "col_sums": [4, 5, 3, 4, 11],
    },
]


def list_presets() -> List[Dict[str, Any]]:
    """番号付きでプリセットを返します（JSON にそのまま出せる形）。"""
    return [{"id": i, **p} for i, p in enumerate(PRESETS)]


def preset_targets(preset_id: int) -> pd.DataFrame:
    """
    プリセット番号からヒント数字の DataFrame を作ります。

    存在しない番号なら IndexError を送出します。
    """
    if not 0 <= preset_id < len(PRESETS):
        raise IndexError(f"No preset #{preset_id} (have {len(PRESETS)})")
    p = PRESETS[preset_id]
    return build_targets_frame(p["row_sums"], p["row_voltorbs"], p["col_sums"], p["col_voltorbs"])
