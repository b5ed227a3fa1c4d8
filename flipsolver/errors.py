# -*- coding: utf-8 -*-
"""
flipsolver が送出する例外をまとめたモジュールです。

どれも ValueError のサブクラスなので、呼び出し側（API など）は
「入力が矛盾している」系のエラーとしてまとめて扱えます。
"""

from __future__ import annotations

from typing import Iterable


class FlipSolverError(ValueError):
    """flipsolver の例外の基底クラス。"""


class Contradiction(FlipSolverError):
    """
    伝播の途中で、あるラインの候補集合やマスの可能値集合が空になったことを表します。

    Attributes
    ----------
    line : str
        "row" または "col"。
    index : int
        矛盾が見つかったラインの番号。
    unsatisfiable : list of UnsatisfiableLine
        ヒント数字だけで候補 0 件になっていたライン全て。
        solve_state() が伝播前に調べた結果を載せます（無ければ空）。
    """

    def __init__(self, line: str, index: int, message: str | None = None):
        self.line = line
        self.index = index
        self.unsatisfiable: list = []
        if message is None:
            name = "row" if line == "row" else "column"
            message = f"Contradiction in {name} {index}: no arrangement is consistent with the inputs"
        super().__init__(message)


class InvalidFix(Contradiction):
    """
    fix() で、そのマスにもうあり得ない値を指定されたことを表します。

    矛盾の起点として、そのマスの行を line / index に入れておきます。
    """

    def __init__(self, row: int, col: int, value: int, possible: Iterable[int]):
        self.row = row
        self.col = col
        self.value = value
        self.possible = sorted(possible)
        super().__init__(
            "row",
            row,
            f"Cell ({row}, {col}) cannot be {value}; still possible: {self.possible}",
        )
