# -*- coding: utf-8 -*-
"""
ビリリダマ推理ソルバで使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

import numpy as np

from .config import GRID_SIZE

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]

# 1 本のライン（行または列）に対する値の並び。長さは常に GRID_SIZE
Sequence = Tuple[int, ...]

# マスごとの「まだあり得る値」の集合
PossibilitySet = FrozenSet[int]


@dataclass(frozen=True)
class LineTarget:
    """
    1 本のライン（行 or 列）のヒント数字を表すクラスです。

    Attributes
    ----------
    kind : str
        "row"（行）または "col"（列）。
    index : int
        0 始まりのライン番号。
    coin_sum : int
        そのラインのコイン合計（1〜15）。
    voltorbs : int
        そのラインのビリリダマの数（0〜4）。
    """

    kind: str  # "row" or "col"
    index: int
    coin_sum: int
    voltorbs: int


@dataclass(frozen=True)
class UnsatisfiableLine:
    """
    ヒント数字を満たす並びが 1 つも存在しないラインの警告です。

    例外ではありません。画面側に「候補 0 件」と表示してもらうための記録です。
    """

    kind: str
    index: int
    coin_sum: int
    voltorbs: int

    @property
    def message(self) -> str:
        name = "Row" if self.kind == "row" else "Column"
        return (
            f"{name} {self.index}: no arrangement has coin sum {self.coin_sum} "
            f"with {self.voltorbs} Voltorb(s)"
        )


@dataclass
class PuzzleState:
    """
    1 つの盤面の推理状態を表すクラスです。

    エンジンの各操作（propagate / fix）は、このオブジェクトを書き換えず
    新しい PuzzleState を返します。

    Attributes
    ----------
    grid : numpy.ndarray
        shape = (5, 5) の object 配列。各要素はそのマスの PossibilitySet。
    row_candidates : list of list of Sequence
        行ごとの候補並び。
    col_candidates : list of list of Sequence
        列ごとの候補並び。
    rounds : int
        直前の propagate() で実行したラウンド数。
    """

    grid: np.ndarray
    row_candidates: List[List[Sequence]]
    col_candidates: List[List[Sequence]]
    rounds: int = field(default=0)

    def possible_values(self, row: int, col: int) -> PossibilitySet:
        """マス (row, col) にまだあり得る値の集合を返します。"""
        return self.grid[row, col]

    def row_counts(self) -> List[int]:
        return [len(c) for c in self.row_candidates]

    def col_counts(self) -> List[int]:
        return [len(c) for c in self.col_candidates]

    def is_determined(self, row: int, col: int) -> bool:
        return len(self.grid[row, col]) == 1

    def is_solved(self) -> bool:
        """全マスの値が 1 つに確定していれば True。"""
        return all(
            self.is_determined(r, c)
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
        )

    def copy(self) -> "PuzzleState":
        # PossibilitySet と Sequence は不変なので、入れ物だけ複製すれば十分
        return PuzzleState(
            grid=self.grid.copy(),
            row_candidates=[list(c) for c in self.row_candidates],
            col_candidates=[list(c) for c in self.col_candidates],
            rounds=self.rounds,
        )
