# -*- coding: utf-8 -*-
"""
ライン（行・列）ごとに、ヒント数字を満たす並びを列挙するモジュールです。

1 本のラインは 5 マスで、各マスは 0（ビリリダマ）/ 1 / 2 / 3 のどれかです。
「コイン合計」と「ビリリダマの数」の 2 つを満たす並びを、
深さ優先探索（バックトラック）で全部作ります。

途中までの合計とビリリダマ数は、値を追加するたびに増える一方なので、
どちらかが目標を超えた時点でその枝を捨てても取りこぼしはありません。
"""

from __future__ import annotations

from typing import List, Tuple

from ..config import GRID_SIZE, VALUES, VOLTORB
from ..logging_utils import get_logger
from ..types import LineTarget, Sequence, UnsatisfiableLine

logger = get_logger()


def enumerate_sequences(coin_sum: int, voltorbs: int) -> List[Sequence]:
    """
    コイン合計 coin_sum、ビリリダマ数 voltorbs を満たす並びを全て返します。

    Parameters
    ----------
    coin_sum : int
        ラインのコイン合計（1〜15）。
    voltorbs : int
        ラインのビリリダマの数（0〜4）。

    Returns
    -------
    list of tuple
        長さ 5 の並びのリスト。値の小さい順（辞書順）に並びます。
        条件を満たす並びが無い場合は空リストを返します（エラーではありません）。
    """
    sequences: List[Sequence] = []
    current: List[int] = []

    def build(partial_sum: int, zeros_used: int) -> None:
        if len(current) == GRID_SIZE:
            if partial_sum == coin_sum and zeros_used == voltorbs:
                sequences.append(tuple(current))
            return

        for val in VALUES:
            new_sum = partial_sum + val
            new_zeros = zeros_used + (1 if val == VOLTORB else 0)

            # 合計・ビリリダマ数のどちらかが超えたら打ち切り
            if new_sum > coin_sum or new_zeros > voltorbs:
                continue

            current.append(val)
            build(new_sum, new_zeros)
            current.pop()

    build(0, 0)
    return sequences


def build_initial_line_candidates(
    row_targets: List[LineTarget],
    col_targets: List[LineTarget],
) -> Tuple[List[List[Sequence]], List[List[Sequence]]]:
    """
    各行・各列のヒント数字から、初期の候補並びを計算します。

    Returns
    -------
    row_candidates : list of list of Sequence
    col_candidates : list of list of Sequence
    """
    row_candidates = [enumerate_sequences(t.coin_sum, t.voltorbs) for t in row_targets]
    col_candidates = [enumerate_sequences(t.coin_sum, t.voltorbs) for t in col_targets]

    logger.debug(
        "Initial candidates: rows=%s cols=%s",
        [len(c) for c in row_candidates],
        [len(c) for c in col_candidates],
    )
    return row_candidates, col_candidates


def find_unsatisfiable_lines(
    row_targets: List[LineTarget],
    col_targets: List[LineTarget],
) -> List[UnsatisfiableLine]:
    """
    ヒント数字だけでもう成り立たない（候補 0 件の）ラインを探します。

    この段階では例外にせず、警告のリストとして返します。
    そのまま伝播を行うと Contradiction になります。
    """
    warnings: List[UnsatisfiableLine] = []
    for t in list(row_targets) + list(col_targets):
        if not enumerate_sequences(t.coin_sum, t.voltorbs):
            w = UnsatisfiableLine(t.kind, t.index, t.coin_sum, t.voltorbs)
            logger.warning("[WARNING] %s", w.message)
            warnings.append(w)
    return warnings
