# -*- coding: utf-8 -*-
"""
flipsolver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 盤面サイズや値の範囲
- 入力として受け付けるヒント数字の範囲
- 「おすすめマス」の表示件数
- ヒートマップ画像の描画サイズ
などを簡単に変更できます。
"""

from __future__ import annotations

import os
from typing import Tuple

# ==== 盤面関連 =============================================================

# 盤面は 5x5 固定
GRID_SIZE: int = 5

# 各マスが取り得る値。0 がビリリダマ（ハズレ）、1〜3 がコイン倍率
VALUES: Tuple[int, ...] = (0, 1, 2, 3)

# ビリリダマを表す値
VOLTORB: int = 0

# ==== 入力範囲 =============================================================
# 画面側（API 側）で範囲外の入力を弾くための値。
# エンジン自体はこの範囲を前提とし、再チェックはしません。

MIN_COIN_SUM: int = 1
MAX_COIN_SUM: int = 15

MIN_VOLTORBS: int = 0
MAX_VOLTORBS: int = 4

# 手動でめくったマスとして受け付けるコインの値
MIN_COIN: int = 1
MAX_COIN: int = 3

# ==== 表示関連 =============================================================

# おすすめマス（ビリリダマ確率の低い順）を何件返すか
BEST_GUESS_LIMIT: int = 5

# ヒートマップ画像の 1 マスのピクセル数
HEATMAP_CELL_PX: int = 64

# マス同士の隙間（ピクセル）
HEATMAP_MARGIN_PX: int = 4

# 行・列ヒントを描く帯の幅（ピクセル）
HEATMAP_HINT_PX: int = 48

# ==== ログ関連 =============================================================

# 環境変数 FLIPSOLVER_LOG_LEVEL で上書き可能（例: "DEBUG"）
LOG_LEVEL: str = os.getenv("FLIPSOLVER_LOG_LEVEL", "INFO")
