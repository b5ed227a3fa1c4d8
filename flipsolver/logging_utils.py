# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

- 処理の進み具合（伝播のラウンド数、候補数の変化など）を確認するのに使います。
- レベルは config.LOG_LEVEL（環境変数 FLIPSOLVER_LOG_LEVEL）で切り替えます。
"""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

# flipsolver パッケージ共通で使うロガー名
LOGGER_NAME = "flipsolver"


def get_logger() -> logging.Logger:
    """
    flipsolver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に LOG_LEVEL 以上のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    return logger
