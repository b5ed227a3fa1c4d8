# -*- coding: utf-8 -*-
"""
伝播結果をヒートマップ画像（PNG）として描画するモジュールです。

- 確定したマス : 値を大きく表示（ビリリダマは "O"）
- 未確定のマス : ビリリダマ確率で色付けし、可能な値を 2x2 で小さく表示
- 右端・下端   : 行・列のヒント数字と残り候補数
"""

from __future__ import annotations

import io
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..config import GRID_SIZE, HEATMAP_CELL_PX, HEATMAP_HINT_PX, HEATMAP_MARGIN_PX, VOLTORB
from ..eval.confidence import zero_probability_matrix
from ..types import LineTarget, PuzzleState
from .render_result import probability_to_rgb

BACKGROUND = (255, 255, 255)
DETERMINED_FILL = (220, 220, 220)
TEXT_COLOR = (0, 0, 0)


def load_font():
    """
    描画用フォントの読み込み（環境に依存しないよう PIL 同梱のものを使う）
    """
    return ImageFont.load_default()


def value_label(val: int) -> str:
    return "O" if val == VOLTORB else str(val)


def _cell_origin(row: int, col: int) -> Tuple[int, int]:
    step = HEATMAP_CELL_PX + HEATMAP_MARGIN_PX
    return HEATMAP_MARGIN_PX + col * step, HEATMAP_MARGIN_PX + row * step


def _draw_centered(draw: ImageDraw.ImageDraw, center: Tuple[int, int], text: str, font) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) // 2 - left
    y = center[1] - (bottom - top) // 2 - top
    draw.text((x, y), text, fill=TEXT_COLOR, font=font)


def draw_cell(draw: ImageDraw.ImageDraw, row: int, col: int, values, fill, font) -> None:
    """
    1 マス分の矩形と文字を描画する
    """
    x1, y1 = _cell_origin(row, col)
    x2, y2 = x1 + HEATMAP_CELL_PX, y1 + HEATMAP_CELL_PX
    draw.rectangle((x1, y1, x2, y2), fill=fill, outline=TEXT_COLOR)

    if len(values) == 1:
        (val,) = tuple(values)
        _draw_centered(draw, (x1 + HEATMAP_CELL_PX // 2, y1 + HEATMAP_CELL_PX // 2), value_label(val), font)
        return

    # 2x2 の小さな表: O 1 / 2 3
    half = HEATMAP_CELL_PX // 2
    for k, val in enumerate((0, 1, 2, 3)):
        if val not in values:
            continue
        cx = x1 + half // 2 + (k % 2) * half
        cy = y1 + half // 2 + (k // 2) * half
        _draw_centered(draw, (cx, cy), value_label(val), font)


def render_heatmap(
    state: PuzzleState,
    row_targets: Optional[List[LineTarget]] = None,
    col_targets: Optional[List[LineTarget]] = None,
) -> Image.Image:
    """
    盤面をヒートマップとして描画した PIL 画像を返します。
    """
    step = HEATMAP_CELL_PX + HEATMAP_MARGIN_PX
    board_px = HEATMAP_MARGIN_PX + GRID_SIZE * step
    size = (board_px + HEATMAP_HINT_PX, board_px + HEATMAP_HINT_PX)

    image = Image.new("RGB", size, BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = load_font()

    probs, _ = zero_probability_matrix(state)
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            values = state.grid[r, c]
            fill = DETERMINED_FILL if len(values) == 1 else probability_to_rgb(probs[r, c])
            draw_cell(draw, r, c, values, fill, font)

    # ヒント数字（"合計/ビリリダマ数 (候補数)"）
    row_counts = state.row_counts()
    col_counts = state.col_counts()
    for r in range(GRID_SIZE):
        _, y = _cell_origin(r, 0)
        label = f"({row_counts[r]})"
        if row_targets:
            label = f"{row_targets[r].coin_sum}/{row_targets[r].voltorbs}\n" + label
        draw.multiline_text((board_px + 2, y + 4), label, fill=TEXT_COLOR, font=font)
    for c in range(GRID_SIZE):
        x, _ = _cell_origin(0, c)
        label = f"({col_counts[c]})"
        if col_targets:
            label = f"{col_targets[c].coin_sum}/{col_targets[c].voltorbs}\n" + label
        draw.multiline_text((x + 4, board_px + 2), label, fill=TEXT_COLOR, font=font)

    return image


def image_to_png_bytes(image: Image.Image) -> bytes:
    """PIL 画像を PNG のバイト列にします。"""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
