# src/tetris_sim/game/rendering/pygame/palette.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    bg: Color = (0, 0, 50)
    panel_bg: Color = (10, 10, 40)
    grid: Color = (30, 30, 80)
    border: Color = (180, 180, 220)

    text: Color = (240, 240, 255)
    muted: Color = (170, 170, 185)
    warn: Color = (255, 120, 120)

    fallback_piece: Color = (180, 180, 200)

    ghost_alpha: int = 90
    paused_overlay_rgba: Tuple[int, int, int, int] = (0, 0, 0, 140)
