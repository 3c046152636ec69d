# src/tetris_sim/game/rendering/pygame/sidebar.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pygame

from tetris_sim.game.core.pieceset import BOX, PieceSet
from tetris_sim.game.core.types import State
from tetris_sim.game.rendering.pygame.grid import draw_piece_preview
from tetris_sim.game.rendering.pygame.palette import Palette
from tetris_sim.game.rendering.pygame.surf import SurfaceCache, blit_text


@dataclass(frozen=True)
class SidebarLayout:
    pad: int = 12
    row_h: int = 22
    section_gap: int = 16
    controls_row_h: int = 18


_LAYOUT = SidebarLayout()

CONTROLS: Sequence[tuple[str, str]] = (
    ("Left/Right", "Move"),
    ("Down", "Soft drop"),
    ("Up", "Hard drop"),
    ("X / Z", "Rotate CW / CCW"),
    ("Enter", "Pause"),
    ("Backspace", "Restart"),
    ("Esc", "Quit"),
)


def draw_sidebar(
        *,
        screen: pygame.Surface,
        state: State,
        rect: pygame.Rect,
        cell: int,
        palette: Palette,
        pieces: PieceSet,
        cache: SurfaceCache,
        font_small: pygame.font.Font,
        font_tiny: pygame.font.Font,
) -> None:
    L = _LAYOUT
    pygame.draw.rect(screen, palette.panel_bg, rect)
    pygame.draw.rect(screen, palette.border, rect, width=2)

    x = rect.x + L.pad
    y = rect.y + L.pad

    y = blit_text(screen=screen, font=font_small, text="NEXT", pos=(x, y), color=palette.text, cache=cache).bottom + 4
    preview_cell = max(8, int(cell) * 3 // 4)
    box = pygame.Rect(x, y, BOX * preview_cell, BOX * preview_cell)
    pygame.draw.rect(screen, palette.grid, box.inflate(4, 4), width=2)
    draw_piece_preview(
        screen=screen,
        kind=state.next_kind,
        box=box,
        cell=preview_cell,
        palette=palette,
        pieces=pieces,
        cache=cache,
    )
    y = box.bottom + L.section_gap

    for label, value in (
            ("SCORE", state.score),
            ("HIGH", state.high_score),
            ("LINES", state.lines),
            ("LEVEL", state.level),
    ):
        blit_text(screen=screen, font=font_small, text=f"{label:<6}{int(value):>8}", pos=(x, y), color=palette.text, cache=cache)
        y += L.row_h

    y += L.section_gap
    for key, desc in CONTROLS:
        if y + L.controls_row_h > rect.bottom - L.pad:
            break
        blit_text(screen=screen, font=font_tiny, text=f"{key}: {desc}", pos=(x, y), color=palette.muted, cache=cache)
        y += L.controls_row_h
