# src/tetris_sim/game/rendering/pygame/window.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame

SIDEBAR_W = 240
OUTER_PAD = 40
SIDEBAR_GAP = 32
FRAME_MARGIN = 4


@dataclass(frozen=True)
class Layout:
    """
    Pixel geometry derived from the visible playfield.

    board:   rect covering the visible rows only (hidden spawn rows are not drawn)
    frame:   board rect grown by FRAME_MARGIN on every side (panel + border)
    sidebar: NEXT / score / controls panel, same height as the frame
    """

    cell: int
    board: pygame.Rect
    frame: pygame.Rect
    sidebar: pygame.Rect
    size: Tuple[int, int]

    def cell_rect(self, col: int, visible_row: int) -> pygame.Rect:
        return pygame.Rect(
            self.board.x + int(col) * self.cell,
            self.board.y + int(visible_row) * self.cell,
            self.cell,
            self.cell,
        )


def compute_layout(*, visible_rows: int, board_w: int, cell: int, sidebar_w: int = SIDEBAR_W) -> Layout:
    if int(visible_rows) <= 0 or int(board_w) <= 0:
        raise ValueError(f"nothing to draw: visible_rows={visible_rows} board_w={board_w}")
    c = int(cell)
    board = pygame.Rect(OUTER_PAD, OUTER_PAD, int(board_w) * c, int(visible_rows) * c)
    frame = board.inflate(2 * FRAME_MARGIN, 2 * FRAME_MARGIN)
    sidebar = pygame.Rect(frame.right + SIDEBAR_GAP, frame.top, int(sidebar_w), frame.height)
    size = (sidebar.right + FRAME_MARGIN * 2, frame.bottom + OUTER_PAD)
    return Layout(cell=c, board=board, frame=frame, sidebar=sidebar, size=size)


def create_window(layout: Layout, *, title: str = "tetris-sim") -> pygame.Surface:
    pygame.display.set_caption(str(title))
    return pygame.display.set_mode(layout.size)


__all__ = ["Layout", "compute_layout", "create_window"]
