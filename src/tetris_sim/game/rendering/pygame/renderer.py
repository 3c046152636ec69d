# src/tetris_sim/game/rendering/pygame/renderer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from tetris_sim.game.core.pieceset import PieceSet
from tetris_sim.game.core.types import SessionStatus, State
from tetris_sim.game.rendering.pygame.grid import draw_grid
from tetris_sim.game.rendering.pygame.palette import Color, Palette
from tetris_sim.game.rendering.pygame.sidebar import draw_sidebar
from tetris_sim.game.rendering.pygame.surf import SurfaceCache
from tetris_sim.game.rendering.pygame.window import Layout, compute_layout, create_window


@dataclass(frozen=True)
class Fonts:
    main: pygame.font.Font
    small: pygame.font.Font
    tiny: pygame.font.Font

    @classmethod
    def load(cls, name: str = "consolas") -> "Fonts":
        return cls(
            main=pygame.font.SysFont(name, 22, bold=True),
            small=pygame.font.SysFont(name, 16),
            tiny=pygame.font.SysFont(name, 13),
        )


class TetrisRenderer:
    """
    Draws a State snapshot; it never touches the session.

    Requires pygame.init() (fonts are loaded in the constructor).
    """

    def __init__(
        self,
        *,
        cell: int,
        hidden_rows: int,
        show_grid_lines: bool,
        palette: Optional[Palette] = None,
        pieces: Optional[PieceSet] = None,
    ) -> None:
        self.cell = int(cell)
        self.hidden_rows = int(hidden_rows)
        self.show_grid_lines = bool(show_grid_lines)
        self.palette = palette or Palette()
        self.pieces = pieces or PieceSet.classic7()
        self.fonts = Fonts.load()
        self.cache = SurfaceCache()
        self._dim: Optional[pygame.Surface] = None

    def init_window(self, *, board_h: int, board_w: int, title: str = "tetris-sim") -> tuple[pygame.Surface, Layout]:
        layout = compute_layout(visible_rows=int(board_h) - self.hidden_rows, board_w=int(board_w), cell=self.cell)
        return create_window(layout, title=title), layout

    def render(self, *, screen: pygame.Surface, state: State, layout: Layout) -> None:
        screen.fill(self.palette.bg)
        draw_grid(
            screen=screen,
            state=state,
            hidden_rows=self.hidden_rows,
            layout=layout,
            show_grid_lines=self.show_grid_lines,
            palette=self.palette,
            pieces=self.pieces,
            cache=self.cache,
        )
        draw_sidebar(
            screen=screen,
            state=state,
            rect=layout.sidebar,
            cell=self.cell,
            palette=self.palette,
            pieces=self.pieces,
            cache=self.cache,
            font_small=self.fonts.small,
            font_tiny=self.fonts.tiny,
        )

        status = state.status
        if status is SessionStatus.GAME_OVER:
            self._banner(screen=screen, layout=layout, title="GAME OVER", hint="Backspace to restart", color=self.palette.warn)
        elif status is SessionStatus.PAUSED:
            self._banner(screen=screen, layout=layout, title="PAUSED", hint="Enter to resume", color=self.palette.text)

    def _banner(self, *, screen: pygame.Surface, layout: Layout, title: str, hint: str, color: Color) -> None:
        if self._dim is None or self._dim.get_size() != layout.board.size:
            self._dim = pygame.Surface(layout.board.size, flags=pygame.SRCALPHA)
            self._dim.fill(self.palette.paused_overlay_rgba)
        screen.blit(self._dim, layout.board.topleft)

        head = self.cache.text(font=self.fonts.main, text=title, color=color)
        sub = self.cache.text(font=self.fonts.tiny, text=hint, color=self.palette.muted)
        cx, cy = layout.board.center
        screen.blit(head, head.get_rect(center=(cx, cy - head.get_height() // 2)))
        screen.blit(sub, sub.get_rect(center=(cx, cy + sub.get_height())))


__all__ = ["Fonts", "TetrisRenderer"]
