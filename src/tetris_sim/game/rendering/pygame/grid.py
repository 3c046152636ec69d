# src/tetris_sim/game/rendering/pygame/grid.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pygame

from tetris_sim.game.core.pieceset import PieceSet
from tetris_sim.game.core.types import ActivePiece, PieceType, State
from tetris_sim.game.rendering.pygame.palette import Color, Palette
from tetris_sim.game.rendering.pygame.surf import SurfaceCache
from tetris_sim.game.rendering.pygame.window import Layout


@dataclass(frozen=True)
class GridRenderCfg:
    border_width: int = 2
    grid_line_width: int = 1


CFG = GridRenderCfg()


def draw_grid(
        *,
        screen: pygame.Surface,
        state: State,
        hidden_rows: int,
        layout: Layout,
        show_grid_lines: bool,
        palette: Palette,
        pieces: PieceSet,
        cache: SurfaceCache,
) -> None:
    """
    Locked cells first, then ghost, then the active piece.

    Grid rows < hidden_rows are the spawn buffer; anything there (including
    parts of the active piece) is clipped.
    """
    pygame.draw.rect(screen, palette.panel_bg, layout.frame)

    grid = np.asarray(state.grid)
    hidden = int(hidden_rows)
    for y, x in zip(*np.nonzero(grid[hidden:])):
        color = _board_id_to_color(board_id=int(grid[hidden + y, x]), palette=palette, pieces=pieces)
        screen.blit(cache.cell(size=layout.cell, color=color), layout.cell_rect(int(x), int(y)))

    if show_grid_lines:
        _draw_grid_lines(screen=screen, layout=layout, color=palette.grid)

    if not state.game_over:
        _draw_piece(
            screen=screen,
            piece=state.ghost,
            hidden_rows=hidden,
            pieces=pieces,
            layout=layout,
            color=_ghost_color(pieces.color_of(state.active.kind) or palette.fallback_piece),
            cache=cache,
            alpha=palette.ghost_alpha,
        )
        _draw_piece(
            screen=screen,
            piece=state.active,
            hidden_rows=hidden,
            pieces=pieces,
            layout=layout,
            color=pieces.color_of(state.active.kind) or palette.fallback_piece,
            cache=cache,
        )

    pygame.draw.rect(screen, palette.border, layout.frame, width=CFG.border_width)


def draw_piece_preview(
        *,
        screen: pygame.Surface,
        kind: PieceType,
        box: pygame.Rect,
        cell: int,
        palette: Palette,
        pieces: PieceSet,
        cache: SurfaceCache,
) -> None:
    """Draw `kind` in spawn rotation, centred on its filled cells inside `box`."""
    minx, miny, maxx, maxy = PieceSet.filled_bbox(pieces.mask(kind, 0))
    w = (maxx - minx + 1) * cell
    h = (maxy - miny + 1) * cell
    px = box.centerx - w // 2 - minx * cell
    py = box.centery - h // 2 - miny * cell
    color = pieces.color_of(kind) or palette.fallback_piece
    tile = cache.cell(size=cell, color=color)
    for r, c in pieces.cells(kind, 0):
        screen.blit(tile, (px + c * cell, py + r * cell))


def _draw_grid_lines(*, screen: pygame.Surface, layout: Layout, color: Color) -> None:
    b = layout.board
    for x in range(b.left + layout.cell, b.right, layout.cell):
        pygame.draw.line(screen, color, (x, b.top), (x, b.bottom - 1), CFG.grid_line_width)
    for y in range(b.top + layout.cell, b.bottom, layout.cell):
        pygame.draw.line(screen, color, (b.left, y), (b.right - 1, y), CFG.grid_line_width)


def _draw_piece(
        *,
        screen: pygame.Surface,
        piece: ActivePiece,
        hidden_rows: int,
        pieces: PieceSet,
        layout: Layout,
        color: Color,
        cache: SurfaceCache,
        alpha: int = 255,
) -> None:
    tile = cache.cell(size=layout.cell, color=color, alpha=alpha)
    for r, c in pieces.cells(piece.kind, piece.rot):
        visible_row = piece.y + r - hidden_rows
        if visible_row < 0:
            continue
        screen.blit(tile, layout.cell_rect(piece.x + c, visible_row))


def _ghost_color(color: Color) -> Color:
    return (color[0] // 2, color[1] // 2, color[2] // 2)


def _board_id_to_color(*, board_id: int, palette: Palette, pieces: PieceSet) -> Color:
    try:
        kind = PieceType.from_board_id(board_id)
    except ValueError:
        return palette.fallback_piece
    return pieces.color_of(kind) or palette.fallback_piece


__all__ = ["draw_grid", "draw_piece_preview"]
