# src/tetris_sim/game/core/rotation.py
from __future__ import annotations

from typing import Optional, Sequence

from tetris_sim.game.core.board import Board
from tetris_sim.game.core.constants import ROTATION_KICKS
from tetris_sim.game.core.types import ActivePiece


def collides(*, board: Board, piece: ActivePiece) -> bool:
    return board.collides(piece.kind, piece.rot, piece.x, piece.y)


def try_rotate(
        *,
        board: Board,
        piece: ActivePiece,
        dir: int,
        kicks: Sequence[tuple[int, int]] = ROTATION_KICKS,
) -> Optional[ActivePiece]:
    """
    Minimal kick rotation (not SRS): rotate by dir and try each (d_col, d_row)
    offset in order. Returns the first placement that fits, or None.
    """
    nrot = (piece.rot + int(dir)) % 4
    for dx, dy in kicks:
        nx = piece.x + dx
        ny = piece.y + dy
        if not board.collides(piece.kind, nrot, nx, ny):
            return ActivePiece(kind=piece.kind, rot=nrot, x=nx, y=ny)
    return None


def drop_distance(*, board: Board, piece: ActivePiece) -> int:
    d = 0
    while not board.collides(piece.kind, piece.rot, piece.x, piece.y + d + 1):
        d += 1
    return d


__all__ = ["collides", "try_rotate", "drop_distance"]
