# src/tetris_sim/game/core/controller.py
from __future__ import annotations

from typing import Optional

from tetris_sim.game.core.board import Board
from tetris_sim.game.core.constants import CLASSIC_NUM_PIECES, SPAWN_ROW
from tetris_sim.game.core.rng import XorShift32
from tetris_sim.game.core.rotation import collides, drop_distance, try_rotate
from tetris_sim.game.core.types import ActivePiece, PieceType


class ActivePieceController:
    """
    Owns the falling piece and the next-piece preview.

    Contracts:
      - move()/rotate() either commit a non-colliding placement and return True,
        or leave the piece untouched and return False.
      - spawn() promotes the preview to active and draws a new preview from the
        RNG; it returns False when the new piece does not fit (game over).
    """

    def __init__(self, *, board: Board, rng: XorShift32, spawn_row: int = SPAWN_ROW) -> None:
        self.board = board
        self.rng = rng
        self.spawn_row = int(spawn_row)
        self.spawn_col = (self.board.w // 2) - 2
        self.next_kind: PieceType = PieceType.I
        self.active = ActivePiece(kind=PieceType.T, rot=0, x=self.spawn_col, y=self.spawn_row)

    def _draw_kind(self) -> PieceType:
        return PieceType(self.rng.next_in_range(0, CLASSIC_NUM_PIECES - 1))

    def prime(self) -> None:
        """Fill the preview slot from the RNG (first draw after a reset)."""
        self.next_kind = self._draw_kind()

    def spawn(self) -> bool:
        kind = self.next_kind
        self.next_kind = self._draw_kind()
        self.active = ActivePiece(kind=kind, rot=0, x=self.spawn_col, y=self.spawn_row)
        return not self.board.collides(kind, 0, self.spawn_col, self.spawn_row)

    def fits(self, piece: Optional[ActivePiece] = None) -> bool:
        return not collides(board=self.board, piece=piece or self.active)

    def move(self, dx: int, dy: int) -> bool:
        moved = self.active.moved(int(dx), int(dy))
        if not self.fits(moved):
            return False
        self.active = moved
        return True

    def rotate(self, direction: int) -> bool:
        if int(direction) not in (1, -1):
            raise ValueError(f"rotation direction must be +1 or -1, got {direction!r}")
        rotated = try_rotate(board=self.board, piece=self.active, dir=int(direction))
        if rotated is None:
            return False
        self.active = rotated
        return True

    def hard_drop_distance(self) -> int:
        return drop_distance(board=self.board, piece=self.active)

    def drop_to_floor(self) -> int:
        d = self.hard_drop_distance()
        self.active = self.active.moved(0, d)
        return d

    def lock(self) -> int:
        """Write the active footprint into the board. Returns cells written (hidden-row cells are dropped)."""
        ap = self.active
        if not self.fits(ap):
            raise RuntimeError(f"refusing to lock overlapping piece {ap!r}")
        return self.board.place(ap.kind, ap.rot, ap.x, ap.y)


__all__ = ["ActivePieceController"]
