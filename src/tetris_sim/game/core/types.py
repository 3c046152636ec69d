# src/tetris_sim/game/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np


class PieceType(IntEnum):
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6

    @property
    def board_id(self) -> int:
        """Grid value for a locked cell of this kind (0 is reserved for empty)."""
        return int(self) + 1

    @classmethod
    def from_board_id(cls, board_id: int) -> "PieceType":
        bid = int(board_id)
        if bid <= 0:
            raise ValueError("board_id must be >= 1 (0 is empty)")
        return cls(bid - 1)


class Button(IntEnum):
    """Joypad button ids (port-local)."""

    B = 0
    Y = 1
    SELECT = 2
    START = 3
    UP = 4
    DOWN = 5
    LEFT = 6
    RIGHT = 7
    A = 8
    X = 9
    L1 = 10
    R1 = 11
    L2 = 12
    R2 = 13
    L3 = 14
    R3 = 15


class SessionStatus(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class FallPhase(Enum):
    FALLING = "falling"
    TOUCHING_GROUND = "touching_ground"


@dataclass(frozen=True)
class ActivePiece:
    kind: PieceType
    rot: int
    x: int
    y: int

    def moved(self, dx: int, dy: int) -> "ActivePiece":
        return ActivePiece(kind=self.kind, rot=self.rot, x=self.x + dx, y=self.y + dy)


@dataclass(frozen=True)
class State:
    """
    Render-/HUD-facing snapshot.

    Contracts:
      - grid is a read-only copy of the LOCKED board (no active overlay).
      - grid cells are board ids: 0 = empty, 1..7 = PieceType + 1.
      - active is reported separately; ghost_distance is the hard-drop distance
        of the active piece (for ghost display).
    """

    grid: np.ndarray
    active: ActivePiece
    ghost_distance: int
    next_kind: PieceType

    score: int
    lines: int
    level: int
    high_score: int

    paused: bool
    game_over: bool

    @property
    def status(self) -> SessionStatus:
        if self.game_over:
            return SessionStatus.GAME_OVER
        if self.paused:
            return SessionStatus.PAUSED
        return SessionStatus.PLAYING

    @property
    def ghost(self) -> ActivePiece:
        return self.active.moved(0, self.ghost_distance)
