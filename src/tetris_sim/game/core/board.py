# src/tetris_sim/game/core/board.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from tetris_sim.game.core.constants import EMPTY_CELL
from tetris_sim.game.core.pieceset import PieceSet
from tetris_sim.game.core.types import PieceType


@dataclass
class Board:
    """
    Fixed-capacity occupancy grid (row-major, row 0 at the top).

    grid holds locked blocks only: 0 = empty, 1..7 = PieceType + 1.
    The array is allocated once and mutated in place; it is never resized.
    Absolute rows < 0 lie above the grid: they are never occupied but still
    take part in left/right/bottom bound checks.
    """

    h: int
    w: int
    grid: np.ndarray
    pieces: PieceSet = field(default_factory=PieceSet.classic7)

    @classmethod
    def empty(cls, *, h: int, w: int, pieces: Optional[PieceSet] = None) -> "Board":
        if int(h) <= 0 or int(w) <= 0:
            raise ValueError(f"board dimensions must be positive, got h={h} w={w}")
        return cls(
            h=int(h),
            w=int(w),
            grid=np.zeros((int(h), int(w)), dtype=np.uint8),
            pieces=pieces or PieceSet.classic7(),
        )

    @classmethod
    def from_rows(cls, rows: Sequence[str], *, h: Optional[int] = None, fill: PieceType = PieceType.I) -> "Board":
        """
        Build a board from text rows ('.' empty, '#' filled with `fill`, or a
        piece letter such as 'T'). Rows are bottom-aligned when h exceeds
        len(rows).
        """
        if not rows:
            raise ValueError("rows must be non-empty")
        w = len(rows[0])
        if any(len(r) != w for r in rows):
            raise ValueError("rows must have equal width")
        hh = len(rows) if h is None else int(h)
        if hh < len(rows):
            raise ValueError(f"h={hh} is smaller than the number of rows ({len(rows)})")

        board = cls.empty(h=hh, w=w)
        top = hh - len(rows)
        for i, text in enumerate(rows):
            for x, ch in enumerate(text):
                if ch == ".":
                    continue
                if ch == "#":
                    kind = fill
                else:
                    try:
                        kind = PieceType[ch.upper()]
                    except KeyError as e:
                        raise ValueError(f"unknown cell character {ch!r} in row {i}") from e
                board.grid[top + i, x] = kind.board_id
        return board

    def reset(self) -> None:
        self.grid.fill(EMPTY_CELL)

    def is_occupied(self, row: int, col: int) -> bool:
        if row < 0:
            return False
        return int(self.grid[row, col]) != EMPTY_CELL

    def cell(self, row: int, col: int) -> Optional[PieceType]:
        if row < 0:
            return None
        v = int(self.grid[row, col])
        if v == EMPTY_CELL:
            return None
        return PieceType.from_board_id(v)

    def collides(self, kind: PieceType, rot: int, col: int, row: int) -> bool:
        for r, c in self.pieces.cells(kind, rot):
            x = col + c
            y = row + r
            if x < 0 or x >= self.w or y >= self.h:
                return True
            if self.is_occupied(y, x):
                return True
        return False

    def place(self, kind: PieceType, rot: int, col: int, row: int) -> int:
        """Write the footprint into the grid; cells above row 0 are dropped. Returns cells written."""
        board_id = PieceType(kind).board_id
        written = 0
        for r, c in self.pieces.cells(kind, rot):
            x = col + c
            y = row + r
            if 0 <= y < self.h and 0 <= x < self.w:
                self.grid[y, x] = board_id
                written += 1
        return written

    def full_rows(self) -> list[int]:
        full = np.all(self.grid != EMPTY_CELL, axis=1)
        return [int(y) for y in np.flatnonzero(full)]

    def clear_full_rows(self) -> int:
        cleared = 0
        for y in range(self.h):
            if not bool(np.all(self.grid[y] != EMPTY_CELL)):
                continue
            # shift everything above y down by one, then open an empty top row
            self.grid[1 : y + 1] = self.grid[0:y].copy()
            self.grid[0].fill(EMPTY_CELL)
            cleared += 1
        return cleared

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def snapshot(self) -> np.ndarray:
        out = self.grid.copy()
        out.flags.writeable = False
        return out
