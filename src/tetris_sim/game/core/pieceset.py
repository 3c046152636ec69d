# src/tetris_sim/game/core/pieceset.py
"""
Static tetromino geometry.

Each (kind, rotation) footprint is a 16-bit mask over a 4x4 local box. Literals
are written MSB-first in four nibble groups, row 0 first, so they read like the
shape itself:

    0b0000_1111_0000_0000   ->   ....
                                 ####
                                 ....
                                 ....

Cell (r, c) is bit (15 - (r*4 + c)).
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Tuple

import numpy as np

from tetris_sim.game.core.types import PieceType

BOX: int = 4
NUM_ROTATIONS: int = 4

SHAPE_MASKS: Dict[PieceType, Tuple[int, int, int, int]] = {
    PieceType.I: (
        0b0000_1111_0000_0000,
        0b0010_0010_0010_0010,
        0b0000_0000_1111_0000,
        0b0100_0100_0100_0100,
    ),
    PieceType.O: (
        0b0000_0110_0110_0000,
        0b0000_0110_0110_0000,
        0b0000_0110_0110_0000,
        0b0000_0110_0110_0000,
    ),
    PieceType.T: (
        0b0000_0100_1110_0000,
        0b0000_0100_0110_0100,
        0b0000_0000_1110_0100,
        0b0000_0100_1100_0100,
    ),
    PieceType.S: (
        0b0000_0110_1100_0000,
        0b0000_0100_0110_0010,
        0b0000_0000_0110_1100,
        0b0000_1000_1100_0100,
    ),
    PieceType.Z: (
        0b0000_1100_0110_0000,
        0b0000_0010_0110_0100,
        0b0000_0000_1100_0110,
        0b0000_0100_1100_1000,
    ),
    PieceType.J: (
        0b0000_1000_1110_0000,
        0b0000_0110_0100_0100,
        0b0000_0000_1110_0010,
        0b0000_0100_0100_1100,
    ),
    PieceType.L: (
        0b0000_0010_1110_0000,
        0b0000_0100_0100_0110,
        0b0000_0000_1110_1000,
        0b0000_1100_0100_0100,
    ),
}

# Standard tetromino colors
PIECE_COLORS: Dict[PieceType, Tuple[int, int, int]] = {
    PieceType.I: (0, 240, 240),
    PieceType.O: (240, 240, 0),
    PieceType.T: (160, 0, 240),
    PieceType.S: (0, 240, 0),
    PieceType.Z: (240, 0, 0),
    PieceType.J: (0, 80, 240),
    PieceType.L: (240, 160, 0),
}


def mask_bit(mask: int, r: int, c: int) -> bool:
    if not (0 <= r < BOX and 0 <= c < BOX):
        return False
    return bool((int(mask) >> (15 - (r * BOX + c))) & 1)


def _decode(mask: int) -> np.ndarray:
    arr = np.zeros((BOX, BOX), dtype=np.uint8)
    for r in range(BOX):
        for c in range(BOX):
            if mask_bit(mask, r, c):
                arr[r, c] = 1
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class PieceDef:
    kind: PieceType
    rotations: Tuple[np.ndarray, ...]  # each is a (4,4) uint8 mask 0/1
    cells_by_rot: Tuple[Tuple[Tuple[int, int], ...], ...]  # filled (row, col) per rotation
    color: Optional[Tuple[int, int, int]] = None

    def mask(self, rot: int) -> np.ndarray:
        return self.rotations[int(rot) % NUM_ROTATIONS]

    def cells(self, rot: int) -> Tuple[Tuple[int, int], ...]:
        return self.cells_by_rot[int(rot) % NUM_ROTATIONS]


@dataclass(frozen=True)
class PieceSet:
    """
    Pure geometry + colors for the classic 7 tetrominoes.

    Stateless lookup. Rotation indices are always taken mod 4 and local
    coordinates outside the 4x4 box are never filled.
    """

    pieces: Dict[PieceType, PieceDef]

    @classmethod
    def from_masks(
            cls,
            masks: Dict[PieceType, Tuple[int, ...]],
            *,
            colors: Optional[Dict[PieceType, Tuple[int, int, int]]] = None,
    ) -> "PieceSet":
        pieces: Dict[PieceType, PieceDef] = {}
        for kind in PieceType:
            rots = masks.get(kind)
            if rots is None or len(rots) != NUM_ROTATIONS:
                raise ValueError(f"{kind.name}: expected {NUM_ROTATIONS} rotation masks")
            arrays = tuple(_decode(m) for m in rots)
            cells = tuple(
                tuple((int(r), int(c)) for r, c in zip(*np.nonzero(a)))
                for a in arrays
            )
            counts = {len(c) for c in cells}
            if len(counts) != 1:
                raise ValueError(f"{kind.name}: rotations must have same filled cell count, got {sorted(counts)}")
            pieces[kind] = PieceDef(
                kind=kind,
                rotations=arrays,
                cells_by_rot=cells,
                color=(colors or {}).get(kind),
            )
        return cls(pieces=pieces)

    @staticmethod
    @lru_cache(maxsize=1)
    def classic7() -> "PieceSet":
        return PieceSet.from_masks(SHAPE_MASKS, colors=PIECE_COLORS)

    def get(self, kind: PieceType | int) -> PieceDef:
        try:
            return self.pieces[PieceType(int(kind))]
        except (KeyError, ValueError) as e:
            raise KeyError(f"unknown piece kind {kind!r}") from e

    def mask(self, kind: PieceType | int, rot: int) -> np.ndarray:
        return self.get(kind).mask(rot)

    def cells(self, kind: PieceType | int, rot: int) -> Tuple[Tuple[int, int], ...]:
        return self.get(kind).cells(rot)

    def is_filled(self, kind: PieceType | int, rot: int, local_row: int, local_col: int) -> bool:
        return mask_bit(SHAPE_MASKS[PieceType(int(kind))][int(rot) % NUM_ROTATIONS], local_row, local_col)

    def color_of(self, kind: PieceType | int) -> Optional[Tuple[int, int, int]]:
        return self.get(kind).color

    @staticmethod
    def filled_bbox(mask: np.ndarray) -> Tuple[int, int, int, int]:
        """
        Return (minx, miny, maxx, maxy) of non-zero cells.
        If mask has no filled cells, returns (0,0,-1,-1).
        """
        m = np.asarray(mask)
        ys, xs = np.nonzero(m != 0)
        if xs.size == 0:
            return (0, 0, -1, -1)
        return int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max())


def is_filled(kind: PieceType | int, rot: int, local_row: int, local_col: int) -> bool:
    return PieceSet.classic7().is_filled(kind, rot, local_row, local_col)


__all__ = ["BOX", "NUM_ROTATIONS", "PIECE_COLORS", "SHAPE_MASKS", "PieceDef", "PieceSet", "is_filled", "mask_bit"]
