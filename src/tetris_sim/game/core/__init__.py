from __future__ import annotations

from tetris_sim.game.core.board import Board
from tetris_sim.game.core.clock import Clock, FixedClock, MonotonicClock
from tetris_sim.game.core.controller import ActivePieceController
from tetris_sim.game.core.input import ButtonSource, HeldButtons, InputEdgeDetector
from tetris_sim.game.core.pieceset import PieceSet, is_filled
from tetris_sim.game.core.rng import XorShift32
from tetris_sim.game.core.rules import ScoreConfig, ScoreKeeper, level_for_lines, score_for_clears
from tetris_sim.game.core.storage import ByteStore, DirectoryStore, MemoryStore, StorageError
from tetris_sim.game.core.timing import TimingController, TimingParams
from tetris_sim.game.core.types import ActivePiece, Button, FallPhase, PieceType, SessionStatus, State

__all__ = [
    "ActivePiece",
    "ActivePieceController",
    "Board",
    "Button",
    "ButtonSource",
    "ByteStore",
    "Clock",
    "DirectoryStore",
    "FallPhase",
    "FixedClock",
    "HeldButtons",
    "InputEdgeDetector",
    "MemoryStore",
    "MonotonicClock",
    "PieceSet",
    "PieceType",
    "ScoreConfig",
    "ScoreKeeper",
    "SessionStatus",
    "State",
    "StorageError",
    "TimingController",
    "TimingParams",
    "XorShift32",
    "is_filled",
    "level_for_lines",
    "score_for_clears",
]
