# tests/test_timing.py
from __future__ import annotations

from tetris_sim.game.core.board import Board
from tetris_sim.game.core.controller import ActivePieceController
from tetris_sim.game.core.rng import XorShift32
from tetris_sim.game.core.timing import TimingController, TimingParams
from tetris_sim.game.core.types import ActivePiece, FallPhase, PieceType


def _controller_with(piece: ActivePiece) -> ActivePieceController:
    ctl = ActivePieceController(board=Board.empty(h=22, w=10), rng=XorShift32(1))
    ctl.active = piece
    return ctl


def test_fall_interval_curve() -> None:
    t = TimingController()
    assert t.fall_interval(level=1, soft_drop=False) == 30
    assert t.fall_interval(level=3, soft_drop=False) == 26
    assert t.fall_interval(level=13, soft_drop=False) == 6
    assert t.fall_interval(level=14, soft_drop=False) == 5
    assert t.fall_interval(level=40, soft_drop=False) == 5
    assert t.fall_interval(level=40, soft_drop=True) == 2


def test_gravity_moves_one_row_per_interval() -> None:
    ctl = _controller_with(ActivePiece(kind=PieceType.T, rot=0, x=3, y=-1))
    t = TimingController()
    for _ in range(29):
        assert not t.tick(ctl, level=1, soft_drop=False)
    assert ctl.active.y == -1
    t.tick(ctl, level=1, soft_drop=False)
    assert ctl.active.y == 0
    assert t.phase is FallPhase.FALLING


def test_soft_drop_interval() -> None:
    ctl = _controller_with(ActivePiece(kind=PieceType.T, rot=0, x=3, y=-1))
    t = TimingController()
    for _ in range(6):
        t.tick(ctl, level=1, soft_drop=True)
    assert ctl.active.y == 2


def test_grounded_piece_locks_after_interval_plus_delay() -> None:
    ctl = _controller_with(ActivePiece(kind=PieceType.O, rot=0, x=3, y=19))
    t = TimingController(TimingParams(base_fall_interval=30, lock_delay_frames=24))

    for frame in range(1, 54):
        assert not t.tick(ctl, level=1, soft_drop=False), frame
    assert t.touching_ground
    assert t.lock_delay == 24
    assert t.tick(ctl, level=1, soft_drop=False)


def test_regaining_support_returns_to_falling() -> None:
    ctl = _controller_with(ActivePiece(kind=PieceType.O, rot=0, x=3, y=18))
    ctl.board.grid[21, 4] = PieceType.I.board_id
    t = TimingController(TimingParams(lock_delay_frames=100))

    for _ in range(30):
        t.tick(ctl, level=1, soft_drop=False)
    assert t.touching_ground
    assert t.lock_delay == 1

    ctl.board.grid[21, 4] = 0
    for _ in range(30):
        assert not t.tick(ctl, level=1, soft_drop=False)
    assert ctl.active.y == 19
    assert t.phase is FallPhase.FALLING
    assert t.lock_delay == 0


def test_reset_clears_counters() -> None:
    t = TimingController()
    t.phase = FallPhase.TOUCHING_GROUND
    t.fall_counter = 7
    t.lock_delay = 3
    t.reset()
    assert (t.phase, t.fall_counter, t.lock_delay) == (FallPhase.FALLING, 0, 0)
