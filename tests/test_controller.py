# tests/test_controller.py
from __future__ import annotations

import pytest

from tetris_sim.game.core.board import Board
from tetris_sim.game.core.controller import ActivePieceController
from tetris_sim.game.core.rng import XorShift32
from tetris_sim.game.core.types import ActivePiece, PieceType


def _controller(seed: int = 1) -> ActivePieceController:
    return ActivePieceController(board=Board.empty(h=22, w=10), rng=XorShift32(seed))


def test_spawn_promotes_preview_and_draws_next() -> None:
    ctl = _controller(seed=1)
    ctl.prime()
    assert ctl.next_kind is PieceType.O
    assert ctl.spawn()
    assert ctl.active == ActivePiece(kind=PieceType.O, rot=0, x=3, y=-1)
    assert ctl.next_kind is PieceType.S


def test_spawn_reports_collision() -> None:
    ctl = _controller(seed=1)
    ctl.board.grid[0:2, 4:6] = PieceType.T.board_id
    ctl.prime()
    assert not ctl.spawn()
    assert ctl.active.kind is PieceType.O


def test_move_stops_at_wall_without_changing_piece() -> None:
    ctl = _controller()
    ctl.active = ActivePiece(kind=PieceType.O, rot=0, x=3, y=5)
    moves = 0
    while ctl.move(-1, 0):
        moves += 1
    assert moves == 4
    assert ctl.active == ActivePiece(kind=PieceType.O, rot=0, x=-1, y=5)


def test_rotate_uses_first_fitting_kick() -> None:
    ctl = _controller()
    # vertical I hugging the right wall: in-place fails, one column left fits
    ctl.active = ActivePiece(kind=PieceType.I, rot=1, x=7, y=5)
    assert ctl.rotate(+1)
    assert ctl.active == ActivePiece(kind=PieceType.I, rot=2, x=6, y=5)


def test_rotate_falls_through_to_last_kick() -> None:
    ctl = _controller()
    # vertical I hugging the left wall: only the +2 column kick fits
    ctl.active = ActivePiece(kind=PieceType.I, rot=1, x=-2, y=5)
    assert ctl.rotate(+1)
    assert ctl.active == ActivePiece(kind=PieceType.I, rot=2, x=0, y=5)


def test_rotate_counter_clockwise_wraps() -> None:
    ctl = _controller()
    ctl.active = ActivePiece(kind=PieceType.T, rot=0, x=3, y=5)
    assert ctl.rotate(-1)
    assert ctl.active.rot == 3


def test_rotate_is_noop_when_every_kick_collides() -> None:
    ctl = _controller()
    ctl.board.grid[:] = PieceType.Z.board_id
    ctl.board.grid[6, 3:7] = 0
    start = ActivePiece(kind=PieceType.I, rot=0, x=3, y=5)
    ctl.active = start
    assert not ctl.rotate(+1)
    assert not ctl.rotate(-1)
    assert ctl.active == start


def test_rotate_rejects_bad_direction() -> None:
    ctl = _controller()
    with pytest.raises(ValueError, match="direction"):
        ctl.rotate(2)


def test_drop_and_lock() -> None:
    ctl = _controller()
    ctl.active = ActivePiece(kind=PieceType.O, rot=0, x=3, y=-1)
    assert ctl.hard_drop_distance() == 20
    assert ctl.drop_to_floor() == 20
    assert ctl.active.y == 19
    assert ctl.hard_drop_distance() == 0

    assert ctl.lock() == 4
    assert ctl.board.cell(20, 4) is PieceType.O
    assert ctl.board.cell(21, 5) is PieceType.O


def test_lock_refuses_overlap() -> None:
    ctl = _controller()
    ctl.board.grid[10, 4] = 1
    ctl.active = ActivePiece(kind=PieceType.O, rot=0, x=3, y=9)
    with pytest.raises(RuntimeError, match="overlapping"):
        ctl.lock()
