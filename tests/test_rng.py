# tests/test_rng.py
from __future__ import annotations

import pytest

from tetris_sim.game.core.constants import RNG_DEFAULT_SEED
from tetris_sim.game.core.rng import XorShift32


def test_zero_seed_uses_default_state() -> None:
    assert XorShift32(0).state == RNG_DEFAULT_SEED
    assert XorShift32(1 << 32).state == RNG_DEFAULT_SEED


def test_seed_one_sequence() -> None:
    rng = XorShift32(1)
    assert rng.next_u32() == 270369
    assert rng.next_u32() == 67634689


def test_next_in_range_piece_draws_for_seed_one() -> None:
    rng = XorShift32(1)
    assert rng.next_in_range(0, 6) == 1
    assert rng.next_in_range(0, 6) == 3


def test_reseed_replays_sequence() -> None:
    rng = XorShift32(99)
    first = [rng.next_u32() for _ in range(8)]
    rng.seed(99)
    assert [rng.next_u32() for _ in range(8)] == first


def test_next_in_range_bounds() -> None:
    rng = XorShift32(7)
    assert rng.next_in_range(5, 5) == 5
    assert all(0 <= rng.next_in_range(0, 6) <= 6 for _ in range(500))
    with pytest.raises(ValueError, match="empty range"):
        rng.next_in_range(3, 2)
