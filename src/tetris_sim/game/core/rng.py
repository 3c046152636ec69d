# src/tetris_sim/game/core/rng.py
from __future__ import annotations

from tetris_sim.game.core.constants import RNG_DEFAULT_SEED

_U32 = 0xFFFFFFFF


class XorShift32:
    """
    32-bit xorshift generator (13/17/5).

    The all-zero state is a fixed point, so seed(0) substitutes RNG_DEFAULT_SEED.
    Modulo bias in next_in_range() is accepted.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int = RNG_DEFAULT_SEED) -> None:
        self.state = RNG_DEFAULT_SEED
        self.seed(seed)

    def seed(self, s: int) -> None:
        v = int(s) & _U32
        self.state = v if v != 0 else RNG_DEFAULT_SEED

    def next_u32(self) -> int:
        x = self.state
        x ^= (x << 13) & _U32
        x ^= x >> 17
        x ^= (x << 5) & _U32
        self.state = x
        return x

    def next_in_range(self, lo: int, hi: int) -> int:
        span = int(hi) - int(lo) + 1
        if span <= 0:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return int(lo) + self.next_u32() % span


__all__ = ["XorShift32"]
