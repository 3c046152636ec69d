# src/tetris_sim/game/core/clock.py
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def millis(self) -> int:
        raise NotImplementedError


class MonotonicClock:
    def millis(self) -> int:
        return int(time.monotonic_ns() // 1_000_000)


class FixedClock:
    """Deterministic clock for scripted runs: returns `start`, then advances by `step` per read."""

    def __init__(self, start: int = 0, step: int = 0) -> None:
        self.now = int(start)
        self.step = int(step)

    def millis(self) -> int:
        v = self.now
        self.now += self.step
        return v


__all__ = ["Clock", "FixedClock", "MonotonicClock"]
