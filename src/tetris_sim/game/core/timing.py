# src/tetris_sim/game/core/timing.py
from __future__ import annotations

from dataclasses import dataclass

from tetris_sim.game.core.constants import (
    BASE_FALL_INTERVAL,
    FALL_INTERVAL_STEP,
    LOCK_DELAY_FRAMES,
    MIN_FALL_INTERVAL,
    SOFT_DROP_INTERVAL,
)
from tetris_sim.game.core.controller import ActivePieceController
from tetris_sim.game.core.types import FallPhase


@dataclass(frozen=True)
class TimingParams:
    base_fall_interval: int = BASE_FALL_INTERVAL
    fall_interval_step: int = FALL_INTERVAL_STEP
    min_fall_interval: int = MIN_FALL_INTERVAL
    soft_drop_interval: int = SOFT_DROP_INTERVAL
    lock_delay_frames: int = LOCK_DELAY_FRAMES


class TimingController:
    """
    Frame-counted gravity and lock delay.

    Falling:         every fall_interval frames try to move down one row.
    TouchingGround:  entered when that move fails; the lock-delay counter then
                     counts every frame and the piece must lock once it exceeds
                     lock_delay_frames. A later successful fall returns to Falling.
    """

    def __init__(self, params: TimingParams | None = None) -> None:
        self.params = params or TimingParams()
        self.phase = FallPhase.FALLING
        self.fall_counter = 0
        self.lock_delay = 0

    def reset(self) -> None:
        self.phase = FallPhase.FALLING
        self.fall_counter = 0
        self.lock_delay = 0

    @property
    def touching_ground(self) -> bool:
        return self.phase is FallPhase.TOUCHING_GROUND

    def fall_interval(self, *, level: int, soft_drop: bool) -> int:
        p = self.params
        if soft_drop:
            return int(p.soft_drop_interval)
        v = int(p.base_fall_interval) - int(p.fall_interval_step) * (int(level) - 1)
        return max(int(p.min_fall_interval), v)

    def tick(self, controller: ActivePieceController, *, level: int, soft_drop: bool) -> bool:
        """Advance one frame. Returns True when the active piece must be locked now."""
        interval = self.fall_interval(level=level, soft_drop=soft_drop)

        self.fall_counter += 1
        if self.fall_counter >= interval:
            self.fall_counter = 0
            if controller.move(0, 1):
                self.phase = FallPhase.FALLING
                self.lock_delay = 0
            elif self.phase is not FallPhase.TOUCHING_GROUND:
                self.phase = FallPhase.TOUCHING_GROUND
                self.lock_delay = 0

        if self.phase is FallPhase.TOUCHING_GROUND:
            self.lock_delay += 1
            return self.lock_delay > int(self.params.lock_delay_frames)
        return False


__all__ = ["TimingController", "TimingParams"]
