from __future__ import annotations

from tetris_sim.core.game.config import ButtonMapConfig, GameConfig, ScoringConfig, TimingConfig

__all__ = ["ButtonMapConfig", "GameConfig", "ScoringConfig", "TimingConfig"]
