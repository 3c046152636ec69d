"""Deterministic, frame-driven falling-block puzzle simulation."""

from __future__ import annotations

from tetris_sim.core.game.config import GameConfig
from tetris_sim.game.core.session import GameSession, TickResult

__version__ = "0.1.0"

__all__ = ["GameConfig", "GameSession", "TickResult", "__version__"]
