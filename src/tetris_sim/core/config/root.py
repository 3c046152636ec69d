# src/tetris_sim/core/config/root.py
from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator

from tetris_sim.core.config.base import ConfigBase
from tetris_sim.core.game.config import GameConfig

LogLevel = str


class PlayConfig(ConfigBase):
    """Interactive front end: frame loop, window and storage location."""

    log_level: LogLevel = "info"
    fps: int = Field(default=60, ge=1, le=1000)
    cell: int = Field(default=20, ge=4, le=128)
    show_grid: bool = True
    store_dir: Path = Path(".tetris_sim")
    game: GameConfig = GameConfig()

    @field_validator("log_level", mode="before")
    @classmethod
    def _log_level_lower(cls, v: object) -> str:
        s = str(v).strip().lower()
        if s not in {"debug", "info", "warning", "error", "critical"}:
            raise ValueError(f"log_level must be one of debug/info/warning/error/critical, got {v!r}")
        return s


__all__ = ["PlayConfig"]
