# src/tetris_sim/core/game/config.py
from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator, model_validator

from tetris_sim.core.config.base import ConfigBase
from tetris_sim.game.core import constants as C
from tetris_sim.game.core.rules import ScoreConfig
from tetris_sim.game.core.timing import TimingParams
from tetris_sim.game.core.types import Button


def _as_int(value: object, *, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where} must be an int, got bool")
    if not isinstance(value, (int, float, str, bytes, bytearray)):
        raise ValueError(f"{where} must be an int-like value, got {type(value)!r}")
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{where} must be an int-like value, got {value!r}") from e


def _as_button(value: object, *, where: str) -> Button:
    if isinstance(value, Button):
        return value
    if isinstance(value, str):
        name = value.strip().upper()
        if name in Button.__members__:
            return Button[name]
        if not name.isdigit():
            raise ValueError(f"{where}: unknown button {value!r} (known: {list(Button.__members__)})")
    idx = _as_int(value, where=where)
    try:
        return Button(idx)
    except ValueError as e:
        raise ValueError(f"{where}: button id out of range: {idx}") from e


class ButtonMapConfig(ConfigBase):
    """Logical action -> joypad button. Values accept names ("left") or ids (6)."""

    left: Button = Button.LEFT
    right: Button = Button.RIGHT
    soft_drop: Button = Button.DOWN
    hard_drop: Button = Button.UP
    rotate_cw: Button = Button.A
    rotate_ccw: Button = Button.B
    pause: Button = Button.START
    restart: Button = Button.SELECT

    @field_validator("*", mode="before")
    @classmethod
    def _button(cls, v: object, info) -> Button:
        return _as_button(v, where=f"buttons.{info.field_name}")


class TimingConfig(ConfigBase):
    base_fall_interval: int = Field(default=C.BASE_FALL_INTERVAL, ge=1)
    fall_interval_step: int = Field(default=C.FALL_INTERVAL_STEP, ge=0)
    min_fall_interval: int = Field(default=C.MIN_FALL_INTERVAL, ge=1)
    soft_drop_interval: int = Field(default=C.SOFT_DROP_INTERVAL, ge=1)
    lock_delay_frames: int = Field(default=C.LOCK_DELAY_FRAMES, ge=0)

    @model_validator(mode="after")
    def _min_not_above_base(self) -> "TimingConfig":
        if self.min_fall_interval > self.base_fall_interval:
            raise ValueError(
                f"timing.min_fall_interval ({self.min_fall_interval}) must be <= "
                f"timing.base_fall_interval ({self.base_fall_interval})"
            )
        return self

    def to_params(self) -> TimingParams:
        return TimingParams(
            base_fall_interval=int(self.base_fall_interval),
            fall_interval_step=int(self.fall_interval_step),
            min_fall_interval=int(self.min_fall_interval),
            soft_drop_interval=int(self.soft_drop_interval),
            lock_delay_frames=int(self.lock_delay_frames),
        )


class ScoringConfig(ConfigBase):
    hard_drop_bonus: int = Field(default=C.HARD_DROP_BONUS_PER_CELL, ge=0)
    high_score_key: str = Field(default=C.HIGH_SCORE_KEY, min_length=1)

    def to_score_config(self) -> ScoreConfig:
        return ScoreConfig(hard_drop_bonus=int(self.hard_drop_bonus), high_score_key=str(self.high_score_key))


class GameConfig(ConfigBase):
    """
    Game-level config (engine-facing).

    seed: None => seed from the clock at startup and on every restart;
          an int => that seed at startup, the clock on restarts.
    """

    seed: Optional[int] = Field(default=None, ge=0)
    width: int = Field(default=C.BOARD_COLS, ge=4)
    visible_height: int = Field(default=C.VISIBLE_ROWS, ge=1)
    hidden_rows: int = Field(default=C.HIDDEN_ROWS, ge=0)
    port: int = Field(default=0, ge=0)

    timing: TimingConfig = TimingConfig()
    scoring: ScoringConfig = ScoringConfig()
    buttons: ButtonMapConfig = ButtonMapConfig()

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_int(cls, v: object) -> Optional[int]:
        if v is None:
            return None
        return _as_int(v, where="game.seed")

    @property
    def height(self) -> int:
        return int(self.visible_height + self.hidden_rows)


__all__ = ["ButtonMapConfig", "GameConfig", "ScoringConfig", "TimingConfig"]
