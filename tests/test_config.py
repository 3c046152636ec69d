# tests/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tetris_sim.cli.play import _cli_overrides, build_parser
from tetris_sim.core.config.io import load_play_config, merge_overrides
from tetris_sim.core.config.root import PlayConfig
from tetris_sim.core.game.config import ButtonMapConfig, GameConfig, TimingConfig
from tetris_sim.game.core.types import Button

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_defaults() -> None:
    cfg = GameConfig()
    assert cfg.seed is None
    assert (cfg.width, cfg.height) == (10, 22)
    assert cfg.buttons.pause is Button.START
    assert cfg.timing.to_params().lock_delay_frames == 24


def test_buttons_accept_names_and_ids() -> None:
    m = ButtonMapConfig(left="x", right=8, pause="Select")
    assert m.left is Button.X
    assert m.right is Button.A
    assert m.pause is Button.SELECT


@pytest.mark.parametrize("value", ["nope", 16, True])
def test_buttons_reject_unknown_values(value: object) -> None:
    with pytest.raises(ValidationError):
        ButtonMapConfig(left=value)


def test_timing_min_interval_must_not_exceed_base() -> None:
    with pytest.raises(ValidationError, match="min_fall_interval"):
        TimingConfig(base_fall_interval=10, min_fall_interval=12)


def test_game_config_guardrails() -> None:
    with pytest.raises(ValidationError):
        GameConfig(seed=-1)
    with pytest.raises(ValidationError):
        GameConfig(width=2)
    with pytest.raises(ValidationError):
        GameConfig(colour="red")


def test_play_config_log_level() -> None:
    assert PlayConfig(log_level="DEBUG").log_level == "debug"
    with pytest.raises(ValidationError):
        PlayConfig(log_level="loud")


def test_load_yaml_with_overrides(tmp_path: Path) -> None:
    p = tmp_path / "play.yaml"
    p.write_text(
        "fps: 50\n"
        "game:\n"
        "  seed: 3\n"
        "  buttons:\n"
        "    pause: select\n"
    )
    cfg = load_play_config(p, overrides=["game.seed=7", "game.timing.lock_delay_frames=30"])
    assert cfg.fps == 50
    assert cfg.game.seed == 7
    assert cfg.game.buttons.pause is Button.SELECT
    assert cfg.game.timing.lock_delay_frames == 30


def test_shipped_play_config_is_valid() -> None:
    cfg = load_play_config(REPO_ROOT / "configs" / "play.yaml")
    assert cfg.game == GameConfig()
    assert cfg.store_dir == Path(".tetris_sim")


def test_merge_overrides_without_overrides_copies() -> None:
    data = {"fps": 10}
    out = merge_overrides(data, [])
    assert out == data
    assert out is not data


def test_cli_flags_become_overrides() -> None:
    args = build_parser().parse_args(["--seed", "3", "--fps", "30", "cell=24"])
    assert args.overrides == ["cell=24"]
    assert _cli_overrides(args) == ["game.seed=3", "fps=30"]
