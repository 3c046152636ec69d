# src/tetris_sim/core/config/io.py
from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import OmegaConf

from tetris_sim.core.config.root import PlayConfig


def load_yaml(path: Path) -> dict[str, Any]:
    cfg_path = Path(path)
    cfg = OmegaConf.load(cfg_path)
    data = OmegaConf.to_container(cfg, resolve=True)
    if not isinstance(data, dict):
        raise TypeError(f"config({path}) must be a mapping")
    return data


def merge_overrides(data: dict[str, Any], overrides: list[str]) -> dict[str, Any]:
    """Apply dotlist overrides (e.g. ["game.seed=7", "fps=30"]) on top of a plain mapping."""
    if not overrides:
        return dict(data)
    merged = OmegaConf.merge(OmegaConf.create(data), OmegaConf.from_dotlist(list(overrides)))
    out = OmegaConf.to_container(merged, resolve=True)
    if not isinstance(out, dict):
        raise TypeError("merged config must be a mapping")
    return out


def load_play_config(path: Path | None = None, *, overrides: list[str] | None = None) -> PlayConfig:
    data: dict[str, Any] = load_yaml(path) if path is not None else {}
    return PlayConfig.model_validate(merge_overrides(data, list(overrides or [])))


__all__ = [
    "load_yaml",
    "merge_overrides",
    "load_play_config",
]
