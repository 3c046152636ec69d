# src/tetris_sim/utils/logging.py
from __future__ import annotations

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "tetris_sim"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def _to_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _LEVELS.get(str(level).strip().lower(), logging.INFO)


def _make_handler(use_rich: bool) -> logging.Handler:
    if use_rich:
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        return handler
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s"))
    return handler


def setup_logger(*, name: str, use_rich: bool = True, level: str | int = "info") -> logging.Logger:
    """
    Module logger with exactly one handler attached.

    Calling it again for the same name replaces the handler instead of stacking
    a second one, so re-imports never double every line.
    """
    logger = logging.getLogger(str(name))
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(_make_handler(use_rich))
    logger.setLevel(_to_level(level))
    logger.propagate = False
    return logger


def set_level(level: str | int, *, prefix: str = PACKAGE_LOGGER) -> None:
    """Apply `level` to every logger already created under `prefix`."""
    lvl = _to_level(level)
    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(lvl)


__all__ = ["PACKAGE_LOGGER", "set_level", "setup_logger"]
