# tests/test_logging.py
from __future__ import annotations

import logging

from tetris_sim.utils.logging import set_level, setup_logger


def test_setup_logger_is_idempotent() -> None:
    a = setup_logger(name="tetris_sim.test_once", use_rich=False)
    b = setup_logger(name="tetris_sim.test_once", use_rich=True, level="warning")
    assert a is b
    assert len(b.handlers) == 1
    assert b.level == logging.WARNING
    assert not b.propagate


def test_set_level_reaches_package_loggers_only() -> None:
    inside = setup_logger(name="tetris_sim.test_scope", use_rich=False)
    outside = logging.getLogger("someone_else.test_scope")
    outside.setLevel(logging.ERROR)

    set_level("debug")
    assert inside.level == logging.DEBUG
    assert outside.level == logging.ERROR

    set_level("INFO")
    assert inside.level == logging.INFO
