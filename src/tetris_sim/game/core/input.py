# src/tetris_sim/game/core/input.py
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

import numpy as np

from tetris_sim.game.core.constants import NUM_BUTTONS
from tetris_sim.game.core.types import Button


@runtime_checkable
class ButtonSource(Protocol):
    def is_button_down(self, port: int, button: int) -> bool:
        raise NotImplementedError


class HeldButtons:
    """
    ButtonSource backed by a plain set of held buttons (one port).

    Used by headless drivers and tests; call hold()/release()/set() between ticks.
    """

    def __init__(self, held: Iterable[Button | int] = ()) -> None:
        self._held: set[int] = {int(b) for b in held}

    def set(self, held: Iterable[Button | int]) -> None:
        self._held = {int(b) for b in held}

    def hold(self, *buttons: Button | int) -> None:
        self._held.update(int(b) for b in buttons)

    def release(self, *buttons: Button | int) -> None:
        for b in buttons:
            self._held.discard(int(b))

    def clear(self) -> None:
        self._held.clear()

    def is_button_down(self, port: int, button: int) -> bool:
        _ = port
        return int(button) in self._held


class InputEdgeDetector:
    """
    Two-state record per button: held this tick, held last tick.

      update(): sample every button once per tick
      pressed(): rising edge this tick (move/rotate/pause/restart/hard drop)
      down():   raw held state (soft drop)
      sync():   previous := current, so buttons already held produce no edge
    """

    def __init__(self, *, num_buttons: int = NUM_BUTTONS) -> None:
        self.num_buttons = int(num_buttons)
        self._prev = np.zeros(self.num_buttons, dtype=bool)
        self._curr = np.zeros(self.num_buttons, dtype=bool)

    def update(self, source: ButtonSource, *, port: int = 0) -> None:
        self._prev[:] = self._curr
        for i in range(self.num_buttons):
            self._curr[i] = bool(source.is_button_down(port, i))

    def pressed(self, btn: Button | int) -> bool:
        i = int(btn)
        return bool(self._curr[i] and not self._prev[i])

    def down(self, btn: Button | int) -> bool:
        return bool(self._curr[int(btn)])

    def sync(self) -> None:
        self._prev[:] = self._curr


__all__ = ["ButtonSource", "HeldButtons", "InputEdgeDetector"]
