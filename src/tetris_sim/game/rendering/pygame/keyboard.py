# src/tetris_sim/game/rendering/pygame/keyboard.py
from __future__ import annotations

from typing import Mapping

import pygame

from tetris_sim.game.core.types import Button

DEFAULT_KEYMAP: Mapping[int, Button] = {
    pygame.K_LEFT: Button.LEFT,
    pygame.K_a: Button.LEFT,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_d: Button.RIGHT,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_s: Button.DOWN,
    pygame.K_UP: Button.UP,
    pygame.K_w: Button.UP,
    pygame.K_x: Button.A,
    pygame.K_z: Button.B,
    pygame.K_RETURN: Button.START,
    pygame.K_BACKSPACE: Button.SELECT,
}


class KeyboardButtons:
    """
    ButtonSource over the pygame keyboard (port 0 only).

    poll() snapshots the key state once per frame; is_button_down() answers from
    that snapshot so every button is sampled at the same instant.
    """

    def __init__(self, keymap: Mapping[int, Button] = DEFAULT_KEYMAP) -> None:
        self.keymap = dict(keymap)
        self._held: set[int] = set()

    def poll(self) -> None:
        keys = pygame.key.get_pressed()
        self._held = {int(btn) for key, btn in self.keymap.items() if keys[key]}

    def is_button_down(self, port: int, button: int) -> bool:
        if int(port) != 0:
            return False
        return int(button) in self._held
