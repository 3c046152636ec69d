# tests/test_input.py
from __future__ import annotations

from tetris_sim.game.core.input import ButtonSource, HeldButtons, InputEdgeDetector
from tetris_sim.game.core.types import Button


class PortRecorder:
    def __init__(self) -> None:
        self.ports: set[int] = set()

    def is_button_down(self, port: int, button: int) -> bool:
        self.ports.add(port)
        return False


def test_pressed_is_a_rising_edge() -> None:
    src = HeldButtons([Button.LEFT])
    det = InputEdgeDetector()

    det.update(src)
    assert det.pressed(Button.LEFT)
    assert det.down(Button.LEFT)

    det.update(src)
    assert not det.pressed(Button.LEFT)
    assert det.down(Button.LEFT)

    src.release(Button.LEFT)
    det.update(src)
    assert not det.pressed(Button.LEFT)
    assert not det.down(Button.LEFT)

    src.hold(Button.LEFT)
    det.update(src)
    assert det.pressed(Button.LEFT)


def test_sync_swallows_held_buttons() -> None:
    det = InputEdgeDetector()
    det.update(HeldButtons([Button.START]))
    det.sync()
    assert not det.pressed(Button.START)
    assert det.down(Button.START)


def test_update_samples_the_given_port() -> None:
    rec = PortRecorder()
    assert isinstance(rec, ButtonSource)
    InputEdgeDetector().update(rec, port=2)
    assert rec.ports == {2}


def test_held_buttons_set_and_clear() -> None:
    src = HeldButtons()
    src.set([Button.A, Button.B])
    assert src.is_button_down(0, Button.A)
    src.clear()
    assert not src.is_button_down(0, Button.B)
