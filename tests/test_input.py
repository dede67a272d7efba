from __future__ import annotations

import pytest

from goldsky.input import InputState


def test_keyboard_direction() -> None:
    state = InputState()
    state.set_keyboard(True, False, False, True)
    assert state.velocity(300) == (-300, 300)


def test_devices_add_up() -> None:
    state = InputState()
    state.set_keyboard(True, False, False, False)
    state.press_touch("left")
    assert state.velocity(300) == (-600, 0)

    state.press_touch("right")
    assert state.velocity(300) == (-300, 0)


def test_release_touch_lets_go_of_everything() -> None:
    state = InputState()
    state.press_touch("up")
    state.press_touch("left")
    state.release_touch()
    assert state.touch.idle
    assert state.velocity(300) == (0, 0)


def test_unknown_direction() -> None:
    with pytest.raises(ValueError):
        InputState().press_touch("diagonal")


def test_clear() -> None:
    state = InputState()
    state.set_keyboard(True, True, True, True)
    state.press_touch("down")
    state.clear()
    assert state.keyboard.idle and state.touch.idle
