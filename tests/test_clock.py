from __future__ import annotations

import pytest

from goldsky.clock import FrameClock


def test_first_tick_is_zero() -> None:
    assert FrameClock(0.1).tick(5000) == 0


def test_delta_in_seconds_and_capped() -> None:
    clock = FrameClock(0.1)
    clock.tick(0)
    assert clock.tick(16) == pytest.approx(0.016)
    assert not clock.clamped

    assert clock.tick(1016) == pytest.approx(0.1)
    assert clock.clamped
    assert clock.last_raw_dt == pytest.approx(1.0)


def test_time_going_backwards_gives_zero() -> None:
    clock = FrameClock(0.1)
    clock.tick(100)
    assert clock.tick(50) == 0


def test_fps_updates_once_per_second() -> None:
    clock = FrameClock(0.1)
    for t in range(0, 1101, 100):
        clock.tick(t)
    assert clock.fps == 11


def test_reset_starts_over() -> None:
    clock = FrameClock(0.1)
    clock.tick(0)
    clock.reset()
    assert clock.tick(10_000) == 0
