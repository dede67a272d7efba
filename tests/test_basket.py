from __future__ import annotations

import pytest

from goldsky.basket import Basket


def test_starts_bottom_center(cfg) -> None:
    basket = Basket.at_start(cfg)
    assert basket.x == 360
    assert basket.y == 510
    assert (basket.vx, basket.vy) == (0, 0)


def test_moves_with_velocity(cfg) -> None:
    basket = Basket.at_start(cfg)
    basket.set_velocity(300, -300)
    basket.advance(0.1)
    assert basket.x == pytest.approx(390)
    assert basket.y == pytest.approx(480)


def test_clamped_inside_margins(cfg) -> None:
    basket = Basket.at_start(cfg)
    basket.set_velocity(300, 300)
    basket.advance(10)
    assert basket.x == 800 - 80 - 10
    assert basket.y == 600 - 40 - 10

    basket.set_velocity(-300, -300)
    basket.advance(10)
    assert (basket.x, basket.y) == (10, 10)


def test_flash_counts_down_in_milliseconds(cfg) -> None:
    basket = Basket.at_start(cfg)
    basket.trigger_flash()
    assert basket.flash_timer == cfg.pickup_flash_duration

    basket.advance(0.05)
    assert basket.flash_timer == pytest.approx(150)
    assert basket.is_flashing

    basket.advance(1)
    assert basket.flash_timer == 0
    assert not basket.is_flashing


def test_collision_bounds(cfg) -> None:
    bounds = Basket(20, 30, cfg).collision_bounds()
    assert (bounds.x, bounds.y, bounds.width, bounds.height) == (20, 30, 80, 40)
