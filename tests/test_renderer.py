from __future__ import annotations

import pygame
import pytest

from goldsky.renderer import WorldRenderer, lerp_color


@pytest.fixture()
def surface():
    pygame.init()
    yield pygame.Surface((800, 600))
    pygame.quit()


def test_lerp_color() -> None:
    assert lerp_color((0, 0, 0), (100, 200, 50), 0.5) == (50, 100, 25)
    assert lerp_color((0, 0, 0), (100, 200, 50), 2) == (100, 200, 50)


def test_background_is_built_once(cfg, surface) -> None:
    renderer = WorldRenderer(cfg)
    renderer.draw_background(surface)
    background = renderer.background
    renderer.draw_background(surface)
    assert renderer.background is background
    assert background.get_size() == (800, 600)


def test_draws_a_busy_frame_with_debug(session, surface) -> None:
    session.start_session()
    session.toggle_debug()
    for _ in range(30):
        session.advance(0.05)
    basket = session.basket
    session.pool.acquire(basket.x + 40, basket.y + 20)
    session.advance(0.01)
    snapshot = session.snapshot()
    assert snapshot.particles and snapshot.basket.is_flashing

    WorldRenderer(session.cfg).draw(surface, snapshot, fps=60)
