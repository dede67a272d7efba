from __future__ import annotations

import pygame
import pytest

from goldsky.models import DirectionalIntent
from goldsky.ui import (
    HUD, GameOverScreen, LoadingScreen, PauseScreen, StartScreen, TouchPad, share_text,
)


@pytest.fixture()
def fonts():
    pygame.init()
    yield pygame.font.Font(None, 48), pygame.font.Font(None, 18)
    pygame.quit()


def test_touch_pad_hit_test() -> None:
    pad = TouchPad(800, 600)
    for direction, rect in pad.buttons.items():
        assert pad.hit(rect.center) == direction
    assert pad.hit((0, 0)) is None


def test_touch_pad_buttons_stay_on_screen() -> None:
    pad = TouchPad(800, 600)
    screen = pygame.Rect(0, 0, 800, 600)
    for rect in pad.buttons.values():
        assert screen.contains(rect)
    rects = list(pad.buttons.values())
    assert not any(a.colliderect(b) for i, a in enumerate(rects) for b in rects[i + 1:])


def test_share_text_mentions_score() -> None:
    assert "42" in share_text(42)


def test_screens_draw(session, fonts) -> None:
    big, small = fonts
    surf = pygame.Surface((800, 600))
    session.start_session()
    session.score = 77
    session.advance(60)
    snapshot = session.snapshot()

    HUD(small).draw(surf, snapshot, muted=True)
    LoadingScreen(small).draw(surf, 0.5, "Audio")
    StartScreen(big, small).draw(surf, snapshot.high_score)
    PauseScreen(big, small).draw(surf)
    screen = GameOverScreen(big, small)
    screen.message = share_text(snapshot.score)
    screen.draw(surf, snapshot)
    TouchPad(800, 600).draw(surf, DirectionalIntent(left=True))
