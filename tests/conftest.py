from __future__ import annotations

import os
import random

# Headless pygame for the renderer and app tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from goldsky.audio import NullAudio
from goldsky.config import GameConfig
from goldsky.input import InputState
from goldsky.session import Session
from goldsky.storage import MemoryHighScoreStore


class RecordingAudio(NullAudio):
    """Silent audio that remembers which sounds were requested."""

    def __init__(self) -> None:
        super().__init__()
        self.played: list[str] = []

    def play(self, name: str) -> None:
        self.played.append(name)


@pytest.fixture()
def cfg() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def session(cfg: GameConfig, rng: random.Random) -> Session:
    """Session in the menu state with recorded audio and an in-memory high score."""
    s = Session(cfg, InputState(), RecordingAudio(), MemoryHighScoreStore(), rng=rng)
    s.assets_ready()
    return s
