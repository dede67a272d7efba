"""Pickup sparkles. Purely cosmetic; nothing in the score depends on them."""

from __future__ import annotations

import random

from goldsky.config import GameConfig
from goldsky.constants import PARTICLE_COLOR
from goldsky.utils import random_range


class Particle:
    """
    A short-lived spark thrown upward from a caught gold piece.

    ``life`` and ``max_life`` are in milliseconds, matching
    ``GameConfig.particle_lifetime``; ``advance`` takes seconds.
    """

    def __init__(self, x: float, y: float, cfg: GameConfig,
                 color: tuple[int, int, int] = PARTICLE_COLOR, rng=random) -> None:
        self.cfg = cfg
        self.rng = rng
        self.spawn(x, y, color)

    def spawn(self, x: float, y: float, color: tuple[int, int, int]) -> None:
        self.x = x
        self.y = y
        self.vx = random_range(-100, 100, self.rng)
        self.vy = random_range(-150, -50, self.rng)
        self.life = self.cfg.particle_lifetime
        self.max_life = self.cfg.particle_lifetime
        self.size = random_range(3, 8, self.rng)
        self.color = color

    def advance(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.vy += self.cfg.gravity * dt
        self.life -= dt * 1000

    def is_expired(self) -> bool:
        return self.life <= 0

    @property
    def alpha(self) -> float:
        """Remaining life as a 0..1 fraction, used for fading and shrinking."""
        return max(0.0, self.life / self.max_life)


def burst(x: float, y: float, cfg: GameConfig, count: int | None = None,
          color: tuple[int, int, int] = PARTICLE_COLOR, rng=random) -> list[Particle]:
    """Spawn ``count`` particles (default ``cfg.particle_count``) at one point."""
    if count is None:
        count = cfg.particle_count
    return [Particle(x, y, cfg, color, rng) for _ in range(count)]
