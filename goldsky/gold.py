"""Gold piece entity: falling physics, hit circle, and point value.

Gold pieces are recycled through ``goldsky.pool.Pool``; ``spawn`` is both the
constructor body and the pool's reset hook, so a recycled piece is
indistinguishable from a new one.
"""

from __future__ import annotations

import math
import random

from goldsky.config import GameConfig
from goldsky.models import Circle
from goldsky.utils import random_range


class Gold:
    """
    One falling gold piece.

    Lifecycle:
    - SPAWN:   placed above the arena with a fresh random radius.
    - FALLING: moves straight down at a speed tied to its radius.
    - GONE:    released back to the pool when caught or once it has fully
               dropped below the arena.

    Larger pieces fall slower and are worth more points. Rotation and shimmer
    only feed the renderer.
    """

    def __init__(self, x: float, y: float, cfg: GameConfig, rng=random) -> None:
        self.cfg = cfg
        self.rng = rng
        self.spawn(x, y)

    # ------------------------------- Update & State ----------------------------------

    def spawn(self, x: float, y: float) -> None:
        cfg = self.cfg
        self.x = x
        self.y = y
        self.radius = random_range(cfg.gold_min_size, cfg.gold_max_size, self.rng)
        self.speed = self.speed_for_radius(self.radius, cfg)
        self.rotation = 0.0
        self.rotation_speed = random_range(-cfg.gold_rotation_speed, cfg.gold_rotation_speed, self.rng)
        self.shimmer = 0.0
        self.collected = False

    @staticmethod
    def speed_for_radius(radius: float, cfg: GameConfig) -> float:
        size_factor = radius / cfg.gold_max_size
        return cfg.gold_min_speed + (cfg.gold_max_speed - cfg.gold_min_speed) * (1 - size_factor * 0.5)

    def advance(self, dt: float) -> None:
        self.y += self.speed * dt
        self.rotation += self.rotation_speed * dt
        self.shimmer += dt * self.cfg.shimmer_speed

    def is_below_arena(self) -> bool:
        return self.y - self.radius > self.cfg.arena_height

    def collision_bounds(self) -> Circle:
        return Circle(self.x, self.y, self.radius - self.cfg.collision_padding)

    def point_value(self) -> int:
        size_ratio = self.radius / self.cfg.gold_max_size
        return math.floor(self.cfg.score_multiplier * size_ratio * self.cfg.size_bonus_multiplier)

    def __repr__(self) -> str:
        return f"Gold(x={self.x:.1f}, y={self.y:.1f}, radius={self.radius:.1f})"
