"""Player basket: velocity driven, clamped to the arena, flashes on pickup."""

from __future__ import annotations

from goldsky.config import GameConfig
from goldsky.models import Rect
from goldsky.utils import clamp


class Basket:
    """
    The player-controlled catcher.

    Velocity is set from input every frame and integrated in ``advance``; the
    position is then clamped so the whole basket stays ``basket_margin`` pixels
    inside the arena. ``flash_timer`` counts down in milliseconds after a
    pickup and is only read by the renderer.
    """

    def __init__(self, x: float, y: float, cfg: GameConfig) -> None:
        self.cfg = cfg
        self.x = x
        self.y = y
        self.width = cfg.basket_width
        self.height = cfg.basket_height
        self.vx = 0.0
        self.vy = 0.0
        self.flash_timer = 0.0

    @classmethod
    def at_start(cls, cfg: GameConfig) -> Basket:
        """Basket centered horizontally near the bottom of the arena."""
        x = (cfg.arena_width - cfg.basket_width) / 2
        y = cfg.arena_height - cfg.basket_height - cfg.basket_bottom_offset
        return cls(x, y, cfg)

    def set_velocity(self, vx: float, vy: float) -> None:
        self.vx = vx
        self.vy = vy

    def advance(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

        margin = self.cfg.basket_margin
        self.x = clamp(self.x, margin, self.cfg.arena_width - self.width - margin)
        self.y = clamp(self.y, margin, self.cfg.arena_height - self.height - margin)

        if self.flash_timer > 0:
            self.flash_timer = max(0.0, self.flash_timer - dt * 1000)

    def trigger_flash(self) -> None:
        self.flash_timer = self.cfg.pickup_flash_duration

    @property
    def is_flashing(self) -> bool:
        return self.flash_timer > 0

    def collision_bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)
