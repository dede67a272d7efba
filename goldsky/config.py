"""Gameplay tuning for Gold Sky.

Every number the simulation reads lives on one frozen ``GameConfig``. A config
is built once at startup and handed to each component; gameplay never mutates
it. Use ``dataclasses.replace`` to derive an alternate config (tests do this a
lot).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from goldsky.errors import ConfigError


@dataclass(frozen=True)
class GameConfig:
    # Arena and timing
    arena_width: int = 800
    arena_height: int = 600
    initial_timer: float = 60.0        # seconds
    fps_target: int = 60
    max_frame_dt: float = 0.1          # seconds, cap applied by FrameClock

    # Basket
    basket_width: int = 80
    basket_height: int = 40
    basket_speed: float = 300.0        # px/s
    basket_margin: int = 10
    basket_bottom_offset: int = 50     # start distance above the floor

    # Gold pieces
    gold_min_size: float = 15.0
    gold_max_size: float = 35.0
    gold_min_speed: float = 100.0      # px/s
    gold_max_speed: float = 250.0
    gold_rotation_speed: float = 5.0   # rad/s, spin drawn from [-v, v]
    shimmer_speed: float = 4.0
    spawn_rate: float = 2.0            # pieces per second
    spawn_rate_increase: float = 0.1   # added every spawn_rate_step seconds
    spawn_rate_step: float = 10.0

    # Physics and collision
    gravity: float = 200.0             # px/s^2, particles only
    collision_padding: float = 5.0

    # Scoring
    score_multiplier: float = 10.0
    size_bonus_multiplier: float = 1.5

    # Effects
    pickup_flash_duration: float = 200.0   # ms
    particle_count: int = 6
    particle_lifetime: float = 500.0       # ms

    debug: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError describing the first inconsistent value."""
        if self.arena_width <= 0 or self.arena_height <= 0:
            raise ConfigError(f"arena must be positive, got {self.arena_width}x{self.arena_height}")
        if self.initial_timer <= 0:
            raise ConfigError(f"initial_timer must be positive, got {self.initial_timer}")
        if self.max_frame_dt <= 0:
            raise ConfigError(f"max_frame_dt must be positive, got {self.max_frame_dt}")
        if self.basket_width <= 0 or self.basket_height <= 0:
            raise ConfigError("basket dimensions must be positive")
        if self.basket_width + 2 * self.basket_margin > self.arena_width:
            raise ConfigError("basket plus margins does not fit the arena width")
        if self.basket_height + 2 * self.basket_margin > self.arena_height:
            raise ConfigError("basket plus margins does not fit the arena height")
        if self.gold_min_size <= 0:
            raise ConfigError(f"gold_min_size must be positive, got {self.gold_min_size}")
        if self.gold_min_size > self.gold_max_size:
            raise ConfigError(
                f"gold_min_size ({self.gold_min_size}) is larger than gold_max_size ({self.gold_max_size})"
            )
        if 2 * self.gold_max_size > self.arena_width:
            raise ConfigError("gold_max_size leaves no room to spawn across the arena")
        if self.gold_min_speed <= 0 or self.gold_min_speed > self.gold_max_speed:
            raise ConfigError(
                f"gold speeds must satisfy 0 < min <= max, got {self.gold_min_speed}..{self.gold_max_speed}"
            )
        if self.spawn_rate <= 0:
            raise ConfigError(f"spawn_rate must be positive, got {self.spawn_rate}")
        if self.spawn_rate_increase < 0:
            raise ConfigError("spawn_rate_increase cannot be negative")
        if self.spawn_rate_step <= 0:
            raise ConfigError("spawn_rate_step must be positive")
        if not 0 <= self.collision_padding < self.gold_min_size:
            raise ConfigError(
                f"collision_padding ({self.collision_padding}) must be in [0, gold_min_size)"
            )
        if self.score_multiplier <= 0 or self.size_bonus_multiplier <= 0:
            raise ConfigError("score multipliers must be positive")
        if self.particle_count < 0 or self.particle_lifetime <= 0:
            raise ConfigError("particle_count must be >= 0 and particle_lifetime positive")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GameConfig:
        """Default config with the GOLDSKY_DEBUG switch applied."""
        environ = os.environ if environ is None else environ
        debug = environ.get("GOLDSKY_DEBUG", "").lower() in ("1", "true", "yes", "on")
        return cls(debug=debug)


DEFAULT_CONFIG = GameConfig()
