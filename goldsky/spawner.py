from __future__ import annotations

import random

from goldsky.config import GameConfig
from goldsky.gold import Gold
from goldsky.pool import Pool
from goldsky.utils import random_range


class Spawner:
    """
    Responsible for dropping new gold pieces at a rate that climbs over the
    session.

    Notes
    - Timing uses simulated session seconds (the sum of frame deltas while
      playing), so paused time never counts and tests are deterministic.
    - The rate is a step function: it rises by ``spawn_rate_increase`` every
      ``spawn_rate_step`` seconds of play.
    """

    def __init__(self, cfg: GameConfig, rng=random) -> None:
        self.cfg = cfg
        self.rng = rng
        self.reset()

    def reset(self) -> None:
        self.current_rate = self.cfg.spawn_rate
        self.last_spawn_at: float | None = None   # None spawns on the first frame

    def get_spawn_rate(self, elapsed: float) -> float:
        """
        Pieces per second after ``elapsed`` seconds of play.
        """
        steps = int(elapsed // self.cfg.spawn_rate_step)
        return self.cfg.spawn_rate + steps * self.cfg.spawn_rate_increase

    def update_rate(self, elapsed: float) -> float:
        self.current_rate = self.get_spawn_rate(elapsed)
        return self.current_rate

    def spawn_interval(self) -> float:
        """Seconds between two spawns at the current rate."""
        return 1.0 / self.current_rate

    def spawn_position(self) -> tuple[float, float]:
        """
        Random x that keeps the largest possible piece inside the arena, just
        above the top edge.
        """
        max_size = self.cfg.gold_max_size
        x = random_range(max_size, self.cfg.arena_width - max_size, self.rng)
        return x, -max_size

    def maybe_spawn(self, elapsed: float, pool: Pool[Gold]) -> Gold | None:
        """
        Spawn a gold piece if enough time has passed since the previous one.

        Parameters
        ----------
        elapsed : float
            Session time in seconds
        pool : Pool[Gold]
            Pool the new piece is acquired from

        Returns
        -------
        Gold | None
            The spawned piece, or None when it is not time yet
        """
        if self.last_spawn_at is not None and elapsed - self.last_spawn_at <= self.spawn_interval():
            return None

        x, y = self.spawn_position()
        gold = pool.acquire(x, y)
        self.last_spawn_at = elapsed
        return gold
