"""The simulation: one play session from start to game over, frame by frame."""

from __future__ import annotations

import random
from dataclasses import dataclass

from statemachine.exceptions import TransitionNotAllowed

from goldsky.audio import NullAudio
from goldsky.basket import Basket
from goldsky.config import DEFAULT_CONFIG, GameConfig
from goldsky.gold import Gold
from goldsky.input import InputState
from goldsky.logger import GameLogger
from goldsky.particle import Particle, burst
from goldsky.pool import Pool
from goldsky.spawner import Spawner
from goldsky.states import GameState, GameStateMachine
from goldsky.storage import MemoryHighScoreStore
from goldsky.utils import circle_intersects_rect


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer and HUD need for one frame."""
    state: GameState
    basket: Basket | None
    items: tuple[Gold, ...]
    particles: tuple[Particle, ...]
    score: int
    high_score: int
    new_high_score: bool
    time_left: float
    elapsed: float
    spawn_rate: float
    pooled_count: int
    debug: bool


class SessionListener:
    """Receives session events. Override only what you need."""

    def on_state_changed(self, old: GameState, new: GameState) -> None:
        pass

    def on_tick(self, score: int, time_left: float) -> None:
        pass

    def on_pickup(self, gold: Gold, points: int, score: int) -> None:
        pass

    def on_miss(self, gold: Gold) -> None:
        pass

    def on_session_ended(self, score: int, high_score: int, new_high_score: bool) -> None:
        pass


class Session:
    """
    Game controller for the core loop: owns the basket, the gold pool, the
    particles, the score and the timer, and moves them forward in ``advance``.

    Collaborators (audio, high score store, logger, input) are passed in;
    defaults are silent and in-memory so a Session runs headless.

    ``advance`` does nothing unless the state is PLAYING. Per frame, in order:
    timer, spawn rate, basket, spawning, gold (catch before miss, newest
    first), particles, listeners.
    """

    def __init__(self, cfg: GameConfig = DEFAULT_CONFIG, input_state: InputState | None = None,
                 audio=None, store=None, logger: GameLogger | None = None, rng=random) -> None:
        self.cfg = cfg
        self.input = input_state if input_state is not None else InputState()
        self.audio = audio if audio is not None else NullAudio()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.logger = logger
        self.rng = rng
        self.listeners: list[SessionListener] = []

        self.machine = GameStateMachine()
        self.pool: Pool[Gold] = Pool(
            lambda x, y: Gold(x, y, cfg, rng),
            lambda gold, x, y: gold.spawn(x, y),
        )
        self.spawner = Spawner(cfg, rng)
        self.particles: list[Particle] = []
        self.basket: Basket | None = None

        self.score = 0
        self.time_left = cfg.initial_timer
        self.elapsed_ms = 0          # whole milliseconds of play
        self.high_score = self.store.load_high_score()
        self.new_high_score = False
        self.debug = cfg.debug

    # --------------------------------- State ----------------------------------------

    @property
    def state(self) -> GameState:
        return self.machine.game_state

    @property
    def spawn_rate(self) -> float:
        return self.spawner.current_rate

    @property
    def elapsed(self) -> float:
        """Seconds of play. Stored as whole milliseconds, so 100 frames of 0.1 s is exactly 10.0."""
        return self.elapsed_ms / 1000

    def add_listener(self, listener: SessionListener) -> None:
        self.listeners.append(listener)

    def _send(self, event: str) -> GameState | None:
        """Fire a state machine event. Returns the previous state, or None if the event is not legal now."""
        old = self.state
        try:
            self.machine.send(event)
        except TransitionNotAllowed:
            return None
        return old

    def _emit(self, hook: str, *args) -> None:
        for listener in self.listeners:
            getattr(listener, hook)(*args)

    def _play(self, name: str) -> None:
        try:
            self.audio.play(name)
        except Exception as e:
            # sound is optional; the frame goes on
            if self.logger:
                self.logger.log_warning(f"Sound {name} failed: {e}")

    # -------------------------------- Lifecycle -------------------------------------

    def assets_ready(self) -> bool:
        old = self._send("assets_ready")
        if old is None:
            return False
        self._emit("on_state_changed", old, self.state)
        return True

    def start_session(self) -> bool:
        """Fresh board: score 0, full timer, base spawn rate, basket bottom-center."""
        return self._begin("start_session")

    def restart_session(self) -> bool:
        return self._begin("restart_session")

    def _begin(self, event: str) -> bool:
        old = self._send(event)
        if old is None:
            return False

        self.score = 0
        self.time_left = self.cfg.initial_timer
        self.elapsed_ms = 0
        self.new_high_score = False
        self.spawner.reset()
        self.pool.clear()
        self.particles = []
        self.basket = Basket.at_start(self.cfg)

        self._play("start")
        if self.logger:
            self.logger.log_session_start(self.high_score)
        self._emit("on_state_changed", old, self.state)
        self._emit("on_tick", self.score, self.time_left)
        return True

    def pause(self) -> bool:
        return self._pause("pause", "requested")

    def visibility_lost(self) -> bool:
        return self._pause("visibility_lost", "window lost focus")

    def _pause(self, event: str, reason: str) -> bool:
        old = self._send(event)
        if old is None:
            return False
        if self.logger:
            self.logger.log_pause(True, self.score, reason)
        self._emit("on_state_changed", old, self.state)
        return True

    def resume(self) -> bool:
        old = self._send("resume")
        if old is None:
            return False
        if self.logger:
            self.logger.log_pause(False, self.score)
        self._emit("on_state_changed", old, self.state)
        return True

    def toggle_pause(self) -> bool:
        if self.state is GameState.PLAYING:
            return self.pause()
        if self.state is GameState.PAUSED:
            return self.resume()
        return False

    def end_session(self) -> bool:
        """PLAYING -> GAME_OVER. Saves the high score only when it was beaten."""
        old = self._send("end_session")
        if old is None:
            return False

        self.new_high_score = self.score > self.high_score
        if self.new_high_score:
            self.high_score = self.score
            self.store.save_high_score(self.high_score)

        if self.logger:
            self.logger.log_session_end(self.score, self.high_score, self.new_high_score)
        self._emit("on_state_changed", old, self.state)
        self._emit("on_session_ended", self.score, self.high_score, self.new_high_score)
        return True

    def toggle_debug(self) -> bool:
        self.debug = not self.debug
        return self.debug

    # --------------------------------- Update ---------------------------------------

    def advance(self, dt: float) -> None:
        if self.state is not GameState.PLAYING:
            return
        dt = max(0.0, dt)

        self.time_left -= dt
        if self.time_left <= 0:
            self.time_left = 0.0
            self.end_session()
            return

        self.elapsed_ms += round(dt * 1000)
        self.spawner.update_rate(self.elapsed)

        self.update_basket(dt)
        self.spawner.maybe_spawn(self.elapsed, self.pool)
        self.update_gold(dt)
        self.update_particles(dt)

        self._emit("on_tick", self.score, self.time_left)

    def update_basket(self, dt: float) -> None:
        if self.basket is None:
            return
        vx, vy = self.input.velocity(self.cfg.basket_speed)
        self.basket.set_velocity(vx, vy)
        self.basket.advance(dt)

    def update_gold(self, dt: float) -> None:
        """Move every piece, then resolve it: caught wins over dropped, once per frame."""
        basket_bounds = self.basket.collision_bounds() if self.basket else None

        for gold in reversed(self.pool.active_items()):
            gold.advance(dt)

            if basket_bounds is not None and circle_intersects_rect(gold.collision_bounds(), basket_bounds):
                self.collect(gold)
                continue

            if gold.is_below_arena():
                self.drop(gold)

    def collect(self, gold: Gold) -> None:
        points = gold.point_value()
        gold.collected = True
        self.score += points
        if self.basket:
            self.basket.trigger_flash()
        self._play("pickup")
        self.particles.extend(burst(gold.x, gold.y, self.cfg, rng=self.rng))
        self.pool.release(gold)

        if self.logger:
            self.logger.log_pickup((gold.x, gold.y), points, self.score)
        self._emit("on_pickup", gold, points, self.score)

    def drop(self, gold: Gold) -> None:
        self._play("miss")
        self.pool.release(gold)

        if self.logger:
            self.logger.log_miss((gold.x, gold.y), self.score)
        self._emit("on_miss", gold)

    def update_particles(self, dt: float) -> None:
        for particle in self.particles:
            particle.advance(dt)
        self.particles = [p for p in self.particles if not p.is_expired()]

    # -------------------------------- Snapshot --------------------------------------

    def snapshot(self) -> Snapshot:
        return Snapshot(
            state=self.state,
            basket=self.basket,
            items=tuple(self.pool.active_items()),
            particles=tuple(self.particles),
            score=self.score,
            high_score=self.high_score,
            new_high_score=self.new_high_score,
            time_left=self.time_left,
            elapsed=self.elapsed,
            spawn_rate=self.spawner.current_rate,
            pooled_count=self.pool.free_count,
            debug=self.debug,
        )
