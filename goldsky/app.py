"""Game entry point"""

from __future__ import annotations

import pygame

from goldsky.audio import AudioManager
from goldsky.clock import FrameClock
from goldsky.config import GameConfig
from goldsky.constants import (
    FONT_NAME, FONT_SIZE_LARGE, FONT_SIZE_MEDIUM, FONT_SIZE_SMALL,
    HIGH_SCORE_FILE, LOADING_STEP_MS, LOADING_STEPS, LOG_FILE, SOUND_PATHS,
)
from goldsky.input import InputState
from goldsky.logger import GameLogger
from goldsky.renderer import WorldRenderer
from goldsky.session import Session
from goldsky.states import GameState
from goldsky.storage import HighScoreStore
from goldsky.ui import (
    HUD, GameOverScreen, LoadingScreen, PauseScreen, StartScreen, TouchPad,
    copy_to_clipboard, share_text,
)


class Game:
    """
    Main game controller: opens the window, wires the session to its
    collaborators, runs the loop, maps input events to session signals, and
    draws the frame.
    """

    def __init__(self, cfg: GameConfig | None = None, log_file: str = LOG_FILE,
                 high_score_file: str = HIGH_SCORE_FILE) -> None:
        """Initialize subsystems and put the session in the loading state."""
        pygame.init()
        pygame.display.set_caption("Gold Sky")

        self.cfg = cfg if cfg is not None else GameConfig.from_env()
        self.screen = pygame.display.set_mode((self.cfg.arena_width, self.cfg.arena_height))
        self.clock = pygame.time.Clock()
        self.frame_clock = FrameClock(self.cfg.max_frame_dt)
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        self.font_medium = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)

        # Collaborators
        self.logger = GameLogger(log_file)
        self.audio = AudioManager(SOUND_PATHS)
        self.store = HighScoreStore(high_score_file)
        self.input = InputState()
        self.session = Session(self.cfg, self.input, self.audio, self.store, self.logger)

        # Presentation
        self.renderer = WorldRenderer(self.cfg)
        self.hud = HUD(self.font_medium)
        self.loading_screen = LoadingScreen(self.font_medium)
        self.start_screen = StartScreen(self.font_big, self.font_small)
        self.pause_screen = PauseScreen(self.font_big, self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)
        self.touch_pad = TouchPad(self.cfg.arena_width, self.cfg.arena_height)

        self.loading_started_at: int | None = None
        self.running = True

    # -------------------------------- Loading ---------------------------------------

    def loading_progress(self, now_ms: int) -> tuple[float, str]:
        if self.loading_started_at is None:
            self.loading_started_at = now_ms
        done = (now_ms - self.loading_started_at) // LOADING_STEP_MS
        step = LOADING_STEPS[min(done, len(LOADING_STEPS) - 1)]
        return min(1.0, done / len(LOADING_STEPS)), step

    def update_loading(self, now_ms: int) -> None:
        progress, _ = self.loading_progress(now_ms)
        if progress >= 1.0:
            self.session.assets_ready()

    # --------------------------------- Input ----------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type in (pygame.WINDOWFOCUSLOST, pygame.WINDOWMINIMIZED):
            # held directions do not survive losing focus
            self.input.clear()
            self.session.visibility_lost()
        elif event.type == pygame.KEYDOWN:
            self.handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.press_touch(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.input.release_touch()
        elif event.type == pygame.FINGERDOWN:
            self.press_touch((int(event.x * self.cfg.arena_width), int(event.y * self.cfg.arena_height)))
        elif event.type == pygame.FINGERUP:
            self.input.release_touch()

    def handle_key(self, key: int) -> None:
        state = self.session.state
        if key == pygame.K_q:
            self.running = False
        elif key == pygame.K_ESCAPE:
            if state is GameState.MENU:
                self.running = False
            else:
                self.session.toggle_pause()
        elif key == pygame.K_p:
            self.session.toggle_pause()
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            if state in (GameState.MENU, GameState.GAME_OVER):
                self.game_over_screen.message = ""
                self.session.start_session()
        elif key == pygame.K_r:
            self.game_over_screen.message = ""
            self.session.restart_session()
        elif key == pygame.K_m:
            self.audio.toggle_mute()
        elif key == pygame.K_d:
            self.session.toggle_debug()
        elif key == pygame.K_s and state is GameState.GAME_OVER:
            self.share_score()

    def press_touch(self, pos: tuple[int, int]) -> None:
        direction = self.touch_pad.hit(pos)
        if direction is not None:
            self.input.press_touch(direction)

    def read_keyboard(self) -> None:
        keys = pygame.key.get_pressed()
        self.input.set_keyboard(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_UP], keys[pygame.K_DOWN])

    def share_score(self) -> None:
        text = share_text(self.session.score)
        if copy_to_clipboard(text):
            self.game_over_screen.message = "Score copied to clipboard!"
        else:
            self.game_over_screen.message = text
            print(text)

    # --------------------------------- Loop -----------------------------------------

    def step(self, now_ms: int) -> None:
        """One frame: loading progress, input, simulation, drawing."""
        dt = self.frame_clock.tick(now_ms)
        if self.session.state is GameState.LOADING:
            self.update_loading(now_ms)
        self.read_keyboard()
        self.session.advance(dt)
        self.draw(now_ms)

    def run(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.step(pygame.time.get_ticks())
            self.clock.tick(self.cfg.fps_target)
        pygame.quit()

    # ------------------------------- Rendering --------------------------------------

    def draw(self, now_ms: int) -> None:
        """
        Compose the frame for the current state. The field keeps drawing while
        paused, frozen, under the pause overlay.
        """
        state = self.session.state
        if state is GameState.LOADING:
            progress, step = self.loading_progress(now_ms)
            self.loading_screen.draw(self.screen, progress, step)
            pygame.display.flip()
            return

        snapshot = self.session.snapshot()
        self.renderer.draw(self.screen, snapshot, self.frame_clock.fps)

        if state is GameState.MENU:
            self.start_screen.draw(self.screen, snapshot.high_score)
        else:
            self.hud.draw(self.screen, snapshot, self.audio.muted)
            if state is GameState.PLAYING:
                self.touch_pad.draw(self.screen, self.input.touch)
            elif state is GameState.PAUSED:
                self.pause_screen.draw(self.screen)
            elif state is GameState.GAME_OVER:
                self.game_over_screen.draw(self.screen, snapshot)

        pygame.display.flip()


def main() -> None:
    Game().run()
