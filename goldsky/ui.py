"""HUD, menu screens, on-screen touch pad, and score sharing"""

from __future__ import annotations

import pygame

from goldsky.constants import (
    FONT_NAME, FONT_SIZE_SMALL, HUD_PADDING, LIGHT_TEXT_COLOR, OVERLAY_COLOR,
    SHARE_TEMPLATE, TEXT_COLOR, TOUCH_BUTTON_COLOR, TOUCH_BUTTON_SIZE,
)
from goldsky.session import Snapshot
from goldsky.utils import format_time


def draw_overlay(surf: pygame.Surface) -> None:
    overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    surf.blit(overlay, (0, 0))


def draw_centered_lines(surf: pygame.Surface, font: pygame.font.Font, lines: list[str],
                        start_y: int, color=LIGHT_TEXT_COLOR, spacing: int = 30) -> int:
    """Blit each line centered horizontally; returns the y below the last line."""
    y = start_y
    for line in lines:
        text = font.render(line, True, color)
        surf.blit(text, text.get_rect(center=(surf.get_width() // 2, y)))
        y += spacing
    return y


class HUD:
    """Heads-Up Display: score and high score on the left, time on the right."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, snapshot: Snapshot, muted: bool = False) -> None:
        left_x = right_y = HUD_PADDING
        score_text = self.font.render(f"Score: {snapshot.score}", True, TEXT_COLOR)
        surf.blit(score_text, (left_x, HUD_PADDING))
        best_text = self.small_font.render(f"Best: {snapshot.high_score}", True, TEXT_COLOR)
        surf.blit(best_text, (left_x, HUD_PADDING + score_text.get_height() + 4))

        time_color = (200, 40, 40) if snapshot.time_left <= 10 else TEXT_COLOR
        time_text = self.font.render(format_time(snapshot.time_left), True, time_color)
        right_x = surf.get_width() - time_text.get_width() - HUD_PADDING
        surf.blit(time_text, (right_x, right_y))

        if muted:
            right_y += time_text.get_height() + 4
            muted_text = self.small_font.render("MUTED", True, (200, 80, 80))
            surf.blit(muted_text, (surf.get_width() - muted_text.get_width() - HUD_PADDING, right_y))


class LoadingScreen:
    """Progress bar shown while the loading steps run."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font

    def draw(self, surf: pygame.Surface, progress: float, step: str) -> None:
        surf.fill((25, 40, 70))
        width, height = surf.get_size()
        draw_centered_lines(surf, self.font, ["Loading Gold Sky...", step], height // 2 - 60)

        bar = pygame.Rect(width // 2 - 150, height // 2 + 10, 300, 16)
        pygame.draw.rect(surf, (60, 70, 100), bar, border_radius=8)
        filled = bar.copy()
        filled.width = int(bar.width * max(0.0, min(1.0, progress)))
        if filled.width > 0:
            pygame.draw.rect(surf, (255, 215, 0), filled, border_radius=8)


class StartScreen:
    """Title, best score and controls."""

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font) -> None:
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, high_score: int) -> None:
        draw_overlay(surf)
        height = surf.get_height()
        draw_centered_lines(surf, self.font_big, ["GOLD SKY"], int(height * 0.25), (255, 215, 0))
        instructions = [
            f"High score: {high_score}",
            "",
            "Arrow keys / touch pad - move the basket",
            "Catch the gold before it hits the ground",
            "Bigger pieces are worth more",
            "",
            "SPACE - Start    P / ESC - Pause    M - Mute",
            "D - Debug overlay    Q - Quit",
        ]
        draw_centered_lines(surf, self.font_small, instructions, int(height * 0.4))


class PauseScreen:
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font) -> None:
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface) -> None:
        draw_overlay(surf)
        height = surf.get_height()
        draw_centered_lines(surf, self.font_big, ["PAUSED"], int(height * 0.35), (255, 255, 100))
        draw_centered_lines(surf, self.font_small, ["P / ESC - Resume", "R - Restart"], int(height * 0.5))


class GameOverScreen:
    """Game over screen with final score, high score and restart option."""

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small
        self.message = ""

    def draw(self, surf: pygame.Surface, snapshot: Snapshot) -> None:
        """
        Draw game over screen.
        """
        draw_overlay(surf)
        height = surf.get_height()
        y = draw_centered_lines(surf, self.font_big, ["TIME'S UP!"], max(80, int(height * 0.25)), (255, 120, 100))

        stats = [f"Final Score: {snapshot.score}", f"High Score: {snapshot.high_score}"]
        y = draw_centered_lines(surf, self.font_small, stats, y + 30)
        if snapshot.new_high_score:
            y = draw_centered_lines(surf, self.font_small, ["New high score!"], y, (255, 215, 0))

        y = draw_centered_lines(surf, self.font_small, ["SPACE / R - Play again    S - Share    Q - Quit"],
                                y + 30, (190, 190, 190))
        if self.message:
            draw_centered_lines(surf, self.font_small, [self.message], y, (190, 190, 190))


class TouchPad:
    """
    Four arrow buttons in the bottom-right corner for mouse and touch play.

    Pressing a button holds that direction; releasing anywhere lets go of all
    of them.
    """

    DIRECTIONS = ("left", "right", "up", "down")

    def __init__(self, width: int, height: int, size: int = TOUCH_BUTTON_SIZE) -> None:
        gap = 6
        cx = width - HUD_PADDING - size - size // 2 - gap
        cy = height - HUD_PADDING - size - size // 2 - gap
        half = size // 2
        self.buttons: dict[str, pygame.Rect] = {
            "up": pygame.Rect(cx - half, cy - half - size - gap, size, size),
            "down": pygame.Rect(cx - half, cy + half + gap, size, size),
            "left": pygame.Rect(cx - half - size - gap, cy - half, size, size),
            "right": pygame.Rect(cx + half + gap, cy - half, size, size),
        }

    def hit(self, pos: tuple[int, int]) -> str | None:
        for direction, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return direction
        return None

    def draw(self, surf: pygame.Surface, pressed) -> None:
        for direction, rect in self.buttons.items():
            button = pygame.Surface(rect.size, pygame.SRCALPHA)
            alpha = 180 if getattr(pressed, direction) else TOUCH_BUTTON_COLOR[3]
            pygame.draw.rect(button, (*TOUCH_BUTTON_COLOR[:3], alpha), button.get_rect(), border_radius=10)
            surf.blit(button, rect)
            self.draw_arrow(surf, direction, rect)

    @staticmethod
    def draw_arrow(surf: pygame.Surface, direction: str, rect: pygame.Rect) -> None:
        cx, cy = rect.center
        s = rect.width // 4
        points = {
            "up": [(cx, cy - s), (cx - s, cy + s), (cx + s, cy + s)],
            "down": [(cx, cy + s), (cx - s, cy - s), (cx + s, cy - s)],
            "left": [(cx - s, cy), (cx + s, cy - s), (cx + s, cy + s)],
            "right": [(cx + s, cy), (cx - s, cy - s), (cx - s, cy + s)],
        }[direction]
        pygame.draw.polygon(surf, TEXT_COLOR, points)


def share_text(score: int) -> str:
    return SHARE_TEMPLATE.format(score=score)


def copy_to_clipboard(text: str) -> bool:
    """
    Put ``text`` on the system clipboard. Returns False when the platform
    clipboard is not available; the caller then shows the text instead.
    """
    try:
        if not pygame.scrap.get_init():
            pygame.scrap.init()
        pygame.scrap.put(pygame.SCRAP_TEXT, text.encode("utf-8"))
    except (pygame.error, NotImplementedError) as e:
        print(f"Clipboard not available: {e}")
        return False
    return True
