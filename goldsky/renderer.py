"""Draws a session snapshot: sky, clouds, gold, basket, particles, debug info."""

from __future__ import annotations

import math

import pygame

from goldsky.basket import Basket
from goldsky.config import GameConfig
from goldsky.constants import (
    BASKET_BODY, BASKET_RIM, BASKET_WEAVE, CLOUD_COLOR, CLOUDS, DEBUG_COLOR,
    FLASH_COLOR, FONT_NAME, FONT_SIZE_SMALL, GOLD_DARK, GOLD_LIGHT, GOLD_MID,
    LIGHT_TEXT_COLOR, SKY_BOTTOM, SKY_MID, SKY_TOP,
)
from goldsky.gold import Gold
from goldsky.particle import Particle
from goldsky.session import Snapshot


def lerp_color(a: tuple[int, ...], b: tuple[int, ...], t: float) -> tuple[int, ...]:
    t = max(0.0, min(1.0, t))
    return tuple(int(ca + (cb - ca) * t) for ca, cb in zip(a, b))


class WorldRenderer:
    """
    Renders the play field. Holds the pre-drawn sky so each frame only blits
    it and then draws the moving entities on top.
    """

    def __init__(self, cfg: GameConfig) -> None:
        self.cfg = cfg
        self.background: pygame.Surface | None = None
        self.debug_font: pygame.font.Font | None = None

    # ------------------------------- Background -------------------------------------

    def build_background(self) -> pygame.Surface:
        """Vertical sky gradient (top -> 70% -> bottom) with a few flat clouds."""
        width, height = self.cfg.arena_width, self.cfg.arena_height
        surf = pygame.Surface((width, height))
        split = int(height * 0.7)
        for y in range(height):
            if y < split:
                color = lerp_color(SKY_TOP, SKY_MID, y / max(1, split))
            else:
                color = lerp_color(SKY_MID, SKY_BOTTOM, (y - split) / max(1, height - split))
            pygame.draw.line(surf, color, (0, y), (width, y))

        clouds = pygame.Surface((width, height), pygame.SRCALPHA)
        for x, y, size in CLOUDS:
            pygame.draw.circle(clouds, CLOUD_COLOR, (x, y), size)
            pygame.draw.circle(clouds, CLOUD_COLOR, (int(x + size * 0.6), y), int(size * 0.8))
            pygame.draw.circle(clouds, CLOUD_COLOR, (int(x + size * 1.2), y), int(size * 0.6))
        surf.blit(clouds, (0, 0))
        return surf

    def draw_background(self, surf: pygame.Surface) -> None:
        if self.background is None:
            self.background = self.build_background()
        surf.blit(self.background, (0, 0))

    # -------------------------------- Entities --------------------------------------

    def draw_gold(self, surf: pygame.Surface, gold: Gold, debug: bool = False) -> None:
        cx, cy = int(gold.x), int(gold.y)
        r = max(1, int(gold.radius))
        shimmer = (math.sin(gold.shimmer) + 1) * 0.1

        # Shadow
        shadow = pygame.Surface((r * 2 + 4, r * 2 + 4), pygame.SRCALPHA)
        pygame.draw.circle(shadow, (*GOLD_DARK, 77), (r + 2, r + 2), r)
        surf.blit(shadow, (cx - r, cy - r))

        # Radial gradient as concentric rings, dark rim to bright core
        rings = 6
        for i in range(rings):
            t = i / (rings - 1)
            ring_r = max(1, int(r * (1 - t * 0.85)))
            base = lerp_color(GOLD_DARK, GOLD_MID, t * 1.4) if t < 0.7 else lerp_color(GOLD_MID, GOLD_LIGHT, (t - 0.7) / 0.3)
            color = lerp_color(base, (255, 255, 255), shimmer)
            pygame.draw.circle(surf, color, (cx, cy), ring_r)

        # Highlight spins with the piece
        hx = -0.3 * r * math.cos(gold.rotation) + 0.3 * r * math.sin(gold.rotation)
        hy = -0.3 * r * math.sin(gold.rotation) - 0.3 * r * math.cos(gold.rotation)
        hr = max(1, int(r * 0.4))
        highlight = pygame.Surface((hr * 2, hr * 2), pygame.SRCALPHA)
        pygame.draw.circle(highlight, (255, 255, 255, 102), (hr, hr), hr)
        surf.blit(highlight, (int(cx + hx) - hr, int(cy + hy) - hr))

        if debug:
            pygame.draw.circle(surf, DEBUG_COLOR, (cx, cy), r, 2)

    def draw_basket(self, surf: pygame.Surface, basket: Basket, debug: bool = False) -> None:
        rect = pygame.Rect(int(basket.x), int(basket.y), basket.width, basket.height)

        if basket.is_flashing:
            strength = basket.flash_timer / self.cfg.pickup_flash_duration
            glow = pygame.Surface((rect.width + 24, rect.height + 24), pygame.SRCALPHA)
            pygame.draw.rect(glow, (*FLASH_COLOR, int(160 * strength)), glow.get_rect(), border_radius=14)
            surf.blit(glow, (rect.x - 12, rect.y - 12))

        pygame.draw.rect(surf, BASKET_BODY, rect, border_radius=6)
        for i in range(0, basket.width, 8):
            pygame.draw.line(surf, BASKET_WEAVE, (rect.x + i, rect.y), (rect.x + i, rect.bottom - 1))
        for j in range(0, basket.height, 6):
            pygame.draw.line(surf, BASKET_WEAVE, (rect.x, rect.y + j), (rect.right - 1, rect.y + j))

        rim = pygame.Rect(rect.x - 3, rect.y - 4, rect.width + 6, 8)
        pygame.draw.rect(surf, BASKET_RIM, rim, border_radius=4)

        handle = pygame.Rect(rect.x + rect.width // 4, rect.y - rect.height // 2, rect.width // 2, rect.height)
        pygame.draw.arc(surf, BASKET_RIM, handle, 0, math.pi, 3)

        if debug:
            pygame.draw.rect(surf, DEBUG_COLOR, rect, 2)

    def draw_particle(self, surf: pygame.Surface, particle: Particle) -> None:
        alpha = particle.alpha
        size = int(particle.size * alpha)
        if size <= 0:
            return
        spark = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
        pygame.draw.circle(spark, (*particle.color, int(255 * alpha)), (size, size), size)
        surf.blit(spark, (int(particle.x) - size, int(particle.y) - size))

    # --------------------------------- Debug ----------------------------------------

    def draw_debug_info(self, surf: pygame.Surface, snapshot: Snapshot, fps: int) -> None:
        if self.debug_font is None:
            self.debug_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        lines = [
            f"FPS: {fps}",
            f"Active Gold: {len(snapshot.items)}",
            f"Pooled Gold: {snapshot.pooled_count}",
            f"Particles: {len(snapshot.particles)}",
            f"Spawn Rate: {snapshot.spawn_rate:.1f}/sec",
            f"Score: {snapshot.score}",
            f"Time: {snapshot.time_left:.1f}s",
        ]
        line_h = self.debug_font.get_linesize()
        panel = pygame.Surface((190, line_h * len(lines) + 12), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 160))
        for i, line in enumerate(lines):
            text = self.debug_font.render(line, True, LIGHT_TEXT_COLOR)
            panel.blit(text, (6, 6 + i * line_h))
        surf.blit(panel, (10, surf.get_height() - panel.get_height() - 10))

    # ---------------------------------- Frame ---------------------------------------

    def draw(self, surf: pygame.Surface, snapshot: Snapshot, fps: int = 0) -> None:
        """
        Compose the play field: sky -> gold -> basket -> particles -> debug.
        """
        self.draw_background(surf)
        for gold in snapshot.items:
            self.draw_gold(surf, gold, snapshot.debug)
        if snapshot.basket is not None:
            self.draw_basket(surf, snapshot.basket, snapshot.debug)
        for particle in snapshot.particles:
            self.draw_particle(surf, particle)
        if snapshot.debug:
            self.draw_debug_info(surf, snapshot, fps)
