"""Math helpers shared by the entities and the session."""

from __future__ import annotations

import math
import random

from goldsky.models import Circle, Rect


def random_range(lo: float, hi: float, rng=random) -> float:
    """Uniform float in [lo, hi)."""
    return rng.random() * (hi - lo) + lo


def random_int(lo: int, hi: int, rng=random) -> int:
    """Uniform integer in [lo, hi], both ends included."""
    return math.floor(rng.random() * (hi - lo + 1)) + lo


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def circle_intersects_rect(circle: Circle, rect: Rect) -> bool:
    """
    Exact circle vs. axis-aligned rectangle test.

    Works on the distance from the circle center to the rectangle center,
    folded into one quadrant. The checks run in a fixed order:

    1. too far on either axis -> no hit
    2. center inside the rectangle's cross (edge bands) -> hit
    3. otherwise compare the distance to the nearest corner with the radius
    """
    half_w = rect.width / 2
    half_h = rect.height / 2
    dist_x = abs(circle.x - rect.x - half_w)
    dist_y = abs(circle.y - rect.y - half_h)

    if dist_x > half_w + circle.radius:
        return False
    if dist_y > half_h + circle.radius:
        return False

    if dist_x <= half_w:
        return True
    if dist_y <= half_h:
        return True

    dx = dist_x - half_w
    dy = dist_y - half_h
    return dx * dx + dy * dy <= circle.radius * circle.radius


def format_time(seconds: float) -> str:
    """Render seconds as ``M:SS``; fractional seconds are truncated."""
    mins = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{mins}:{secs:02d}"
