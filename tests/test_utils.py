from __future__ import annotations

import pytest

from goldsky.models import Circle, DirectionalIntent, Rect
from goldsky.utils import circle_intersects_rect, clamp, format_time, random_int, random_range


class FixedRandom:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def test_random_range_scales_unit_draw() -> None:
    assert random_range(10, 20, FixedRandom(0.0)) == 10
    assert random_range(10, 20, FixedRandom(0.5)) == pytest.approx(15)


def test_random_int_includes_both_ends() -> None:
    assert random_int(1, 3, FixedRandom(0.0)) == 1
    assert random_int(1, 3, FixedRandom(0.999)) == 3


def test_clamp() -> None:
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(4, 0, 10) == 4


def test_circle_inside_rect_hits() -> None:
    assert circle_intersects_rect(Circle(5, 5, 1), Rect(0, 0, 10, 10))


def test_circle_far_away_misses() -> None:
    rect = Rect(0, 0, 10, 10)
    assert not circle_intersects_rect(Circle(20, 5, 1), rect)
    assert not circle_intersects_rect(Circle(5, -20, 1), rect)


def test_touching_edge_counts_as_hit() -> None:
    assert circle_intersects_rect(Circle(11, 5, 1), Rect(0, 0, 10, 10))
    assert not circle_intersects_rect(Circle(11.5, 5, 1), Rect(0, 0, 10, 10))


def test_corner_uses_true_distance() -> None:
    rect = Rect(0, 0, 10, 10)
    # center (13, 13) is 3,3 away from the corner: distance ~4.24
    assert not circle_intersects_rect(Circle(13, 13, 4), rect)
    assert circle_intersects_rect(Circle(13, 13, 5), rect)


def test_circle_tangent_to_corner_hits() -> None:
    rect = Rect(0, 0, 10, 10)
    # 3-4-5 triangle from the (10, 10) corner
    assert circle_intersects_rect(Circle(13, 14, 5), rect)
    assert not circle_intersects_rect(Circle(13, 14, 4.99), rect)


@pytest.mark.parametrize(
    "circle",
    [
        Circle(5, 5, 1),
        Circle(11, 5, 1),
        Circle(11.5, 5, 1),
        Circle(13, 14, 5),
        Circle(13, 14, 4.99),
        Circle(-2, 3, 2.5),
        Circle(20, 30, 6),
        Circle(14, -3, 5.5),
    ],
)
def test_result_is_symmetric_about_rect_center(circle: Circle) -> None:
    rect = Rect(2, 4, 8, 6)
    cx, cy = rect.x + rect.width / 2, rect.y + rect.height / 2
    expected = circle_intersects_rect(circle, rect)
    for x, y in [(2 * cx - circle.x, circle.y), (circle.x, 2 * cy - circle.y), (2 * cx - circle.x, 2 * cy - circle.y)]:
        assert circle_intersects_rect(Circle(x, y, circle.radius), rect) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0:00"), (5, "0:05"), (9.99, "0:09"), (59.9, "0:59"), (60, "1:00"), (65, "1:05"), (125.5, "2:05")],
)
def test_format_time(seconds: float, expected: str) -> None:
    assert format_time(seconds) == expected


def test_intent_velocity_cancels_opposites() -> None:
    assert DirectionalIntent(left=True).velocity(300) == (-300, 0)
    assert DirectionalIntent(left=True, right=True, down=True).velocity(300) == (0, 300)
    assert DirectionalIntent().idle
