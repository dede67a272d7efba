"""Lightweight data models used across the game."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Circle:
    """
    Collision circle for a gold piece.

    Attributes
    ----------
    x, y : float
        Center of the circle in arena coordinates.
    radius : float
        Hit radius (already shrunk by the collision padding).
    """
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle anchored at its top-left corner.

    Attributes
    ----------
    x, y : float
        Top-left corner in arena coordinates.
    width, height : float
        Extent of the rectangle.
    """
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class DirectionalIntent:
    """Four directional switches reported by one input device."""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    def velocity(self, speed: float) -> tuple[float, float]:
        """Each pressed direction adds ``speed`` on its axis; opposites cancel."""
        vx = vy = 0.0
        if self.left:
            vx -= speed
        if self.right:
            vx += speed
        if self.up:
            vy -= speed
        if self.down:
            vy += speed
        return vx, vy

    @property
    def idle(self) -> bool:
        return not (self.left or self.right or self.up or self.down)


NO_INTENT = DirectionalIntent()
