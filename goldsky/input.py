"""Directional input collected from the keyboard and the on-screen touch pad."""

from __future__ import annotations

from goldsky.models import NO_INTENT, DirectionalIntent


class InputState:
    """
    Latest directional intent of every input device.

    The session reads ``velocity`` once per frame and never learns which
    device a direction came from. Devices add up: holding left on the keyboard
    and on the touch pad at once moves twice as fast, while left plus right
    cancels out.
    """

    def __init__(self) -> None:
        self.keyboard: DirectionalIntent = NO_INTENT
        self.touch: DirectionalIntent = NO_INTENT

    def set_keyboard(self, left: bool, right: bool, up: bool, down: bool) -> None:
        self.keyboard = DirectionalIntent(left, right, up, down)

    def press_touch(self, direction: str) -> None:
        """Hold one touch pad direction ('left', 'right', 'up' or 'down')."""
        if direction not in ("left", "right", "up", "down"):
            raise ValueError(f"unknown touch direction: {direction!r}")
        current = self.touch
        self.touch = DirectionalIntent(
            left=current.left or direction == "left",
            right=current.right or direction == "right",
            up=current.up or direction == "up",
            down=current.down or direction == "down",
        )

    def release_touch(self) -> None:
        """Lifting the finger releases every touch direction."""
        self.touch = NO_INTENT

    def clear(self) -> None:
        self.keyboard = NO_INTENT
        self.touch = NO_INTENT

    def velocity(self, speed: float) -> tuple[float, float]:
        kx, ky = self.keyboard.velocity(speed)
        tx, ty = self.touch.velocity(speed)
        return kx + tx, ky + ty
