"""Frame timing: turns frame timestamps into bounded simulation steps."""

from __future__ import annotations


class FrameClock:
    """
    Converts successive frame timestamps (milliseconds) into a delta time in
    seconds and keeps a once-per-second FPS figure for the debug overlay.

    The delta is capped at ``max_dt``: after a stall the simulation moves one
    bounded step, not the whole gap.
    """

    def __init__(self, max_dt: float) -> None:
        self.max_dt = max_dt
        self.last_frame_ms: float | None = None
        self.fps = 0
        self.frame_count = 0
        self.fps_timer = 0.0
        self.last_raw_dt = 0.0

    def tick(self, now_ms: float) -> float:
        if self.last_frame_ms is None:
            self.last_frame_ms = now_ms
        raw_dt = max(0.0, (now_ms - self.last_frame_ms) / 1000.0)
        self.last_frame_ms = now_ms
        self.last_raw_dt = raw_dt

        self.frame_count += 1
        self.fps_timer += raw_dt
        if self.fps_timer >= 1:
            self.fps = round(self.frame_count / self.fps_timer)
            self.frame_count = 0
            self.fps_timer = 0.0

        return min(raw_dt, self.max_dt)

    @property
    def clamped(self) -> bool:
        """True when the last tick had to be shortened."""
        return self.last_raw_dt > self.max_dt

    def reset(self) -> None:
        self.last_frame_ms = None
