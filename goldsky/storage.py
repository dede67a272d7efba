"""High score persistence."""

from __future__ import annotations

import json
from pathlib import Path


class HighScoreStore:
    """
    Keeps the best score in a small JSON file: ``{"high_score": 123}``.

    A missing, unreadable or malformed file reads as 0. Failing to write is
    reported through ``last_error`` and never raised.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.last_error: str | None = None

    def load_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self.last_error = f"Failed to read high score: {e}"
            print(self.last_error)
            return 0
        if not isinstance(data, dict):
            return 0
        try:
            return max(0, int(data.get("high_score", 0)))
        except (TypeError, ValueError):
            return 0

    def save_high_score(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"high_score": int(score)}, f, indent=2)
            self.last_error = None
        except OSError as e:
            self.last_error = f"Failed to save high score: {e}"
            print(self.last_error)


class MemoryHighScoreStore:
    """In-memory store for tests and for runs that should not touch disk."""

    def __init__(self, high_score: int = 0) -> None:
        self.high_score = high_score
        self.saves: list[int] = []

    def load_high_score(self) -> int:
        return self.high_score

    def save_high_score(self, score: int) -> None:
        self.high_score = score
        self.saves.append(score)
