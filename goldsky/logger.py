"""Markdown logger for gameplay events (pickups, misses, session results)."""

import datetime


class GameLogger:
    """Appends one markdown table row per gameplay event to ``log_file``."""

    def __init__(self, log_file: str):
        """
        Start a fresh log, overwriting the previous run.

        Parameters
        ----------
        log_file : str
            Path of the markdown file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Gold Sky Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Event | Score | Details |\n")
                f.write("|-----------|-------|-------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, score: int | str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {score} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_session_start(self, high_score: int) -> None:
        self._write_row("START", 0, f"High score to beat: {high_score}")

    def log_pickup(self, pos: tuple[float, float], points: int, score: int) -> None:
        """
        Log a caught gold piece.

        Parameters
        ----------
        pos : tuple[float, float]
            Where the piece was caught (x, y)
        points : int
            Points awarded for this piece
        score : int
            Score after the pickup
        """
        self._write_row("PICKUP", score, f"+{points} at ({pos[0]:.0f}, {pos[1]:.0f})")

    def log_miss(self, pos: tuple[float, float], score: int) -> None:
        self._write_row("MISS", score, f"Dropped at x={pos[0]:.0f}")

    def log_pause(self, paused: bool, score: int, reason: str = "") -> None:
        event = "PAUSE" if paused else "RESUME"
        self._write_row(event, score, reason)

    def log_session_end(self, score: int, high_score: int, new_high_score: bool) -> None:
        """
        Log the end of a session.

        Parameters
        ----------
        score : int
            Final score
        high_score : int
            High score after this session
        new_high_score : bool
            Whether this session set the high score
        """
        details = "New high score!" if new_high_score else f"High score stays {high_score}"
        self._write_row("GAME OVER", score, details)

    def log_warning(self, message: str) -> None:
        self._write_row("WARNING", "-", message)
