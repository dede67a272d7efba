from __future__ import annotations

from goldsky.logger import GameLogger


def test_header_and_rows(tmp_path) -> None:
    log_file = tmp_path / "log.md"
    logger = GameLogger(str(log_file))
    logger.log_session_start(120)
    logger.log_pickup((100.4, 200.6), 15, 45)
    logger.log_miss((300.2, 650), 45)
    logger.log_session_end(45, 120, False)

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "# Gold Sky Game Log"
    assert "| Timestamp | Event | Score | Details |" in lines
    assert any("| PICKUP | 45 | +15 at (100, 201) |" in line for line in lines)
    assert any("| MISS | 45 | Dropped at x=300 |" in line for line in lines)
    assert any("High score stays 120" in line for line in lines)


def test_setup_truncates_previous_log(tmp_path) -> None:
    log_file = tmp_path / "log.md"
    GameLogger(str(log_file)).log_warning("stale-run-marker")
    assert "stale-run-marker" in log_file.read_text(encoding="utf-8")

    GameLogger(str(log_file))
    text = log_file.read_text(encoding="utf-8")
    assert "stale-run-marker" not in text
    assert "| WARNING |" not in text
    assert text.startswith("# Gold Sky Game Log")


def test_unwritable_log_does_not_raise(tmp_path, capsys) -> None:
    logger = GameLogger(str(tmp_path))
    logger.log_pause(True, 0, "requested")
    assert "Failed" in capsys.readouterr().out
