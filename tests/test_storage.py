from __future__ import annotations

import json

from goldsky.storage import HighScoreStore, MemoryHighScoreStore


def test_missing_file_reads_zero(tmp_path) -> None:
    assert HighScoreStore(tmp_path / "none.json").load_high_score() == 0


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "nested" / "highscore.json"
    store = HighScoreStore(path)
    store.save_high_score(321)
    assert json.loads(path.read_text(encoding="utf-8")) == {"high_score": 321}
    assert HighScoreStore(path).load_high_score() == 321


def test_corrupt_file_reads_zero(tmp_path) -> None:
    path = tmp_path / "highscore.json"
    path.write_text("{not json", encoding="utf-8")
    store = HighScoreStore(path)
    assert store.load_high_score() == 0
    assert store.last_error is not None


def test_unexpected_shapes_read_zero(tmp_path) -> None:
    path = tmp_path / "highscore.json"
    for content in ("[1, 2]", '{"high_score": "abc"}', '{"high_score": -4}', "{}"):
        path.write_text(content, encoding="utf-8")
        assert HighScoreStore(path).load_high_score() == 0


def test_write_failure_is_reported_not_raised(tmp_path) -> None:
    store = HighScoreStore(tmp_path)
    store.save_high_score(10)
    assert store.last_error is not None


def test_memory_store_records_saves() -> None:
    store = MemoryHighScoreStore(5)
    assert store.load_high_score() == 5
    store.save_high_score(9)
    assert store.load_high_score() == 9
    assert store.saves == [9]
