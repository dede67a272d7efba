from __future__ import annotations

import pygame

from goldsky.audio import AudioManager, NullAudio


def test_null_audio_keeps_no_history() -> None:
    audio = NullAudio()
    for _ in range(1000):
        audio.play("pickup")
    assert not hasattr(audio, "played")
    assert audio.toggle_mute()
    assert not audio.toggle_mute()


def test_missing_files_are_skipped(tmp_path) -> None:
    audio = AudioManager({"pickup": str(tmp_path / "nope.wav")})
    try:
        assert audio.sounds == {}
        audio.play("pickup")
        audio.play("unknown")
        assert audio.toggle_mute()
        assert not audio.toggle_mute()
        audio.set_volume(2.0)
        assert audio.volume == 1.0
    finally:
        pygame.mixer.quit()
