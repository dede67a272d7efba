# Sound effects

from __future__ import annotations

import os

import pygame


class AudioManager:
    """
    Named sound effects played through ``pygame.mixer``.

    The session only ever calls ``play("pickup" | "miss" | "start")``. When the
    mixer cannot start (no audio device) or a file is missing, the affected
    sounds are simply skipped.
    """

    def __init__(self, sound_paths: dict[str, str], volume: float = 0.7):
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        self.muted = False
        self.volume = max(0.0, min(1.0, volume))
        self.supported = True

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            print(f"Audio not supported, continuing without sound: {e}")
            self.supported = False
            return

        self.load_sounds(sound_paths)

    def load_sounds(self, sound_paths: dict[str, str]) -> None:
        for name, path in sound_paths.items():
            if not os.path.exists(path):
                print(f"Sound effect file not found: {path}")
                continue
            try:
                sound = pygame.mixer.Sound(path)
            except pygame.error as e:
                print(f"Failed to load sound effect {name}: {e}")
                continue
            sound.set_volume(self.volume)
            self.sounds[name] = sound

    def play(self, name: str) -> None:
        if self.muted or not self.supported or name not in self.sounds:
            return
        try:
            self.sounds[name].play()
        except pygame.error as e:
            print(f"Could not play sound {name}: {e}")

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def set_volume(self, volume: float) -> None:
        """Set sound effects volume (0.0 to 1.0)"""
        self.volume = max(0.0, min(1.0, volume))  # Clamp between 0 and 1
        for sound in self.sounds.values():
            sound.set_volume(self.volume)


class NullAudio:
    """Silent stand-in for headless runs."""

    def __init__(self) -> None:
        self.muted = False

    def play(self, name: str) -> None:
        pass

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def set_volume(self, volume: float) -> None:
        pass
