from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


def make_blip(
    freq: int = 660, duration: float = 0.08, volume: float = 0.3, sample_rate: int = SAMPLE_RATE
) -> np.ndarray:
    """Square-wave blip as signed 16-bit mono samples at `sample_rate`."""
    t = np.arange(int(sample_rate * duration)) / sample_rate
    wave = np.sign(np.sin(2 * np.pi * freq * t))
    # Short linear fade-out avoids a click at the end.
    fade = np.linspace(1.0, 0.0, wave.size)
    return (wave * fade * volume * 32767).astype(np.int16)


class EatSound:
    """Plays a short clip whenever the snake eats.

    Any failure to initialise the mixer, load the clip or play it is logged
    and otherwise ignored, so a muted or missing output device never affects
    the game.
    """

    def __init__(self, sound=None, enabled: bool = True) -> None:
        self.sound = sound
        self.enabled = enabled

    @classmethod
    def load(cls, path: Optional[str] = None, enabled: bool = True) -> "EatSound":
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            if path:
                sound = pygame.mixer.Sound(path)
            else:
                sound = pygame.mixer.Sound(buffer=_blip_for_mixer().tobytes())
        except (pygame.error, OSError) as exc:
            logger.warning("Sound unavailable, continuing without audio: %s", exc)
            sound = None
        return cls(sound, enabled=enabled)

    @property
    def available(self) -> bool:
        return self.sound is not None

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def play(self) -> None:
        if not self.enabled or self.sound is None:
            return
        try:
            # Restart from the beginning if the previous blip is still playing.
            self.sound.stop()
            self.sound.play()
        except pygame.error as exc:
            logger.warning("Could not play eat sound: %s", exc)


def _blip_for_mixer() -> np.ndarray:
    # The mixer may already be running (pygame.init starts it) at another rate or in stereo.
    frequency, _, channels = pygame.mixer.get_init()
    samples = make_blip(sample_rate=frequency)
    if channels > 1:
        samples = np.repeat(samples[:, None], channels, axis=1)
    return np.ascontiguousarray(samples)
