"""
PyGame sound effects for Pongish, synthesized at startup
"""

import logging

import numpy as np
import pygame

from pongish.core.entities import Sound

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# frequency (Hz), duration (s), volume
TONES: dict[Sound, tuple[float, float, float]] = {
    Sound.TABLE_HIT: (440.0, 0.05, 0.35),
    Sound.BAT_HIT: (660.0, 0.07, 0.5),
}


def make_tone(
    frequency: float,
    duration: float,
    volume: float,
    sample_rate: int = SAMPLE_RATE,
    channels: int = 2,
) -> np.ndarray:
    """Builds a 16-bit click: a sine wave with a linear decay"""
    n_samples = int(sample_rate * duration)
    t = np.linspace(0, duration, n_samples, endpoint=False, dtype=np.float32)
    envelope = np.linspace(1.0, 0.0, n_samples, dtype=np.float32)
    audio = (np.sin(2 * np.pi * frequency * t) * envelope * volume * 32767).astype(np.int16)
    if channels == 1:
        return audio
    return np.ascontiguousarray(np.column_stack([audio] * channels))


class PygameSoundPlayer:
    """Plays the game's sound effects through pygame.mixer"""

    def __init__(self) -> None:
        self.sounds: dict[Sound, pygame.mixer.Sound] = {}
        self.enabled = True

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
        except pygame.error as e:
            logger.warning("Audio unavailable, playing without sound: %s", e)
            self.enabled = False
            return

        sample_rate, _, channels = pygame.mixer.get_init()
        for sound, (frequency, duration, volume) in TONES.items():
            samples = make_tone(frequency, duration, volume, sample_rate, channels)
            self.sounds[sound] = pygame.sndarray.make_sound(samples)

    def play(self, sound: Sound) -> None:
        if self.enabled:
            self.sounds[sound].play()
