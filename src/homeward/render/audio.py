# src/homeward/render/audio.py
# pygame.mixer backend for the "play_tone" capability.

from __future__ import annotations

import math
from array import array
from typing import Dict

import pygame

from ..engine.feedback import TONES


class MixerTones:
    def __init__(self, sample_rate: int = 22050):
        self.sample_rate = sample_rate
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        if not pygame.mixer.get_init():
            pygame.mixer.init(frequency=sample_rate, size=-16, channels=1)
        # Mixer may have been opened elsewhere with another rate.
        self.sample_rate = pygame.mixer.get_init()[0]
        self.channels = pygame.mixer.get_init()[2]

    def _build(self, kind: str) -> pygame.mixer.Sound:
        tone = TONES[kind]
        n = int(self.sample_rate * tone.duration)
        amp = int(32767 * tone.gain)
        samples = array("h")
        for i in range(n):
            v = int(amp * math.sin(2.0 * math.pi * tone.frequency * i / self.sample_rate))
            samples.extend([v] * self.channels)
        return pygame.mixer.Sound(buffer=samples.tobytes())

    def play_tone(self, kind: str) -> None:
        if kind not in self._sounds:
            self._sounds[kind] = self._build(kind)
        self._sounds[kind].play()
