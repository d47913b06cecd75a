# src/homeward/engine/feedback.py
# Speech and tone capabilities injected into the session.

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Protocol


@dataclass(frozen=True)
class Tone:
    frequency: float   # Hz
    gain: float        # 0..1
    duration: float    # seconds


TONES: Dict[str, Tone] = {
    "move": Tone(440.0, 0.1, 0.1),   # A note
    "wall": Tone(200.0, 0.1, 0.1),   # low, blocked
    "win": Tone(660.0, 0.2, 0.1),    # high, celebratory
}


class Feedback(Protocol):
    def speak(self, text: str) -> None: ...
    def play_tone(self, kind: str) -> None: ...


class SilentFeedback:
    def speak(self, text: str) -> None:
        pass

    def play_tone(self, kind: str) -> None:
        pass


class CallbackFeedback:
    """Adapt two plain callables (e.g. a subtitle sink and a mixer) to Feedback."""

    def __init__(self, speak: Callable[[str], None], play_tone: Callable[[str], None]):
        self._speak = speak
        self._play_tone = play_tone

    def speak(self, text: str) -> None:
        self._speak(text)

    def play_tone(self, kind: str) -> None:
        if kind not in TONES:
            raise ValueError(f"unknown tone: {kind!r}")
        self._play_tone(kind)
