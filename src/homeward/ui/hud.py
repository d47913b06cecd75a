from typing import List, Optional, Tuple

INSTRUCTIONS = (
    "Help the star find its way home! "
    "Use the arrow keys or W, A, S, D to move. Press R to start over."
)

def status_line(level: int, moves: int, position: Tuple[int, int]) -> str:
    # Positions are announced 1-based, like the speech messages.
    x, y = position
    return f"Level {level}   Moves: {moves}   Position {x + 1}, {y + 1}"

def win_banner(moves: int) -> str:
    return f"Congratulations! You found your way home in {moves} moves!"

class Subtitles:
    """
    Holds the most recent spoken line for on-screen display.
    `ttl_ticks` frames after the last speak() the line disappears.
    """
    def __init__(self, ttl_ticks: int = 180, history: int = 20):
        self.ttl_ticks = ttl_ticks
        self.history_size = history
        self.text: Optional[str] = None
        self.history: List[str] = []
        self._ticks_left = 0

    def speak(self, text: str) -> None:
        self.text = text
        self._ticks_left = self.ttl_ticks
        self.history.append(text)
        del self.history[:-self.history_size]

    def tick(self) -> None:
        if self._ticks_left > 0:
            self._ticks_left -= 1
            if self._ticks_left == 0:
                self.text = None
