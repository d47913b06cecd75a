# src/homeward/engine/state.py
# GameSession: one active maze, one player position, move counter and level progression.

from __future__ import annotations

import logging
import random
from typing import Optional

from ..config import SETTINGS, AccessibilitySettings
from ..grid import Grid
from ..mapgen.generator import generate_maze
from ..mapgen.size import normalize_level
from .feedback import Feedback, SilentFeedback
from .movement import MoveResult, as_direction, try_move

log = logging.getLogger(__name__)

WIN_MESSAGE = "Congratulations! You found the way home! You won the game!"
RESET_MESSAGE = "Game reset. You are back at the starting position."


class GameSession:
    def __init__(
        self,
        level: int = 1,
        *,
        rng: Optional[random.Random] = None,
        settings: AccessibilitySettings = SETTINGS,
        feedback: Optional[Feedback] = None,
        grid: Optional[Grid] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.settings = settings
        self.feedback = feedback if feedback is not None else SilentFeedback()
        self.level = normalize_level(level)

        # A fixed grid (e.g. the classic layout) skips generation for the first level.
        self.grid = grid if grid is not None else generate_maze(self.level, self.rng)
        self.position = self.grid.start
        self.moves = 0
        self.won = False

    # ------------- feedback gates -------------
    def _tone(self, kind: str) -> None:
        if self.settings.audio_enabled:
            self.feedback.play_tone(kind)

    def _say(self, text: str) -> None:
        if self.settings.screen_reader or self.settings.subtitles:
            self.feedback.speak(text)

    # ------------- actions -------------
    def move(self, direction) -> MoveResult:
        direction = as_direction(direction)
        if self.won:
            return MoveResult(accepted=False, position=self.position)

        result = try_move(self.grid, self.position, direction)
        if not result.accepted:
            self._tone("wall")
            self._say(f"Cannot move {direction.value}. There is a wall.")
            return result

        self.position = result.position
        self.moves += 1
        self._tone("move")
        if result.reached_goal:
            self.won = True
            self._tone("win")
            self._say(WIN_MESSAGE)
            log.info("Level %d solved in %d moves", self.level, self.moves)
        else:
            x, y = self.position
            self._say(f"Moved {direction.value}. Position {x + 1}, {y + 1}.")
        return result

    def reset(self) -> None:
        self.position = self.grid.start
        self.moves = 0
        self.won = False
        self._say(RESET_MESSAGE)

    def next_level(self) -> Grid:
        """Replace the maze with a fresh one for the following level."""
        self.level += 1
        self.grid = generate_maze(self.level, self.rng)
        self.position = self.grid.start
        self.moves = 0
        self.won = False
        log.debug("Advanced to level %d (%dx%d)", self.level, self.grid.width, self.grid.height)
        self._say(f"Level {self.level}. Find the way home.")
        return self.grid
