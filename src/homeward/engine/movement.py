# src/homeward/engine/movement.py
# Pure movement check plus the key → direction table used by front ends.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from ..grid import Grid

XY = Tuple[int, int]


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> XY:
        return _DELTAS[self]


_DELTAS: Dict[Direction, XY] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    position: XY
    reached_goal: bool = False


def as_direction(value: Union[Direction, str]) -> Direction:
    """Accept a Direction or its string value; anything else is a caller bug."""
    if isinstance(value, Direction):
        return value
    try:
        return Direction(value)
    except (ValueError, TypeError):
        raise ValueError(f"unknown direction: {value!r}") from None


def try_move(grid: Grid, position: XY, direction: Union[Direction, str]) -> MoveResult:
    """
    Step one cell from `position`. Out-of-bounds and WALL targets are rejected
    and the position is returned unchanged. No side effects.
    """
    dx, dy = as_direction(direction).delta
    x, y = position
    nx, ny = x + dx, y + dy
    if not grid.is_open(nx, ny):
        return MoveResult(accepted=False, position=position)
    return MoveResult(accepted=True, position=(nx, ny), reached_goal=(nx, ny) == grid.goal)


# Browser-style key names plus WASD, either case.
KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowUp": Direction.UP, "w": Direction.UP, "W": Direction.UP,
    "ArrowDown": Direction.DOWN, "s": Direction.DOWN, "S": Direction.DOWN,
    "ArrowLeft": Direction.LEFT, "a": Direction.LEFT, "A": Direction.LEFT,
    "ArrowRight": Direction.RIGHT, "d": Direction.RIGHT, "D": Direction.RIGHT,
}
RESET_KEYS = ("r", "R")


def direction_for_key(key: str) -> Optional[Direction]:
    return KEY_BINDINGS.get(key)


def is_reset_key(key: str) -> bool:
    return key in RESET_KEYS
