# src/homeward/mapgen/frame.py
from typing import List

from ..tiles import PATH, WALL


def ensure_goal_open(maze: List[List[int]]) -> None:
    # Last interior cell is the goal; the carve reaches it, this just pins it.
    maze[-1][-1] = PATH


def frame_with_walls(maze: List[List[int]]) -> List[List[int]]:
    """Wrap an inner×inner maze in a one-cell WALL rim, returning a new matrix."""
    full = len(maze) + 2
    return [
        [
            WALL if (x == 0 or y == 0 or x == full - 1 or y == full - 1) else maze[y - 1][x - 1]
            for x in range(full)
        ]
        for y in range(full)
    ]
