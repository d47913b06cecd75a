# src/homeward/mapgen/loops.py
# Punch extra openings into a carved maze so it is not a pure tree.

import random
from typing import List

from ..rng import rand_below, shuffle_in_place
from ..tiles import PATH, WALL

LOOP_DIRS = [(0, -1), (1, 0), (0, 1), (-1, 0)]


def add_loops(maze: List[List[int]], count: int, rng: random.Random, attempt_factor: int = 10) -> int:
    """
    Open up to `count` walls that separate two PATH nodes, in place.

    Each attempt samples a lattice node (even interior coordinates) and tries
    the four unit directions in shuffled order; the first direction whose
    node two cells away is in bounds and PATH, with a WALL midpoint, gets its
    midpoint opened. At most count * attempt_factor attempts are made, so
    dense or tiny mazes stop early. Returns the number of openings.
    """
    if count < 0:
        raise ValueError(f"loop count must be >= 0, got {count}")

    inner = len(maze)
    nodes = (inner + 1) // 2
    added = 0
    attempts = 0
    while added < count and attempts < count * attempt_factor:
        x = rand_below(rng, nodes) * 2
        y = rand_below(rng, nodes) * 2

        for dx, dy in shuffle_in_place(rng, list(LOOP_DIRS)):
            nx, ny = x + 2 * dx, y + 2 * dy
            mx, my = x + dx, y + dy
            if (
                0 <= nx < inner and 0 <= ny < inner
                and maze[y][x] == PATH
                and maze[ny][nx] == PATH
                and maze[my][mx] == WALL
            ):
                maze[my][mx] = PATH
                added += 1
                break

        attempts += 1
    return added
