# src/homeward/mapgen/carve.py
# Randomized depth-first carve of a perfect maze on the even-coordinate lattice.
# Interior coordinates are 0-based, grid is [row][col].

import random
from typing import List

from ..rng import shuffle_in_place
from ..tiles import PATH, WALL

# Node-to-node steps: up, right, down, left
CARVE_DIRS = [(0, -2), (2, 0), (0, 2), (-2, 0)]


def empty_wall_grid(inner: int) -> List[List[int]]:
    return [[WALL for _ in range(inner)] for _ in range(inner)]


def carve_spanning_tree(inner: int, rng: random.Random) -> List[List[int]]:
    """
    Return an inner×inner grid where every even-coordinate node is PATH and
    exactly one passage joins each node to the tree it was reached from.

    Uses an explicit stack of [x, y, shuffled_dirs, next_index] frames, which
    consumes the RNG in the same order as the recursive formulation: a node's
    directions are shuffled when it is entered, and a neighbour is fully
    explored before the next direction is tried.
    """
    if inner < 1 or inner % 2 == 0:
        raise ValueError(f"interior size must be a positive odd number, got {inner}")

    maze = empty_wall_grid(inner)
    maze[0][0] = PATH
    stack = [[0, 0, shuffle_in_place(rng, list(CARVE_DIRS)), 0]]

    while stack:
        frame = stack[-1]
        x, y, dirs, i = frame
        if i == len(dirs):
            stack.pop()
            continue
        frame[3] = i + 1

        dx, dy = dirs[i]
        nx, ny = x + dx, y + dy
        if 0 <= nx < inner and 0 <= ny < inner and maze[ny][nx] == WALL:
            maze[y + dy // 2][x + dx // 2] = PATH
            maze[ny][nx] = PATH
            stack.append([nx, ny, shuffle_in_place(rng, list(CARVE_DIRS)), 0])

    return maze
