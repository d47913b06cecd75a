# tests/test_loops.py
import random

import pytest

from homeward.grid import Grid
from homeward.mapgen.carve import carve_spanning_tree
from homeward.mapgen.frame import frame_with_walls
from homeward.mapgen.loops import add_loops
from homeward.mapgen.verify import cycle_count, is_solvable, reachable_cells
from homeward.tiles import PATH, WALL

class CountingRandom(random.Random):
    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws = 0

    def random(self):
        self.draws += 1
        return super().random()

def diff_cells(before, after):
    return [(x, y) for y, row in enumerate(before) for x, v in enumerate(row) if v != after[y][x]]

def test_openings_are_midpoints_and_counted():
    for seed in range(10):
        rng = random.Random(seed)
        maze = carve_spanning_tree(15, rng)
        before = [row[:] for row in maze]
        added = add_loops(maze, 8, rng)
        changed = diff_cells(before, maze)
        assert 0 < added <= 8
        assert len(changed) == added
        for x, y in changed:
            assert before[y][x] == WALL and maze[y][x] == PATH
            assert (x % 2) + (y % 2) == 1, f"({x},{y}) is not between two nodes"
        grid = Grid.from_matrix(frame_with_walls(maze))
        assert cycle_count(grid) == added

def test_loops_never_disconnect():
    rng = random.Random(3)
    maze = carve_spanning_tree(11, rng)
    reach_before = reachable_cells(Grid.from_matrix(frame_with_walls(maze)))
    add_loops(maze, 11, rng)
    grid = Grid.from_matrix(frame_with_walls(maze))
    assert reach_before <= reachable_cells(grid)
    assert is_solvable(grid)

def test_small_maze_cannot_exceed_spare_walls():
    # 3x3 nodes: 12 possible passages, 8 used by the tree
    for seed in range(20):
        rng = random.Random(seed)
        maze = carve_spanning_tree(5, rng)
        assert add_loops(maze, 5, rng) <= 4

def test_attempt_cap_on_open_room():
    room = [[PATH] * 7 for _ in range(7)]
    rng = CountingRandom(0)
    assert add_loops(room, 3, rng) == 0
    # 3 * 10 attempts, each: two coordinate draws + three shuffle draws
    assert rng.draws == 3 * 10 * 5

def test_zero_and_negative_budget():
    rng = CountingRandom(1)
    maze = carve_spanning_tree(7, random.Random(1))
    before = [row[:] for row in maze]
    assert add_loops(maze, 0, rng) == 0
    assert maze == before and rng.draws == 0
    with pytest.raises(ValueError):
        add_loops(maze, -1, rng)
