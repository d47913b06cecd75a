# tests/test_movement.py
import pytest

from homeward.engine.movement import (
    Direction, MoveResult, direction_for_key, is_reset_key, try_move,
)
from homeward.grid import Grid

# 7x7 corridor maze, single route from (1,1) to (5,5):
# down 2, right 2, up 2, right 2, down 4
CORRIDOR = [
    [1, 1, 1, 1, 1, 1, 1],
    [1, 0, 1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1, 0, 1],
    [1, 1, 1, 1, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1],
]
ROUTE = ["down"] * 2 + ["right"] * 2 + ["up"] * 2 + ["right"] * 2 + ["down"] * 4

def test_wall_to_the_right_is_rejected():
    g = Grid.from_matrix(CORRIDOR)
    res = try_move(g, (1, 1), Direction.RIGHT)
    assert res == MoveResult(accepted=False, position=(1, 1), reached_goal=False)

def test_border_and_out_of_bounds_rejected():
    g = Grid.from_matrix(CORRIDOR)
    assert not try_move(g, (1, 1), Direction.UP).accepted
    assert not try_move(g, (1, 1), Direction.LEFT).accepted
    open_room = Grid.from_matrix([[0, 0, 0]] * 3)
    res = try_move(open_room, (0, 0), Direction.LEFT)
    assert not res.accepted and res.position == (0, 0)
    assert not try_move(open_room, (2, 2), Direction.DOWN).accepted

def test_walk_route_to_goal():
    g = Grid.from_matrix(CORRIDOR)
    pos = g.start
    for i, step in enumerate(ROUTE):
        res = try_move(g, pos, step)
        assert res.accepted, f"step {i} ({step}) from {pos} rejected"
        pos = res.position
        assert res.reached_goal == (i == len(ROUTE) - 1)
    assert pos == g.goal

def test_try_move_is_pure():
    g = Grid.from_matrix(CORRIDOR)
    before = g.as_matrix()
    try_move(g, (1, 1), "down")
    try_move(g, (1, 1), "right")
    assert g.as_matrix() == before

@pytest.mark.parametrize("bad", ["north", "UP", 5, None, (0, 1)])
def test_unknown_direction_fails_fast(bad):
    g = Grid.from_matrix(CORRIDOR)
    with pytest.raises(ValueError):
        try_move(g, (1, 1), bad)

def test_key_bindings():
    assert direction_for_key("ArrowUp") is Direction.UP
    assert direction_for_key("W") is Direction.UP
    assert direction_for_key("s") is Direction.DOWN
    assert direction_for_key("a") is Direction.LEFT
    assert direction_for_key("ArrowRight") is Direction.RIGHT
    assert direction_for_key("q") is None
    assert is_reset_key("r") and is_reset_key("R") and not is_reset_key("x")

def test_direction_deltas():
    assert Direction.UP.delta == (0, -1)
    assert Direction.RIGHT.delta == (1, 0)
