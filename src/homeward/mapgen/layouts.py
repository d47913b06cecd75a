# src/homeward/mapgen/layouts.py
# Hand-authored layouts using the extended codes (0 path, 1 wall, 2 start, 3 goal).

from typing import Optional, Sequence

from ..grid import XY, Grid
from ..tiles import GOAL, START

# The fixed 7×7 level the game shipped with before procedural mazes.
CLASSIC_LAYOUT = (
    (1, 1, 1, 1, 1, 1, 1),
    (1, 2, 0, 1, 0, 0, 1),
    (1, 1, 0, 1, 0, 1, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 1, 3, 1),
    (1, 1, 1, 1, 1, 1, 1),
)


def _find(codes: Sequence[Sequence[int]], code: int) -> Optional[XY]:
    for y, row in enumerate(codes):
        for x, v in enumerate(row):
            if v == code:
                return (x, y)
    return None


def grid_from_layout(codes: Sequence[Sequence[int]] = CLASSIC_LAYOUT) -> Grid:
    """
    Build a Grid from a coded layout. START/GOAL cells become PATH; when a
    code is missing the default corner positions are used.
    """
    return Grid.from_matrix(codes, start=_find(codes, START), goal=_find(codes, GOAL))
