from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .tiles import PATH, WALL, is_open

XY = Tuple[int, int]

@dataclass(frozen=True)
class Grid:
    """
    A finished maze: rows of PATH/WALL codes indexed as cells[y][x], framed by
    a one-cell wall border. Start is the first interior cell, goal the last.
    """
    cells: Tuple[Tuple[int, ...], ...]
    start: XY
    goal: XY

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]], start: Optional[XY] = None, goal: Optional[XY] = None) -> "Grid":
        if not matrix or not matrix[0]:
            raise ValueError("grid matrix must be non-empty")
        w = len(matrix[0])
        if any(len(row) != w for row in matrix):
            raise ValueError("grid matrix must be rectangular")
        h = len(matrix)
        cells = tuple(tuple(PATH if is_open(v) else WALL for v in row) for row in matrix)
        return cls(
            cells=cells,
            start=start if start is not None else (1, 1),
            goal=goal if goal is not None else (w - 2, h - 2),
        )

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.cells[y][x]

    def is_open(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[y][x] == PATH

    def as_matrix(self) -> List[List[int]]:
        return [list(row) for row in self.cells]
