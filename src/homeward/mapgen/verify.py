# src/homeward/mapgen/verify.py
# Navigability checks over a finished Grid (4-neighbour adjacency through PATH).

from collections import deque
from typing import Dict, Optional, Set

from ..grid import XY, Grid
from ..tiles import WALL

NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _distances(grid: Grid, origin: XY) -> Dict[XY, int]:
    if not grid.is_open(*origin):
        return {}
    dist = {origin: 0}
    queue = deque([origin])
    while queue:
        x, y = queue.popleft()
        for dx, dy in NEIGHBOURS:
            nxt = (x + dx, y + dy)
            if nxt not in dist and grid.is_open(*nxt):
                dist[nxt] = dist[(x, y)] + 1
                queue.append(nxt)
    return dist


def reachable_cells(grid: Grid, origin: Optional[XY] = None) -> Set[XY]:
    return set(_distances(grid, origin if origin is not None else grid.start))


def open_cells(grid: Grid) -> Set[XY]:
    return {(x, y) for y in range(grid.height) for x in range(grid.width) if grid.is_open(x, y)}


def is_solvable(grid: Grid) -> bool:
    return grid.goal in reachable_cells(grid)


def shortest_path_length(grid: Grid) -> Optional[int]:
    """Number of moves from start to goal, or None when the goal is cut off."""
    return _distances(grid, grid.start).get(grid.goal)


def border_is_wall(grid: Grid) -> bool:
    w, h = grid.width, grid.height
    rim = [(x, 0) for x in range(w)] + [(x, h - 1) for x in range(w)]
    rim += [(0, y) for y in range(h)] + [(w - 1, y) for y in range(h)]
    return all(grid.get(x, y) == WALL for x, y in rim)


def cycle_count(grid: Grid) -> int:
    """
    Independent cycles in the PATH graph (edges - vertices + components).
    Zero for a perfect maze; each loop opening adds exactly one.
    """
    cells = open_cells(grid)
    edges = sum(1 for (x, y) in cells for nxt in ((x + 1, y), (x, y + 1)) if nxt in cells)
    components = 0
    seen: Set[XY] = set()
    for cell in cells:
        if cell not in seen:
            components += 1
            seen |= reachable_cells(grid, cell)
    return edges - len(cells) + components
