# src/homeward/mapgen/generator.py
# Level → finished maze: size curve, carve, goal pin, loops, wall frame.

import logging
import random
from typing import List, Optional

from ..config import CONFIG, MazeConfig
from ..grid import Grid
from .carve import carve_spanning_tree
from .frame import ensure_goal_open, frame_with_walls
from .loops import add_loops
from .size import interior_size, loop_count, normalize_level

log = logging.getLogger(__name__)


def generate_matrix(level, rng: Optional[random.Random] = None, config: MazeConfig = CONFIG) -> List[List[int]]:
    level = normalize_level(level)
    rng = rng if rng is not None else random.Random()

    inner = interior_size(level, config)
    maze = carve_spanning_tree(inner, rng)
    ensure_goal_open(maze)

    wanted = loop_count(level, inner, config)
    added = add_loops(maze, wanted, rng, attempt_factor=config.loop_attempt_factor)
    log.debug("Level %d: interior %dx%d, loops %d/%d", level, inner, inner, added, wanted)

    return frame_with_walls(maze)


def generate_maze(level, rng: Optional[random.Random] = None, config: MazeConfig = CONFIG) -> Grid:
    """Build a fresh Grid for `level`. Pass a seeded rng to replay a maze."""
    return Grid.from_matrix(generate_matrix(level, rng, config))
