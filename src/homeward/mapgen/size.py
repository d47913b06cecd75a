# src/homeward/mapgen/size.py
# Level → maze dimension curve and loop budget.

import logging
from numbers import Integral

from ..config import CONFIG, MazeConfig

log = logging.getLogger(__name__)


def normalize_level(level) -> int:
    """Levels below 1 or non-integers fall back to level 1 (smallest maze)."""
    if isinstance(level, bool) or not isinstance(level, Integral) or level < 1:
        log.warning("Invalid level %r, clamping to 1", level)
        return 1
    return int(level)


def interior_size(level, config: MazeConfig = CONFIG) -> int:
    """
    Interior side length for a level: base + 2 per 3 levels, capped at max.
    Always odd so the even-coordinate carve lattice reaches both corners.
    """
    level = normalize_level(level)
    increment = (level // config.levels_per_step) * config.size_step
    return min(config.base_size + increment, config.max_size)


def loop_count(level, inner: int, config: MazeConfig = CONFIG) -> int:
    level = normalize_level(level)
    return min(inner, config.base_loops + level // config.levels_per_loop)
