# Cell codes shared by the generator, the engine and the renderers.

PATH = 0
WALL = 1

# Only used by hand-authored layouts; both are walkable.
START = 2
GOAL = 3

def is_open(code: int) -> bool:
    return code != WALL
