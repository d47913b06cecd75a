# Injectable randomness for maze generation.
# All draws go through rng.random() so a seeded random.Random replays a maze exactly.

import random
from typing import List, Optional, TypeVar

T = TypeVar("T")

def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)

def rand_below(rng: random.Random, n: int) -> int:
    """Uniform integer in [0, n) from a single random() draw."""
    assert n > 0
    return int(rng.random() * n)

def shuffle_in_place(rng: random.Random, items: List[T]) -> List[T]:
    """
    Fisher-Yates, walking i from the end down to 1 and swapping with
    j = floor(random() * (i + 1)). Returns the same list for chaining.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rand_below(rng, i + 1)
        items[i], items[j] = items[j], items[i]
    return items
