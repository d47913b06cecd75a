import random
from itertools import permutations

from homeward.rng import make_rng, rand_below, shuffle_in_place

def test_shuffle_is_permutation_and_in_place():
    items = list(range(10))
    out = shuffle_in_place(random.Random(3), items)
    assert out is items
    assert sorted(items) == list(range(10))

def test_shuffle_draws_once_per_swap_step():
    # Fisher-Yates over n items consumes n-1 draws
    a, b = random.Random(42), random.Random(42)
    shuffle_in_place(a, [1, 2, 3, 4])
    for _ in range(3):
        b.random()
    assert a.random() == b.random()

def test_shuffle_reaches_every_order():
    rng = random.Random(7)
    seen = {tuple(shuffle_in_place(rng, [0, 1, 2, 3])) for _ in range(2000)}
    assert seen == set(permutations(range(4)))

def test_seeded_rng_is_reproducible():
    assert [rand_below(make_rng(5), 100) for _ in range(3)] == [rand_below(make_rng(5), 100) for _ in range(3)]

def test_rand_below_bounds():
    rng = make_rng(1)
    vals = [rand_below(rng, 3) for _ in range(500)]
    assert set(vals) == {0, 1, 2}
