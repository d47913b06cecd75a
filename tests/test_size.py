# tests/test_size.py
import logging

from homeward.config import MazeConfig
from homeward.mapgen.size import interior_size, loop_count, normalize_level

def test_size_curve_known_levels():
    assert interior_size(1) == 5
    assert interior_size(2) == 5
    assert interior_size(3) == 7
    assert interior_size(4) == 7
    assert interior_size(9) == 11

def test_size_is_odd_and_bounded():
    for lvl in range(1, 200):
        n = interior_size(lvl)
        assert n % 2 == 1, f"even size at level {lvl}"
        assert 5 <= n <= 25, f"size {n} out of range at level {lvl}"

def test_size_grows_every_three_levels_then_caps():
    for lvl in range(1, 100):
        assert interior_size(lvl) <= interior_size(lvl + 3)
    # 5 + (30 // 3) * 2 == 25
    assert interior_size(30) == 25
    for lvl in range(30, 60):
        assert interior_size(lvl) == interior_size(lvl + 3) == 25

def test_invalid_levels_clamp_to_smallest(caplog):
    with caplog.at_level(logging.WARNING):
        for bad in (0, -3, 2.5, "3", None, True):
            assert interior_size(bad) == 5, f"level {bad!r} should clamp"
            assert normalize_level(bad) == 1
    assert "Invalid level" in caplog.text

def test_loop_budget():
    assert loop_count(1, 5) == 5
    assert loop_count(10, interior_size(10)) == 10
    assert loop_count(30, 25) == 20
    assert loop_count(60, 25) == 25   # capped by interior size
    assert loop_count(-1, 5) == 5

def test_config_overrides_curve():
    cfg = MazeConfig(base_size=9, max_size=13)
    assert interior_size(1, cfg) == 9
    assert interior_size(100, cfg) == 13
