import pytest

from homeward.grid import Grid

def test_from_matrix_defaults_and_bounds():
    g = Grid.from_matrix([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
    assert g.start == (1, 1) and g.goal == (1, 1)
    assert g.in_bounds(2, 2) and not g.in_bounds(3, 0) and not g.in_bounds(-1, 0)
    assert g.is_open(1, 1) and not g.is_open(0, 0) and not g.is_open(5, 5)

@pytest.mark.parametrize("bad", [[], [[]], [[1, 1], [1]]])
def test_from_matrix_rejects_bad_shapes(bad):
    with pytest.raises(ValueError):
        Grid.from_matrix(bad)
