import pytest

from gridmdp.environment import GridWorld, default_grid
from gridmdp.scaled import scale_grid, scaled_grid_5x


def test_scaled_5x_shape():
    grid = scaled_grid_5x()
    assert (grid.rows, grid.cols) == (30, 30)


def test_scaled_5x_wall_count_and_blocks():
    grid = scaled_grid_5x()
    assert len(grid.walls) == 125
    assert grid.is_wall(0, 5) and grid.is_wall(4, 9)
    assert grid.is_wall(5, 20) and grid.is_wall(9, 24)
    assert grid.is_wall(20, 5) and grid.is_wall(24, 19)
    assert not grid.is_wall(0, 4)
    assert not grid.is_wall(25, 5)


def test_scaled_5x_reward_samples():
    grid = scaled_grid_5x()
    assert grid.rewards[0][0] == 1.00
    assert grid.rewards[0][15] == -0.05
    assert grid.rewards[5][5] == -1.00
    assert grid.rewards[10][20] == 1.00
    assert grid.rewards[20][20] == -1.00
    assert grid.rewards[29][29] == -0.05
    assert grid.rewards[22][12] == 0.00


def test_scaled_keeps_parameters():
    base = default_grid()
    grid = scaled_grid_5x()
    assert grid.discount == base.discount
    assert grid.threshold == base.threshold
    assert grid.intended_prob == base.intended_prob
    assert grid.unintended_prob == base.unintended_prob


def test_scale_by_one_is_identity():
    base = default_grid()
    assert scale_grid(base, 1) == base


def test_every_block_matches_source_cell():
    base = default_grid()
    factor = 3
    grid = scale_grid(base, factor)
    for r in range(grid.rows):
        for c in range(grid.cols):
            assert grid.rewards[r][c] == base.rewards[r // factor][c // factor]
            assert grid.is_wall(r, c) == base.is_wall(r // factor, c // factor)


def test_scale_small_grid():
    base = GridWorld(rewards=((1.0, -1.0),), walls={(0, 1)})
    grid = scale_grid(base, 2)
    assert grid.rewards == ((1.0, 1.0, -1.0, -1.0), (1.0, 1.0, -1.0, -1.0))
    assert grid.walls == {(0, 2), (0, 3), (1, 2), (1, 3)}


@pytest.mark.parametrize("factor", [0, -2, 1.5])
def test_invalid_factor(factor):
    with pytest.raises(ValueError):
        scale_grid(default_grid(), factor)