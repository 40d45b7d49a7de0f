import pytest

from gridmdp.environment import Action, GridWorld, default_grid
from gridmdp.policy_iteration import evaluate_policy, improve_policy, policy_iteration
from gridmdp.value_iteration import value_iteration


def test_evaluate_single_cell_fixed_point():
    grid = GridWorld(rewards=((1.0,),), discount=0.5)
    utilities, history = evaluate_policy(grid, [["R"]], [[0.0]])
    assert utilities[0][0] == pytest.approx(2.0, abs=1e-5)
    assert history[-1] == utilities


def test_evaluate_keeps_cells_without_action():
    grid = GridWorld(rewards=((1.0, 1.0),))
    utilities, _ = evaluate_policy(grid, [["", "R"]], [[7.0, 0.0]])
    assert utilities[0][0] == 7.0


def test_evaluate_does_not_mutate_input():
    grid = default_grid()
    start = grid.zero_utilities()
    policy = [["R"] * grid.cols for _ in range(grid.rows)]
    evaluate_policy(grid, policy, start)
    assert start == grid.zero_utilities()


def test_evaluate_rejects_unknown_label():
    grid = GridWorld(rewards=((0.0,),))
    with pytest.raises(ValueError):
        evaluate_policy(grid, [["X"]], [[0.0]])


def test_improve_policy_is_greedy_and_idempotent():
    grid = default_grid()
    policy = [["W" if grid.is_wall(r, c) else "R" for c in range(grid.cols)]
              for r in range(grid.rows)]
    utilities, _ = evaluate_policy(grid, policy, grid.zero_utilities())
    improved, _ = improve_policy(grid, policy, utilities)
    for row, col in grid.cells():
        values = {a.label: grid.action_value(row, col, a, utilities) for a in Action}
        assert values[improved[row][col]] == max(values.values())
    again, stable = improve_policy(grid, improved, utilities)
    assert stable is True
    assert again == improved


def test_improve_policy_reports_change():
    grid = GridWorld(rewards=((0.0, 1.0),))
    new_policy, stable = improve_policy(grid, [["L", "L"]], [[0.0, 0.0]])
    assert stable is False
    assert new_policy[0][0] == "R"


def test_policy_iteration_matches_value_iteration():
    grid = default_grid()
    pi = policy_iteration(grid)
    vi = value_iteration(grid)
    for row, col in grid.cells():
        assert pi.utilities[row][col] == pytest.approx(vi.utilities[row][col], abs=1e-3)
    for row, col in grid.walls:
        assert pi.policy[row][col] == "W"
        assert pi.utilities[row][col] == 0.0


def test_policy_iteration_result_is_stable():
    grid = default_grid()
    result = policy_iteration(grid)
    _, stable = improve_policy(grid, result.policy, result.utilities)
    assert stable is True
    assert result.history[-1] == result.utilities