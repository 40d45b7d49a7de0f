# gridmdp

Solves a small stochastic grid world with value iteration and policy iteration,
prints the utilities and policies each method finds, and plots how every
non-wall cell's utility estimate changes from one sweep to the next.

## The world

The default world (`default_grid()`) is a 6×6 grid. Green cells give a reward
of `+1.0`, brown cells `-1.0`, white cells `-0.05`, and a few cells are walls.
The agent can move up, down, left or right. The intended move happens with
probability 0.8 and each of the other three moves with probability 0.1; the
expected value is then normalised by the total probability. A move into a wall
or off the edge leaves the agent where it is. Future utility is discounted by
0.99, and both algorithms stop after the first sweep in which no utility
changes by `1e-6` or more.

`scaled_grid_5x()` gives a 30×30 version in which every cell of the default
world, walls included, becomes a 5×5 block. `scale_grid(grid, factor)` does the
same for any grid and any positive integer factor, and raises `ValueError`
otherwise.

## Installation

```
pip install .
```

## Command line

```
gridmdp [--output-dir DIR] [--no-plot]
```

This runs value iteration and then policy iteration on the default 6×6 grid.
For each it prints a utility table (`W` for walls) and a policy table drawn as
arrows, then writes `value_iteration.png` and `policy_iteration.png` to
`--output-dir` (the current directory by default). With `--no-plot` no images
are written. If a plot cannot be saved, the error is printed and the run
carries on.

The command always works on the default grid; the 30×30 grid and custom grids
are available only through the library.

## Library use

```python
from gridmdp.environment import default_grid
from gridmdp.scaled import scaled_grid_5x
from gridmdp.value_iteration import value_iteration, greedy_policy
from gridmdp.policy_iteration import policy_iteration
from gridmdp.display import format_utilities, format_policy, format_value_policy
from gridmdp.plotting import plot_history

grid = default_grid()

vi = value_iteration(grid)
print(format_utilities(grid, vi.utilities))
print(format_value_policy(grid, greedy_policy(grid, vi.utilities)))
print(vi.iterations, "sweeps")

pi = policy_iteration(grid)
print(format_utilities(grid, pi.utilities))
print(format_policy(grid, pi.policy))

plot_history(grid, vi.history, "Value Iteration", "value_iteration.png")

big = scaled_grid_5x()
print(format_utilities(big, value_iteration(big).utilities))
```

- `GridWorld` (in `gridmdp.environment`) holds the rewards, the walls, the
  discount, the threshold and the move probabilities. `is_wall`, `is_valid`,
  `cells()` (non-wall cells in row-major order) and `zero_utilities()` help
  walk it, and `action_value(row, col, action, utilities)` gives the expected
  value of taking an `Action` (or its label `"U"`, `"D"`, `"L"`, `"R"`) from a
  cell under a utility table.
- `value_iteration(grid)` returns a `ValueIterationResult` with `utilities`,
  the greedy `policy` (`"[W]"` on walls), `history` (one utility table per
  sweep) and `iterations`.
- `policy_iteration(grid)` starts from "move right" everywhere and returns a
  `PolicyIterationResult` with `utilities`, the stable `policy` (`"W"` on
  walls) and `history`, which holds every evaluation sweep plus one table after
  each improvement step. `evaluate_policy` and `improve_policy` run the two
  halves on their own.
- `format_utilities`, `format_policy` and `format_value_policy` return the
  tables as text.
- `plot_history(grid, history, title, path)` draws one line per non-wall cell,
  saves the figure to `path` and returns the matplotlib `Figure`.

## Running the tests

```
pip install .[test]
pytest
```