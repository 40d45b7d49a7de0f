"""Value iteration over a grid world."""

from __future__ import annotations

from dataclasses import dataclass, field

from .display import WALL_MARKER
from .environment import Action, GridWorld, Utilities


@dataclass
class ValueIterationResult:
    """Converged utilities, the greedy policy and every sweep's utilities."""

    utilities: list[list[float]]
    policy: list[list[str]]
    history: list[list[list[float]]] = field(default_factory=list)

    @property
    def iterations(self) -> int:
        return len(self.history)


def _best_action(
    grid: GridWorld, row: int, col: int, utilities: Utilities
) -> tuple[str, float]:
    best_label = "."
    best_value = float("-inf")
    for action in Action:
        value = grid.action_value(row, col, action, utilities)
        if value > best_value:
            best_label, best_value = action.label, value
    return best_label, best_value


def value_iteration(grid: GridWorld) -> ValueIterationResult:
    """Run Bellman updates from zero utilities until the largest change is below threshold."""
    utilities = grid.zero_utilities()
    history: list[list[list[float]]] = []
    while True:
        new_utilities = grid.zero_utilities()
        delta = 0.0
        for row, col in grid.cells():
            _, best = _best_action(grid, row, col, utilities)
            new_utilities[row][col] = best
            delta = max(delta, abs(best - utilities[row][col]))
        utilities = new_utilities
        history.append([list(r) for r in utilities])
        if delta < grid.threshold:
            break
    return ValueIterationResult(
        utilities=utilities,
        policy=greedy_policy(grid, utilities),
        history=history,
    )


def greedy_policy(grid: GridWorld, utilities: Utilities) -> list[list[str]]:
    """Return the best action label per cell, with "[W]" on walls."""
    return [
        [
            WALL_MARKER if grid.is_wall(row, col)
            else _best_action(grid, row, col, utilities)[0]
            for col in range(grid.cols)
        ]
        for row in range(grid.rows)
    ]