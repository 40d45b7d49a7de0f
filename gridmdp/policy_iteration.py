"""Policy iteration over a grid world."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .environment import Action, GridWorld, Utilities

_NO_UPDATE = ("", "W")


@dataclass
class PolicyIterationResult:
    """Converged utilities, the stable policy and every recorded utility table."""

    utilities: list[list[float]]
    policy: list[list[str]]
    history: list[list[list[float]]] = field(default_factory=list)


def _label(cell: Action | str) -> str:
    return cell.label if isinstance(cell, Action) else cell


def evaluate_policy(
    grid: GridWorld,
    policy: Sequence[Sequence[Action | str]],
    utilities: Utilities,
) -> tuple[list[list[float]], list[list[list[float]]]]:
    """Iterate the utilities of a fixed policy until the largest change is below threshold.

    Returns the final utilities and a snapshot of every sweep. Cells whose
    policy entry is empty or "W" keep their utility unchanged.
    """
    current = [list(row) for row in utilities]
    history: list[list[list[float]]] = []
    while True:
        new_utilities = grid.zero_utilities()
        delta = 0.0
        for row, col in grid.cells():
            chosen = _label(policy[row][col])
            if chosen in _NO_UPDATE:
                new_utilities[row][col] = current[row][col]
                continue
            value = grid.action_value(row, col, chosen, current)
            new_utilities[row][col] = value
            delta = max(delta, abs(value - current[row][col]))
        current = new_utilities
        history.append([list(r) for r in current])
        if delta < grid.threshold:
            return current, history


def improve_policy(
    grid: GridWorld,
    policy: Sequence[Sequence[Action | str]],
    utilities: Utilities,
) -> tuple[list[list[str]], bool]:
    """Make the policy greedy with respect to the utilities.

    Returns the new policy and whether it was already stable.
    """
    new_policy = [[_label(cell) for cell in row] for row in policy]
    stable = True
    for row, col in grid.cells():
        old = new_policy[row][col]
        best_label = old
        best_value = float("-inf")
        for action in Action:
            value = grid.action_value(row, col, action, utilities)
            if value > best_value:
                best_label, best_value = action.label, value
        if best_label != old:
            new_policy[row][col] = best_label
            stable = False
    return new_policy, stable


def policy_iteration(grid: GridWorld) -> PolicyIterationResult:
    """Alternate evaluation and improvement, starting from "move right", until stable."""
    policy = [
        ["W" if grid.is_wall(row, col) else Action.RIGHT.label for col in range(grid.cols)]
        for row in range(grid.rows)
    ]
    utilities = grid.zero_utilities()
    history: list[list[list[float]]] = []
    stable = False
    while not stable:
        utilities, sweeps = evaluate_policy(grid, policy, utilities)
        history.extend(sweeps)
        policy, stable = improve_policy(grid, policy, utilities)
        history.append([list(r) for r in utilities])
    return PolicyIterationResult(utilities=utilities, policy=policy, history=history)