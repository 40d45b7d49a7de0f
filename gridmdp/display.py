"""Text rendering of utility and policy tables."""

from __future__ import annotations

from typing import Sequence

from .environment import Action, GridWorld, Utilities

_ARROWS = {"U": "↑", "R": "→", "L": "←", "D": "↓"}

WALL_MARKER = "[W]"


def _label(cell: Action | str | None) -> str:
    if cell is None:
        return ""
    if isinstance(cell, Action):
        return cell.label
    return cell


def _arrow_cell(cell: Action | str | None) -> str:
    arrow = _ARROWS.get(_label(cell))
    return f"{arrow}  " if arrow else ""


def format_utilities(grid: GridWorld, utilities: Utilities) -> str:
    """Render the utility table, one row per line, with walls shown as W."""
    lines = ["Utility Table:"]
    for row in range(grid.rows):
        lines.append(
            "".join(
                "   W   " if grid.is_wall(row, col) else f"{utilities[row][col]:6.2f} "
                for col in range(grid.cols)
            )
        )
    return "\n".join(lines) + "\n\n"


def format_policy(grid: GridWorld, policy: Sequence[Sequence[Action | str]]) -> str:
    """Render a policy table as arrows, with walls shown as W."""
    lines = ["Policy Table:"]
    for row in range(grid.rows):
        lines.append(
            "".join(
                "W  " if grid.is_wall(row, col) else _arrow_cell(policy[row][col])
                for col in range(grid.cols)
            )
        )
    return "\n".join(lines) + "\n\n"


def format_value_policy(
    grid: GridWorld, policy: Sequence[Sequence[Action | str]]
) -> str:
    """Render a greedy policy whose wall cells are marked "[W]"."""
    lines = []
    for row in range(grid.rows):
        lines.append(
            "".join(
                "W  " if _label(policy[row][col]) == WALL_MARKER
                else _arrow_cell(policy[row][col])
                for col in range(grid.cols)
            )
        )
    return "\n".join(lines) + "\n\n"