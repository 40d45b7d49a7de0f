"""Command line entry point: solve the maze with both methods and plot convergence."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .display import format_policy, format_utilities, format_value_policy
from .environment import GridWorld, default_grid
from .plotting import plot_history
from .policy_iteration import policy_iteration
from .value_iteration import value_iteration


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gridmdp",
        description="Solve the grid maze with value iteration and policy iteration.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory for the convergence plots (default: current directory)",
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="skip writing the convergence plots",
    )
    return parser.parse_args(argv)


def _run_value_iteration(grid: GridWorld, output_dir: Path, plot: bool) -> None:
    print("Value Iteration")
    result = value_iteration(grid)
    print("Value Iteration converged.")
    print(format_utilities(grid, result.utilities), end="")
    print(format_value_policy(grid, result.policy), end="")
    if not plot:
        return
    try:
        plot_history(
            grid, result.history, "Value Iteration", output_dir / "value_iteration.png"
        )
    except (OSError, ValueError) as exc:
        print("Error saving value_iteration plot:", exc)
    else:
        print("Saved value_iteration.png")
    print()


def _run_policy_iteration(grid: GridWorld, output_dir: Path, plot: bool) -> None:
    print("Policy Iteration")
    result = policy_iteration(grid)
    print("Policy Iteration converged.")
    print(format_utilities(grid, result.utilities), end="")
    print(format_policy(grid, result.policy), end="")
    if not plot:
        return
    try:
        plot_history(
            grid, result.history, "Policy Iteration", output_dir / "policy_iteration.png"
        )
    except (OSError, ValueError) as exc:
        print("Error saving policy_iteration plot:", exc)
    else:
        print("saved policy_iteration.png")
        print()


def main(argv: Sequence[str] | None = None) -> int:
    """Run value iteration, then policy iteration, printing tables and saving plots."""
    args = _parse_args(argv)
    grid = default_grid()
    plot = not args.no_plot
    _run_value_iteration(grid, args.output_dir, plot)
    _run_policy_iteration(grid, args.output_dir, plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())