"""Enlarged versions of a grid world, each cell blown up into a square block."""

from __future__ import annotations

from .environment import GridWorld, default_grid


def scale_grid(grid: GridWorld, factor: int) -> GridWorld:
    """Return a grid where every cell becomes a factor-by-factor block."""
    if not isinstance(factor, int) or factor < 1:
        raise ValueError("scale factor must be a positive integer")
    rewards = tuple(
        tuple(value for value in row for _ in range(factor))
        for row in grid.rewards
        for _ in range(factor)
    )
    walls = frozenset(
        (r * factor + dr, c * factor + dc)
        for r, c in grid.walls
        for dr in range(factor)
        for dc in range(factor)
    )
    return GridWorld(
        rewards=rewards,
        walls=walls,
        discount=grid.discount,
        threshold=grid.threshold,
        intended_prob=grid.intended_prob,
        unintended_prob=grid.unintended_prob,
    )


def scaled_grid_5x() -> GridWorld:
    """The standard maze enlarged five times to 30x30."""
    return scale_grid(default_grid(), 5)