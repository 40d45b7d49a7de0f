"""Grid world environment: rewards, walls, actions and the transition model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence

DISCOUNT = 0.99
THRESHOLD = 1e-6
INTENDED_MOVE_PROB = 0.8
UNINTENDED_MOVE_PROB = 0.1

REWARD_WHITE = -0.05
REWARD_GREEN = 1.0
REWARD_BROWN = -1.0

Utilities = Sequence[Sequence[float]]


class Action(Enum):
    """A move on the grid, identified by its one-letter label."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def label(self) -> str:
        return self.value

    @property
    def dr(self) -> int:
        return _DELTAS[self][0]

    @property
    def dc(self) -> int:
        return _DELTAS[self][1]


_DELTAS = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class GridWorld:
    """A rectangular grid of rewards with impassable wall cells."""

    rewards: tuple[tuple[float, ...], ...]
    walls: frozenset[tuple[int, int]] = field(default_factory=frozenset)
    discount: float = DISCOUNT
    threshold: float = THRESHOLD
    intended_prob: float = INTENDED_MOVE_PROB
    unintended_prob: float = UNINTENDED_MOVE_PROB

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rewards)
        if not rows or not rows[0]:
            raise ValueError("reward grid must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("reward grid must be rectangular")
        object.__setattr__(self, "rewards", rows)
        object.__setattr__(
            self, "walls", frozenset((int(r), int(c)) for r, c in self.walls)
        )

    @property
    def rows(self) -> int:
        return len(self.rewards)

    @property
    def cols(self) -> int:
        return len(self.rewards[0])

    def is_wall(self, row: int, col: int) -> bool:
        """Return True if the cell is a wall."""
        return (row, col) in self.walls

    def is_valid(self, row: int, col: int) -> bool:
        """Return True if the cell is inside the grid and not a wall."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return False
        return not self.is_wall(row, col)

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every non-wall cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                if not self.is_wall(row, col):
                    yield row, col

    def zero_utilities(self) -> list[list[float]]:
        """Return a fresh utility table filled with zeros."""
        return [[0.0] * self.cols for _ in range(self.rows)]

    def action_value(
        self, row: int, col: int, action: Action | str, utilities: Utilities
    ) -> float:
        """Expected reward plus discounted utility of taking an action from a cell.

        The intended move happens with the intended probability and each other
        move with the unintended probability; the result is normalised by the
        total probability. Moves into walls or off the grid leave the agent
        where it is.
        """
        intended = Action(action)
        value = 0.0
        total_prob = 0.0
        for actual in Action:
            prob = self.intended_prob if actual is intended else self.unintended_prob
            nr, nc = row + actual.dr, col + actual.dc
            if not self.is_valid(nr, nc):
                nr, nc = row, col
            value += prob * (self.rewards[nr][nc] + self.discount * utilities[nr][nc])
            total_prob += prob
        if total_prob > 0:
            value /= total_prob
        return value


def default_grid() -> GridWorld:
    """The standard 6x6 maze."""
    g, w, b = REWARD_GREEN, REWARD_WHITE, REWARD_BROWN
    rewards = (
        (g, 0.0, g, w, w, g),
        (w, b, w, g, 0.0, b),
        (w, w, b, w, g, w),
        (w, w, w, b, w, g),
        (w, 0.0, 0.0, 0.0, b, w),
        (w, w, w, w, w, w),
    )
    walls = frozenset({(0, 1), (1, 4), (4, 1), (4, 2), (4, 3)})
    return GridWorld(rewards=rewards, walls=walls)