"""Line charts of utility estimates over the course of an iteration."""

from __future__ import annotations

import os
from typing import Sequence, Union

from matplotlib.figure import Figure

from .environment import GridWorld, Utilities

PathLike = Union[str, "os.PathLike[str]"]

FIGURE_SIZE_INCHES = (8, 5)
FIGURE_DPI = 100


def plot_history(
    grid: GridWorld,
    history: Sequence[Utilities],
    title: str,
    path: PathLike,
) -> Figure:
    """Plot one line per non-wall cell across all recorded sweeps and save it.

    The figure is written to ``path`` and returned so callers can inspect it.
    Any error raised while writing the file propagates to the caller.
    """
    fig = Figure(figsize=FIGURE_SIZE_INCHES, dpi=FIGURE_DPI)
    ax = fig.add_subplot()
    ax.set_title(title)
    ax.set_xlabel("Iterations")
    ax.set_ylabel("Utility Estimates")

    iterations = list(range(len(history)))
    for row, col in grid.cells():
        ax.plot(
            iterations,
            [snapshot[row][col] for snapshot in history],
            label=f"({row},{col})",
        )

    ax.legend(loc="upper left")
    fig.savefig(path)
    return fig