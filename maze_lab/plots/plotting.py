# maze_lab/plots/plotting.py
# Renders a maze as a terrain-cost image and overlays a replayed action sequence.
# Walls are drawn as NaN (masked), open cells by their step cost, and I/K/G are labelled.
from __future__ import annotations
from typing import Optional, Sequence

import matplotlib
import numpy as np
import matplotlib.pyplot as plt

from ..problems.maze import GOAL, INITIAL, KEY, WALL, MazeProblem, MazeState


def maze_to_array(problem: MazeProblem) -> np.ndarray:
    grid = np.full((problem.rows, problem.cols), np.nan)
    for r, line in enumerate(problem.maze):
        for c, ch in enumerate(line):
            if ch != WALL:
                grid[r, c] = problem.cost(MazeState(c, r))
    return grid


def draw_solution(problem: MazeProblem, actions: Optional[Sequence[str]] = None, ax=None, title: str = ""):
    if ax is None:
        fig, ax = plt.subplots(figsize=(0.5 * problem.cols + 1, 0.5 * problem.rows + 1))
    else:
        fig = ax.figure

    grid = np.ma.masked_invalid(maze_to_array(problem))
    cmap = matplotlib.colormaps["YlOrBr"].copy()
    cmap.set_bad("dimgray")
    ax.imshow(grid, cmap=cmap, vmin=0, vmax=4, origin="upper")

    for r, line in enumerate(problem.maze):
        for c, ch in enumerate(line):
            if ch in (INITIAL, KEY, GOAL):
                ax.text(c, r, ch, ha="center", va="center", fontsize=10, fontweight="bold")

    if actions:
        path = problem.trace(actions)
        xs = [s.col for s in path]
        ys = [s.row for s in path]
        ax.plot(xs, ys, "-", color="tab:blue", linewidth=2)
        ok, cost = problem.test_solution(actions)
        title = title or f"{'solution' if ok else 'not a solution'}: {len(actions)} moves, cost {cost}"

    ax.set_xticks([]); ax.set_yticks([])
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig
