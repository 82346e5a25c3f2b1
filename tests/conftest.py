from __future__ import annotations

import heapq

import matplotlib

matplotlib.use("Agg")

import pytest

from maze_lab.problems.maze import MazeProblem


def reference_cost(problem: MazeProblem, start, objectives):
    """Plain uniform-cost search; the cheapest cost to any objective, or None."""
    objectives = set(objectives)
    dist = {start: 0}
    heap = [(0, start.col, start.row, start)]
    while heap:
        d, _, _, s = heapq.heappop(heap)
        if s in objectives:
            return d
        if d > dist[s]:
            continue
        for s2 in problem.transitions(s).values():
            nd = d + problem.cost(s2)
            if nd < dist.get(s2, float("inf")):
                dist[s2] = nd
                heapq.heappush(heap, (nd, s2.col, s2.row, s2))
    return None


@pytest.fixture
def open_maze() -> MazeProblem:
    return MazeProblem([
        "XXXXX",
        "XI..X",
        "X.X.X",
        "X..GX",
        "XXXXX",
    ])


@pytest.fixture
def ucs_cost():
    return reference_cost
