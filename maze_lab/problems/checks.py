# maze_lab/problems/checks.py
from __future__ import annotations
from collections import deque

from .maze import WALL, MazeProblem


def sanity_check_problem(problem: MazeProblem, max_states: int = 10_000) -> str:
    """Walks reachable states breadth-first and checks every transition is legal with a positive cost."""
    seen = set()
    q = deque([problem.initial_state])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a, s2 in problem.transitions(s).items():
            if not problem.in_bounds(s2):
                raise AssertionError(f"transition leaves the grid: (s={s}, a={a}, s'={s2})")
            if problem.cell(s2) == WALL:
                raise AssertionError(f"transition enters a wall: (s={s}, a={a}, s'={s2})")
            cost = problem.cost(s2)
            if cost is None or cost <= 0:
                raise AssertionError(f"cost is {cost!r} for s'={s2}")
            q.append(s2)
    return f"OK: visited {len(seen)} states; all transitions legal."
