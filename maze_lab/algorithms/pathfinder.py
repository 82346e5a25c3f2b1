# maze_lab/algorithms/pathfinder.py
# Two-leg maze solver: A* from home to the key, then A* from the key to any goal.
from __future__ import annotations
import logging
from typing import List, Optional

from ..core.metrics import SearchResult
from ..problems.maze import MazeProblem
from .astar import a_star_search

logger = logging.getLogger(__name__)

NAME = "KeyThenGoalA*"


def two_phase_search(problem: MazeProblem) -> SearchResult:
    """
    Solve the maze as two independent optimal legs and concatenate them.

    The combined cost is optimal for the decomposition (home -> key, then
    key -> goal), which is the route the maze requires.
    """
    to_key = a_star_search(problem, problem.initial_state, problem.objectives(has_key=False), name="A*[key]")
    if not to_key.success:
        logger.info("Key unreachable from %r", problem.initial_state)
        return SearchResult(NAME, False, [], float("inf"), to_key.nodes_expanded,
                            to_key.time_s, to_key.peak_kb, error="key unreachable")

    to_goal = a_star_search(problem, problem.key_state, problem.objectives(has_key=True), name="A*[goal]")
    expanded = to_key.nodes_expanded + to_goal.nodes_expanded
    time_s = to_key.time_s + to_goal.time_s
    peak_kb = max(to_key.peak_kb, to_goal.peak_kb)
    if not to_goal.success:
        logger.info("No goal reachable from key at %r", problem.key_state)
        return SearchResult(NAME, False, [], float("inf"), expanded, time_s, peak_kb, error="goal unreachable")

    return SearchResult(NAME, True, to_key.actions + to_goal.actions, to_key.cost + to_goal.cost,
                        expanded, time_s, peak_kb)


def solve(problem: MazeProblem) -> Optional[List[str]]:
    """Actions that pick up the key and then reach a goal, or None if either leg is impossible."""
    result = two_phase_search(problem)
    return result.actions if result.success else None
