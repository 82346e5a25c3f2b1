# maze_lab/algorithms/astar.py
# A* graph search from a given start to the closest of a set of objective states.
from __future__ import annotations
import logging
from typing import Collection, List, Optional

from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchResult, MeasuredRun
from ..core.node import Node
from ..core.problem import State, StateSpace
from ..core.utils import heuristic, reconstruct_path

logger = logging.getLogger(__name__)


def a_star_search(problem: StateSpace, start: State, objectives: Collection[State], name: str = "A*") -> SearchResult:
    """
    Best-first graph search on f = g + h with h = Manhattan distance to the
    nearest objective. Equal-f nodes pop in insertion order. Returns a failed
    SearchResult when the frontier empties first; a start that is already an
    objective succeeds with no actions.
    """
    objectives = frozenset(objectives)
    h = lambda s: heuristic(s, objectives)
    expanded = 0

    with MeasuredRun() as meter:
        if not objectives:
            logger.debug("%s: empty objective set, nothing to reach", name)
            return SearchResult(name, False, [], float("inf"), 0, meter.elapsed, meter.peak_kb,
                                error="no objectives")

        frontier = PriorityQueue()
        frontier.push(Node(start, heuristic=h(start)))
        closed = set()

        while frontier:
            node = frontier.pop()
            if node.state in objectives:
                actions, cost = reconstruct_path(node)
                logger.debug("%s: reached %r at cost %s after %d expansions", name, node.state, cost, expanded)
                return SearchResult(name, True, actions, cost, expanded, meter.elapsed, meter.peak_kb)
            if node.state in closed:
                continue

            closed.add(node.state)
            expanded += 1
            for child in node.expand(problem, h):
                if child.state not in closed:
                    frontier.push(child)

    logger.debug("%s: frontier exhausted after %d expansions", name, expanded)
    return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                        error="unreachable")


def solve(problem: StateSpace, start: State, objectives: Collection[State]) -> Optional[List[str]]:
    """Actions from start to the cheapest objective, or None when none is reachable."""
    result = a_star_search(problem, start, objectives)
    return result.actions if result.success else None
