# maze_lab/core/utils.py
# Path reconstruction from a goal node, plus the Manhattan heuristic over an objective set.
from __future__ import annotations
from typing import Iterable, List, Tuple
from .node import Node


def reconstruct_path(node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def manhattan(a, b) -> int:
    return abs(a.col - b.col) + abs(a.row - b.row)


def heuristic(state, objectives: Iterable) -> int:
    """Distance to the closest objective; 0 when there are no objectives."""
    return min((manhattan(state, obj) for obj in objectives), default=0)
