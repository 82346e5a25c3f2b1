# maze_lab/core/node.py
# Search tree node for the maze engine: one step of a candidate path with g, h and f = g + h.
from __future__ import annotations
from typing import Callable, Iterator, Optional

from .problem import Action, State, StateSpace


class Node:
    def __init__(self, state: State, parent: Optional["Node"] = None, action: Optional[Action] = None,
                 path_cost: int = 0, heuristic: int = 0):
        self.state = state
        self.parent = parent
        self.action = action
        self.path_cost = path_cost
        self.heuristic = heuristic
        self.evaluation = path_cost + heuristic
        self.depth = 0 if parent is None else parent.depth + 1

    def expand(self, problem: StateSpace, h: Callable[[State], int]) -> Iterator["Node"]:
        """Generate child Nodes from TRANSITIONS(s); g grows by the cost of the entered cell."""
        for action, s2 in problem.transitions(self.state).items():
            cost = problem.cost(s2)
            if cost is None or cost <= 0:
                raise ValueError(
                    f"cost returned {cost!r} for s'={s2!r} (reached from {self.state!r} by {action!r}). "
                    "Step costs must be positive integers."
                )
            yield Node(
                state=s2,
                parent=self,
                action=action,
                path_cost=self.path_cost + cost,
                heuristic=h(s2),
            )

    def __repr__(self) -> str:
        return (f"Node(state={self.state!r}, action={self.action!r}, "
                f"g={self.path_cost}, h={self.heuristic}, f={self.evaluation})")
