# Defines the interface the informed search engine expects from a state space (transitions, costs).
# maze_lab/core/problem.py
from __future__ import annotations
from typing import Hashable, Mapping, Protocol

Action = str
State = Hashable


class StateSpace(Protocol):
    """Transition model consumed by the search engine.

    States must expose integer ``col`` and ``row`` attributes so the
    Manhattan heuristic can be computed against an objective set.
    """
    def transitions(self, state: State) -> Mapping[Action, State]: ...
    def cost(self, state: State) -> int: ...
