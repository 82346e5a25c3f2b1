# maze_lab/core/frontiers.py
# Priority frontier for best-first search: nodes pop by ascending evaluation, FIFO among equals.
from __future__ import annotations
import heapq
from typing import Callable, List, Tuple

from .node import Node


def _evaluation(node: Node) -> int:
    return node.evaluation


class PriorityQueue:
    """Min-heap of nodes by key(node), default f = g + h."""
    def __init__(self, key: Callable[[Node], float] = _evaluation):
        self.key = key
        self.h: List[Tuple[float, int, Node]] = []
        self.counter = 0  # insertion sequence; breaks ties between equal keys
    def push(self, node: Node) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(node), self.counter, node))
    def pop(self) -> Node:
        return heapq.heappop(self.h)[2]
    def __len__(self): return len(self.h)
    def peek(self) -> Node:
        return self.h[0][2]
