# maze_lab/problems/maze.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

WALL, OPEN, INITIAL, KEY, GOAL, MUD = "X", ".", "I", "K", "G", "M"
ALPHABET = frozenset({WALL, OPEN, INITIAL, KEY, GOAL, MUD})

MUD_COST = 3
STEP_COST = 1


class FormatError(ValueError):
    """Raised when a maze grid cannot be turned into a state space."""


@dataclass(frozen=True)
class MazeState:
    """A (col, row) location in the maze."""
    col: int
    row: int

    def __add__(self, other: "MazeState") -> "MazeState":
        return MazeState(self.col + other.col, self.row + other.row)

    def __repr__(self) -> str:
        return f"({self.col}, {self.row})"


# Action -> offset; iteration order is the order children are generated in.
TRANSITIONS: Mapping[str, MazeState] = MappingProxyType({
    "U": MazeState(0, -1),
    "D": MazeState(0, 1),
    "L": MazeState(-1, 0),
    "R": MazeState(1, 0),
})


class MazeProblem:
    """
    Key-then-goal maze pathfinding with terrain costs.

    - State: MazeState(col, row)
    - TRANSITIONS(s): {action: s'} for the moves in {'U','D','L','R'} that stay in-bounds and off walls
    - cost(s'): 3 for mud ('M'), 1 for any other enterable cell
    - IS-GOAL(s): s is a 'G' cell
    - objectives(has_key): the key cell before pickup, the goal cells after

    Grid alphabet: 'X' wall, '.' open, 'I' initial, 'K' key, 'G' goal, 'M' mud.
    """

    def __init__(self, maze: Sequence[str]):
        self.maze: Tuple[str, ...] = tuple(maze)
        self.rows = len(self.maze)
        if self.rows == 0:
            raise FormatError("Maze has no rows")
        self.cols = len(self.maze[0])

        initial: Optional[MazeState] = None
        key: Optional[MazeState] = None
        goals = set()
        for row, line in enumerate(self.maze):
            if len(line) != self.cols:
                raise FormatError(f"Row {row} has length {len(line)}, expected {self.cols}")
            for col, ch in enumerate(line):
                if ch not in ALPHABET:
                    raise FormatError(f"Unrecognized character {ch!r} at (col={col}, row={row})")
                if ch == INITIAL:
                    if initial is not None:
                        raise FormatError(f"Second initial cell at (col={col}, row={row})")
                    initial = MazeState(col, row)
                elif ch == KEY:
                    if key is not None:
                        raise FormatError(f"Second key cell at (col={col}, row={row})")
                    key = MazeState(col, row)
                elif ch == GOAL:
                    goals.add(MazeState(col, row))
        if initial is None:
            raise FormatError("Maze has no initial cell 'I'")

        self.initial_state: MazeState = initial
        self.key_state: Optional[MazeState] = key
        self.goal_states: FrozenSet[MazeState] = frozenset(goals)
        self.key_states: FrozenSet[MazeState] = frozenset() if key is None else frozenset({key})
        logger.debug("Built %dx%d maze: initial=%r key=%r goals=%d",
                     self.cols, self.rows, initial, key, len(goals))

    @classmethod
    def from_text(cls, text: str) -> "MazeProblem":
        """Rows separated by newlines; blank lines and surrounding whitespace are ignored."""
        return cls([line.strip() for line in text.splitlines() if line.strip()])

    def to_text(self) -> str:
        return "\n".join(self.maze)

    # --- State space ---------------------------------------------------------

    def in_bounds(self, state: MazeState) -> bool:
        return 0 <= state.col < self.cols and 0 <= state.row < self.rows

    def cell(self, state: MazeState) -> str:
        return self.maze[state.row][state.col]

    def objectives(self, has_key: bool) -> FrozenSet[MazeState]:
        return self.goal_states if has_key else self.key_states

    def is_goal(self, state: MazeState) -> bool:
        return state in self.goal_states

    def transitions(self, state: MazeState) -> Dict[str, MazeState]:
        result = {}
        for action, offset in TRANSITIONS.items():
            s2 = state + offset
            if self.in_bounds(s2) and self.cell(s2) != WALL:
                result[action] = s2
        return result

    def cost(self, state: MazeState) -> int:
        return MUD_COST if self.cell(state) == MUD else STEP_COST

    # --- Solution checking ---------------------------------------------------

    def trace(self, actions: Iterable[str]) -> List[MazeState]:
        """States visited when replaying actions from the initial state (initial included)."""
        cur = self.initial_state
        visited = [cur]
        for i, action in enumerate(actions):
            offset = TRANSITIONS.get(action)
            if offset is None:
                raise ValueError(f"Unknown action {action!r} at step {i}")
            cur = cur + offset
            if not self.in_bounds(cur):
                raise ValueError(f"Step {i} ({action}) leaves the maze at {cur!r}")
            if self.cell(cur) == WALL:
                raise ValueError(f"Step {i} ({action}) enters a wall at {cur!r}")
            visited.append(cur)
        return visited

    def test_solution(self, possible_soln: Iterable[str]) -> Tuple[bool, int]:
        """
        Replay a candidate action sequence.

        Returns (is_solution, cost). is_solution holds only when the replay
        ends on a goal and passed over the key on the way; cost sums the
        cost of every entered cell. An illegal move (wall, off-grid or
        unknown token) returns (False, -1).
        """
        try:
            visited = self.trace(possible_soln)
        except ValueError as e:
            logger.debug("Rejected replay: %s", e)
            return False, -1
        has_key = self.key_state is not None and self.key_state in visited[1:]
        cost = sum(self.cost(s) for s in visited[1:])
        return self.is_goal(visited[-1]) and has_key, cost


def load_maze(path: Union[str, Path]) -> MazeProblem:
    return MazeProblem.from_text(Path(path).read_text(encoding="utf-8"))
