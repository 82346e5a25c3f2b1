# maze_lab/problems/samples.py
# Ready-made mazes for the benchmark runner and demos.
from __future__ import annotations
from typing import Dict, Tuple

from .maze import MazeProblem

SAMPLE_MAZES: Dict[str, Tuple[str, ...]] = {
    "corridor": (
        "XXXXXX",
        "XIK.GX",
        "X....X",
        "XXXXXX",
    ),
    "classic": (
        "XXXXXXX",
        "X.....X",
        "XIX.X.X",
        "XX.XK.X",
        "XG....X",
        "XXXXXXX",
    ),
    "mud_detour": (
        "XXXXXXXX",
        "XI.MMKGX",
        "X.X..X.X",
        "X......X",
        "XXXXXXXX",
    ),
    "two_goals": (
        "XXXXXXXXX",
        "XG.....GX",
        "X.XXMXX.X",
        "X.X.K.X.X",
        "X.XMXMX.X",
        "X...I...X",
        "XXXXXXXXX",
    ),
    "walled_key": (
        "XXXXXXX",
        "XI...GX",
        "X.XXX.X",
        "X.XKX.X",
        "X.XXX.X",
        "X.....X",
        "XXXXXXX",
    ),
}


def make_maze_problem(name: str = "classic") -> MazeProblem:
    try:
        return MazeProblem(SAMPLE_MAZES[name])
    except KeyError:
        raise ValueError(f"Unknown sample maze {name!r}; choose from {sorted(SAMPLE_MAZES)}") from None
