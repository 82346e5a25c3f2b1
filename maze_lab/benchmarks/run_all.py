# maze_lab/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..algorithms.pathfinder import two_phase_search
from ..problems.maze import FormatError, MazeProblem, load_maze
from ..problems.samples import SAMPLE_MAZES

# ---- Tunables (overridable via environment variables) -----------------------
LOG_LEVEL = os.getenv("MAZE_LOG_LEVEL", "WARNING")
REPEATS   = int(os.getenv("MAZE_REPEATS", "1"))       # runs per maze; best time is kept

DEFAULT_OUT = Path(__file__).with_name("results.json")

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _load_mazes(paths: Sequence[str]) -> Dict[str, MazeProblem]:
    if not paths:
        return {name: MazeProblem(rows) for name, rows in SAMPLE_MAZES.items()}
    mazes = {}
    for p in paths:
        try:
            mazes[Path(p).stem] = load_maze(p)
        except (OSError, FormatError) as e:
            raise SystemExit(f"Could not load maze {p}: {e}")
    return mazes

def run_maze(name: str, problem: MazeProblem, repeats: int = REPEATS) -> dict:
    best = None
    for _ in range(max(1, repeats)):
        r = two_phase_search(problem)
        if best is None or r.time_s < best.time_s:
            best = r
    row = best.to_row()
    row["maze"] = name
    if best.success:
        row["valid"], _ = problem.test_solution(best.actions)
    return row

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Run the key-then-goal A* solver over a set of mazes.")
    ap.add_argument("--maze", action="append", default=[], help="maze text file (repeatable); default: built-in samples")
    ap.add_argument("--out", default=str(DEFAULT_OUT), help="results JSON path")
    args = ap.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s")

    rows = []
    for name, problem in _load_mazes(args.maze).items():
        print(f"→ Solving {name} ...")
        row = run_maze(name, problem)
        print(
            f"  {name}: "
            f"{'OK' if row['success'] else 'FAIL'} "
            f"cost={row['cost']} "
            f"len={row['length']} "
            f"expanded={row['nodes_expanded']}, "
            f"time={_fmt_time(row['time_s'])}s"
            + (f" ({row['error']})" if row["error"] else "")
        )
        rows.append(row)

    out = {"results": rows, "ts": time.time()}
    out_path = Path(args.out)
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")
    return out

if __name__ == "__main__":
    main()
