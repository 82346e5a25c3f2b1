# maze_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"

def load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m maze_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only solved mazes
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No solved mazes to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        return math.inf if v is None else v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    names = [r["maze"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]
    x = list(range(len(names)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(names, rotation=20, ha="right")
    top = max(vals) or 1
    for xi, v in zip(x, vals):
        label = f"{v:.4f}" if isinstance(v, float) and v < 0.01 else (f"{v:.3f}" if isinstance(v, float) else f"{v}")
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def fmt_table(rows):
    lines = [
        "| Maze | Length | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) and not x.is_integer() else f"{x:g}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['maze']} | {fnum(r.get('length'))} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

CHARTS = (
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ("cost", "Path Cost", "cost", "cost.png"),
)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Tabulate and chart maze benchmark results.")
    ap.add_argument("--results", default=str(RESULTS_JSON))
    ap.add_argument("--out-dir", default=str(HERE))
    args = ap.parse_args(argv)
    out_dir = Path(args.out_dir)
    rows = load_rows(Path(args.results))

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    written = [md_path]
    for metric, title, ylabel, fname in CHARTS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        (out_dir / fname).write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {out_dir / fname}")
        written.append(out_dir / fname)
    return written

if __name__ == "__main__":
    main()
