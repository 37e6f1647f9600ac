# statespace/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = [
    ("generated", "States Generated (lower is better)", "states"),
    ("expanded", "States Expanded (lower is better)", "states"),
    ("time_s", "Wall Time (lower is better)", "seconds"),
]


def load_rows(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m statespace.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)


def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    top = max(vals) or 1
    for xi, v in zip(x, vals):
        if isinstance(v, float):
            label = f"{v:.4f}" if v < 0.01 else f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def fmt_table(rows) -> str:
    # Markdown table
    lines = [
        "| Algorithm | Depth | Generated | Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    for r in rows:
        def fnum(x):
            if isinstance(x, (int, float)):
                return f"{x:.6f}" if isinstance(x, float) else f"{x}"
            return "n/a"
        lines.append(
            f"| {r['algo']} | {fnum(r.get('depth'))} | {fnum(r.get('generated'))} | "
            f"{fnum(r.get('expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


def write_plots(rows: List[Dict[str, Any]], out_dir: Path) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = [out_dir / "results.md"]
    written[0].write_text(fmt_table(rows))

    for metric, title, ylabel in METRICS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        path = out_dir / f"{metric}.png"
        path.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        written.append(path)
    return written


def main(argv: Optional[Sequence[str]] = None) -> List[Path]:
    ap = argparse.ArgumentParser(description="Plot a run_all JSON report.")
    ap.add_argument("--results", default="results.json")
    ap.add_argument("--out-dir", default=".")
    args = ap.parse_args(argv)

    written = write_plots(load_rows(Path(args.results)), Path(args.out_dir))
    for p in written:
        print(f"Wrote {p}")
    return written


if __name__ == "__main__":
    main()
