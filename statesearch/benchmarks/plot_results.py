# statesearch/benchmarks/plot_results.py
#   python -m statesearch.benchmarks.plot_results   (after run_all)
from __future__ import annotations
import json
from collections import OrderedDict
from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt

from ..core.metrics import SearchResult
from ..plots.plotting import bar_compare

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

def load_rows(path: Path = RESULTS_JSON) -> List[dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m statesearch.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _as_result(row: dict) -> SearchResult:
    fields = {k: row.get(k) for k in SearchResult.__dataclass_fields__ if k in row}
    if fields.get("cost") is None:
        fields["cost"] = float("inf")
    return SearchResult(**fields)

def by_problem(rows: List[dict]) -> Dict[str, List[SearchResult]]:
    groups: Dict[str, List[SearchResult]] = OrderedDict()
    for r in rows:
        groups.setdefault(r.get("problem", "problem"), []).append(_as_result(r))
    return groups

def fmt_table(rows: List[dict]) -> str:
    # Markdown table
    lines = [
        "| Problem | Algorithm | Depth | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r.get('problem', '')} | {r['algo']} | {fnum(r.get('depth'))} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def main(path: Path = RESULTS_JSON, out_dir: Path = OUT_DIR) -> List[Path]:
    rows = load_rows(path)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")
    written.append(md_path)

    for i, (label, results) in enumerate(by_problem(rows).items()):
        fig = bar_compare(results, title=label)
        png = out_dir / f"comparison_{i}.png"
        fig.savefig(png, dpi=160)
        plt.close(fig)
        print(f"Wrote {png}")
        written.append(png)
    return written

if __name__ == "__main__":
    main()
