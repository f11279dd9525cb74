# statesearch/benchmarks/run_all.py
# Runs every uninformed strategy on the configured 8-puzzle and on the Romania map; writes results.json.
#   python -m statesearch.benchmarks.run_all
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .. import config
from ..algorithms.bfs import breadth_first_search
from ..algorithms.depth_limited import depth_limited_search
from ..algorithms.dfs import depth_first_search
from ..algorithms.ids import iterative_deepening_search
from ..algorithms.ucs import uniform_cost_search
from ..core.metrics import SearchResult, run_search
from ..core.problem import Problem
from ..problems.eight_puzzle import EightPuzzle, parse_row
from ..problems.romania import romania_problem

RESULTS_JSON = Path(__file__).with_name("results.json")

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def load_problems() -> List[Tuple[str, Problem]]:
    return [
        (f"8-puzzle {config.PUZZLE_ROW}", EightPuzzle.from_row(parse_row(config.PUZZLE_ROW))),
        ("Romania Arad->Bucharest", romania_problem()),
    ]

def load_algos(dls_limit: int = config.DLS_LIMIT,
               ids_max_depth: int = config.IDS_MAX_DEPTH) -> List[Tuple[str, Callable, Dict[str, Any]]]:
    return [
        ("BFS", breadth_first_search, {}),
        ("UCS", uniform_cost_search, {}),
        ("DFS", depth_first_search, {}),
        (f"DLS(l={dls_limit})", depth_limited_search, {"limit": dls_limit}),
        ("IDS", iterative_deepening_search, {"max_depth": ids_max_depth}),
    ]

def run_benchmarks(problems=None, algos=None, track_memory: bool = True) -> List[Dict[str, Any]]:
    rows = []
    for label, problem in (problems or load_problems()):
        print(f"== {label}")
        for name, fn, kwargs in (algos or load_algos()):
            print(f"→ Running {name} ...")
            r: SearchResult = run_search(name, fn, problem, track_memory=track_memory, **kwargs)
            if r.error:
                print(f"  {name}: ERROR {r.error}")
            else:
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
            row = r.to_row()
            row["problem"] = label
            rows.append(row)
    return rows

def main(out_path: Optional[Path] = None):
    config.setup_logging()
    rows = run_benchmarks()
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    out_path = out_path or RESULTS_JSON
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")
    return out

if __name__ == "__main__":
    main()
