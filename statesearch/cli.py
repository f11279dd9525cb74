# statesearch/cli.py
# Solve one 8-puzzle from the command line:  python -m statesearch.cli 1,2,3,4,0,5,7,8,6 --algo bfs
from __future__ import annotations

import argparse
from typing import Callable, Dict, List, Optional

from . import config
from .algorithms.bfs import breadth_first_search
from .algorithms.depth_limited import depth_limited_search
from .algorithms.dfs import depth_first_search
from .algorithms.ids import iterative_deepening_search
from .algorithms.ucs import uniform_cost_search
from .core.metrics import ExpansionCounter
from .core.node import Node
from .core.problem import Problem
from .core.utils import log_expansion
from .problems.eight_puzzle import DEFAULT_GOAL, EightPuzzle, InvalidPuzzleError, PuzzleState, parse_row

Strategy = Callable[[Problem, Callable[[Node], None], argparse.Namespace], Optional[Node]]

STRATEGIES: Dict[str, Strategy] = {
    "dfs": lambda p, obs, args: depth_first_search(p, on_expand=obs),
    "bfs": lambda p, obs, args: breadth_first_search(p, on_expand=obs),
    "ucs": lambda p, obs, args: uniform_cost_search(p, on_expand=obs),
    "dls": lambda p, obs, args: depth_limited_search(p, args.limit, on_expand=obs),
    "ids": lambda p, obs, args: iterative_deepening_search(p, max_depth=args.max_depth, on_expand=obs),
}


def _row(text: str):
    try:
        return parse_row(text)
    except InvalidPuzzleError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="statesearch", description="Uninformed search on the 8-puzzle.")
    ap.add_argument("row", nargs="?", type=_row, default=config.PUZZLE_ROW,
                    help="tiles in row-major order, 0 for the blank, e.g. 1,2,3,4,0,5,7,8,6")
    ap.add_argument("--goal", type=_row, default=DEFAULT_GOAL, help="goal layout (default 1..8 then blank)")
    ap.add_argument("--algo", choices=sorted(STRATEGIES), default="bfs")
    ap.add_argument("--limit", type=int, default=config.DLS_LIMIT, help="depth limit for dls")
    ap.add_argument("--max-depth", type=int, default=config.IDS_MAX_DEPTH, help="deepest limit ids will try")
    ap.add_argument("--verbose", action="store_true", help="log every expansion")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.limit < 0:
        ap.error("--limit must be >= 0")
    config.setup_logging("DEBUG" if args.verbose else None)

    row = args.row
    state = PuzzleState(row)
    if not state.is_solvable(args.goal):
        print(f"Unsolvable problem: {list(row)}")
        return 1

    counter = ExpansionCounter()
    if args.verbose:
        def observer(node: Node) -> None:
            counter(node)
            log_expansion(node)
    else:
        observer = counter

    node = STRATEGIES[args.algo](EightPuzzle(state, args.goal), observer, args)
    if node is None:
        print(f"no solution for {list(row)}")
        return 1

    print(f"Found solution after {node.depth} steps: {[str(a) for a in node.solution()]}")
    print(f"  path cost={node.path_cost:g} expanded={counter.count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
