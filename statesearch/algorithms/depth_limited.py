# statesearch/algorithms/depth_limited.py
# Depth-Limited Search (tree-like): DFS that refuses to expand below a given depth. No explored set.
from __future__ import annotations
from typing import List, Optional, Tuple
from ..core.node import Node
from ..core.problem import Problem
from .graph_search import Observer

def limited_dfs(root: Node, limit: int, on_expand: Optional[Observer] = None) -> Tuple[Optional[Node], bool]:
    """
    Returns (goal_node or None, cutoff). cutoff is True when some node was left
    unexpanded because the limit ran out, i.e. a deeper search might still succeed.

    Same visiting order as the textbook recursion (children in ACTIONS order,
    first hit wins) but driven by an explicit stack, so a big limit can't
    blow the interpreter's recursion limit. States can be revisited; on a
    cyclic space the work grows with b**limit.
    """
    if limit < 0:
        raise ValueError(f"depth limit must be >= 0, got {limit}")

    cutoff = False
    stack: List[Tuple[Node, int]] = [(root, limit)]
    while stack:
        node, depth_left = stack.pop()
        if node.problem.test_goal():
            return node, False
        if depth_left == 0:
            cutoff = True
            continue
        if on_expand is not None:
            on_expand(node)
        # reversed so the first action's subtree is searched first
        for child in reversed(node.expand()):
            stack.append((child, depth_left - 1))
    return None, cutoff

def depth_limited_search(problem: Problem, limit: int, on_expand: Optional[Observer] = None) -> Optional[Node]:
    node, _ = limited_dfs(Node.root(problem), limit, on_expand=on_expand)
    return node
