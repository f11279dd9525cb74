from __future__ import annotations
import itertools
import logging
from typing import Optional
from ..core.node import Node
from ..core.problem import Problem
from .depth_limited import limited_dfs
from .graph_search import Observer

logger = logging.getLogger(__name__)

def iterative_deepening_search(problem: Problem, max_depth: Optional[int] = None,
                               on_expand: Optional[Observer] = None) -> Optional[Node]:
    """
    Iterative Deepening Search (tree-like). Repeats depth-limited search with limits 0, 1, 2, ...

    Stops with None when an iteration finishes without any cutoff (the whole
    tree is shallower than the limit) or once max_depth has been tried.
    With max_depth=None an unsolvable *cyclic* space never stops.
    """
    root = Node.root(problem)
    limits = itertools.count() if max_depth is None else range(max_depth + 1)

    for limit in limits:
        goal_node, cutoff = limited_dfs(root, limit, on_expand=on_expand)
        if goal_node is not None:
            logger.debug("IDS found goal with limit %d", limit)
            return goal_node
        if not cutoff:
            logger.debug("IDS: tree exhausted at limit %d", limit)
            break  # fully explored up to `limit`; nothing deeper

    return None
