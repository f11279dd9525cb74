# statesearch/algorithms/dfs.py
# Depth-First Search (graph-search flavour): generic traversal over a LIFO stack.
from __future__ import annotations
from typing import Optional
from ..core.frontiers import LIFOStack
from ..core.node import Node
from ..core.problem import Problem
from .graph_search import Observer, graph_search

def depth_first_search(problem: Problem, on_expand: Optional[Observer] = None) -> Optional[Node]:
    return graph_search(problem, LIFOStack(), on_expand=on_expand)
