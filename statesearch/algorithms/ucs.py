# Uniform Cost Search: the generic traversal over a priority queue keyed by cumulative path cost g(n).
# statesearch/algorithms/ucs.py
from __future__ import annotations
from typing import Optional
from ..core.frontiers import PriorityQueue
from ..core.node import Node
from ..core.problem import Problem
from .graph_search import Observer, graph_search

def uniform_cost_search(problem: Problem, on_expand: Optional[Observer] = None) -> Optional[Node]:
    return graph_search(problem, PriorityQueue(key=lambda n: n.path_cost), on_expand=on_expand)
