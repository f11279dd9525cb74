from __future__ import annotations
from typing import Optional
from ..core.frontiers import FIFOQueue
from ..core.node import Node
from ..core.problem import Problem
from .graph_search import Observer, graph_search

def breadth_first_search(problem: Problem, on_expand: Optional[Observer] = None) -> Optional[Node]:
    """Shallowest goal first; with uniform step costs that is also a cheapest one."""
    return graph_search(problem, FIFOQueue(), on_expand=on_expand)
