# statesearch/algorithms/graph_search.py
# Generic frontier-driven graph search. DFS, BFS and UCS differ only in the frontier handed in.
from __future__ import annotations
import logging
from typing import Callable, Optional, Set
from ..core.frontiers import Frontier
from ..core.node import Node
from ..core.problem import Problem

logger = logging.getLogger(__name__)

Observer = Callable[[Node], None]


def graph_search(problem: Problem, frontier: Frontier, on_expand: Optional[Observer] = None) -> Optional[Node]:
    """
    Pop, goal-test, expand, push unexplored children; None once the frontier runs dry.

    Goal test happens on pop, not on generation, so with a PriorityQueue the
    returned node is a cheapest one. Every expanded node stays in `explored`
    until the call returns: memory is O(distinct expanded states).
    """
    frontier.add(Node.root(problem))
    explored: Set[Node] = set()

    while not frontier.is_empty():
        node = frontier.remove()
        if node in explored:
            # stale duplicate (e.g. a costlier copy left behind in the priority queue)
            continue
        if node.problem.test_goal():
            logger.debug("goal at depth %d (cost %g) after %d expansions", node.depth, node.path_cost, len(explored))
            return node

        explored.add(node)
        if on_expand is not None:
            on_expand(node)
        for child in node.expand():
            if child not in explored:
                frontier.add(child)

    logger.debug("frontier exhausted after %d expansions", len(explored))
    return None
