# statesearch/core/utils.py
# Helpers around a finished search: solution extraction, replay, and a logging observer for expansions.
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple
from .node import Node
from .problem import Action, Problem

logger = logging.getLogger(__name__)


def reconstruct_path(node: Optional[Node]) -> Tuple[List[Action], float]:
    if node is None:
        return [], float("inf")
    return node.solution(), float(node.path_cost)


def replay(problem: Problem, actions: Iterable[Action]) -> Problem:
    """Apply actions one by one from problem; IllegalActionError surfaces on the first bad one."""
    cur = problem
    for a in actions:
        cur = cur.result(a)
    return cur


def log_expansion(node: Node) -> None:
    """Ready-made on_expand observer."""
    logger.debug("step.%d %r - %s", node.depth, node.action, node.problem.describe())
