# statesearch/core/node.py
# A Node is one vertex of the search tree: an owned Problem snapshot plus lineage (parent, action, depth, cost).
from __future__ import annotations
from typing import List, Optional
from .problem import Action, Problem


class Node:
    __slots__ = ("problem", "parent", "action", "path_cost", "depth", "_fingerprint")

    def __init__(self, problem: Problem, parent: Optional[Node] = None, action: Optional[Action] = None,
                 path_cost: float = 0.0, depth: int = 0):
        self.problem = problem
        self.parent = parent
        self.action = action
        self.path_cost = float(path_cost)
        self.depth = depth
        self._fingerprint = problem.fingerprint()

    @classmethod
    def root(cls, problem: Problem) -> Node:
        return cls(problem)

    @property
    def fingerprint(self) -> int:
        return self._fingerprint

    def child_node(self, action: Action) -> Node:
        child = self.problem.result(action)
        cost = child.path_cost()
        if cost is None:
            raise ValueError(
                f"path_cost returned None after {action!r} from {self.problem.describe()}. "
                "Check your problem's RESULT/cost mapping."
            )
        return Node(
            problem=child,
            parent=self,
            action=action,
            path_cost=self.path_cost + float(cost),
            depth=self.depth + 1,
        )

    def expand(self) -> List[Node]:
        """One child per legal action, in the order ACTIONS returned them."""
        return [self.child_node(a) for a in self.problem.actions()]

    def path(self) -> List[Node]:
        nodes = []
        cur: Optional[Node] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes

    def solution(self) -> List[Action]:
        return [n.action for n in self.path()[1:]]

    # Same state reached by another route == same node, as far as dedup is concerned.
    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._fingerprint == other._fingerprint

    def __hash__(self) -> int:
        return hash(self._fingerprint)

    def __repr__(self) -> str:
        return f"<Node depth={self.depth} cost={self.path_cost:g} action={self.action!r} {self.problem.describe()}>"
