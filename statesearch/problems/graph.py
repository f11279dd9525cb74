# statesearch/problems/graph.py
# Route finding on an explicit weighted graph. One instance = "standing at this vertex".
from __future__ import annotations
from typing import Collection, Hashable, List, Mapping, Optional, Union

from ..core.problem import Problem, require_legal, stable_fingerprint

Vertex = Hashable
Graph = Mapping[Vertex, Mapping[Vertex, float]]


class GraphProblem(Problem):
    """
    - State: the current vertex
    - ACTIONS(s): neighbours of s, in the mapping's insertion order
    - RESULT(s,a): a (the action *is* the neighbour)
    - step cost: graph[s][a], stored on the successor
    - goal: one vertex, or a set/list of them (tuples count as a single vertex)
    - vertices with no entry in graph are dead ends
    - value(): estimates[s] when given (e.g. straight-line distance), else 0
    """
    def __init__(self, graph: Graph, state: Vertex, goal: Union[Vertex, Collection[Vertex]],
                 step_cost: float = 0.0, estimates: Optional[Mapping[Vertex, float]] = None):
        self.graph = graph
        self.state = state
        self.goals = frozenset(goal) if isinstance(goal, (set, frozenset, list)) else frozenset([goal])
        self._step_cost = float(step_cost)
        self.estimates = estimates or {}

    def actions(self) -> List[Vertex]:
        return list(self.graph.get(self.state, {}).keys())

    def result(self, action: Vertex) -> GraphProblem:
        require_legal(self, action)
        return GraphProblem(self.graph, action, self.goals, step_cost=self.graph[self.state][action], estimates=self.estimates)

    def test_goal(self) -> bool:
        return self.state in self.goals

    def path_cost(self) -> float:
        return self._step_cost

    def value(self) -> float:
        return float(self.estimates.get(self.state, 0.0))

    def describe(self) -> str:
        return f"at {self.state!r}"

    def fingerprint(self) -> int:
        return stable_fingerprint(self.state)


def undirected(edges) -> dict:
    """[(u, v, cost), ...] -> symmetric adjacency dict, neighbours in edge order."""
    graph: dict = {}
    for u, v, cost in edges:
        graph.setdefault(u, {})[v] = cost
        graph.setdefault(v, {})[u] = cost
    return graph
