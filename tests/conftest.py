from collections import deque

import pytest

from statesearch.core.problem import Problem, require_legal
from statesearch.problems.graph import GraphProblem, undirected


class DeadEnd(Problem):
    """A non-goal state with nowhere to go."""
    def actions(self):
        return []

    def result(self, action):
        require_legal(self, action)

    def test_goal(self):
        return False

    def path_cost(self):
        return 0.0

    def fingerprint(self):
        return 0


class Counter:
    def __init__(self):
        self.nodes = []

    def __call__(self, node):
        self.nodes.append(node)

    @property
    def count(self):
        return len(self.nodes)


def shortest_hops(graph, start, goals):
    """Brute-force BFS over the raw adjacency dict; None if unreachable."""
    dist = {start: 0}
    q = deque([start])
    while q:
        v = q.popleft()
        if v in goals:
            return dist[v]
        for w in graph.get(v, {}):
            if w not in dist:
                dist[w] = dist[v] + 1
                q.append(w)
    return None


# S - A - C - G  plus a long detour S - B - D - E - G and a shortcut A - G
SMALL_EDGES = [
    ("S", "B", 1), ("S", "A", 1), ("A", "C", 1), ("C", "G", 1),
    ("B", "D", 1), ("D", "E", 1), ("E", "G", 1), ("A", "G", 1),
    ("X", "Y", 1),  # unreachable island
]


@pytest.fixture
def small_graph():
    return undirected(SMALL_EDGES)


@pytest.fixture
def observer():
    return Counter()


@pytest.fixture
def lazy_deletion_graph():
    # the cheap way into B is only discovered after B was queued at cost 5
    return {
        "S": {"A": 1, "B": 5},
        "A": {"B": 1},
        "B": {"G": 1},
        "G": {},
    }


@pytest.fixture
def make_graph_problem():
    def make(graph, start, goal, **kw):
        return GraphProblem(graph, start, goal, **kw)
    return make
