import pytest

from statesearch.core.problem import IllegalActionError
from statesearch.problems.checks import sanity_check_problem
from statesearch.problems.graph import GraphProblem, undirected
from statesearch.problems.grid import GridProblem, make_grid_problem
from statesearch.problems.romania import ROMANIA, romania_problem


def test_graph_actions_keep_insertion_order(small_graph):
    assert GraphProblem(small_graph, "S", "G").actions() == ["B", "A"]


def test_graph_result_carries_step_cost(lazy_deletion_graph):
    p = GraphProblem(lazy_deletion_graph, "S", "G")
    assert p.path_cost() == 0.0
    assert p.result("B").path_cost() == 5.0
    assert p.result("B").state == "B"
    assert p.state == "S"


def test_graph_rejects_non_neighbour(small_graph):
    with pytest.raises(IllegalActionError):
        GraphProblem(small_graph, "S", "G").result("G")


def test_graph_vertex_without_entry_is_dead_end():
    assert GraphProblem({"a": {"b": 1}}, "b", "z").actions() == []


def test_graph_goal_collection(small_graph):
    assert GraphProblem(small_graph, "C", ["C", "G"]).test_goal()
    assert not GraphProblem(small_graph, "S", {"C", "G"}).test_goal()


def test_graph_tuple_vertices_are_single_goals():
    grid_like = {(0, 0): {(0, 1): 1}, (0, 1): {}}
    assert GraphProblem(grid_like, (0, 0), (0, 1)).result((0, 1)).test_goal()


def test_undirected_is_symmetric():
    g = undirected([("a", "b", 2), ("b", "c", 3)])
    assert g == {"a": {"b": 2}, "b": {"a": 2, "c": 3}, "c": {"b": 3}}


def test_romania_value_is_straight_line_distance():
    p = romania_problem()
    assert p.value() == 366.0
    assert p.result("Sibiu").value() == 253.0
    assert romania_problem("Arad", "Iasi").value() == 0.0


def test_romania_unknown_city():
    with pytest.raises(ValueError):
        romania_problem("Atlantis")


def test_romania_roads_are_symmetric():
    for a, roads in ROMANIA.graph.items():
        for b, d in roads.items():
            assert ROMANIA.graph[b][a] == d


def test_grid_actions_avoid_walls_and_edges():
    p = make_grid_problem()
    assert p.actions() == ["Down", "Right"]
    assert GridProblem(3, 3, (1, 1), (2, 2), walls={(0, 1)}).actions() == ["Down", "Left", "Right"]


def test_grid_value_is_manhattan():
    assert make_grid_problem().value() == 10.0


@pytest.mark.parametrize("problem", [
    romania_problem(),
    make_grid_problem(),
    GraphProblem(undirected([(1, 2, 1), (2, 3, 4)]), 1, 3),
])
def test_domains_honour_problem_contract(problem):
    assert sanity_check_problem(problem).startswith("OK")
