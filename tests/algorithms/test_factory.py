import pytest

from graphsolve.algorithms.bellman_ford import BellmanFord
from graphsolve.algorithms.dijkstra import Dijkstra
from graphsolve.algorithms.factory import shortest_path_solver, spanning_tree_solver
from graphsolve.algorithms.kruskal import Kruskal
from graphsolve.algorithms.prim import Prim
from graphsolve.algorithms.warshall_floyd import WarshallFloyd
from graphsolve.types.base import ShortestPathAlgorithm, SpanningTreeAlgorithm


@pytest.mark.parametrize(
    "algorithm, expected",
    [
        (ShortestPathAlgorithm.BELLMAN_FORD, BellmanFord),
        (ShortestPathAlgorithm.DIJKSTRA, Dijkstra),
        (ShortestPathAlgorithm.WARSHALL_FLOYD, WarshallFloyd),
        ("bellman_ford", BellmanFord),
        ("Dijkstra", Dijkstra),
        ("warshall-floyd", WarshallFloyd),
        (3, WarshallFloyd),
    ],
)
def test_shortest_path_solver_selection(algorithm, expected):
    assert type(shortest_path_solver(algorithm)) is expected


def test_shortest_path_solver_default_and_kwargs():
    solver = shortest_path_solver(infinity=10**9)
    assert isinstance(solver, Dijkstra)
    assert solver.infinity == 10**9

    wf = shortest_path_solver("warshall_floyd", capacity=4)
    assert wf.capacity == 4


@pytest.mark.parametrize(
    "algorithm, expected",
    [
        (SpanningTreeAlgorithm.PRIM, Prim),
        (SpanningTreeAlgorithm.KRUSKAL, Kruskal),
        ("PRIM", Prim),
        ("kruskal", Kruskal),
    ],
)
def test_spanning_tree_solver_selection(algorithm, expected):
    assert type(spanning_tree_solver(algorithm)) is expected


def test_spanning_tree_solver_kwargs():
    assert isinstance(spanning_tree_solver(), Kruskal)
    prim = spanning_tree_solver("prim", root=3, capacity=5)
    assert prim.root == 3
    assert prim.capacity == 5


def test_unknown_algorithm_names():
    with pytest.raises(ValueError, match="Valid values are"):
        shortest_path_solver("astar")
    with pytest.raises(ValueError):
        spanning_tree_solver("boruvka")
