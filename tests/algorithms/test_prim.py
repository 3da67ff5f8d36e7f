import pytest

from graphsolve.algorithms.prim import Prim
from graphsolve.config import SolverConfig
from graphsolve.exceptions import EmptyGraph, InvalidVertex
from graphsolve.types.base import Edge, SpanningTree


def test_prim_diamond(diamond):
    prim = Prim(capacity=4)
    for src, dst, cost in diamond:
        prim.add_edge(src, dst, cost)

    tree = prim.solve()
    assert isinstance(tree, SpanningTree)
    assert tree.total_cost == 4
    # Selection order follows the frontier from vertex 0
    assert tree.edges == (Edge(0, 2, 1), Edge(2, 1, 2), Edge(1, 3, 1))


def test_prim_result_unpacks(diamond):
    prim = Prim()
    for src, dst, cost in diamond:
        prim.add_edge(src, dst, cost)
    total, edges = prim.solve()
    assert total == 4
    assert len(edges) == 3


def test_prim_disconnected_covers_root_component(two_components):
    prim = Prim()
    for src, dst, cost in two_components:
        prim.add_edge(src, dst, cost)
    tree = prim.solve()
    assert tree.total_cost == 3
    assert tree.edges == (Edge(0, 1, 3),)
    assert tree.vertices == (0, 1)


def test_prim_custom_root(two_components):
    prim = Prim(root=3)
    for src, dst, cost in two_components:
        prim.add_edge(src, dst, cost)
    assert prim.solve().edges == (Edge(2, 3, 7),)

    from_config = Prim(config=SolverConfig(prim_root=2))
    assert from_config.root == 2


def test_prim_edge_inserted_backwards_is_usable():
    prim = Prim()
    # Root 0 only appears as the destination
    prim.add_edge(1, 0, 5)
    prim.add_edge(2, 1, 1)
    tree = prim.solve()
    assert tree.total_cost == 6
    assert set(tree.edges) == {Edge(1, 0, 5), Edge(2, 1, 1)}


def test_prim_ignores_self_loops_and_parallel_edges():
    prim = Prim()
    prim.add_edge(0, 0, -10)
    prim.add_edge(0, 1, 9)
    prim.add_edge(0, 1, 4)
    tree = prim.solve()
    assert tree.total_cost == 4
    assert tree.edges == (Edge(0, 1, 4),)


def test_prim_equal_costs_resolved_by_insertion_order():
    prim = Prim()
    prim.add_edge(0, 1, 1)
    prim.add_edge(0, 2, 1)
    prim.add_edge(1, 2, 1)
    assert prim.solve().edges == (Edge(0, 1, 1), Edge(0, 2, 1))


def test_prim_grows_past_capacity():
    prim = Prim(capacity=2)
    prim.add_edge(0, 6, 2)
    assert prim.capacity == 7
    assert prim.num_vertices == 2
    assert prim.num_edges == 1
    assert prim.solve().total_cost == 2


def test_prim_errors():
    prim = Prim()
    with pytest.raises(EmptyGraph):
        prim.solve()
    prim.add_edge(1, 2, 1)
    # Root 0 never appeared in an edge
    with pytest.raises(InvalidVertex):
        prim.solve()
    with pytest.raises(InvalidVertex):
        prim.add_edge(-3, 1, 1)
    with pytest.raises(ValueError):
        Prim(capacity=-1)
