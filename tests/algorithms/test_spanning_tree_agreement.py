"""Cross-checks between spanning-tree strategies and against NetworkX."""

import networkx as nx
import pytest

from graphsolve.algorithms.kruskal import Kruskal
from graphsolve.algorithms.prim import Prim
from graphsolve.lib.nx import load_networkx


@pytest.mark.parametrize("solver_cls", [Prim, Kruskal])
def test_diamond_mst(solver_cls, diamond):
    solver = solver_cls()
    for src, dst, cost in diamond:
        solver.add_edge(src, dst, cost)
    tree = solver.solve()
    assert tree.total_cost == 1 + 2 + 1
    assert {(e.src, e.dst) for e in tree.edges} == {(0, 2), (2, 1), (1, 3)}


def test_prim_and_kruskal_agree(connected_random_graph):
    prim = Prim()
    kruskal = Kruskal()
    load_networkx(connected_random_graph, prim)
    load_networkx(connected_random_graph, kruskal)

    prim_tree = prim.solve()
    kruskal_tree = kruskal.solve()

    assert prim_tree.total_cost == kruskal_tree.total_cost
    expected = nx.minimum_spanning_tree(connected_random_graph, weight="cost")
    assert prim_tree.total_cost == expected.size(weight="cost")
    n = connected_random_graph.number_of_nodes()
    assert len(prim_tree.edges) == len(kruskal_tree.edges) == n - 1


def test_prim_and_kruskal_differ_on_forest(two_components):
    prim = Prim()
    kruskal = Kruskal()
    for src, dst, cost in two_components:
        prim.add_edge(src, dst, cost)
        kruskal.add_edge(src, dst, cost)

    assert prim.solve().total_cost == 3
    assert kruskal.solve().total_cost == 3 + 7


def test_kruskal_forest_matches_networkx(random_graph):
    kruskal = Kruskal()
    load_networkx(random_graph, kruskal)
    expected = nx.minimum_spanning_tree(random_graph, weight="cost")
    assert kruskal.solve().total_cost == expected.size(weight="cost")
