"""Global pytest configuration and shared fixture graphs.

Graphs are plain ``(src, dst, cost)`` edge lists so every solver family can
load the same fixture.
"""

from __future__ import annotations

import random
from typing import List, Tuple

import networkx as nx
import pytest

EdgeList = List[Tuple[int, int, int]]


@pytest.fixture
def diamond() -> EdgeList:
    # Cost (undirected):
    #        [4]
    #    0 ───────── 1
    #    │ ╲         │
    # [1]│   ╲[2]    │[1]
    #    │     ╲     │
    #    2 ───────── 3
    #        [5]
    # (the diagonal is 2-1)
    return [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1), (2, 3, 5)]


@pytest.fixture
def negative_cycle() -> EdgeList:
    # Directed: 0 -[1]-> 1 -[-5]-> 2 -[1]-> 0, total -3
    return [(0, 1, 1), (1, 2, -5), (2, 0, 1)]


@pytest.fixture
def two_components() -> EdgeList:
    # {0, 1} and {2, 3}, no edge between them
    return [(0, 1, 3), (2, 3, 7)]


@pytest.fixture
def sparse_ids() -> EdgeList:
    # Only vertices 0 and 5 exist
    return [(0, 5, 2)]


def _random_graph(seed: int, n: int, m: int, max_cost: int = 20) -> nx.Graph:
    rng = random.Random(seed)
    G = nx.gnm_random_graph(n, m, seed=seed)
    for u, v in G.edges():
        G.edges[u, v]["cost"] = rng.randint(0, max_cost)
    return G


@pytest.fixture
def random_graph() -> nx.Graph:
    """Undirected random graph with integer costs, possibly disconnected."""
    return _random_graph(seed=7, n=12, m=30)


@pytest.fixture
def connected_random_graph() -> nx.Graph:
    """Undirected connected random graph with integer costs."""
    seed = 11
    while True:
        G = _random_graph(seed=seed, n=15, m=40)
        if nx.is_connected(G):
            return G
        seed += 1
