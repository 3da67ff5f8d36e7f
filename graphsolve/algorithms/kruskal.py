"""Kruskal's minimum spanning forest."""

from __future__ import annotations

from typing import List

from graphsolve.algorithms.base import SpanningTreeSolver
from graphsolve.algorithms.disjoint_set import DisjointSet
from graphsolve.exceptions import EmptyGraph
from graphsolve.logging import get_logger
from graphsolve.types.base import Cost, Edge, SpanningTree

LOGGER = get_logger(__name__)


class Kruskal(SpanningTreeSolver):
    """Scan edges by ascending cost, keeping those that join two components.

    Disconnected graphs yield a minimum spanning forest with one tree per
    component. Equal-cost edges are considered in insertion order.

    Complexity: O(E log E).
    """

    def solve(self) -> SpanningTree:
        if not self._vertices:
            raise EmptyGraph()

        pool = sorted(self.edges(), key=lambda e: e.cost)
        groups = DisjointSet(len(self._adjacency))
        total: Cost = 0
        selected: List[Edge] = []

        for edge in pool:
            if groups.union(edge.src, edge.dst):
                total += edge.cost
                selected.append(edge)

        LOGGER.debug(
            "Kruskal scanned %d edges, selected %d into %d components",
            len(pool),
            len(selected),
            groups.group_count - (len(self._adjacency) - self.num_vertices),
        )
        return SpanningTree(total_cost=total, edges=tuple(selected))
