"""Prim's minimum spanning tree."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Tuple

from graphsolve.algorithms.base import SpanningTreeSolver
from graphsolve.config import SolverConfig
from graphsolve.logging import get_logger
from graphsolve.types.base import Cost, Edge, SpanningTree, VertexID

LOGGER = get_logger(__name__)


class Prim(SpanningTreeSolver):
    """Grow a tree from ``root`` by repeatedly taking the cheapest frontier edge.

    Only the root's connected component is covered; other vertices are left
    out of the result without error. Equal-cost frontier edges are taken in
    the order they were pushed.

    Complexity: O(E log E).

    Args:
        capacity: Expected number of vertex slots.
        root: Starting vertex. Defaults to ``config.prim_root``.
        config: Solver defaults.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        root: Optional[VertexID] = None,
        config: Optional[SolverConfig] = None,
    ) -> None:
        super().__init__(capacity=capacity, config=config)
        self.root = self.config.prim_root if root is None else root

    def solve(self) -> SpanningTree:
        root = self.root
        self._require_vertex(root)

        visited = [False] * len(self._adjacency)
        seq = count()
        # Entries are (cost, seq, edge, vertex); the root carries no edge
        frontier: List[Tuple[Cost, int, Optional[Edge], VertexID]] = [
            (0, next(seq), None, root)
        ]
        total: Cost = 0
        selected: List[Edge] = []

        while frontier:
            cost, _, edge, vertex = heappop(frontier)
            if visited[vertex]:
                continue
            visited[vertex] = True
            if edge is not None:
                total += cost
                selected.append(edge)
            for out in self._adjacency[vertex]:
                neighbor = out.other(vertex)
                if not visited[neighbor]:
                    heappush(frontier, (out.cost, next(seq), out, neighbor))

        LOGGER.debug(
            "Prim from %s selected %d edges, total cost %s",
            root,
            len(selected),
            total,
        )
        return SpanningTree(total_cost=total, edges=tuple(selected))
