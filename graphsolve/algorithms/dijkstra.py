"""Dijkstra shortest paths with a binary heap."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from graphsolve.algorithms.base import ShortestPathSolver
from graphsolve.config import SolverConfig
from graphsolve.logging import get_logger
from graphsolve.types.base import Cost, Edge, VertexID

LOGGER = get_logger(__name__)


class Dijkstra(ShortestPathSolver):
    """Single-source shortest paths for non-negative edge costs.

    Outgoing edges live in a list indexed by vertex id. The list is pre-sized
    from ``capacity`` and grown explicitly to the highest id inserted.

    Negative costs are accepted with a warning; results are then not
    guaranteed to be shortest.

    Complexity: O(E log V).

    Args:
        capacity: Expected number of vertex slots.
        infinity: Distance reported for unreachable vertices.
        config: Solver defaults.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        infinity: Optional[Cost] = None,
        config: Optional[SolverConfig] = None,
    ) -> None:
        super().__init__(infinity=infinity, config=config)
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}.")
        self._adjacency: List[List[Edge]] = [[] for _ in range(capacity or 0)]

    @property
    def capacity(self) -> int:
        """Number of allocated vertex slots."""
        return len(self._adjacency)

    def _ensure_capacity(self, vertex: VertexID) -> None:
        missing = vertex + 1 - len(self._adjacency)
        if missing > 0:
            self._adjacency.extend([] for _ in range(missing))

    def add_directed_edge(self, src: VertexID, dst: VertexID, cost: Cost) -> None:
        self._track(src, dst)
        if cost < 0:
            LOGGER.warning(
                "Negative cost %s on edge %s->%s; Dijkstra results may be wrong",
                cost,
                src,
                dst,
            )
        self._ensure_capacity(max(src, dst))
        self._adjacency[src].append(Edge(src, dst, cost))

    def out_edges(self, vertex: VertexID) -> List[Edge]:
        """Outgoing edges of ``vertex`` in insertion order."""
        if 0 <= vertex < len(self._adjacency):
            return list(self._adjacency[vertex])
        return []

    def _distances(self, src: VertexID) -> Dict[VertexID, Cost]:
        inf = self._infinity
        adjacency = self._adjacency
        dists: Dict[VertexID, Cost] = {v: inf for v in self.vertices}
        dists[src] = 0
        min_pq: List[Tuple[Cost, VertexID]] = [(0, src)]
        settled = 0

        while min_pq:
            current_cost, vertex = heappop(min_pq)
            if current_cost > dists[vertex]:
                continue
            settled += 1
            for edge in adjacency[vertex]:
                new_cost = current_cost + edge.cost
                if new_cost < dists[edge.dst]:
                    dists[edge.dst] = new_cost
                    heappush(min_pq, (new_cost, edge.dst))

        LOGGER.debug("Dijkstra from %s settled %d vertices", src, settled)
        return dists
