"""Bellman-Ford shortest paths over a flat edge list."""

from __future__ import annotations

from typing import Dict, List, Optional

from graphsolve.algorithms.base import ShortestPathSolver
from graphsolve.config import SolverConfig
from graphsolve.exceptions import NonConvergence
from graphsolve.logging import get_logger
from graphsolve.types.base import Cost, Edge, VertexID

LOGGER = get_logger(__name__)


class BellmanFord(ShortestPathSolver):
    """Edge-list relaxation until no distance changes.

    Negative edge costs are allowed. Termination is guaranteed by a pass bound:
    ``max_passes`` if given, else ``config.bellman_ford_max_passes``, else
    ``V - 1`` where V is the number of distinct vertices. If distances still
    change on the pass after the bound, `NonConvergence` is raised.

    Complexity: O(V * E).

    Args:
        infinity: Distance reported for unreachable vertices.
        max_passes: Relaxation pass bound.
        config: Solver defaults.
    """

    def __init__(
        self,
        infinity: Optional[Cost] = None,
        max_passes: Optional[int] = None,
        config: Optional[SolverConfig] = None,
    ) -> None:
        super().__init__(infinity=infinity, config=config)
        self.max_passes = max_passes
        self._edges: List[Edge] = []

    @property
    def edges(self) -> List[Edge]:
        """Directed edges in insertion order."""
        return list(self._edges)

    def add_directed_edge(self, src: VertexID, dst: VertexID, cost: Cost) -> None:
        self._track(src, dst)
        self._edges.append(Edge(src, dst, cost))

    def _distances(self, src: VertexID) -> Dict[VertexID, Cost]:
        inf = self._infinity
        dists: Dict[VertexID, Cost] = {v: inf for v in self.vertices}
        dists[src] = 0

        bound = self.config.resolve_max_passes(self.num_vertices, self.max_passes)
        # One pass beyond the bound tells convergence apart from a negative cycle
        for passes in range(1, bound + 2):
            updated = False
            for edge in self._edges:
                d_src = dists[edge.src]
                if d_src >= inf:
                    continue
                candidate = d_src + edge.cost
                if candidate < dists[edge.dst]:
                    dists[edge.dst] = candidate
                    updated = True
            if not updated:
                LOGGER.debug(
                    "Bellman-Ford from %s converged after %d passes over %d edges",
                    src,
                    passes,
                    len(self._edges),
                )
                return dists

        LOGGER.debug(
            "Bellman-Ford from %s still relaxing after %d passes", src, bound + 1
        )
        raise NonConvergence(bound + 1)
