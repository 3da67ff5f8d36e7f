"""Warshall-Floyd all-pairs shortest paths over a dense cost matrix."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

import numpy as np

from graphsolve.algorithms.base import ShortestPathSolver
from graphsolve.config import SolverConfig
from graphsolve.exceptions import EmptyGraph, NonConvergence
from graphsolve.graph.matrix import CostMatrix
from graphsolve.logging import get_logger
from graphsolve.types.base import Cost, VertexID

LOGGER = get_logger(__name__)


class WarshallFloyd(ShortestPathSolver):
    """All-pairs shortest paths.

    Edges are written straight into a square `CostMatrix`; parallel edges keep
    the cheapest cost. The matrix starts at ``capacity`` (or
    ``config.default_capacity``) and grows to ``max(src, dst) + 1`` when a
    larger id is inserted.

    Relaxation happens in place on the first query after an insertion. Later
    queries reuse the relaxed matrix until the next insertion, whose cost is
    folded into the already-relaxed entries before relaxing again.

    Negative edge costs are allowed. A query from ``src`` raises
    `NonConvergence` when ``src`` reaches a vertex with a negative diagonal
    entry, i.e. a negative cycle. Cycles ``src`` cannot reach are ignored, as
    in `BellmanFord`. `distance_matrix` covers every source, so any negative
    cycle makes it raise.

    Complexity: O(C^3) per relaxation, where C is the matrix size.

    Args:
        capacity: Initial matrix size.
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
        if capacity is None:
            capacity = self.config.default_capacity
        self._matrix = CostMatrix(capacity, self._infinity)
        self._dirty = False

    @property
    def capacity(self) -> int:
        """Current side length of the cost matrix."""
        return self._matrix.size

    @property
    def matrix(self) -> CostMatrix:
        """Underlying cost matrix, relaxed in place by queries."""
        return self._matrix

    def add_directed_edge(self, src: VertexID, dst: VertexID, cost: Cost) -> None:
        self._track(src, dst)
        needed = max(src, dst) + 1
        if needed > self._matrix.size:
            LOGGER.debug(
                "Growing cost matrix from %d to %d", self._matrix.size, needed
            )
            self._matrix.resize(needed)
        if cost < self._matrix[src, dst]:
            self._matrix[src, dst] = cost
        self._dirty = True

    def _relax(self) -> None:
        if not self._dirty:
            return
        self._matrix.relax_all()
        self._dirty = False
        LOGGER.debug(
            "Relaxed %dx%d cost matrix for %d vertices",
            self._matrix.size,
            self._matrix.size,
            self.num_vertices,
        )

    def _check_negative_cycles(self, sources: Iterable[VertexID]) -> None:
        rows = self._matrix.rows
        cycle_vertices = [v for v in self._vertices if rows[v][v] < 0]
        for src in sources:
            for v in cycle_vertices:
                if rows[src][v] < self._infinity:
                    LOGGER.debug("Negative cycle through %s reachable from %s", v, src)
                    raise NonConvergence(
                        self._matrix.size,
                        f"Negative cycle through vertex {v}; distances are undefined.",
                    )

    def _distances(self, src: VertexID) -> Dict[VertexID, Cost]:
        self._relax()
        self._check_negative_cycles((src,))
        row = self._matrix.rows[src]
        return {v: row[v] for v in self.vertices}

    def distance_matrix(self) -> np.ndarray:
        """All-pairs distances over the tracked vertices.

        Rows and columns follow `vertices` order.

        Raises:
            EmptyGraph: If no edge has been inserted.
            NonConvergence: If the graph has a negative cycle.
        """
        if not self._vertices:
            raise EmptyGraph()
        self._relax()
        order = self.vertices
        self._check_negative_cycles(order)
        rows = self._matrix.rows
        return np.array([[rows[i][j] for j in order] for i in order])
