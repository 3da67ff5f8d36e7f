"""Configuration classes for graphsolve solvers."""

import math
from dataclasses import dataclass
from typing import Optional

from graphsolve.types.base import Cost


@dataclass
class SolverConfig:
    """Defaults shared by shortest-path and spanning-tree solvers."""

    # Distance reported for unreachable vertices
    infinity: Cost = math.inf

    # Initial side length of the WarshallFloyd cost matrix
    default_capacity: int = 16

    # Relaxation pass bound for BellmanFord; None means V - 1
    bellman_ford_max_passes: Optional[int] = None

    # Starting vertex for Prim
    prim_root: int = 0

    def resolve_infinity(self, infinity: Optional[Cost] = None) -> Cost:
        """Return ``infinity`` if given, otherwise the configured sentinel."""
        return self.infinity if infinity is None else infinity

    def resolve_max_passes(
        self, num_vertices: int, max_passes: Optional[int] = None
    ) -> int:
        """Return the BellmanFord pass bound for a graph of ``num_vertices``.

        An explicit ``max_passes`` wins over the configured value; when both are
        None the classic ``V - 1`` bound applies.
        """
        if max_passes is None:
            max_passes = self.bellman_ford_max_passes
        if max_passes is None:
            max_passes = num_vertices - 1
        return max(0, max_passes)


# Global configuration instance
DEFAULT_CONFIG = SolverConfig()
