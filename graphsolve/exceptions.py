"""Exceptions raised by graphsolve solvers.

Each error also derives from the builtin exception a caller would expect for
the same failure, so ``except KeyError`` around a vertex lookup keeps working.
"""

from __future__ import annotations

from typing import Any, Optional


class GraphSolveError(Exception):
    """Base class for all graphsolve errors."""


class InvalidVertex(GraphSolveError, KeyError):
    """A vertex id is unknown to the solver or cannot be used as an index."""

    def __init__(self, vertex: Any, message: Optional[str] = None) -> None:
        self.vertex = vertex
        super().__init__(message or f"Vertex '{vertex}' is not in the graph.")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead
        return str(self.args[0])


class NonConvergence(GraphSolveError, RuntimeError):
    """Relaxation did not reach a fixpoint within the allowed passes.

    Raised when a negative-cost cycle is reachable from the source.
    """

    def __init__(self, passes: int, message: Optional[str] = None) -> None:
        self.passes = passes
        super().__init__(
            message
            or f"Relaxation did not converge after {passes} passes; "
            "the graph contains a reachable negative cycle."
        )


class EmptyGraph(GraphSolveError, ValueError):
    """Solving was requested on a graph with no vertices."""

    def __init__(self, message: str = "Graph has no vertices") -> None:
        super().__init__(message)
