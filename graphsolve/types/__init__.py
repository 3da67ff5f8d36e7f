"""Shared types for graphsolve."""

from graphsolve.types.base import (
    Cost,
    Edge,
    ShortestPathAlgorithm,
    SpanningTree,
    SpanningTreeAlgorithm,
    VertexID,
)

__all__ = [
    "Cost",
    "Edge",
    "ShortestPathAlgorithm",
    "SpanningTree",
    "SpanningTreeAlgorithm",
    "VertexID",
]
