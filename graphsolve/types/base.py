"""Base types and enums shared by the solver families."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple, Union

#: Represents numeric cost of an edge or path (distance, latency, weight, ...).
Cost = Union[int, float]

#: Vertex identifier; a non-negative integer used directly as a storage index.
VertexID = int


@dataclass(frozen=True)
class Edge:
    """Weighted edge between two vertices, directed from ``src`` to ``dst``.

    Attributes:
        src: Source vertex.
        dst: Destination vertex.
        cost: Edge cost.
    """

    src: VertexID
    dst: VertexID
    cost: Cost

    def reversed(self) -> Edge:
        """Return the same edge pointing the other way."""
        return Edge(self.dst, self.src, self.cost)

    def other(self, vertex: VertexID) -> VertexID:
        """Return the endpoint opposite to ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.src:
            return self.dst
        if vertex == self.dst:
            return self.src
        raise ValueError(f"Vertex '{vertex}' is not an endpoint of {self}.")


@dataclass(frozen=True)
class SpanningTree:
    """Result of a spanning-tree computation.

    Unpacks as ``(total_cost, edges)``.

    Attributes:
        total_cost: Sum of the selected edge costs.
        edges: Selected edges in the order the solver accepted them.
    """

    total_cost: Cost
    edges: Tuple[Edge, ...]

    def __iter__(self) -> Iterator:
        yield self.total_cost
        yield self.edges

    @property
    def vertices(self) -> Tuple[VertexID, ...]:
        """Sorted vertices touched by the selected edges."""
        seen = {e.src for e in self.edges} | {e.dst for e in self.edges}
        return tuple(sorted(seen))


class _NamedEnum(IntEnum):
    @classmethod
    def from_string(cls, value: str):
        """Parse a case-insensitive member name (``-`` and spaces allowed).

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid {cls.__name__} '{value}'. Valid values are: {valid}"
            ) from None


class ShortestPathAlgorithm(_NamedEnum):
    """Shortest-path strategies."""

    #: Edge-list relaxation to a fixpoint; tolerates negative costs.
    BELLMAN_FORD = 1
    #: Binary-heap Dijkstra; requires non-negative costs.
    DIJKSTRA = 2
    #: Dense all-pairs relaxation.
    WARSHALL_FLOYD = 3


class SpanningTreeAlgorithm(_NamedEnum):
    """Minimum-spanning-tree strategies."""

    #: Frontier growth from a root; covers the root's component only.
    PRIM = 1
    #: Sorted edge scan over a disjoint set; yields a spanning forest.
    KRUSKAL = 2
