"""Abstract solver interfaces.

`ShortestPathSolver` and `SpanningTreeSolver` fix the call surface shared by
every strategy: edges are appended one at a time, then the graph is solved.
Concrete strategies own their graph representation and only implement storage
and the algorithm itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Set, Union

from graphsolve.config import DEFAULT_CONFIG, SolverConfig
from graphsolve.exceptions import EmptyGraph, InvalidVertex
from graphsolve.types.base import Cost, Edge, SpanningTree, VertexID


def check_vertex_id(vertex: VertexID) -> None:
    """Raise `InvalidVertex` unless ``vertex`` is usable as a storage index."""
    if not isinstance(vertex, int) or isinstance(vertex, bool) or vertex < 0:
        raise InvalidVertex(
            vertex, f"Vertex id must be a non-negative integer, got {vertex!r}."
        )


class _VertexTracking:
    """Distinct vertex ids seen so far, kept apart from storage capacity."""

    def __init__(self) -> None:
        self._vertices: Set[VertexID] = set()

    def _track(self, *vertices: VertexID) -> None:
        for v in vertices:
            check_vertex_id(v)
        self._vertices.update(vertices)

    @property
    def num_vertices(self) -> int:
        """Number of distinct vertex ids inserted so far."""
        return len(self._vertices)

    @property
    def vertices(self) -> List[VertexID]:
        """Distinct vertex ids in ascending order."""
        return sorted(self._vertices)

    def has_vertex(self, vertex: VertexID) -> bool:
        return vertex in self._vertices

    def _require_vertex(self, vertex: VertexID) -> None:
        if not self._vertices:
            raise EmptyGraph()
        if vertex not in self._vertices:
            raise InvalidVertex(vertex)


class ShortestPathSolver(_VertexTracking, ABC):
    """Single-source shortest-path solver.

    Args:
        infinity: Distance reported for unreachable vertices. Defaults to
            ``config.infinity``.
        config: Solver defaults; `DEFAULT_CONFIG` when omitted.
    """

    def __init__(
        self,
        infinity: Optional[Cost] = None,
        config: Optional[SolverConfig] = None,
    ) -> None:
        super().__init__()
        self.config = config if config is not None else DEFAULT_CONFIG
        self._infinity = self.config.resolve_infinity(infinity)

    @property
    def infinity(self) -> Cost:
        """Sentinel distance for unreachable vertices."""
        return self._infinity

    def add_edge(self, src: VertexID, dst: VertexID, cost: Cost) -> None:
        """Insert an undirected edge as two directed edges of equal cost."""
        self.add_directed_edge(src, dst, cost)
        self.add_directed_edge(dst, src, cost)

    @abstractmethod
    def add_directed_edge(self, src: VertexID, dst: VertexID, cost: Cost) -> None:
        """Insert a single directed edge ``src -> dst``."""

    @abstractmethod
    def _distances(self, src: VertexID) -> Dict[VertexID, Cost]:
        """Compute distances from ``src`` to every tracked vertex."""

    def shortest_path(
        self, src: VertexID, dst: Optional[VertexID] = None
    ) -> Union[Dict[VertexID, Cost], Cost]:
        """Return shortest distances from ``src``.

        Args:
            src: Source vertex.
            dst: Optional destination vertex.

        Returns:
            If ``dst`` is None, a dict mapping every tracked vertex (ascending)
            to its distance from ``src``; unreachable vertices map to
            `infinity`. Otherwise the distance from ``src`` to ``dst``.

        Raises:
            EmptyGraph: If no edge has been inserted.
            InvalidVertex: If ``src`` or ``dst`` is not a tracked vertex.
        """
        self._require_vertex(src)
        if dst is not None:
            self._require_vertex(dst)
        dists = self._distances(src)
        if dst is None:
            return dists
        return dists[dst]


class SpanningTreeSolver(_VertexTracking, ABC):
    """Minimum-spanning-tree solver over undirected edges.

    Each edge is stored once per endpoint in a list indexed by vertex id. The
    adjacency is pre-sized from ``capacity`` and grows when a larger id shows up.

    Args:
        capacity: Expected number of vertex slots (ids ``0 .. capacity-1``).
        config: Solver defaults; `DEFAULT_CONFIG` when omitted.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        config: Optional[SolverConfig] = None,
    ) -> None:
        super().__init__()
        self.config = config if config is not None else DEFAULT_CONFIG
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}.")
        self._adjacency: List[List[Edge]] = [[] for _ in range(capacity or 0)]
        self._edges: List[Edge] = []

    @property
    def capacity(self) -> int:
        """Number of allocated vertex slots."""
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        """Number of undirected edges inserted."""
        return len(self._edges)

    def _ensure_capacity(self, vertex: VertexID) -> None:
        missing = vertex + 1 - len(self._adjacency)
        if missing > 0:
            self._adjacency.extend([] for _ in range(missing))

    def add_edge(self, src: VertexID, dst: VertexID, cost: Cost) -> None:
        """Record an undirected edge in both endpoints' adjacency lists."""
        self._track(src, dst)
        self._ensure_capacity(max(src, dst))
        edge = Edge(src, dst, cost)
        self._adjacency[src].append(edge)
        if dst != src:
            self._adjacency[dst].append(edge)
        self._edges.append(edge)

    def edges(self) -> List[Edge]:
        """Every inserted edge exactly once, in insertion order."""
        return list(self._edges)

    @abstractmethod
    def solve(self) -> SpanningTree:
        """Compute a minimum spanning tree (or forest).

        Raises:
            EmptyGraph: If no edge has been inserted.
        """
