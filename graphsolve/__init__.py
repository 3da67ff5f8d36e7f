"""graphsolve: shortest paths and minimum spanning trees on integer-indexed graphs.

Primary API:
    BellmanFord, Dijkstra, WarshallFloyd - Shortest-path strategies
    Prim, Kruskal - Minimum-spanning-tree strategies
    DisjointSet - Union-find structure
    shortest_path_solver(), spanning_tree_solver() - Pick a strategy by name

Example:
    from graphsolve import Dijkstra, Kruskal

    sp = Dijkstra()
    sp.add_edge(0, 1, 4)
    sp.add_edge(0, 2, 1)
    sp.add_edge(2, 1, 2)
    sp.shortest_path(0)        # {0: 0, 1: 3, 2: 1}
    sp.shortest_path(0, 1)     # 3

    mst = Kruskal()
    mst.add_edge(0, 1, 4)
    mst.add_edge(0, 2, 1)
    mst.add_edge(2, 1, 2)
    total, edges = mst.solve() # 3, (Edge(0, 2, 1), Edge(2, 1, 2))
"""

from __future__ import annotations

from graphsolve import logging
from graphsolve._version import __version__
from graphsolve.algorithms import (
    BellmanFord,
    Dijkstra,
    DisjointSet,
    Kruskal,
    Prim,
    ShortestPathSolver,
    SpanningTreeSolver,
    WarshallFloyd,
    shortest_path_solver,
    spanning_tree_solver,
)
from graphsolve.config import DEFAULT_CONFIG, SolverConfig
from graphsolve.exceptions import (
    EmptyGraph,
    GraphSolveError,
    InvalidVertex,
    NonConvergence,
)
from graphsolve.types.base import (
    Cost,
    Edge,
    ShortestPathAlgorithm,
    SpanningTree,
    SpanningTreeAlgorithm,
    VertexID,
)

__all__ = [
    # Version
    "__version__",
    # Shortest paths
    "ShortestPathSolver",
    "BellmanFord",
    "Dijkstra",
    "WarshallFloyd",
    "shortest_path_solver",
    # Spanning trees
    "SpanningTreeSolver",
    "Prim",
    "Kruskal",
    "spanning_tree_solver",
    "DisjointSet",
    # Types
    "Cost",
    "Edge",
    "SpanningTree",
    "VertexID",
    "ShortestPathAlgorithm",
    "SpanningTreeAlgorithm",
    # Configuration
    "SolverConfig",
    "DEFAULT_CONFIG",
    # Errors
    "GraphSolveError",
    "InvalidVertex",
    "NonConvergence",
    "EmptyGraph",
    # Utilities
    "logging",
]
