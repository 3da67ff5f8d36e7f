"""Construction-time selection of solver strategies."""

from __future__ import annotations

from typing import Any, Dict, Type, Union

from graphsolve.algorithms.base import ShortestPathSolver, SpanningTreeSolver
from graphsolve.algorithms.bellman_ford import BellmanFord
from graphsolve.algorithms.dijkstra import Dijkstra
from graphsolve.algorithms.kruskal import Kruskal
from graphsolve.algorithms.prim import Prim
from graphsolve.algorithms.warshall_floyd import WarshallFloyd
from graphsolve.types.base import ShortestPathAlgorithm, SpanningTreeAlgorithm

SHORTEST_PATH_SOLVERS: Dict[ShortestPathAlgorithm, Type[ShortestPathSolver]] = {
    ShortestPathAlgorithm.BELLMAN_FORD: BellmanFord,
    ShortestPathAlgorithm.DIJKSTRA: Dijkstra,
    ShortestPathAlgorithm.WARSHALL_FLOYD: WarshallFloyd,
}

SPANNING_TREE_SOLVERS: Dict[SpanningTreeAlgorithm, Type[SpanningTreeSolver]] = {
    SpanningTreeAlgorithm.PRIM: Prim,
    SpanningTreeAlgorithm.KRUSKAL: Kruskal,
}


def shortest_path_solver(
    algorithm: Union[ShortestPathAlgorithm, str] = ShortestPathAlgorithm.DIJKSTRA,
    **kwargs: Any,
) -> ShortestPathSolver:
    """Build a shortest-path solver.

    Args:
        algorithm: Enum member or case-insensitive name, e.g. ``"bellman_ford"``.
        **kwargs: Forwarded to the solver constructor.

    Raises:
        ValueError: If the name doesn't match any algorithm.
    """
    if isinstance(algorithm, str):
        algorithm = ShortestPathAlgorithm.from_string(algorithm)
    return SHORTEST_PATH_SOLVERS[ShortestPathAlgorithm(algorithm)](**kwargs)


def spanning_tree_solver(
    algorithm: Union[SpanningTreeAlgorithm, str] = SpanningTreeAlgorithm.KRUSKAL,
    **kwargs: Any,
) -> SpanningTreeSolver:
    """Build a spanning-tree solver.

    Args:
        algorithm: Enum member or case-insensitive name, e.g. ``"prim"``.
        **kwargs: Forwarded to the solver constructor.

    Raises:
        ValueError: If the name doesn't match any algorithm.
    """
    if isinstance(algorithm, str):
        algorithm = SpanningTreeAlgorithm.from_string(algorithm)
    return SPANNING_TREE_SOLVERS[SpanningTreeAlgorithm(algorithm)](**kwargs)
