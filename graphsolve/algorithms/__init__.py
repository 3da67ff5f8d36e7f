"""Shortest-path and spanning-tree solvers."""

from graphsolve.algorithms.base import ShortestPathSolver, SpanningTreeSolver
from graphsolve.algorithms.bellman_ford import BellmanFord
from graphsolve.algorithms.dijkstra import Dijkstra
from graphsolve.algorithms.disjoint_set import DisjointSet
from graphsolve.algorithms.factory import shortest_path_solver, spanning_tree_solver
from graphsolve.algorithms.kruskal import Kruskal
from graphsolve.algorithms.prim import Prim
from graphsolve.algorithms.warshall_floyd import WarshallFloyd

__all__ = [
    "BellmanFord",
    "Dijkstra",
    "DisjointSet",
    "Kruskal",
    "Prim",
    "ShortestPathSolver",
    "SpanningTreeSolver",
    "WarshallFloyd",
    "shortest_path_solver",
    "spanning_tree_solver",
]
