"""NetworkX graph conversion utilities.

Solvers address vertices by small integer ids. These helpers load a NetworkX
graph with arbitrary hashable node names into a solver and turn a spanning
tree back into a NetworkX graph.

Example:
    >>> import networkx as nx
    >>> from graphsolve import Dijkstra
    >>> from graphsolve.lib.nx import load_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", cost=10)
    >>> G.add_edge("B", "C", cost=5)
    >>>
    >>> solver = Dijkstra()
    >>> node_map = load_networkx(G, solver)
    >>> solver.shortest_path(node_map.to_index["A"], node_map.to_index["C"])
    15
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Union

from graphsolve.algorithms.base import ShortestPathSolver, SpanningTreeSolver
from graphsolve.exceptions import EmptyGraph
from graphsolve.types.base import Cost, SpanningTree

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)

    def names(self, distances: Dict[int, Cost]) -> Dict[Hashable, Cost]:
        """Re-key a distance dict from vertex ids to node names."""
        return {self.to_name.get(v, v): d for v, d in distances.items()}


def load_networkx(
    G: NxGraph,
    solver: Union[ShortestPathSolver, SpanningTreeSolver],
    *,
    cost_attr: str = "cost",
    default_cost: Cost = 1,
) -> NodeMap:
    """Insert every edge of a NetworkX graph into ``solver``.

    Node names are sorted by ``str`` and numbered from 0. Undirected graphs are
    inserted with ``add_edge``. Directed graphs use ``add_directed_edge`` on
    shortest-path solvers; spanning-tree solvers always treat edges as
    undirected. Isolated nodes get an id but are not tracked by the solver.

    Args:
        G: NetworkX graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        solver: Solver receiving the edges.
        cost_attr: Edge attribute holding the cost (default: "cost").
        default_cost: Cost used when the attribute is missing (default: 1).

    Returns:
        NodeMap for translating vertex ids back to node names.

    Raises:
        TypeError: If G is not a NetworkX graph.
        EmptyGraph: If G has no nodes.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise EmptyGraph("NetworkX graph has no nodes")

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))

    directed = G.is_directed() and isinstance(solver, ShortestPathSolver)
    insert = solver.add_directed_edge if directed else solver.add_edge

    for u, v, data in G.edges(data=True):
        insert(
            node_map.to_index[u],
            node_map.to_index[v],
            data.get(cost_attr, default_cost),
        )

    return node_map


def to_networkx(
    tree: SpanningTree,
    node_map: Optional[NodeMap] = None,
    *,
    cost_attr: str = "cost",
) -> "nx.Graph":
    """Convert a spanning tree to an undirected NetworkX graph.

    Args:
        tree: Result of a spanning-tree solver.
        node_map: Optional NodeMap restoring original node names. Without it,
            nodes are labeled by vertex id.
        cost_attr: Edge attribute name for the cost (default: "cost").

    Returns:
        nx.Graph holding the tree edges.
    """
    import networkx as nx

    G = nx.Graph()
    for edge in tree.edges:
        if node_map is not None:
            u = node_map.to_name.get(edge.src, edge.src)
            v = node_map.to_name.get(edge.dst, edge.dst)
        else:
            u, v = edge.src, edge.dst
        G.add_edge(u, v, **{cost_attr: edge.cost})
    return G
