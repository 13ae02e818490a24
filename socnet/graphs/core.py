"""
Core graph data structure.

Provides an unweighted Graph with a set-based adjacency representation.
Adding nodes/edges is O(1) amortized and adjacency tests are O(1).
Nodes and neighbors are returned in sorted order for deterministic behavior.

Algorithms in this package only read a Graph; none of them mutate it.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Set, Tuple

from .errors import InvalidGraphKindError, UnknownNodeError
from .utils import sorted_nodes


@dataclass
class Graph:
    """
    Unweighted graph with adjacency-set representation.

    Supports directed and undirected graphs. For directed graphs,
    ``neighbors`` returns out-neighbors only.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.
        adj: Adjacency mapping node -> set of (out-)neighbors.

    Complexity:
        - add_node: O(1) amortized
        - add_edge: O(1) amortized
        - are_connected: O(1)
        - neighbors: O(deg(v) log deg(v)) (sorted copy)
        - nodes: O(V log V)
        - edges: O(E log E)
    """

    directed: bool = False
    adj: Dict[Hashable, Set[Hashable]] = field(default_factory=dict)

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self.directed = directed
        self.adj = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable]],
        nodes: Optional[Iterable[Hashable]] = None,
        directed: bool = False,
    ) -> "Graph":
        """
        Build a graph from an edge list.

        Args:
            edges: Iterable of (u, v) pairs.
            nodes: Optional explicit node set. When given, every edge endpoint
                must belong to it; nodes without edges are kept as isolates.
            directed: If True, build a directed graph.

        Returns:
            New Graph instance.

        Raises:
            UnknownNodeError: If ``nodes`` is given and an edge references a
                node outside it.
            ValueError: If an edge is a self-loop.

        Example:
            >>> G = Graph.from_edges([(1, 2), (2, 3)], nodes=[1, 2, 3, 4])
            >>> G.node_count()
            4
        """
        graph = cls(directed=directed)
        if nodes is not None:
            for node in nodes:
                graph.add_node(node)
            for u, v in edges:
                for endpoint in (u, v):
                    if endpoint not in graph.adj:
                        raise UnknownNodeError(
                            endpoint, f"Edge ({u!r}, {v!r}) references unknown node {endpoint!r}"
                        )
                graph.add_edge(u, v)
        else:
            for u, v in edges:
                graph.add_edge(u, v)
        return graph

    def add_node(self, node: Hashable) -> None:
        """
        Add a node to the graph.

        Args:
            node: Hashable node identifier.
        """
        if node not in self.adj:
            self.adj[node] = set()

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Add an edge from u to v.

        For undirected graphs, also adds edge from v to u. Missing endpoints
        are added to the node set.

        Args:
            u: Source node.
            v: Target node.

        Raises:
            ValueError: If u == v.
        """
        if u == v:
            raise ValueError(f"Self-loops are not supported (node {u!r})")

        self.add_node(u)
        self.add_node(v)

        self.adj[u].add(v)
        if not self.directed:
            self.adj[v].add(u)

    def has_node(self, node: Hashable) -> bool:
        """Return True if node is in the graph."""
        return node in self.adj

    def __contains__(self, node: Hashable) -> bool:
        return node in self.adj

    def __len__(self) -> int:
        return len(self.adj)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes())

    def node_count(self) -> int:
        """Return the number of nodes."""
        return len(self.adj)

    def edge_count(self) -> int:
        """Return the number of edges (each undirected edge counted once)."""
        total = sum(len(nbrs) for nbrs in self.adj.values())
        return total if self.directed else total // 2

    def nodes(self) -> List[Hashable]:
        """
        Return list of all nodes in sorted order.

        Returns:
            Sorted list of nodes.
        """
        return sorted_nodes(self.adj.keys())

    def neighbors(self, node: Hashable) -> List[Hashable]:
        """
        Return (out-)neighbors of a node in sorted order.

        Args:
            node: Node to get neighbors for.

        Returns:
            Sorted list of neighbors.

        Raises:
            UnknownNodeError: If node is not in graph.
        """
        if node not in self.adj:
            raise UnknownNodeError(node)
        return sorted_nodes(self.adj[node])

    def degree(self, node: Hashable) -> int:
        """
        Return the (out-)degree of a node.

        Raises:
            UnknownNodeError: If node is not in graph.
        """
        if node not in self.adj:
            raise UnknownNodeError(node)
        return len(self.adj[node])

    def are_connected(self, u: Hashable, v: Hashable) -> bool:
        """
        Return True if the edge u -> v exists.

        For undirected graphs the answer is symmetric.

        Raises:
            UnknownNodeError: If either node is not in graph.
        """
        for node in (u, v):
            if node not in self.adj:
                raise UnknownNodeError(node)
        return v in self.adj[u]

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """
        Return list of all edges.

        For undirected graphs, each edge appears once, oriented so that the
        endpoint that sorts first comes first.

        Returns:
            List of (u, v) tuples.
        """
        order = {node: idx for idx, node in enumerate(self.nodes())}
        edges_list = []

        for u in order:
            for v in sorted(self.adj[u], key=order.__getitem__):
                if self.directed or order[u] < order[v]:
                    edges_list.append((u, v))

        return edges_list

    def require_undirected(self, algorithm: str) -> None:
        """
        Fail fast when an undirected-only algorithm receives a directed graph.

        Args:
            algorithm: Name of the calling algorithm, used in the message.

        Raises:
            InvalidGraphKindError: If the graph is directed.
        """
        if self.directed:
            raise InvalidGraphKindError(algorithm)
