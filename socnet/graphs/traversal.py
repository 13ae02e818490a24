"""
Breadth-first traversal: frontier expansion, distance labels and BFS trees.

The frontier engine expands one BFS round at a time and exposes every
intermediate frontier, so callers can log or render traversal progress
through an observer without affecting the result. Neighbors are expanded
in sorted order for reproducible results.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
"""

from collections import deque
from typing import Callable, Dict, Hashable, Iterator, List, Optional, Tuple, Union

from ..diagnostics.core import assert_valid_labeling
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Graph
from .errors import UnknownNodeError
from .utils import reconstruct_path

logger = get_logger(__name__)

#: Distance label of a node with no path from the source.
UNREACHED = float("inf")

Distance = Union[int, float]
DistanceLabeling = Dict[Hashable, Distance]

#: Called with (labels snapshot, frontier snapshot) after each frontier is built.
FrontierObserver = Callable[[DistanceLabeling, List[Hashable]], None]


def _check_source(graph: Graph, source: Hashable) -> None:
    if source not in graph.adj:
        raise UnknownNodeError(source, f"Source node {source!r} not in graph")


def bfs_frontiers(
    graph: Graph, source: Hashable
) -> Iterator[Tuple[DistanceLabeling, List[Hashable]]]:
    """
    Expand BFS frontiers from a source, one round at a time.

    Yields a ``(labels, frontier)`` snapshot after each frontier is built:
    first the initial frontier ``[source]``, then every following round,
    ending with the empty frontier. Snapshots are copies; modifying them
    does not affect the traversal.

    Args:
        graph: Graph to traverse (out-edges for directed graphs).
        source: Source node.

    Yields:
        Tuple of:
        - labels: Dictionary mapping node -> distance so far (UNREACHED if
          not yet discovered)
        - frontier: Nodes discovered in this round, in discovery order

    Raises:
        UnknownNodeError: If source is not in graph.

    Complexity: O(V + E) plus the cost of the snapshots.
    """
    _check_source(graph, source)
    return ((dict(labels), list(frontier)) for labels, frontier in _expand_frontiers(graph, source))


def _expand_frontiers(
    graph: Graph, source: Hashable
) -> Iterator[Tuple[DistanceLabeling, List[Hashable]]]:
    # Yields the live labels dict; callers copy it when they hand it out
    labels: DistanceLabeling = {node: UNREACHED for node in graph.nodes()}
    labels[source] = 0
    frontier: List[Hashable] = [source]
    distance = 0

    yield labels, frontier

    while frontier:
        next_frontier: List[Hashable] = []
        for u in frontier:
            for v in graph.neighbors(u):
                # First writer wins; all frontier nodes share one distance
                if labels[v] == UNREACHED:
                    labels[v] = distance + 1
                    next_frontier.append(v)
        distance += 1
        frontier = next_frontier
        logger.debug("BFS from %r: round %d discovered %d node(s)", source, distance, len(frontier))
        yield labels, frontier


def shortest_path_distances(
    graph: Graph,
    source: Hashable,
    observer: Optional[FrontierObserver] = None,
) -> DistanceLabeling:
    """
    Hop distances from a source node to every node in the graph.

    Args:
        graph: Graph to traverse (out-edges for directed graphs).
        source: Source node.
        observer: Optional callback invoked with (labels, frontier) snapshots
            after every frontier is built, including the initial and the
            final empty one. It does not change the result.

    Returns:
        Dictionary mapping every node -> distance from source, or UNREACHED.

    Raises:
        UnknownNodeError: If source is not in graph.

    Complexity: O(V + E) without an observer.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_node('C')
        >>> dist = shortest_path_distances(G, 'A')
        >>> dist['B'], dist['C']
        (1, inf)
    """
    _check_source(graph, source)

    labels: DistanceLabeling = {}
    for labels, frontier in _expand_frontiers(graph, source):
        if observer is not None:
            observer(dict(labels), list(frontier))

    reached = sum(1 for d in labels.values() if d != UNREACHED)
    logger.debug("BFS from %r reached %d of %d node(s)", source, reached, len(labels))

    if is_debug_enabled():
        assert_valid_labeling(graph, source, labels)

    return labels


def bfs(
    graph: Graph, source: Hashable
) -> Tuple[List[Hashable], DistanceLabeling, Dict[Hashable, Optional[Hashable]]]:
    """
    Breadth-first search from a source node, recording the BFS tree.

    Returns nodes in BFS visitation order, distances from source, and parent
    map for path reconstruction.

    Args:
        graph: Graph to traverse.
        source: Source node to start BFS from.

    Returns:
        Tuple of:
        - order: List of reached nodes in BFS visitation order
        - distance: Dictionary mapping node -> distance from source (int or UNREACHED)
        - parent: Dictionary mapping each reached node -> parent node (None for
          the source); unreached nodes are absent

    Raises:
        UnknownNodeError: If source is not in graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('A', 'C')
        >>> order, dist, parent = bfs(G, 'A')
        >>> order
        ['A', 'B', 'C']
        >>> dist['B']
        1
    """
    _check_source(graph, source)

    order: List[Hashable] = []
    distance: DistanceLabeling = {node: UNREACHED for node in graph.nodes()}
    parent: Dict[Hashable, Optional[Hashable]] = {source: None}

    distance[source] = 0
    queue = deque([source])

    while queue:
        u = queue.popleft()
        order.append(u)

        for v in graph.neighbors(u):
            if distance[v] == UNREACHED:
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)

    return order, distance, parent


def shortest_path(graph: Graph, source: Hashable, target: Hashable) -> Optional[List[Hashable]]:
    """
    One shortest path (fewest hops) from source to target.

    Ties between equally short paths are broken by sorted neighbor order.

    Args:
        graph: Graph to search.
        source: Start node.
        target: End node.

    Returns:
        List of nodes from source to target inclusive, or None if target is
        unreachable.

    Raises:
        UnknownNodeError: If source or target is not in graph.

    Example:
        >>> G = Graph.from_edges([('A', 'B'), ('B', 'C')])
        >>> shortest_path(G, 'A', 'C')
        ['A', 'B', 'C']
    """
    _check_source(graph, source)
    if target not in graph.adj:
        raise UnknownNodeError(target, f"Target node {target!r} not in graph")

    _, _, parent = bfs(graph, source)
    return reconstruct_path(parent, target, source=source)


def eccentricity(graph: Graph, source: Hashable) -> int:
    """
    Largest finite distance from source to any reachable node.

    Unreachable nodes are ignored, so an isolated source has eccentricity 0.

    Raises:
        UnknownNodeError: If source is not in graph.
    """
    labels = shortest_path_distances(graph, source)
    return max(int(d) for d in labels.values() if d != UNREACHED)
