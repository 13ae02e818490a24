"""
Triangle counting and clustering coefficients for undirected graphs.

A triangle at v is a pair of v's neighbors that are themselves connected.
Counting ordered neighbor pairs sees each such pair twice, hence the
halving.

References:
    - Newman, M. "Networks: An Introduction" (2010), Section 7.9.
"""

from enum import Enum
from itertools import permutations
from typing import Dict, Hashable, Tuple, Union

from ..diagnostics.core import assert_valid_triangle_counts
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


class Undefined(Enum):
    """Result state of a clustering coefficient with a zero denominator."""

    UNDEFINED = "undefined"


UNDEFINED = Undefined.UNDEFINED


def _per_node_triangles(graph: Graph) -> Dict[Hashable, int]:
    counts: Dict[Hashable, int] = {}
    for v in graph.nodes():
        closed = sum(1 for i, j in permutations(graph.neighbors(v), 2) if graph.are_connected(i, j))
        counts[v] = closed // 2
    return counts


def _possible_triples(graph: Graph) -> int:
    return sum(d * (d - 1) // 2 for d in (graph.degree(v) for v in graph.nodes()))


def triangle_counts(
    graph: Graph,
) -> Tuple[Dict[Hashable, int], Union[float, Undefined]]:
    """
    Triangles incident to each node and the global clustering coefficient.

    The coefficient is the sum of per-node triangle counts divided by the
    number of possible neighbor pairs, ``sum(deg * (deg - 1) / 2)``.

    Args:
        graph: Undirected graph.

    Returns:
        Tuple of:
        - counts: Dictionary mapping node -> number of incident triangles
        - coefficient: Global clustering coefficient, or UNDEFINED if no
          node has degree >= 2

    Raises:
        InvalidGraphKindError: If graph is directed.

    Complexity: O(sum deg(v)^2).

    Example:
        >>> G = Graph.from_edges([(1, 2), (2, 3), (1, 3)])
        >>> counts, coefficient = triangle_counts(G)
        >>> counts
        {1: 1, 2: 1, 3: 1}
        >>> coefficient
        1.0
    """
    graph.require_undirected("triangle_counts")

    counts = _per_node_triangles(graph)
    possible = _possible_triples(graph)

    if is_debug_enabled():
        assert_valid_triangle_counts(graph, counts)

    if possible == 0:
        logger.info("clustering coefficient undefined: no node has degree >= 2")
        return counts, UNDEFINED

    coefficient = sum(counts.values()) / possible
    logger.debug("triangle_counts: %d closed of %d possible triples", sum(counts.values()), possible)
    return counts, coefficient


def global_clustering_coefficient(graph: Graph) -> Union[float, Undefined]:
    """Return the global clustering coefficient, or UNDEFINED."""
    _, coefficient = triangle_counts(graph)
    return coefficient


def local_clustering(graph: Graph) -> Dict[Hashable, float]:
    """
    Local clustering coefficient of every node.

    Triangles at v divided by ``deg(v) * (deg(v) - 1) / 2``; nodes with
    degree below 2 get 0.0.

    Raises:
        InvalidGraphKindError: If graph is directed.
    """
    graph.require_undirected("local_clustering")

    counts = _per_node_triangles(graph)
    result: Dict[Hashable, float] = {}
    for v, triangles in counts.items():
        d = graph.degree(v)
        result[v] = triangles / (d * (d - 1) / 2) if d >= 2 else 0.0
    return result
