"""
Mutual-neighbor ("mutual friends") counting and friend recommendation.

The overlap matrix counts, for every pair of nodes, how many neighbors they
share. It is dense (V x V) and built in O(sum of deg(v)^2), which suits
small social graphs; use :meth:`OverlapMatrix.to_dict` for a sparse view.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Hashable, List, Optional, Set, Union

import numpy as np

from ..diagnostics.core import assert_symmetric
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Graph
from .errors import UnknownNodeError
from .utils import node_index_map

logger = get_logger(__name__)


class NoRecommendation(Enum):
    """Result state of :func:`recommend` when no candidate shares a neighbor."""

    NO_RECOMMENDATION = "no_recommendation"


NO_RECOMMENDATION = NoRecommendation.NO_RECOMMENDATION


@dataclass(eq=False)
class OverlapMatrix:
    """
    Symmetric matrix of common-neighbor counts.

    ``values[i, j]`` is the number of nodes adjacent to both ``nodes[i]``
    and ``nodes[j]``. The diagonal is NaN: a node is not its own mutual
    friend.

    Attributes:
        nodes: Node ordering of both axes.
        index: Mapping node -> axis position.
        values: (n, n) float array.
    """

    nodes: List[Hashable]
    index: Dict[Hashable, int]
    values: np.ndarray

    @property
    def shape(self):
        return self.values.shape

    def _position(self, node: Hashable) -> int:
        if node not in self.index:
            raise UnknownNodeError(node)
        return self.index[node]

    def value(self, u: Hashable, v: Hashable) -> Optional[int]:
        """
        Number of common neighbors of u and v, or None when u == v.

        Raises:
            UnknownNodeError: If either node is not in the matrix.
        """
        i, j = self._position(u), self._position(v)
        if i == j:
            return None
        return int(self.values[i, j])

    def __getitem__(self, key) -> Optional[int]:
        u, v = key
        return self.value(u, v)

    def row(self, node: Hashable) -> Dict[Hashable, int]:
        """
        Common-neighbor counts between node and every other node.

        Raises:
            UnknownNodeError: If node is not in the matrix.
        """
        i = self._position(node)
        return {
            other: int(self.values[i, j])
            for j, other in enumerate(self.nodes)
            if j != i
        }

    def to_dict(self) -> Dict[Hashable, Dict[Hashable, int]]:
        """
        Sparse map-of-maps holding the non-zero off-diagonal entries.

        Every node gets an entry, possibly empty.
        """
        sparse: Dict[Hashable, Dict[Hashable, int]] = {}
        for node in self.nodes:
            sparse[node] = {other: count for other, count in self.row(node).items() if count}
        return sparse


def mutual_friends(graph: Graph) -> OverlapMatrix:
    """
    Count the common neighbors of every pair of nodes.

    For each node v, every ordered pair (i, j) of v's neighbors (i == j
    included) gains one shared neighbor. The diagonal is then overwritten
    with NaN.

    Args:
        graph: Undirected graph.

    Returns:
        OverlapMatrix over all nodes of the graph.

    Raises:
        InvalidGraphKindError: If graph is directed.

    Complexity: O(V^2) memory, O(V^2 + sum deg(v)^2) time.

    Example:
        >>> G = Graph.from_edges([('a', 'b'), ('b', 'c')])
        >>> mutual_friends(G)['a', 'c']
        1
    """
    graph.require_undirected("mutual_friends")

    node_to_idx, idx_to_node = node_index_map(graph.nodes())
    n = len(idx_to_node)
    counts = np.zeros((n, n))

    for v in idx_to_node:
        friends = [node_to_idx[u] for u in graph.neighbors(v)]
        if friends:
            counts[np.ix_(friends, friends)] += 1

    np.fill_diagonal(counts, np.nan)

    matrix = OverlapMatrix(nodes=idx_to_node, index=node_to_idx, values=counts)
    logger.debug("mutual_friends: %dx%d matrix", n, n)

    if is_debug_enabled():
        assert_symmetric(matrix.values)

    return matrix


def recommend(
    matrix: OverlapMatrix, node: Hashable
) -> Union[Set[Hashable], NoRecommendation]:
    """
    Nodes sharing the most neighbors with a query node.

    All nodes attaining the row maximum are returned, so ties yield several
    recommendations. The query node itself is never recommended.

    Args:
        matrix: Output of :func:`mutual_friends`.
        node: Query node.

    Returns:
        Set of best candidates, or NO_RECOMMENDATION when no other node
        shares a neighbor with ``node``.

    Raises:
        UnknownNodeError: If node is not in the matrix.

    Example:
        >>> recommend(mutual_friends(G), 'a')
        {'c'}
    """
    row = matrix.row(node)
    best = max(row.values(), default=0)
    if best <= 0:
        return NO_RECOMMENDATION
    return {other for other, count in row.items() if count == best}


def neighborhood_overlap(graph: Graph, u: Hashable, v: Hashable) -> float:
    """
    Jaccard overlap of the neighborhoods of u and v.

    Computed as ``|N(u) & N(v)| / |N(u) | N(v)|`` where each neighborhood
    excludes the other endpoint. Returns 0.0 when the union is empty.

    Raises:
        UnknownNodeError: If either node is not in graph.
        InvalidGraphKindError: If graph is directed.
    """
    graph.require_undirected("neighborhood_overlap")
    n_u = set(graph.neighbors(u)) - {v}
    n_v = set(graph.neighbors(v)) - {u}
    union = n_u | n_v
    if not union:
        return 0.0
    return len(n_u & n_v) / len(union)
