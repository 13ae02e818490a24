"""
Utility functions for graph algorithms.

Provides helpers for deterministic node ordering, node indexing, and path
reconstruction.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple


def sorted_nodes(nodes: Iterable[Hashable]) -> List[Hashable]:
    """
    Sort nodes deterministically.

    Nodes are sorted by their natural order when they are mutually
    comparable (so integer ids sort numerically), otherwise by string
    representation.

    Example:
        >>> sorted_nodes([10, 2, 1])
        [1, 2, 10]
        >>> sorted_nodes(['b', 1, 'a'])
        [1, 'a', 'b']
    """
    nodes = list(nodes)
    try:
        return sorted(nodes)
    except TypeError:
        return sorted(nodes, key=lambda x: (str(x), type(x).__name__))


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the node ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    ordered = sorted_nodes(set(nodes))
    node_to_index = {node: idx for idx, node in enumerate(ordered)}
    return node_to_index, ordered


#: Default for ``source`` in :func:`reconstruct_path`; None is a valid node id.
_NO_SOURCE = object()


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]],
    target: Hashable,
    source: Hashable = _NO_SOURCE,
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from BFS, where parent[node] is the previous
    node on a shortest path, or None for the source. Nodes missing from the
    map are unreachable.

    When ``source`` is given the walk stops at that node, so graphs that use
    None as a node id work. Without it the walk stops at the first node whose
    parent is None.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Target node to reconstruct path to.
        source: Root of the BFS tree (optional).

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is unreachable or the parent map is not a tree.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D') is None
        True
        >>> reconstruct_path({None: None, 1: None, 2: 1}, 2, source=None)
        [None, 1, 2]
    """
    if target not in parent:
        return None

    path = []
    current = target
    visited = set()
    while True:
        if current in visited:
            # Not a tree
            return None
        visited.add(current)
        path.append(current)
        if source is _NO_SOURCE:
            if parent[current] is None:
                break
        elif current == source:
            break
        current = parent[current]
        if current not in parent:
            return None

    path.reverse()
    return path
