"""
Connected component labelling for undirected graphs.

Components are discovered by repeated BFS. The next traversal always starts
from the smallest unassigned node in sorted node order, so labels are
reproducible: label 1 holds the smallest node, and each following label
holds the smallest node not covered by an earlier component.

Each traversal produces a full distance labelling, so the cost grows with
the number of components times the number of nodes.
"""

from typing import Dict, Hashable, List, Optional

from ..diagnostics.core import assert_partition
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Graph
from .traversal import UNREACHED, FrontierObserver, shortest_path_distances

logger = get_logger(__name__)

ComponentAssignment = Dict[Hashable, int]


def connected_components(
    graph: Graph, observer: Optional[FrontierObserver] = None
) -> ComponentAssignment:
    """
    Label every node with the id of its connected component.

    Args:
        graph: Undirected graph.
        observer: Optional frontier observer forwarded to every traversal.

    Returns:
        Dictionary mapping node -> component label. Labels are dense,
        start at 1, and follow discovery order.

    Raises:
        InvalidGraphKindError: If graph is directed.

    Complexity: O(V + E) traversal work plus O(V) per component, since each
    traversal labels every node. That is O(V * C) for C components, so
    graphs made of many small components (isolated nodes in particular)
    approach O(V^2).

    Example:
        >>> G = Graph.from_edges([(1, 2), (3, 4)], nodes=[1, 2, 3, 4, 5])
        >>> connected_components(G)
        {1: 1, 2: 1, 3: 2, 4: 2, 5: 3}
    """
    graph.require_undirected("connected_components")

    assignment: ComponentAssignment = {}
    label = 1

    for source in graph.nodes():
        if source in assignment:
            continue

        distances = shortest_path_distances(graph, source, observer=observer)
        size = 0
        for node, distance in distances.items():
            if distance != UNREACHED:
                assignment[node] = label
                size += 1

        logger.debug("component %d: source %r, %d node(s)", label, source, size)
        label += 1

    logger.info("found %d component(s) over %d node(s)", label - 1, graph.node_count())

    # Keys in node order, independent of discovery order
    result = {node: assignment[node] for node in graph.nodes()}

    if is_debug_enabled():
        assert_partition(graph, result)

    return result


def component_members(assignment: ComponentAssignment) -> Dict[int, List[Hashable]]:
    """
    Group nodes by component label.

    Args:
        assignment: Output of :func:`connected_components`.

    Returns:
        Dictionary mapping label -> nodes of that component, labels in
        ascending order, nodes in the assignment's order.
    """
    members: Dict[int, List[Hashable]] = {}
    for node, label in assignment.items():
        members.setdefault(label, []).append(node)
    return dict(sorted(members.items()))


def count_components(graph: Graph) -> int:
    """Return the number of connected components of an undirected graph."""
    assignment = connected_components(graph)
    return len(set(assignment.values()))


def largest_component(graph: Graph) -> List[Hashable]:
    """
    Nodes of the largest (giant) connected component.

    Ties are broken by the lowest component label. An empty graph yields an
    empty list.

    Raises:
        InvalidGraphKindError: If graph is directed.
    """
    members = component_members(connected_components(graph))
    if not members:
        return []
    best = max(members, key=lambda label: (len(members[label]), -label))
    return members[best]
