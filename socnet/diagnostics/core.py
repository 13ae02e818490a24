"""Invariant checks for graph algorithm outputs."""

from __future__ import annotations

import math
from collections import deque
from typing import TYPE_CHECKING, Dict, Hashable, Optional

import numpy as np

if TYPE_CHECKING:
    from ..graphs.core import Graph


def _labeling_violation(
    graph: "Graph", source: Hashable, labels: Dict[Hashable, float]
) -> Optional[str]:
    nodes = graph.nodes()
    if set(labels) != set(nodes):
        return "labels do not cover exactly the graph's nodes"
    if labels.get(source) != 0:
        return f"source {source!r} has label {labels.get(source)!r}, expected 0"

    # Smallest label over the in-neighbors of each node
    best_pred: Dict[Hashable, float] = {node: math.inf for node in nodes}
    for u in nodes:
        du = labels[u]
        if not math.isinf(du) and (du < 0 or du != int(du)):
            return f"node {u!r} has invalid label {du!r}"
        for v in graph.neighbors(u):
            if labels[v] > du + 1:
                return f"edge ({u!r}, {v!r}) skips a level: {du!r} -> {labels[v]!r}"
            best_pred[v] = min(best_pred[v], du)

    for v in nodes:
        dv = labels[v]
        if v == source or math.isinf(dv):
            continue
        if best_pred[v] != dv - 1:
            return f"node {v!r} has label {dv!r} but no predecessor at {dv - 1!r}"
    return None


def is_valid_labeling(graph: "Graph", source: Hashable, labels: Dict[Hashable, float]) -> bool:
    """
    Check whether labels are exact BFS hop distances from source.

    Parameters
    ----------
    graph:
        Graph the labels were computed on.
    source:
        Traversal source.
    labels:
        Mapping node -> distance (``inf`` for unreached nodes).

    Returns
    -------
    bool
        True if the source is at 0 and every other finite label is one more
        than the smallest label among its predecessors.
    """
    return _labeling_violation(graph, source, labels) is None


def assert_valid_labeling(graph: "Graph", source: Hashable, labels: Dict[Hashable, float]) -> None:
    """
    Assert that labels are exact BFS hop distances from source.

    Raises
    ------
    ValueError
        If the labelling is inconsistent with the graph.
    """
    violation = _labeling_violation(graph, source, labels)
    if violation is not None:
        raise ValueError(f"Invalid distance labelling: {violation}")


def _partition_violation(graph: "Graph", assignment: Dict[Hashable, int]) -> Optional[str]:
    nodes = graph.nodes()
    if set(assignment) != set(nodes):
        return "assignment does not cover exactly the graph's nodes"

    # Labels must appear as 1, 2, 3, ... in node order
    seen = []
    for node in nodes:
        label = assignment[node]
        if label not in seen:
            if label != len(seen) + 1:
                return f"label {label!r} out of discovery order at node {node!r}"
            seen.append(label)

    for u in nodes:
        for v in graph.neighbors(u):
            if assignment[u] != assignment[v]:
                return f"edge ({u!r}, {v!r}) crosses components"

    # Every label class must be connected
    for label in seen:
        members = {node for node in nodes if assignment[node] == label}
        start = next(node for node in nodes if assignment[node] == label)
        reached = {start}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in graph.neighbors(u):
                if v not in reached:
                    reached.add(v)
                    queue.append(v)
        if reached != members:
            return f"component {label} is not connected"
    return None


def is_partition(graph: "Graph", assignment: Dict[Hashable, int]) -> bool:
    """
    Check whether assignment labels the connected components of graph.

    Labels must be dense from 1, numbered in the order their first node
    appears in ``graph.nodes()``.
    """
    return _partition_violation(graph, assignment) is None


def assert_partition(graph: "Graph", assignment: Dict[Hashable, int]) -> None:
    """
    Assert that assignment labels the connected components of graph.

    Raises
    ------
    ValueError
        If the assignment is not a valid component labelling.
    """
    violation = _partition_violation(graph, assignment)
    if violation is not None:
        raise ValueError(f"Invalid component assignment: {violation}")


def is_symmetric(mat: np.ndarray, atol: float = 0.0) -> bool:
    """
    Check whether a square matrix is symmetric.

    NaN entries are treated as equal to each other, so a NaN diagonal does
    not break symmetry.

    Parameters
    ----------
    mat:
        Array with shape (n, n).
    atol:
        Absolute tolerance for checking equality.
    """
    mat = np.asarray(mat)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False
    return bool(np.allclose(mat, mat.T, rtol=0.0, atol=atol, equal_nan=True))


def assert_symmetric(mat: np.ndarray, atol: float = 0.0) -> None:
    """
    Assert that a square matrix is symmetric.

    Raises
    ------
    ValueError
        If the matrix is not square or not symmetric.
    """
    if not is_symmetric(mat, atol=atol):
        raise ValueError("Matrix is not symmetric.")


def _triangle_violation(graph: "Graph", counts: Dict[Hashable, int]) -> Optional[str]:
    if set(counts) != set(graph.nodes()):
        return "node set does not match graph"
    for node, count in counts.items():
        if isinstance(count, bool) or not isinstance(count, int):
            return f"count of {node!r} is not an integer"
        if count < 0:
            return f"count of {node!r} is negative"
        d = graph.degree(node)
        if count > d * (d - 1) // 2:
            return f"count of {node!r} exceeds its {d * (d - 1) // 2} neighbor pair(s)"
    if sum(counts.values()) % 3:
        return "total is not a multiple of 3"
    return None


def is_valid_triangle_counts(graph: "Graph", counts: Dict[Hashable, int]) -> bool:
    """
    Check that counts is a plausible per-node triangle count for graph.

    Every node has a non-negative integer count no larger than its number
    of neighbor pairs, and the counts sum to a multiple of 3 since each
    triangle is seen from its three corners.
    """
    return _triangle_violation(graph, counts) is None


def assert_valid_triangle_counts(graph: "Graph", counts: Dict[Hashable, int]) -> None:
    """
    Assert that counts is a plausible per-node triangle count for graph.

    Raises
    ------
    ValueError
        If a count is out of range or the total is not a multiple of 3.
    """
    violation = _triangle_violation(graph, counts)
    if violation is not None:
        raise ValueError(f"Invalid triangle counts: {violation}")
