"""
Graph analytics package for socnet.

This package provides unweighted graph algorithms built on breadth-first
traversal and neighbor-set intersection:
- Graph data structure (directed or undirected)
- BFS frontier engine, hop distances, BFS trees and shortest paths
- Connected component labelling
- Mutual-friend overlap matrix and friend recommendation
- Triangle counts and clustering coefficients

All algorithms are deterministic and use sorted node ordering for reproducibility.
"""

from .components import (
    ComponentAssignment,
    component_members,
    connected_components,
    count_components,
    largest_component,
)
from .core import Graph
from .errors import GraphError, InvalidGraphKindError, UnknownNodeError
from .observers import FrontierRecorder, LoggingObserver
from .overlap import (
    NO_RECOMMENDATION,
    NoRecommendation,
    OverlapMatrix,
    mutual_friends,
    neighborhood_overlap,
    recommend,
)
from .traversal import (
    UNREACHED,
    DistanceLabeling,
    FrontierObserver,
    bfs,
    bfs_frontiers,
    eccentricity,
    shortest_path,
    shortest_path_distances,
)
from .triangles import (
    UNDEFINED,
    Undefined,
    global_clustering_coefficient,
    local_clustering,
    triangle_counts,
)
from .utils import node_index_map, reconstruct_path, sorted_nodes

__all__ = [
    "Graph",
    "GraphError",
    "UnknownNodeError",
    "InvalidGraphKindError",
    "UNREACHED",
    "DistanceLabeling",
    "FrontierObserver",
    "bfs",
    "bfs_frontiers",
    "shortest_path_distances",
    "shortest_path",
    "eccentricity",
    "FrontierRecorder",
    "LoggingObserver",
    "ComponentAssignment",
    "connected_components",
    "component_members",
    "count_components",
    "largest_component",
    "OverlapMatrix",
    "NoRecommendation",
    "NO_RECOMMENDATION",
    "mutual_friends",
    "recommend",
    "neighborhood_overlap",
    "Undefined",
    "UNDEFINED",
    "triangle_counts",
    "global_clustering_coefficient",
    "local_clustering",
    "sorted_nodes",
    "node_index_map",
    "reconstruct_path",
]

# Example usage:
# from socnet.graphs import Graph, mutual_friends, recommend
#
# G = Graph.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)])
# M = mutual_friends(G)
# recommend(M, 1)  # {4}
