"""socnet - small, deterministic graph analytics for social networks."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_partition,
    assert_symmetric,
    assert_valid_labeling,
    assert_valid_triangle_counts,
    debug_context,
    is_debug_enabled,
    is_partition,
    is_symmetric,
    is_valid_labeling,
    is_valid_triangle_counts,
    reset_debug_mode,
    set_debug_enabled,
)

# Graph algorithms
from .graphs import (
    NO_RECOMMENDATION,
    UNDEFINED,
    UNREACHED,
    FrontierRecorder,
    Graph,
    GraphError,
    InvalidGraphKindError,
    LoggingObserver,
    NoRecommendation,
    OverlapMatrix,
    Undefined,
    UnknownNodeError,
    bfs,
    bfs_frontiers,
    component_members,
    connected_components,
    count_components,
    eccentricity,
    global_clustering_coefficient,
    largest_component,
    local_clustering,
    mutual_friends,
    neighborhood_overlap,
    recommend,
    reconstruct_path,
    shortest_path,
    shortest_path_distances,
    triangle_counts,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "Graph",
    "GraphError",
    "UnknownNodeError",
    "InvalidGraphKindError",
    "UNREACHED",
    "bfs",
    "bfs_frontiers",
    "shortest_path_distances",
    "shortest_path",
    "eccentricity",
    "reconstruct_path",
    "FrontierRecorder",
    "LoggingObserver",
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
    # Diagnostics
    "is_valid_labeling",
    "assert_valid_labeling",
    "is_partition",
    "assert_partition",
    "is_symmetric",
    "assert_symmetric",
    "is_valid_triangle_counts",
    "assert_valid_triangle_counts",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_mode",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
