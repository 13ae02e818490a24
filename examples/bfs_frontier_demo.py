"""
Example: Watching BFS frontiers

Traversal progress is exposed through an observer callback instead of an
interactive plot. This script prints each frontier as a text "frame", then
replays the recorded frames, and finally routes the same frames through the
socnet logger.
"""

import logging

from socnet import (
    UNREACHED,
    FrontierRecorder,
    Graph,
    LoggingObserver,
    configure_logging,
    shortest_path_distances,
)


def render(labels, frontier):
    """Print one BFS round as a row of node:distance cells."""
    cells = []
    for node, d in labels.items():
        text = "." if d == UNREACHED else str(d)
        marker = "*" if node in frontier else " "
        cells.append(f"{node}:{text}{marker}")
    print("  " + "  ".join(cells))


def main():
    G = Graph.from_edges(
        [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("d", "e"), ("f", "g")]
    )

    print("Live frames (* marks the frontier):")
    shortest_path_distances(G, "a", observer=render)

    recorder = FrontierRecorder()
    dist = shortest_path_distances(G, "a", observer=recorder)
    print(f"\nRecorded {len(recorder.snapshots)} frame(s); frontiers: {recorder.frontiers()}")
    print(f"Final distances: {dist}")

    print("\nLogged frames:")
    observer = LoggingObserver(level=logging.INFO)
    configure_logging(level=logging.INFO)
    shortest_path_distances(G, "a", observer=observer)


if __name__ == "__main__":
    main()
