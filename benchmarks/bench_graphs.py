"""Benchmark the graph analyses on random graphs."""

import time
from typing import Callable, Dict

import numpy as np

from socnet import (
    Graph,
    connected_components,
    mutual_friends,
    shortest_path_distances,
    triangle_counts,
)


def random_graph(n_nodes: int, avg_degree: float, seed: int = 0) -> Graph:
    """Erdos-Renyi graph with the given expected degree."""
    rng = np.random.default_rng(seed)
    p = avg_degree / max(n_nodes - 1, 1)
    G = Graph()
    for u in range(n_nodes):
        G.add_node(u)
    rows, cols = np.nonzero(np.triu(rng.random((n_nodes, n_nodes)) < p, k=1))
    for u, v in zip(rows.tolist(), cols.tolist()):
        G.add_edge(u, v)
    return G


def _time(fn: Callable[[], object], repeats: int) -> float:
    fn()  # Warmup
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def benchmark_graphs(n_nodes: int, avg_degree: float = 8.0, repeats: int = 3) -> Dict[str, float]:
    """Benchmark each analysis on one random graph.

    Args:
        n_nodes: Number of nodes.
        avg_degree: Expected node degree.
        repeats: Timed repetitions per analysis.

    Returns:
        Dictionary with mean seconds per call.
    """
    G = random_graph(n_nodes, avg_degree)
    return {
        "n_nodes": n_nodes,
        "n_edges": G.edge_count(),
        "distances_sec": _time(lambda: shortest_path_distances(G, 0), repeats),
        "components_sec": _time(lambda: connected_components(G), repeats),
        "mutual_friends_sec": _time(lambda: mutual_friends(G), repeats),
        "triangles_sec": _time(lambda: triangle_counts(G), repeats),
    }


if __name__ == "__main__":
    print("Benchmarking graph analyses...")

    for n in (200, 1000, 2000):
        results = benchmark_graphs(n_nodes=n)
        print(f"{n} nodes, {results['n_edges']} edges:")
        for key in ("distances_sec", "components_sec", "mutual_friends_sec", "triangles_sec"):
            print(f"  {key[:-4]:<15} {results[key] * 1e3:8.2f} ms")
