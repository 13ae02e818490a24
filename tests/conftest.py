"""Pytest configuration and shared fixtures for socnet tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph checks
- Small reference graphs used across the graph test modules
- A random graph factory
"""

import os
from typing import Callable

import numpy as np
import pytest

from socnet.diagnostics import set_debug_enabled, is_debug_enabled
from socnet.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Restore the global debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def components_graph() -> Graph:
    """Three components: {1..6}, {7, 8, 9} and {10, 11}."""
    return Graph.from_edges(
        [(1, 2), (1, 3), (2, 3), (3, 4), (4, 5), (4, 6), (7, 8), (7, 9), (8, 9), (10, 11)]
    )


@pytest.fixture
def friends_graph() -> Graph:
    """Node 1's friends 2, 3 and 4 all know 5."""
    return Graph.from_edges(
        [(1, 2), (1, 3), (1, 4), (2, 5), (3, 5), (4, 5), (5, 6), (5, 7), (7, 8), (7, 9)]
    )


@pytest.fixture
def triangle_graph() -> Graph:
    """Friends graph plus 1-5, 2-3 and 8-9: six triangles."""
    return Graph.from_edges(
        [
            (1, 2), (1, 3), (1, 4), (2, 5), (3, 5), (4, 5), (5, 6),
            (5, 7), (7, 8), (7, 9), (1, 5), (2, 3), (8, 9),
        ]
    )


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for Erdos-Renyi style undirected graphs on nodes 0..n-1."""

    def make(n: int = 30, p: float = 0.08, directed: bool = False) -> Graph:
        G = Graph(directed=directed)
        for u in range(n):
            G.add_node(u)
        for u in range(n):
            for v in range(n):
                if u == v or (not directed and v < u):
                    continue
                if rng.random() < p:
                    G.add_edge(u, v)
        return G

    return make
