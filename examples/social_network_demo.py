"""
Example: Social network analysis with socnet

This example runs the four graph analyses on small friendship networks:
hop distances, connected components, mutual-friend recommendations and
triangle counts with the clustering coefficient.
"""

from socnet import (
    NO_RECOMMENDATION,
    UNDEFINED,
    UNREACHED,
    Graph,
    component_members,
    connected_components,
    mutual_friends,
    recommend,
    shortest_path_distances,
    triangle_counts,
)


def example_distances():
    """Example: Degrees of separation from one person."""
    print("=" * 60)
    print("Example 1: Degrees of Separation")
    print("=" * 60)

    G = Graph.from_edges(
        [(1, 2), (1, 3), (1, 4), (2, 5), (3, 5), (4, 5), (5, 6), (5, 7), (7, 8), (7, 9)],
        nodes=range(1, 11),
    )
    dist = shortest_path_distances(G, 1)
    for node, d in dist.items():
        label = "unreached" if d == UNREACHED else f"{d} hop(s)"
        print(f"  1 -> {node}: {label}")
    print()


def example_components():
    """Example: Friend circles as connected components."""
    print("=" * 60)
    print("Example 2: Connected Components")
    print("=" * 60)

    G = Graph.from_edges(
        [(1, 2), (1, 3), (2, 3), (3, 4), (4, 5), (4, 6), (7, 8), (7, 9), (8, 9), (10, 11)]
    )
    for label, nodes in component_members(connected_components(G)).items():
        print(f"  Component {label}: {nodes}")
    print()


def example_recommendations():
    """Example: People you may know."""
    print("=" * 60)
    print("Example 3: Mutual Friends and Recommendations")
    print("=" * 60)

    G = Graph.from_edges(
        [(1, 2), (1, 3), (1, 4), (2, 5), (3, 5), (4, 5), (5, 6), (5, 7), (7, 8), (7, 9)],
        nodes=range(1, 11),
    )
    M = mutual_friends(G)
    for node in G.nodes():
        best = recommend(M, node)
        if best is NO_RECOMMENDATION:
            print(f"  {node}: no recommendation")
        else:
            shared = M.value(node, next(iter(best)))
            print(f"  {node}: recommend {sorted(best)} ({shared} mutual friend(s))")
    print()


def example_triangles():
    """Example: Triangles and clustering."""
    print("=" * 60)
    print("Example 4: Triangles and Clustering Coefficient")
    print("=" * 60)

    G = Graph.from_edges(
        [
            (1, 2), (1, 3), (1, 4), (2, 5), (3, 5), (4, 5), (5, 6),
            (5, 7), (7, 8), (7, 9), (1, 5), (2, 3), (8, 9),
        ]
    )
    counts, coefficient = triangle_counts(G)
    for node, count in counts.items():
        print(f"  node {node}: {count} triangle(s)")
    if coefficient is UNDEFINED:
        print("  Clustering coefficient: undefined")
    else:
        print(f"  Clustering coefficient: {coefficient:.4f}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("socnet - Social Network Analysis Examples")
    print("=" * 60 + "\n")

    example_distances()
    example_components()
    example_recommendations()
    example_triangles()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
