"""Tests for mutual-friend counting and recommendation."""

import numpy as np
import pytest

from socnet.graphs import (
    NO_RECOMMENDATION,
    Graph,
    InvalidGraphKindError,
    NoRecommendation,
    UnknownNodeError,
    mutual_friends,
    neighborhood_overlap,
    recommend,
)
from socnet.diagnostics import debug_context, is_symmetric


class TestMutualFriends:
    """Tests for the overlap matrix."""

    def test_reference_values(self, friends_graph):
        """Test a few hand-computed entries."""
        M = mutual_friends(friends_graph)
        assert M.value(1, 5) == 3
        assert M.value(2, 3) == 2
        assert M.value(5, 8) == 1
        assert M.value(8, 9) == 1
        assert M.value(1, 2) == 0
        assert M[6, 7] == 1

    def test_matches_neighbor_intersection(self, random_graph):
        """Test that every entry is the size of the common neighborhood."""
        G = random_graph(n=25, p=0.2)
        M = mutual_friends(G)
        for u in G.nodes():
            for v in G.nodes():
                if u == v:
                    continue
                expected = len(set(G.neighbors(u)) & set(G.neighbors(v)))
                assert M.value(u, v) == expected

    def test_symmetric(self, random_graph):
        """Test matrix symmetry on random graphs."""
        for p in (0.05, 0.2, 0.5):
            M = mutual_friends(random_graph(n=20, p=p))
            assert is_symmetric(M.values)
            for u in M.nodes:
                for v in M.nodes:
                    if u != v:
                        assert M.value(u, v) == M.value(v, u)

    def test_diagonal_not_applicable(self, friends_graph):
        """Test that the diagonal is excluded."""
        M = mutual_friends(friends_graph)
        assert np.all(np.isnan(np.diag(M.values)))
        assert M.value(5, 5) is None
        assert 5 not in M.row(5)

    def test_axes(self, friends_graph):
        """Test node ordering of the axes."""
        M = mutual_friends(friends_graph)
        assert M.nodes == friends_graph.nodes()
        assert M.shape == (9, 9)
        assert M.index[1] == 0

    def test_row(self, friends_graph):
        """Test row access."""
        row = mutual_friends(friends_graph).row(6)
        assert row == {1: 0, 2: 1, 3: 1, 4: 1, 5: 0, 7: 1, 8: 0, 9: 0}

    def test_to_dict_sparse(self, friends_graph):
        """Test the sparse map-of-maps view."""
        sparse = mutual_friends(friends_graph).to_dict()
        assert sparse[6] == {2: 1, 3: 1, 4: 1, 7: 1}
        assert sparse[1] == {5: 3}
        assert set(sparse) == set(friends_graph.nodes())

    def test_unknown_node(self, friends_graph):
        """Test lookups of unknown nodes."""
        M = mutual_friends(friends_graph)
        with pytest.raises(UnknownNodeError):
            M.value(1, 42)
        with pytest.raises(UnknownNodeError):
            M.row(42)

    def test_empty_graph(self):
        """Test the empty graph."""
        M = mutual_friends(Graph())
        assert M.shape == (0, 0)
        assert M.nodes == []

    def test_directed_graph_rejected(self):
        """Test that directed graphs fail fast."""
        with pytest.raises(InvalidGraphKindError):
            mutual_friends(Graph.from_edges([(1, 2)], directed=True))

    def test_debug_mode(self, friends_graph):
        """Test that debug mode accepts the matrix."""
        with debug_context(True):
            M = mutual_friends(friends_graph)
        assert M.value(1, 5) == 3


class TestRecommend:
    """Tests for friend recommendation."""

    def test_reference_recommendation(self, friends_graph):
        """Test that node 1 is recommended node 5."""
        M = mutual_friends(friends_graph)
        assert recommend(M, 1) == {5}

    def test_ties_return_all(self, friends_graph):
        """Test that every maximal node is returned."""
        M = mutual_friends(friends_graph)
        assert recommend(M, 6) == {2, 3, 4, 7}
        assert recommend(M, 8) == {5, 9}
        assert recommend(M, 2) == {3, 4}

    def test_never_recommends_self(self, friends_graph):
        """Test that the query node is excluded."""
        M = mutual_friends(friends_graph)
        for node in friends_graph.nodes():
            result = recommend(M, node)
            if result is not NO_RECOMMENDATION:
                assert node not in result

    def test_all_zero_row(self):
        """Test the no-recommendation result on a zero row."""
        G = Graph.from_edges([(10, 11)], nodes=[10, 11, 12])
        M = mutual_friends(G)
        result = recommend(M, 10)
        assert result is NO_RECOMMENDATION
        assert isinstance(result, NoRecommendation)
        assert recommend(M, 12) is NO_RECOMMENDATION

    def test_single_node(self):
        """Test a row with no other nodes."""
        G = Graph()
        G.add_node("solo")
        assert recommend(mutual_friends(G), "solo") is NO_RECOMMENDATION

    def test_unknown_node(self, friends_graph):
        """Test recommendation for an unknown node."""
        with pytest.raises(UnknownNodeError):
            recommend(mutual_friends(friends_graph), 42)


class TestNeighborhoodOverlap:
    """Tests for Jaccard neighborhood overlap of an edge."""

    def test_overlap(self, triangle_graph):
        """Test a hand-computed overlap."""
        # N(1) - {2} = {3, 4, 5}; N(2) - {1} = {3, 5}
        assert neighborhood_overlap(triangle_graph, 1, 2) == pytest.approx(2 / 3)

    def test_no_overlap(self, friends_graph):
        """Test a bridge-like edge with disjoint neighborhoods."""
        assert neighborhood_overlap(friends_graph, 5, 7) == 0.0

    def test_empty_union(self):
        """Test an isolated edge."""
        G = Graph.from_edges([("a", "b")])
        assert neighborhood_overlap(G, "a", "b") == 0.0

    def test_directed_graph_rejected(self):
        """Test that directed graphs fail fast."""
        with pytest.raises(InvalidGraphKindError):
            neighborhood_overlap(Graph.from_edges([(1, 2)], directed=True), 1, 2)
