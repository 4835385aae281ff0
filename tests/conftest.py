"""Shared fixtures and helpers for graph tests."""

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from simplegraphs.core.graph import Graph  # noqa: E402

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def chain_graph():
    """Directed graph where the cheap route is the long one: 1->2->3->4 beats 1->3."""
    G = Graph([1, 2, 3, 4], directed=True)
    G.add_edge(1, 2, 1)
    G.add_edge(2, 3, 1)
    G.add_edge(1, 3, 5)
    G.add_edge(3, 4, 1)
    return G


@pytest.fixture
def tree_graph():
    """Undirected tree.

        a
       / \\
      b   c
     / \\   \\
    d   e   f
    """
    G = Graph(list("abcdef"), directed=False)
    for parent, child in [("a", "b"), ("a", "c"), ("b", "d"), ("b", "e"), ("c", "f")]:
        G.add_edge(parent, child)
    return G


@pytest.fixture
def grid_graph():
    """Undirected 5x5 grid of (x, y) vertices with unit weights."""
    G = Graph(directed=False)
    n = 5
    for x in range(n):
        for y in range(n):
            G.add_vertex((x, y))
    for x in range(n):
        for y in range(n):
            if x + 1 < n:
                G.add_edge((x, y), (x + 1, y))
            if y + 1 < n:
                G.add_edge((x, y), (x, y + 1))
    return G


def manhattan(v, target):
    return abs(v[0] - target[0]) + abs(v[1] - target[1])


# ======================================================================
# HELPERS
# ======================================================================


def path_weight(G, path):
    """Sum of edge weights along ``path``; fails if a hop is not an edge."""
    total = 0.0
    for u, v in zip(path, path[1:]):
        edge = G.get_edge(u, v)
        assert edge is not None, f"{u!r} -> {v!r} is not an edge"
        total += float(edge.weight)
    return total


def assert_consistent(G):
    """Global edge index and adjacency records agree."""
    for edge in G.get_edges():
        assert G.edge_exists(edge.a, edge.b)
        if not G.is_directed():
            assert G.edge_exists(edge.b, edge.a)
    per_vertex = sum(len(G.get_edges(v)) for v in G.get_vertices())
    expected = G.edge_count() if G.is_directed() else 2 * G.edge_count()
    assert per_vertex == expected, f"{per_vertex} adjacency records for {G.edge_count()} edges"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
