import pytest

from simplegraphs import DirectedGraph, Graph, UndirectedGraph


def directed(*edges):
    G = DirectedGraph()
    for u, v in edges:
        G.add_vertex(u)
        G.add_vertex(v)
        G.add_edge(u, v)
    return G


def undirected(*edges):
    G = UndirectedGraph()
    for u, v in edges:
        G.add_vertex(u)
        G.add_vertex(v)
        G.add_edge(u, v)
    return G


class TestDirectedCycles:
    def test_three_cycle(self):
        assert directed(("a", "b"), ("b", "c"), ("c", "a")).detect_cycle()

    def test_two_cycle(self):
        assert directed(("a", "b"), ("b", "a")).detect_cycle()

    def test_diamond_is_acyclic(self):
        G = directed(("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"))
        assert not G.detect_cycle()

    def test_chain_is_acyclic(self, chain_graph):
        assert not chain_graph.detect_cycle()

    def test_closing_edge_makes_cycle(self, chain_graph):
        chain_graph.add_edge(4, 1)
        assert chain_graph.detect_cycle()
        chain_graph.remove_edge(4, 1)
        assert not chain_graph.detect_cycle()

    def test_cycle_in_later_component(self):
        G = directed(("sink_source", "sink"), ("x", "y"), ("y", "z"), ("z", "x"))
        assert G.detect_cycle()

    def test_cycle_unreachable_from_first_vertex(self):
        G = directed(("c", "a"), ("a", "b"), ("b", "c"), ("d", "a"))
        G.sort_vertices(key=lambda v: v != "b")
        assert list(G.get_vertices())[0] == "b"
        assert G.detect_cycle()

    @pytest.mark.parametrize("order", [None, "reverse"])
    def test_start_order_does_not_matter(self, order):
        G = directed(("a", "b"), ("b", "c"), ("c", "d"), ("d", "b"))
        if order:
            G.sort_vertices(reverse=True)
        assert G.detect_cycle()

    def test_small_graphs(self):
        assert not Graph().detect_cycle()
        assert not directed(("a", "b")).detect_cycle()
        assert not Graph(range(5)).detect_cycle()


class TestUndirectedCycles:
    def test_triangle(self):
        assert undirected(("a", "b"), ("b", "c"), ("c", "a")).detect_cycle()

    def test_single_edge_is_not_a_cycle(self):
        assert not undirected(("a", "b")).detect_cycle()

    def test_path_is_acyclic(self):
        assert not undirected(("a", "b"), ("b", "c"), ("c", "d")).detect_cycle()

    def test_tree_is_acyclic(self, tree_graph):
        assert not tree_graph.detect_cycle()

    def test_tree_plus_edge(self, tree_graph):
        tree_graph.add_edge("d", "f")
        assert tree_graph.detect_cycle()

    def test_grid_has_cycles(self, grid_graph):
        assert grid_graph.detect_cycle()

    def test_forest(self):
        G = undirected(("a", "b"), ("b", "c"), ("x", "y"), ("y", "z"), ("z", "w"))
        assert not G.detect_cycle()
        G.add_edge("w", "x")
        assert G.detect_cycle()
