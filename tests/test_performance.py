import time

import pytest

from simplegraphs import Graph


class TestPerformance:
    """Large inputs: iteration depth and run time."""

    @pytest.mark.slow
    def test_long_chain_cycle_detection(self):
        n = 20000
        G = Graph(range(n))
        for i in range(n - 1):
            G.add_edge(i, i + 1)
        start = time.time()
        assert not G.detect_cycle()
        G.add_edge(n - 1, 0)
        assert G.detect_cycle()
        print(f"\ncycle detection over {n} vertices: {time.time() - start:.4f}s")

    @pytest.mark.slow
    def test_long_chain_searches(self):
        n = 20000
        G = Graph(range(n), directed=False)
        for i in range(n - 1):
            G.add_edge(i, i + 1)
        assert G.find_minimum_distance(0, n - 1) == n - 1
        assert G.depth_first_search(0).size() == n
        assert G.breadth_first_search(n // 2, max_depth=10).size() == 21
