import pytest

from adjgraph.algorithms import component_stats, components
from adjgraph.core import DenseGraph


class TestComponents:
    @pytest.mark.parametrize("order", ["dfs", "bfs"])
    def test_small_graph(self, small_graph, order):
        found = components(small_graph, order)
        assert [sorted(c) for c in found] == [[0], [1, 2, 3], [4]]

    def test_small_graph_stats(self, small_graph):
        assert component_stats(small_graph) == (3, 3)

    def test_printed_groups_on_dense(self):
        g = DenseGraph(5)
        g.add_edge_bi(1, 2)
        g.add_edge_bi(2, 3)
        g.add_edge_bi(4, 4)
        text = "".join("{" + "".join(map(str, c)) + "}" for c in components(g))
        assert text == "{0}{123}{4}"

    def test_sets_are_out_reachability_not_scc(self, graph_cls):
        # 1 -> 0 only: 0 is reached first as its own root, 1 then stands alone
        g = graph_cls(2)
        g.add_edge(1, 0)
        assert components(g) == [[0], [1]]

        # 0 -> 1 only: a single set rooted at 0
        g = graph_cls(2)
        g.add_edge(0, 1)
        assert components(g) == [[0, 1]]

    def test_every_vertex_reported_once(self, graph_cls):
        g = graph_cls(6)
        for v, w in [(0, 1), (2, 1), (3, 4), (4, 3), (5, 0)]:
            g.add_edge(v, w)
        found = components(g)
        flat = [v for c in found for v in c]
        assert sorted(flat) == list(range(6))
        assert [sorted(c) for c in found] == [[0, 1], [2], [3, 4], [5]]
        assert component_stats(g) == (2, 4)

    def test_empty_graph(self, graph_cls):
        g = graph_cls(0)
        assert components(g) == []
        assert component_stats(g) == (0, 0)
