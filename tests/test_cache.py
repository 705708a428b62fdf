import numpy as np
import pytest
import scipy.sparse as sp


class TestAdjacencyCache:
    def test_csr_matches_edges(self, small_graph):
        A = small_graph.adjacency_matrix()
        assert sp.issparse(A)
        assert A.shape == (5, 5)
        assert A.nnz == small_graph.edge_count() == 5
        expected = np.zeros((5, 5), dtype=np.int8)
        for v, w in [(1, 2), (2, 1), (2, 3), (3, 2), (4, 4)]:
            expected[v, w] = 1
        assert (A.toarray() == expected).all()

    def test_row_sums_are_degrees(self, small_graph):
        sums = np.asarray(small_graph.cache.csr.sum(axis=1)).ravel()
        assert sums.tolist() == [small_graph.degree(v) for v in range(5)]

    def test_cached_until_mutation(self, small_graph):
        cache = small_graph.cache
        assert not cache.has_csr()
        first = cache.csr
        assert cache.has_csr()
        assert cache.csr is first

        small_graph.add_edge(0, 1)
        assert not cache.has_csr()
        second = cache.csr
        assert second is not first
        assert second[0, 1] == 1

    def test_noop_remove_keeps_cache(self, small_graph):
        first = small_graph.cache.csr
        small_graph.remove_edge(0, 4)
        assert small_graph.cache.csr is first

    def test_csc_and_build(self, small_graph):
        cache = small_graph.cache
        cache.build()
        assert cache.has_csr() and cache.has_csc()
        assert (cache.csc.toarray() == cache.csr.toarray()).all()

    def test_invalidate_and_info(self, small_graph):
        cache = small_graph.cache
        assert cache.info()["csr"] == {"cached": False}
        cache.build(["csr"])
        info = cache.info()["csr"]
        assert info["cached"] and info["nnz"] == 5 and info["shape"] == (5, 5)
        cache.invalidate(["csr"])
        assert not cache.has_csr()
        cache.build()
        cache.clear()
        assert not cache.has_csr() and not cache.has_csc()

    def test_unknown_format(self, small_graph):
        with pytest.raises(ValueError):
            small_graph.cache.invalidate(["dense"])

    def test_empty_graph(self, graph_cls):
        A = graph_cls(0).adjacency_matrix()
        assert A.shape == (0, 0)
        assert A.nnz == 0
