import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from adjgraph.core import DenseGraph, SparseGraph


@pytest.fixture(params=["sparse", "dense"])
def graph_cls(request):
    return {"sparse": SparseGraph, "dense": DenseGraph}[request.param]


@pytest.fixture
def small_graph(graph_cls):
    """5 vertices: 1<->2, 2<->3, self-loop on 4, vertex 0 isolated."""
    g = graph_cls(5)
    g.add_edge_bi(1, 2)
    g.add_edge_bi(2, 3)
    g.add_edge_bi(4, 4)
    return g
