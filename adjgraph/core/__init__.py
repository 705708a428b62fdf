from .base import AdjacencyGraph
from .dense import DenseGraph
from .labels import ABSENT, NO_LABEL, EdgeState, is_edge
from .registry import DENSE_THRESHOLD, available_backends, make_graph
from .sparse import SparseGraph
from .view import GraphView

__all__ = [
    "ABSENT",
    "NO_LABEL",
    "DENSE_THRESHOLD",
    "AdjacencyGraph",
    "DenseGraph",
    "EdgeState",
    "GraphView",
    "SparseGraph",
    "available_backends",
    "is_edge",
    "make_graph",
]
