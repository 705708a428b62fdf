import numpy as np

from .base import AdjacencyGraph
from .labels import ABSENT


class SparseGraph(AdjacencyGraph):
    """Adjacency-list graph, best suited for sparse graphs.

    Each vertex owns a dict ``{w: label}`` of its outgoing edges, allocated on
    its first edge. Space is Θ(n + m); ``degree``, ``has_edge`` and ``label``
    are O(1), ``neighbors(v)`` is O(degree(v)).

    Neighbor order is unspecified; callers must not rely on it.
    """

    def __init__(self, n: int, *, history: bool = True):
        super().__init__(n, history=history)
        # rows stay None until the vertex gets an outgoing edge
        self._rows = [None] * self._n

    def _put(self, v, w, x):
        row = self._rows[v]
        if row is None:
            row = self._rows[v] = {}
        created = w not in row
        row[w] = x
        return created

    def _drop(self, v, w):
        row = self._rows[v]
        if not row or w not in row:
            return False
        del row[w]
        return True

    def _edge_arrays(self):
        rows = [v for v, row in enumerate(self._rows) if row for _ in row]
        cols = [w for row in self._rows if row for w in row]
        return np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp)

    def has_edge(self, v, w):
        row = self._rows[self._vertex(v)]
        w = self._vertex(w)
        return row is not None and w in row

    def label(self, v, w):
        row = self._rows[self._vertex(v)]
        w = self._vertex(w)
        if row is None:
            return ABSENT
        return row.get(w, ABSENT)

    def degree(self, v):
        row = self._rows[self._vertex(v)]
        return len(row) if row else 0

    def neighbors(self, v):
        row = self._rows[self._vertex(v)]
        return iter(row.items()) if row else iter(())
