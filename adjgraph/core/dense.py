import numpy as np

from .base import AdjacencyGraph
from .labels import ABSENT


class DenseGraph(AdjacencyGraph):
    """Adjacency-matrix graph, best suited for dense graphs.

    Storage is an n×n boolean presence mask (NumPy) plus an n×n table of
    labels. Space is Θ(n²). Per-edge operations are O(1) worst case;
    ``degree`` and ``neighbors`` scan a full row and are O(n).

    ``neighbors(v)`` yields vertices in ascending index order, so traversals
    over a DenseGraph are reproducible for a fixed edge set.
    """

    def __init__(self, n: int, *, history: bool = True):
        super().__init__(n, history=history)
        self._present = np.zeros((self._n, self._n), dtype=bool)
        # plain lists: labels may be arrays or sequences numpy would broadcast
        self._labels = [[ABSENT] * self._n for _ in range(self._n)]

    def _put(self, v, w, x):
        created = not self._present[v, w]
        self._present[v, w] = True
        self._labels[v][w] = x
        return created

    def _drop(self, v, w):
        if not self._present[v, w]:
            return False
        self._present[v, w] = False
        self._labels[v][w] = ABSENT
        return True

    def _edge_arrays(self):
        return np.nonzero(self._present)

    def has_edge(self, v, w):
        return bool(self._present[self._vertex(v), self._vertex(w)])

    def label(self, v, w):
        return self._labels[self._vertex(v)][self._vertex(w)]

    def degree(self, v):
        return int(np.count_nonzero(self._present[self._vertex(v)]))

    def neighbors(self, v):
        v = self._vertex(v)
        labels = self._labels[v]
        return ((int(w), labels[w]) for w in np.flatnonzero(self._present[v]))
