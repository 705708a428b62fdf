from __future__ import annotations

import operator
from abc import ABC, abstractmethod

from ._history import HistoryMixin
from ._state import _State
from .cache import CacheManager
from .labels import ABSENT, NO_LABEL


class AdjacencyGraph(HistoryMixin, ABC):
    """Directed graph on a fixed vertex set ``0 .. n-1`` with optional edge labels.

    Subclasses choose the storage; this class owns the mutation and query
    surface whose semantics do not depend on it.

    Parameters
    ----------
    n : int
        Number of vertices. Fixed for the lifetime of the graph.
    history : bool, default True
        Record every mutation in the in-memory history (see ``history()``).

    Notes
    -----
    - An edge and its label are one piece of state. Adding an edge that
      already exists overwrites its label; removing a missing edge is a no-op.
    - Bidirectional operations touch ``(v, w)`` and, only when ``v != w``,
      ``(w, v)``; a self-loop is counted once.
    - Vertex ids are validated on every call: non-integers raise ``TypeError``,
      ids outside ``[0, n)`` raise ``IndexError``.

    """

    _MUTATORS = (
        "add_edge",
        "add_edge_labeled",
        "add_edge_bi",
        "add_edge_bi_labeled",
        "remove_edge",
        "remove_edge_bi",
    )

    def __init__(self, n: int, *, history: bool = True):
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")
        self._n = n
        self._num_edges = 0
        self._state = _State()
        self.cache = CacheManager(self)
        self._init_history(history)

    # ==================== Storage primitives ====================

    @abstractmethod
    def _put(self, v: int, w: int, x) -> bool:
        """Store label ``x`` on ``v -> w``; return True if the edge was created."""

    @abstractmethod
    def _drop(self, v: int, w: int) -> bool:
        """Clear ``v -> w``; return True if an edge was removed."""

    @abstractmethod
    def _edge_arrays(self):
        """Return ``(rows, cols)`` index arrays of all edges."""

    @abstractmethod
    def has_edge(self, v: int, w: int) -> bool:
        """True if there is an edge from ``v`` to ``w``."""

    @abstractmethod
    def label(self, v: int, w: int):
        """Label of ``v -> w``: the stored value, ``NO_LABEL``, or ``ABSENT``."""

    @abstractmethod
    def degree(self, v: int) -> int:
        """Number of outgoing edges of ``v``."""

    @abstractmethod
    def neighbors(self, v: int):
        """Yield ``(w, label)`` for every edge ``v -> w``."""

    # ==================== Validation ====================

    def _vertex(self, v) -> int:
        try:
            i = operator.index(v)
        except TypeError:
            raise TypeError(f"Vertex must be an integer, got {type(v).__name__}") from None
        if not 0 <= i < self._n:
            raise IndexError(f"Vertex {i} out of range [0, {self._n})")
        return i

    # ==================== Queries ====================

    def vertex_count(self) -> int:
        """Number of vertices. O(1)."""
        return self._n

    def edge_count(self) -> int:
        """Number of directed edges, self-loops included. O(1)."""
        return self._num_edges

    def vertices(self):
        return range(self._n)

    def for_each_neighbor(self, v: int, visit) -> None:
        """Call ``visit(w, label)`` for every edge ``v -> w``."""
        for w, x in self.neighbors(v):
            visit(w, x)

    def edges(self):
        """Yield ``(v, w, label)`` for every edge, source vertices ascending."""
        for v in range(self._n):
            for w, x in self.neighbors(v):
                yield v, w, x

    def adjacency_matrix(self):
        """Cached ``scipy.sparse`` CSR presence matrix (see ``cache``)."""
        return self.cache.csr

    # ==================== Mutation ====================

    def _set(self, v: int, w: int, x) -> None:
        if x is ABSENT:
            raise ValueError("ABSENT marks a missing edge and cannot be stored as a label")
        if self._put(v, w, x):
            self._num_edges += 1
        self._state.bump()

    def _unset(self, v: int, w: int) -> None:
        if self._drop(v, w):
            self._num_edges -= 1
            self._state.bump()

    def add_edge(self, v: int, w: int) -> None:
        """Insert ``v -> w`` with no label, replacing any previous label."""
        self._set(self._vertex(v), self._vertex(w), NO_LABEL)

    def add_edge_labeled(self, v: int, w: int, x) -> None:
        """Insert ``v -> w`` with label ``x``, replacing any previous label.

        ``x`` may be any value, ``None`` included, except the ``ABSENT``
        sentinel, which raises ``ValueError``.
        """
        self._set(self._vertex(v), self._vertex(w), x)

    def add_edge_bi(self, v: int, w: int) -> None:
        """Insert unlabeled edges ``v -> w`` and ``w -> v``."""
        self._set_bi(v, w, NO_LABEL)

    def add_edge_bi_labeled(self, v: int, w: int, x) -> None:
        """Insert edges ``v -> w`` and ``w -> v`` both labeled ``x``."""
        self._set_bi(v, w, x)

    def _set_bi(self, v, w, x) -> None:
        v, w = self._vertex(v), self._vertex(w)
        self._set(v, w, x)
        if v != w:
            self._set(w, v, x)

    def remove_edge(self, v: int, w: int) -> None:
        """Remove ``v -> w`` if present."""
        self._unset(self._vertex(v), self._vertex(w))

    def remove_edge_bi(self, v: int, w: int) -> None:
        """Remove ``v -> w`` and ``w -> v`` if present."""
        v, w = self._vertex(v), self._vertex(w)
        self._unset(v, w)
        if v != w:
            self._unset(w, v)

    # ==================== Interop ====================

    @property
    def nx(self):
        """Lazy NX (NetworkX) proxy.
        Usage: G.nx.descendants(0), G.nx.strongly_connected_components()
        """
        if not hasattr(self, "_nx_proxy"):
            from ..adapters.manager import get_proxy

            self._nx_proxy = get_proxy("networkx", self)
        return self._nx_proxy

    # ==================== Convenience ====================

    def __len__(self):
        return self._n

    def __repr__(self):
        return f"{type(self).__name__}(n={self._n}, m={self._num_edges})"
