"""
Breadth-first and depth-first search over any GraphView.

The caller owns the ``visited`` buffer, so one buffer can be shared across
calls with different start vertices to sweep every component of a graph.
"""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, MutableSequence
from enum import Enum

from ..core.view import GraphView

__all__ = ["Order", "bfs", "dfs", "traverse"]


class Order(str, Enum):
    """Visitation order (BFS, DFS).

    Attributes:
        BFS: Expand the oldest discovered vertex first (FIFO)
        DFS: Expand the most recently discovered vertex first (LIFO)
    """

    BFS = "bfs"
    DFS = "dfs"


def traverse(
    g: GraphView,
    start: int,
    visited: MutableSequence[bool],
    action: Callable[[int], object],
    order: Order | str = Order.DFS,
) -> None:
    """Visit every not-yet-visited vertex reachable from ``start``.

    Parameters
    ----------
    g : GraphView
        Graph to search; only ``vertex_count`` and ``neighbors`` are used.
    start : int
        Start vertex.
    visited : mutable sequence of bool
        One flag per vertex, updated in place. Vertices already flagged are
        neither reported nor expanded.
    action : callable
        Called as ``action(w)`` exactly once per newly discovered vertex, at
        the moment it is discovered.
    order : Order or {'bfs', 'dfs'}, default 'dfs'

    Raises
    ------
    TypeError
        If ``start`` is not an integer.
    ValueError
        If ``visited`` does not have one entry per vertex, or ``order`` is unknown.
    IndexError
        If ``start`` is not a vertex of ``g``.

    Notes
    -----
    Edges are followed outward only, so the vertices discovered from ``start``
    form its out-reachable set. Edge labels are ignored.

    """
    order = Order(order)
    n = g.vertex_count()
    if len(visited) != n:
        raise ValueError(f"visited has {len(visited)} entries, graph has {n} vertices")
    try:
        start = operator.index(start)
    except TypeError:
        raise TypeError(f"Vertex must be an integer, got {type(start).__name__}") from None
    if not 0 <= start < n:
        raise IndexError(f"Vertex {start} out of range [0, {n})")
    if visited[start]:
        return

    work = deque()
    pop = work.popleft if order is Order.BFS else work.pop

    visited[start] = True
    action(start)
    work.append(start)
    while work:
        v = pop()
        for w, _ in g.neighbors(v):
            if not visited[w]:
                visited[w] = True
                action(w)
                work.append(w)


def bfs(g: GraphView, start: int, visited: MutableSequence[bool], action: Callable[[int], object]) -> None:
    """Breadth-first ``traverse``: vertices are reported in non-decreasing distance from ``start``."""
    traverse(g, start, visited, action, Order.BFS)


def dfs(g: GraphView, start: int, visited: MutableSequence[bool], action: Callable[[int], object]) -> None:
    """Depth-first ``traverse``."""
    traverse(g, start, visited, action, Order.DFS)
