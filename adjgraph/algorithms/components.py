from __future__ import annotations

from ..core.view import GraphView
from .traversal import Order, traverse

__all__ = ["component_stats", "components"]


def components(g: GraphView, order: Order | str = Order.DFS) -> list[list[int]]:
    """Split the vertices of ``g`` into reachable sets.

    Vertices are scanned in index order with one shared ``visited`` buffer;
    every vertex still unvisited starts a new traversal, and the vertices it
    discovers (in discovery order) form one set.

    On graphs with one-way edges these are out-reachability sets of each
    unvisited root, not strongly connected components: a vertex reached from
    an earlier root is never reported again.
    """
    n = g.vertex_count()
    visited = [False] * n
    result = []
    for v in range(n):
        if not visited[v]:
            found = []
            traverse(g, v, visited, found.append, order)
            result.append(found)
    return result


def component_stats(g: GraphView) -> tuple[int, int]:
    """Return ``(largest_size, count)`` over ``components(g)``."""
    sizes = [len(c) for c in components(g)]
    return max(sizes, default=0), len(sizes)
