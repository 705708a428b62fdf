from __future__ import annotations

import importlib

from ._proxy import BackendProxy

__all__ = [
    "ensure_materialized",
    "get_proxy",
]


def _nx_to_backend(graph):
    from .networkx import to_backend

    return to_backend(graph)


# Map backend name -> callable that converts an adjgraph graph -> backend graph
_REGISTRY = {
    "networkx": _nx_to_backend,
}


def get_proxy(backend_name: str, graph) -> BackendProxy:
    """Return a lazy proxy so users can write `G.nx.<algo>()`."""
    if backend_name not in _REGISTRY:
        raise ValueError(f"No backend '{backend_name}' registered")
    return BackendProxy(graph, backend_name)


def ensure_materialized(backend_name: str, graph) -> dict:
    """
    Convert (or re-convert) *graph* into the requested backend object and
    cache the result on the graph's private state object.  Returns the cache
    entry: {"module": nx, "graph": nx.DiGraph, "version": int}
    """
    cache = graph._state._backend_cache
    entry = cache.get(backend_name)

    if entry is None or graph._state.dirty_since(entry["version"]):
        converted = _REGISTRY[backend_name](graph)
        backend_module = importlib.import_module(backend_name)

        entry = cache[backend_name] = {
            "module": backend_module,
            "graph": converted,
            "version": graph._state.version,
        }

    return entry
