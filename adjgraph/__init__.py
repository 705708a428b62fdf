"""adjgraph: fixed-size directed graphs with sparse and dense storage."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "adjgraph.adapters",
    "algorithms": "adjgraph.algorithms",
    "core": "adjgraph.core",
    "utils": "adjgraph.utils",
    "networkx": "adjgraph.adapters.networkx",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "SparseGraph": ("adjgraph.core.sparse", "SparseGraph"),
    "DenseGraph": ("adjgraph.core.dense", "DenseGraph"),
    "GraphView": ("adjgraph.core.view", "GraphView"),
    "EdgeState": ("adjgraph.core.labels", "EdgeState"),
    "ABSENT": ("adjgraph.core.labels", "ABSENT"),
    "NO_LABEL": ("adjgraph.core.labels", "NO_LABEL"),
    "is_edge": ("adjgraph.core.labels", "is_edge"),
    "make_graph": ("adjgraph.core.registry", "make_graph"),
    "available_backends": ("adjgraph.core.registry", "available_backends"),

    # Traversal
    "Order": ("adjgraph.algorithms.traversal", "Order"),
    "traverse": ("adjgraph.algorithms.traversal", "traverse"),
    "bfs": ("adjgraph.algorithms.traversal", "bfs"),
    "dfs": ("adjgraph.algorithms.traversal", "dfs"),
    "components": ("adjgraph.algorithms.components", "components"),
    "component_stats": ("adjgraph.algorithms.components", "component_stats"),

    # Random graphs / benchmark
    "random_graph_pair": ("adjgraph.utils.random_graphs", "random_graph_pair"),
    "benchmark": ("adjgraph.utils.random_graphs", "benchmark"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("adjgraph.adapters.networkx", "to_nx"),
    "from_nx": ("adjgraph.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("adjgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
