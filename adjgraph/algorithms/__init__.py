from .components import component_stats, components
from .traversal import Order, bfs, dfs, traverse

__all__ = ["Order", "bfs", "component_stats", "components", "dfs", "traverse"]
