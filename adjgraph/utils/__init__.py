from .random_graphs import benchmark, random_graph_pair

__all__ = ["benchmark", "random_graph_pair"]
