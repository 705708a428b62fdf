try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install adjgraph[networkx]"
    ) from e

import warnings

from ..core.labels import NO_LABEL
from ..core.registry import make_graph

__all__ = ["from_nx", "to_backend", "to_nx"]


def to_nx(graph, *, label_attr: str = "label") -> "nx.DiGraph":
    """
    Export a graph to a NetworkX DiGraph.

    Parameters
    ----------
    graph : SparseGraph | DenseGraph
        Source graph instance.
    label_attr : str
        Edge attribute that receives explicit labels. Unlabeled edges get no
        attribute at all, so ``None`` labels survive the export.

    Returns
    -------
    networkx.DiGraph
        Nodes ``0 .. n-1``, one edge per directed edge of ``graph``.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.vertices())
    for v, w, x in graph.edges():
        if x is NO_LABEL:
            G.add_edge(v, w)
        else:
            G.add_edge(v, w, **{label_attr: x})
    return G


def to_backend(graph):
    return to_nx(graph)


def from_nx(nxG, backend: str = "sparse", *, label_attr: str = "label", history: bool = True):
    """
    Build a graph from any NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph
        Source graph. Nodes are numbered in ``nxG.nodes`` order.
    backend : {'sparse', 'dense', 'auto'}
        Storage for the new graph (see ``make_graph``).
    label_attr : str
        Edge attribute read as the label; edges without it are unlabeled.

    Returns
    -------
    (graph, nodes)
        The new graph and the list mapping vertex index -> original node.

    Notes
    -----
    Undirected inputs become pairs of opposite directed edges. Parallel edges
    of multigraphs collapse into one edge; the last one's label wins.
    """
    nodes = list(nxG.nodes())
    index = {u: i for i, u in enumerate(nodes)}
    expected = nxG.number_of_edges()
    if not nxG.is_directed():
        expected *= 2
    G = make_graph(len(nodes), backend, expected_edges=expected, history=history)

    if nxG.is_multigraph():
        warnings.warn(
            "Multigraph input: parallel edges are collapsed into a single edge.",
            category=RuntimeWarning,
            stacklevel=2,
        )

    add = G.add_edge_labeled if nxG.is_directed() else G.add_edge_bi_labeled
    add_plain = G.add_edge if nxG.is_directed() else G.add_edge_bi
    for u, v, data in nxG.edges(data=True):
        if label_attr in data:
            add(index[u], index[v], data[label_attr])
        else:
            add_plain(index[u], index[v])
    return G, nodes
