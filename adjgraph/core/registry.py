"""Pick a storage backend by name, or by expected density."""
from .dense import DenseGraph
from .sparse import SparseGraph

__all__ = ["DENSE_THRESHOLD", "available_backends", "make_graph"]

# name -> graph class
_BACKENDS = {
    "sparse": SparseGraph,
    "dense": DenseGraph,
}

# Fraction of the n*n possible edges at which "auto" switches to the matrix.
DENSE_THRESHOLD = 0.1


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def make_graph(n: int, backend: str = "sparse", *, expected_edges=None, history: bool = True):
    """Construct an empty graph with ``n`` vertices.

    Parameters
    ----------
    n : int
        Number of vertices.
    backend : {'sparse', 'dense', 'auto'}, default 'sparse'
        Storage strategy. ``'auto'`` picks ``'dense'`` when
        ``expected_edges >= DENSE_THRESHOLD * n * n`` and ``'sparse'``
        otherwise, including when ``expected_edges`` is not given.
    expected_edges : int, optional
        Anticipated number of directed edges, used by ``'auto'`` only.
    history : bool, default True
        Forwarded to the graph constructor.

    Returns
    -------
    SparseGraph | DenseGraph

    Raises
    ------
    ValueError
        If ``backend`` is not a known name.

    """
    name = backend.lower()
    if name == "auto":
        dense = expected_edges is not None and expected_edges >= DENSE_THRESHOLD * n * n
        name = "dense" if dense else "sparse"
    if name not in _BACKENDS:
        raise ValueError(f"Unknown backend '{backend}'")
    return _BACKENDS[name](n, history=history)
