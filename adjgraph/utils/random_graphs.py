"""Random graph pairs and the sparse-vs-dense traversal benchmark."""
from __future__ import annotations

import time

import numpy as np
import polars as pl

from ..algorithms.components import component_stats, components
from ..core.dense import DenseGraph
from ..core.sparse import SparseGraph

__all__ = ["benchmark", "random_graph_pair"]


def random_graph_pair(n: int, m: int | None = None, seed=None) -> tuple[SparseGraph, DenseGraph]:
    """Build a SparseGraph and a DenseGraph with the same random edge set.

    Parameters
    ----------
    n : int
        Number of vertices.
    m : int, optional
        Number of distinct directed edges (self-loops allowed). Defaults to ``n``.
    seed : int | numpy.random.Generator, optional
        Seed for ``numpy.random.default_rng``.

    Raises
    ------
    ValueError
        If ``m`` exceeds the ``n * n`` possible directed edges.

    """
    m = n if m is None else m
    if m < 0 or m > n * n:
        raise ValueError(f"Cannot place {m} distinct edges on {n} vertices")
    rng = np.random.default_rng(seed)
    sparse, dense = SparseGraph(n, history=False), DenseGraph(n, history=False)
    while sparse.edge_count() < m:
        batch = rng.integers(0, n, size=(m - sparse.edge_count(), 2))
        for v, w in batch.tolist():
            if not sparse.has_edge(v, w):
                sparse.add_edge(v, w)
                dense.add_edge(v, w)
    return sparse, dense


def benchmark(sizes, iterations: int = 100, seed=None) -> pl.DataFrame:
    """Time full DFS decompositions on random sparse/dense graph pairs.

    For every ``n`` in ``sizes`` a pair with ``n`` edges is generated and each
    backend is decomposed into reachable sets ``iterations`` times.

    Returns
    -------
    polars.DataFrame
        Columns ``n``, ``backend``, ``iterations``, ``seconds``,
        ``components`` and ``largest``; two rows per size.
    """
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        pair = random_graph_pair(n, seed=rng)
        for name, g in zip(("sparse", "dense"), pair):
            start = time.perf_counter()
            for _ in range(iterations):
                components(g)
            elapsed = time.perf_counter() - start
            largest, count = component_stats(g)
            rows.append(
                {
                    "n": n,
                    "backend": name,
                    "iterations": iterations,
                    "seconds": elapsed,
                    "components": count,
                    "largest": largest,
                }
            )
    return pl.DataFrame(
        rows,
        schema={
            "n": pl.Int64,
            "backend": pl.Utf8,
            "iterations": pl.Int64,
            "seconds": pl.Float64,
            "components": pl.Int64,
            "largest": pl.Int64,
        },
    )
