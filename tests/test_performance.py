import polars as pl
import pytest

from adjgraph.utils import benchmark


def test_benchmark_table():
    table = benchmark([3, 20], iterations=2, seed=1)
    assert isinstance(table, pl.DataFrame)
    assert table.columns == ["n", "backend", "iterations", "seconds", "components", "largest"]
    assert table.height == 4
    assert table["backend"].to_list() == ["sparse", "dense", "sparse", "dense"]
    # both backends hold the same edges, so the decomposition agrees
    for n in (3, 20):
        rows = table.filter(pl.col("n") == n)
        assert rows["components"].n_unique() == 1
        assert rows["largest"].n_unique() == 1


class TestPerformance:
    """Optional performance comparison tests."""

    @pytest.mark.slow
    def test_backend_speed_comparison(self):
        table = benchmark([100, 500, 1000], iterations=10, seed=0)
        print("\nDFS sweep (seconds):")
        for row in table.iter_rows(named=True):
            print(f"  n={row['n']:>5} {row['backend']:>6}: {row['seconds']:.4f}s")
        assert (table["seconds"] >= 0).all()
