import adjgraph as ag

GRAPH_SIZE_TO_ANALYZE = 1000
GRAPH_SIZES = [3, 100, 500, 1000, 1500, 2000, 2500, 3000, 3500, 4000, 4500, 5000]
TEST_ITERATIONS = 100


def analyze_graph_info(n: int = GRAPH_SIZE_TO_ANALYZE, seed=None):
    """Print component statistics of a random graph stored both ways."""
    sparse, dense = ag.random_graph_pair(n, seed=seed)

    for name, g in (("Sparse", sparse), ("Dense", dense)):
        largest, count = ag.component_stats(g)
        print(f"Largest component size in {name}: {largest}")
        print(f"Number of components in {name}: {count}")
        print("-" * 18)


def analyze_graph_performance(sizes=GRAPH_SIZES, iterations: int = TEST_ITERATIONS, seed=None):
    """Print how long repeated DFS sweeps take on each backend."""
    table = ag.benchmark(sizes, iterations=iterations, seed=seed)
    for n in sizes:
        print(f"Testing graph size: {n}")
        for row in table.filter(table["n"] == n).iter_rows(named=True):
            print(f"  {row['backend']}: {row['seconds']:.4f}s")
    return table


def main():
    print("🧩 Components of a random graph")
    analyze_graph_info()

    print("\n⏱️ Traversal performance (sparse vs dense)")
    analyze_graph_performance()


if __name__ == "__main__":
    main()
