# =============================
# Minimum arborescence benchmark
# Compares networkx.minimum_spanning_arborescence with min_arborescence
# =============================

import time
import random
import sys


try:
    import networkx as nx
except ImportError:
    print("Error: networkx not found, install it with:")
    print("  pip install networkx")
    sys.exit(1)


from min_arborescence import (
    AppConfig, ArborescenceApp, NO_ARBORESCENCE, minimum_arborescence_weight,
)


# =============================
# NetworkX reference: fix the root by dropping its incoming edges,
# collapse parallel edges to their minimum, drop self-loops
# =============================
def networkx_reference_weight(n, edges, root=1):
    best = {}
    for u, v, w in edges:
        if u == v or v == root:
            continue
        if (u, v) not in best or w < best[(u, v)]:
            best[(u, v)] = w

    G = nx.DiGraph()
    G.add_nodes_from(range(1, n + 1))
    G.add_weighted_edges_from((u, v, w) for (u, v), w in best.items())
    try:
        tree = nx.minimum_spanning_arborescence(G, attr="weight")
    except nx.NetworkXException:
        return NO_ARBORESCENCE
    return sum(d["weight"] for _, _, d in tree.edges(data=True))


def random_digraph(n, m, max_weight=100, seed=None):
    """Random edge list on 1..n; a shuffled path from 1 keeps it feasible."""
    rng = random.Random(seed)
    order = list(range(2, n + 1))
    rng.shuffle(order)
    edges = []
    prev = 1
    for v in order:
        edges.append((prev, v, rng.randint(0, max_weight)))
        prev = v
    while len(edges) < m:
        edges.append((rng.randint(1, n), rng.randint(1, n), rng.randint(0, max_weight)))
    return edges


# =============================
# One benchmark case
# =============================
def benchmark_one_case(case_name, n, edges, contract_all_cycles=False):
    """
    Run one case with NetworkX and with min_arborescence, time both,
    and compare the resulting weights.
    """
    print(f"\n--- {case_name} ---")
    print(f"Vertices: {n}, Edges: {len(edges)}")

    start_nx = time.time()
    nx_weight = networkx_reference_weight(n, edges)
    nx_time = time.time() - start_nx
    print(f"[NetworkX]     Time: {nx_time:.4f}s | Weight: {nx_weight}")

    app = ArborescenceApp(AppConfig(contract_all_cycles=contract_all_cycles, max_vertices=0, max_edges=0))
    start_my = time.time()
    try:
        my_weight = app.solve(n, edges, 1)
        my_time = time.time() - start_my
        print(f"[My Algorithm] Time: {my_time:.4f}s | Weight: {my_weight}")

        speedup_nx = nx_time / my_time if my_time > 0 else 0.0
        print(f"Speedup vs NetworkX: {speedup_nx:.2f}x")

        if nx_weight == my_weight:
            print("Correctness check passed (vs NX)")
        else:
            print(f"Weight mismatch (vs NX)! Diff: {my_weight - nx_weight}")

    except Exception as e:
        print(f"[My Algorithm] Failed: {e}")
        import traceback
        traceback.print_exc()


def main():
    print("=========================================")
    print("Benchmark: min_arborescence vs NetworkX.minimum_spanning_arborescence")
    print("=========================================")

    # Case 1: small sparse graph
    benchmark_one_case("Random Sparse (n=50, m=200)", 50, random_digraph(50, 200, seed=42))

    # Case 2: low weight range, many ties
    benchmark_one_case("Random Ties (n=200, m=2000, w<=3)", 200, random_digraph(200, 2000, max_weight=3, seed=7))

    # Case 3: upper bounds, sequential contraction
    edges = random_digraph(1000, 10000, seed=2024)
    benchmark_one_case("Random Large (n=1000, m=10000)", 1000, edges)

    # Case 4: same graph, all cycles of a pass contracted together
    benchmark_one_case("Random Large, batch contraction", 1000, edges, contract_all_cycles=True)

    # Case 5: adapter on a networkx graph built by networkx itself
    G = nx.gnm_random_graph(300, 3000, seed=11, directed=True)
    rng = random.Random(11)
    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, 50)
    t0 = time.time()
    w = minimum_arborescence_weight(G, 0)
    print(f"\n--- NetworkX adapter (gnm n=300, m=3000) ---\nWeight: {w} | Time: {time.time() - t0:.4f}s")


if __name__ == "__main__":
    main()
