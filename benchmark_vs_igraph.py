import time
import random
import networkx as nx
import igraph as ig

from min_arborescence import NO_ARBORESCENCE, compute_min_arborescence_weight
from benchmark_vs_networkx import networkx_reference_weight


def igraph_random_edges(n, m, max_weight=100, seed=42):
    """Erdos-Renyi G(n, m) digraph from igraph, relabelled to 1..n with random weights."""
    random.seed(seed)
    g = ig.Graph.Erdos_Renyi(n=n, m=m, directed=True, loops=False)
    rng = random.Random(seed)
    edges = [(s + 1, t + 1, rng.randint(0, max_weight)) for s, t in g.get_edgelist()]
    return g, edges


def igraph_feasible(g, root=0):
    """An arborescence exists iff every vertex is reachable from the root."""
    return len(g.subcomponent(root, mode="out")) == g.vcount()


def run_benchmark(name, n, m, seed=42):
    g, edges = igraph_random_edges(n, m, seed=seed)
    print(f"\n[{name}] Nodes: {g.vcount()}, Edges: {g.ecount()}")

    # --- 1. Feasibility from igraph reachability ---
    t0 = time.time()
    feasible = igraph_feasible(g)
    t_ig = time.time() - t0
    print(f"  > igraph  (C Lib)  | Time: {t_ig:.4f}s | Reachable from root: {feasible}")

    # --- 2. My Algorithm ---
    t0 = time.time()
    w_my = compute_min_arborescence_weight(n, edges, 1)
    t_my = time.time() - t0
    print(f"  > My Algo (Python) | Time: {t_my:.4f}s | Weight: {w_my}")

    if (w_my != NO_ARBORESCENCE) == feasible:
        print("  Feasibility: Match")
    else:
        print("  Feasibility: MISMATCH")

    # --- 3. Weight against networkx when feasible ---
    if feasible:
        t0 = time.time()
        w_nx = networkx_reference_weight(n, edges)
        t_nx = time.time() - t0
        print(f"  > NetworkX         | Time: {t_nx:.4f}s | Weight: {w_nx}")
        print("  Accuracy: Exact Match" if w_nx == w_my else f"  Accuracy: Diff {w_my - w_nx}")


if __name__ == "__main__":
    print("Benchmarking: min_arborescence vs igraph reachability / NetworkX weight")
    print("---------------------------------------------------------")

    # Case 1: sparse, often infeasible
    run_benchmark("G(200, 300)", 200, 300)

    # Case 2: denser, usually feasible
    run_benchmark("G(500, 5000)", 500, 5000)

    # Case 3: upper bounds
    run_benchmark("G(1000, 10000)", 1000, 10000, seed=2024)
