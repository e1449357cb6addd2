import time
import random

from min_arborescence import NO_ARBORESCENCE, compute_min_arborescence_weight


def random_rooted_graph(n, m, max_weight=100, seed=0):
    """Random digraph on 1..n with a spanning path from vertex 1, so an arborescence exists."""
    rng = random.Random(seed)
    order = list(range(2, n + 1))
    rng.shuffle(order)
    edges = []
    prev = 1
    for v in order:
        edges.append((prev, v, rng.randint(0, max_weight)))
        prev = v
    while len(edges) < m:
        u = rng.randint(1, n)
        v = rng.randint(1, n)
        edges.append((u, v, rng.randint(0, max_weight)))
    return edges


def check(name, got, expected):
    if got == expected:
        print(f"  [PASS] {name}: {got}")
        return True
    print(f"  [FAIL] {name}: got {got}, expected {expected}")
    return False


def verify():
    print("--- Verifying min_arborescence (Final Check) ---")
    ok = True

    # 1. Chain with a shortcut: 1->2->3->4 at weight 1 each
    edges = [(1, 2, 1), (1, 3, 5), (2, 3, 1), (2, 4, 2), (3, 4, 1)]
    ok &= check("Chain n=4", compute_min_arborescence_weight(4, edges, 1), 3)

    # 2. Vertex 2 has no incoming edge
    ok &= check("Unreachable n=2", compute_min_arborescence_weight(2, [(2, 1, 5)], 1), NO_ARBORESCENCE)

    # 3. Cheap 3-cycle 2->3->4->2 fed by an expensive root edge
    edges = [(1, 2, 10), (2, 3, 1), (3, 4, 1), (4, 2, 1), (1, 3, 20)]
    # cycle costs 3, cheapest entry replaces (4,2): 10 - 1 -> 3 + 9 = 12
    ok &= check("3-cycle n=4", compute_min_arborescence_weight(4, edges, 1), 12)

    # 4. Performance at the upper bounds
    n, m = 1000, 10000
    edges = random_rooted_graph(n, m, seed=2024)
    print(f"\n[Random n={n}, m={m}] Running...")

    t0 = time.time()
    w = compute_min_arborescence_weight(n, edges, 1)
    dt = time.time() - t0
    print(f"  Time: {dt:.4f}s | Weight: {w}")

    if dt > 10.0:
        print("  [FAIL] Too slow! Exceeds the 10s budget.")
        ok = False
    else:
        print("  [PASS] Speed is good.")

    print("\nALL PASS" if ok else "\nSOME CHECKS FAILED")
    return ok


if __name__ == "__main__":
    verify()
