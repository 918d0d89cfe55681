import random
import time

import networkx as nx

from nx_bench.algorithms import kruskal, prim
from nx_bench.graph import convert_from_nx
from nx_bench.matrix import IncidenceMatrix


def make_weighted_graph(n=800, p=0.01, seed=7):
    rng = random.Random(seed)
    G = nx.gnp_random_graph(n, p, seed=seed)
    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, 1000)
    return G


def total_weight(H):
    return sum(data.get("weight", 1) for _u, _v, data in H.edges(data=True))


def main():
    print("=== Minimum Spanning Tree Demo ===")
    G = make_weighted_graph()
    print(f"Graph has {G.number_of_nodes()} nodes and {G.number_of_edges()} edges")
    store, _nodes = convert_from_nx(G)
    matrix = IncidenceMatrix.from_graph(store)

    t0 = time.time()
    mst_py = nx.minimum_spanning_tree(G, weight="weight")
    t1 = time.time()

    k_list = kruskal(store)
    t2 = time.time()

    k_matrix = kruskal(matrix)
    t3 = time.time()

    p_list = prim(store, 0)
    t4 = time.time()

    p_matrix = prim(matrix, 0)
    t5 = time.time()

    print(f"NetworkX (Kruskal): {t1 - t0:.3f}s")
    print(f"nx-bench Kruskal (list): {t2 - t1:.3f}s")
    print(f"nx-bench Kruskal (matrix): {t3 - t2:.3f}s")
    print(f"nx-bench Prim (list): {t4 - t3:.3f}s")
    print(f"nx-bench Prim (matrix): {t5 - t4:.3f}s")

    # gnp graphs can be disconnected; networkx then returns a forest, Prim only the root's tree
    w_py = total_weight(mst_py)
    print(f"Total weight NetworkX: {w_py}")
    print(f"Total weight Kruskal (list/matrix): {k_list.total_weight}/{k_matrix.total_weight}")
    print(f"Total weight Prim (list/matrix): {p_list.total_weight}/{p_matrix.total_weight}")
    print("Kruskal matches:", w_py == k_list.total_weight == k_matrix.total_weight)
    print("Prim spanning:", p_list.is_spanning())


if __name__ == "__main__":
    main()
