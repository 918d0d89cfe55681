import random
import time

import networkx as nx

from nx_bench.algorithms import bellman_ford, dijkstra
from nx_bench.graph import convert_from_nx
from nx_bench.matrix import IncidenceMatrix


def main():
    # Grid graphs force longer paths between corners
    print("Creating weighted grid graph...")
    grid_size = 40
    print(f"Building {grid_size}x{grid_size} grid...")
    t_graph_start = time.time()
    G = nx.grid_2d_graph(grid_size, grid_size).to_directed()
    rng = random.Random(42)
    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, 10)
    t_graph_end = time.time()
    print(f"Graph creation time: {t_graph_end - t_graph_start:.3f}s")
    print(f"Graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")

    store, nodes = convert_from_nx(G)
    matrix = IncidenceMatrix.from_graph(store)
    index = {n: i for i, n in enumerate(nodes)}

    # Pick diagonal corners for maximum path length
    source = (0, 0)
    target = (grid_size - 1, grid_size - 1)
    s, t = index[source], index[target]
    print(f"\nFinding shortest path from {source} to {target}")

    print("=" * 50)
    print("Dijkstra's Algorithm")
    print("=" * 50)
    t0 = time.time()
    length_py = nx.dijkstra_path_length(G, source, target, weight="weight")
    t1 = time.time()
    res_list = dijkstra(store, s)
    t2 = time.time()
    res_matrix = dijkstra(matrix, s)
    t3 = time.time()

    print(f"NetworkX: {t1 - t0:.3f}s, distance: {length_py}")
    print(f"nx-bench (list): {t2 - t1:.3f}s, distance: {res_list.distances[t]}")
    print(f"nx-bench (matrix): {t3 - t2:.3f}s, distance: {res_matrix.distances[t]}")
    path = [nodes[v] for v in res_list.path_to(t)]
    print(f"Path starts: {path[:5]}")
    print(f"\nVerification: {length_py == res_list.distances[t] == res_matrix.distances[t]}")

    print("\n" + "=" * 50)
    print("Bellman-Ford Algorithm")
    print("=" * 50)
    t0 = time.time()
    length_py_bf = nx.bellman_ford_path_length(G, source, target, weight="weight")
    t1 = time.time()
    res_bf_list = bellman_ford(store, s)
    t2 = time.time()
    res_bf_cached = bellman_ford(matrix, s, cache_edges=True)
    t3 = time.time()
    res_bf_rescan = bellman_ford(matrix, s, cache_edges=False)
    t4 = time.time()

    print(f"NetworkX: {t1 - t0:.3f}s, distance: {length_py_bf}")
    print(f"nx-bench (list): {t2 - t1:.3f}s, distance: {res_bf_list.distances[t]}")
    print(f"nx-bench (matrix, cached edges): {t3 - t2:.3f}s, distance: {res_bf_cached.distances[t]}")
    print(f"nx-bench (matrix, rescanned edges): {t4 - t3:.3f}s, distance: {res_bf_rescan.distances[t]}")
    same = length_py_bf == res_bf_list.distances[t] == res_bf_cached.distances[t] == res_bf_rescan.distances[t]
    print(f"\nVerification: {same}")


if __name__ == "__main__":
    main()
