import time

import networkx as nx
import pytest

from graph_helpers import compare_distances, make_store, nx_distances, reachable_from
from nx_bench.algorithms import AlgorithmKind, bellman_ford, dijkstra, run_algorithm
from nx_bench.generators import build_random_graph
from nx_bench.graph import INFINITY, GraphStore
from nx_bench.matrix import IncidenceMatrix


def path_length(store, path):
    """
    Compute total path length given a list of vertices
    """
    total = 0
    for u, v in zip(path, path[1:]):
        total += store.get_edge(u, v).weight
    return total


# UNIT TESTS (CORRECTNESS)

@pytest.mark.unit
def test_dijkstra_concrete_scenario(sp_scenario):
    res = dijkstra(sp_scenario, 0)
    assert res.distances == [0, 1, 3, 4]
    assert res.parents == [0, 0, 1, 2]
    assert res.path_to(3) == [0, 1, 2, 3]


@pytest.mark.unit
def test_dijkstra_matrix_concrete_scenario(sp_scenario):
    res = dijkstra(IncidenceMatrix.from_graph(sp_scenario), 0)
    assert res.distances == [0, 1, 3, 4]
    assert res.parents == [0, 0, 1, 2]


@pytest.mark.unit
def test_bellman_ford_concrete_scenario(sp_scenario):
    for cache in (True, False):
        res = bellman_ford(IncidenceMatrix.from_graph(sp_scenario), 0, cache_edges=cache)
        assert res.distances == [0, 1, 3, 4]
        assert res.parents == [0, 0, 1, 2]
        assert not res.negative_cycle

    res = bellman_ford(sp_scenario, 0)
    assert res.distances == [0, 1, 3, 4]


@pytest.mark.unit
def test_unreachable_vertices_are_none():
    G = make_store(4, [(0, 1, 2), (2, 3, 1)], directed=True)
    for res in (dijkstra(G, 0), bellman_ford(G, 0)):
        assert res.distances == [0, 2, None, None]
        assert res.parents == [0, 0, None, None]
        assert not res.is_reachable(2)
        assert res.path_to(3) is None


@pytest.mark.unit
def test_zero_weight_distance_distinct_from_unreachable():
    G = make_store(3, [(0, 1, 0)], directed=True)
    res = dijkstra(G, 0)
    assert res.distances == [0, 0, None]
    assert res.parents[1] == 0
    assert res.parents[2] is None


@pytest.mark.unit
def test_dijkstra_overflow_edge_is_skipped():
    G = make_store(3, [(0, 1, INFINITY - 1), (1, 2, 5), (0, 2, 7)], directed=True)
    res = dijkstra(G, 0)
    # INFINITY - 1 + 5 would overflow, so 1 -> 2 is ignored
    assert res.distances == [0, INFINITY - 1, 7]
    assert res.parents[2] == 0


@pytest.mark.unit
def test_bellman_ford_negative_edge_without_cycle():
    G = make_store(3, [(0, 1, 1), (1, 2, -2), (0, 2, 5)], directed=True)
    res = bellman_ford(G, 0)
    assert res.distances == [0, 1, -1]
    assert res.parents == [0, 0, 1]
    assert not res.negative_cycle


@pytest.mark.unit
def test_bellman_ford_negative_cycle_is_reported_not_raised(caplog):
    G = make_store(3, [(0, 1, 1), (1, 2, -3), (2, 1, 1)], directed=True)
    with caplog.at_level("WARNING"):
        res = bellman_ford(G, 0)
    assert res.negative_cycle
    assert "negative-weight cycle" in caplog.text
    # distances are the ones left after V-1 passes, not corrected
    assert res.distances[0] == 0
    assert res.distances[1] is not None


@pytest.mark.unit
def test_start_vertex_out_of_range():
    G = GraphStore(3, directed=True)
    with pytest.raises(ValueError):
        dijkstra(G, 3)
    with pytest.raises(ValueError):
        bellman_ford(G, -1)


@pytest.mark.unit
def test_single_vertex_graph():
    G = GraphStore(1, directed=True)
    assert dijkstra(G, 0).distances == [0]
    assert bellman_ford(G, 0).distances == [0]


@pytest.mark.unit
@pytest.mark.parametrize("kind", [
    AlgorithmKind.DIJKSTRA_LIST,
    AlgorithmKind.DIJKSTRA_MATRIX,
    AlgorithmKind.BELLMAN_FORD_LIST,
    AlgorithmKind.BELLMAN_FORD_MATRIX_EDGE_LIST,
    AlgorithmKind.BELLMAN_FORD_MATRIX_NO_EDGE_LIST,
])
def test_random_graph_matches_networkx(kind, rng):
    store, matrix = build_random_graph(40, 0.1, kind, start_vertex=3, rng=rng)
    rep = matrix if kind.uses_matrix else store

    res = run_algorithm(kind, rep, 3)
    compare_distances(nx_distances(store, 3), res.distances, msg_prefix=f"{kind.value}:")

    # generated directed graphs reach everything from the start vertex
    assert all(d is not None for d in res.distances)
    for v in range(store.num_vertices):
        path = res.path_to(v)
        assert path[0] == 3 and path[-1] == v
        assert path_length(store, path) == res.distances[v]


@pytest.mark.unit
def test_dijkstra_and_bellman_ford_agree(rng):
    store, _ = build_random_graph(60, 0.05, "dijkstra_list", start_vertex=0, rng=rng)
    d = dijkstra(store, 0)
    b = bellman_ford(store, 0)
    assert d.distances == b.distances


@pytest.mark.unit
def test_list_and_matrix_agree(rng):
    store, matrix = build_random_graph(30, 0.2, "dijkstra_matrix", start_vertex=5, rng=rng)
    assert dijkstra(store, 5).distances == dijkstra(matrix, 5).distances
    assert bellman_ford(store, 5).distances == bellman_ford(matrix, 5, cache_edges=False).distances


@pytest.mark.unit
def test_reachability_agrees_with_networkx(rng):
    store, _ = build_random_graph(50, 0.02, "bellman_ford_list", start_vertex=7, rng=rng)
    G = nx.DiGraph([(u, v) for u, v, _ in store.edges()])
    assert reachable_from(store, 7) == set(range(50))
    assert nx.descendants(G, 7) | {7} == set(range(50))


@pytest.mark.unit
def test_bellman_ford_undirected_path_downhill():
    G = make_store(3, [(0, 1, 1), (1, 2, 1)], directed=False)
    M = IncidenceMatrix.from_graph(G)
    expected = dijkstra(G, 2)
    assert expected.distances == [2, 1, 0]
    for res in (bellman_ford(G, 2), bellman_ford(M, 2), bellman_ford(M, 2, cache_edges=False)):
        assert res.distances == [2, 1, 0]
        assert res.parents == [1, 2, 2]
        assert not res.negative_cycle


@pytest.mark.unit
@pytest.mark.parametrize("kind", [
    AlgorithmKind.BELLMAN_FORD_LIST,
    AlgorithmKind.BELLMAN_FORD_MATRIX_EDGE_LIST,
    AlgorithmKind.BELLMAN_FORD_MATRIX_NO_EDGE_LIST,
])
def test_bellman_ford_undirected_matches_dijkstra(kind, rng):
    # an MST kind gives an undirected graph
    store, _ = build_random_graph(35, 0.1, "prim_list", rng=rng)
    start = store.num_vertices - 1
    rep = IncidenceMatrix.from_graph(store) if kind.uses_matrix else store
    res = run_algorithm(kind, rep, start)
    compare_distances(dijkstra(store, start).distances, res.distances, msg_prefix=f"{kind.value}:")
    compare_distances(nx_distances(store, start), res.distances, msg_prefix=f"{kind.value} vs networkx:")


# PERFORMANCE (list vs matrix)

@pytest.mark.performance
def test_dijkstra_list_faster_than_matrix(rng):
    store, matrix = build_random_graph(300, 0.05, "dijkstra_matrix", start_vertex=0, rng=rng)

    t0 = time.perf_counter()
    res_list = dijkstra(store, 0)
    t_list = time.perf_counter() - t0

    t0 = time.perf_counter()
    res_matrix = dijkstra(matrix, 0)
    t_matrix = time.perf_counter() - t0

    assert res_list.distances == res_matrix.distances

    print("")
    print(
        f"[dijkstra V=300]\n"
        f"list={t_list:.3f}s matrix={t_matrix:.3f}s"
    )


@pytest.mark.slow
def test_large_graph_matches_networkx(rng):
    store, _ = build_random_graph(1500, 0.01, "dijkstra_list", start_vertex=0, rng=rng)
    compare_distances(nx_distances(store, 0), dijkstra(store, 0).distances, msg_prefix="large_dijkstra:")
