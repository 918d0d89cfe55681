import pytest

from nx_bench.dsu import DisjointSet


@pytest.mark.unit
def test_singletons():
    dsu = DisjointSet(4)
    assert len(dsu) == 4
    assert dsu.count_sets() == 4
    assert all(dsu.find(i) == i for i in range(4))


@pytest.mark.unit
def test_unite_and_connected():
    dsu = DisjointSet(5)
    assert dsu.unite(0, 1)
    assert dsu.unite(3, 4)
    assert not dsu.unite(1, 0)
    assert dsu.connected(0, 1)
    assert not dsu.connected(1, 3)
    assert dsu.count_sets() == 3

    assert dsu.unite(1, 4)
    assert dsu.connected(0, 3)
    assert dsu.count_sets() == 2


@pytest.mark.unit
def test_path_compression_flattens_chain():
    dsu = DisjointSet(6)
    # build a chain by hand so compression has something to do
    dsu.parent = [0, 0, 1, 2, 3, 4]
    root = dsu.find(5)
    assert root == 0
    assert dsu.parent == [0, 0, 0, 0, 0, 0]


@pytest.mark.unit
def test_union_by_rank_keeps_taller_root():
    dsu = DisjointSet(4)
    dsu.unite(0, 1)
    assert dsu.rank[0] == 1
    dsu.unite(2, 0)
    assert dsu.find(2) == 0
    assert dsu.rank[0] == 1


@pytest.mark.unit
def test_matches_networkx_components(rng_seed):
    import networkx as nx

    G = nx.gnp_random_graph(60, 0.03, seed=rng_seed)
    dsu = DisjointSet(60)
    for u, v in G.edges():
        dsu.unite(u, v)
    assert dsu.count_sets() == nx.number_connected_components(G)
