import pytest

from nx_bench.algorithms import (
    AlgorithmKind,
    Family,
    KruskalResult,
    PrimResult,
    ShortestPathResult,
    build_representation,
    run_algorithm,
)
from nx_bench.exceptions import ConfigError
from nx_bench.matrix import IncidenceMatrix


@pytest.mark.unit
def test_nine_kinds():
    assert len(AlgorithmKind) == 9
    assert sum(k.uses_matrix for k in AlgorithmKind) == 5
    assert {k.family for k in AlgorithmKind} == set(Family)


@pytest.mark.unit
@pytest.mark.parametrize("text, expected", [
    ("dijkstra_list", AlgorithmKind.DIJKSTRA_LIST),
    ("Dijkstra-Matrix", AlgorithmKind.DIJKSTRA_MATRIX),
    ("belman_ford_list", AlgorithmKind.BELLMAN_FORD_LIST),
    ("belman_ford_matrix_no_edge_list", AlgorithmKind.BELLMAN_FORD_MATRIX_NO_EDGE_LIST),
    (" kruskal_matrix ", AlgorithmKind.KRUSKAL_MATRIX),
])
def test_parse_accepts_aliases(text, expected):
    assert AlgorithmKind.parse(text) is expected


@pytest.mark.unit
def test_parse_unknown_kind():
    with pytest.raises(ConfigError, match="Unknown algorithm type"):
        AlgorithmKind.parse("floyd_warshall")
    with pytest.raises(ConfigError):
        AlgorithmKind.parse(None)


@pytest.mark.unit
def test_kind_properties():
    assert AlgorithmKind.BELLMAN_FORD_MATRIX_EDGE_LIST.family is Family.BELLMAN_FORD
    assert AlgorithmKind.BELLMAN_FORD_MATRIX_EDGE_LIST.directed
    assert not AlgorithmKind.PRIM_MATRIX.directed
    assert not AlgorithmKind.KRUSKAL_LIST.uses_matrix


@pytest.mark.unit
@pytest.mark.parametrize("kind", list(AlgorithmKind))
def test_every_kind_runs_on_its_representation(kind, sp_scenario, mst_scenario):
    store = sp_scenario if kind.directed else mst_scenario
    rep = build_representation(kind, store)
    assert isinstance(rep, IncidenceMatrix) == kind.uses_matrix

    res = run_algorithm(kind, rep, 0)
    if kind.family in (Family.DIJKSTRA, Family.BELLMAN_FORD):
        assert isinstance(res, ShortestPathResult)
        assert res.distances == [0, 1, 3, 4]
    elif kind.family is Family.PRIM:
        assert isinstance(res, PrimResult)
        assert res.total_weight == 6
    else:
        assert isinstance(res, KruskalResult)
        assert res.total_weight == 6


@pytest.mark.unit
def test_wrong_representation_is_rejected(sp_scenario):
    with pytest.raises(TypeError):
        run_algorithm("dijkstra_matrix", sp_scenario, 0)
    with pytest.raises(TypeError):
        run_algorithm("dijkstra_list", IncidenceMatrix.from_graph(sp_scenario), 0)
