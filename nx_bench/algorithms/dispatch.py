"""
Algorithm selector and dispatch

The nine selectors are {dijkstra, bellman_ford, prim, kruskal} crossed with
{list, matrix}; Bellman-Ford on a matrix comes in a cached-edge-list and a
rescan-every-pass flavour. Each family is implemented once; the selector only
decides which representation it runs on.
"""

import enum

from ..exceptions import ConfigError
from ..graph import GraphStore
from ..matrix import IncidenceMatrix
from .mst import kruskal, prim
from .shortest import bellman_ford, dijkstra


class Family(str, enum.Enum):
    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman_ford"
    PRIM = "prim"
    KRUSKAL = "kruskal"


class AlgorithmKind(str, enum.Enum):
    DIJKSTRA_LIST = "dijkstra_list"
    DIJKSTRA_MATRIX = "dijkstra_matrix"
    BELLMAN_FORD_LIST = "bellman_ford_list"
    BELLMAN_FORD_MATRIX_EDGE_LIST = "bellman_ford_matrix_edge_list"
    BELLMAN_FORD_MATRIX_NO_EDGE_LIST = "bellman_ford_matrix_no_edge_list"
    PRIM_LIST = "prim_list"
    PRIM_MATRIX = "prim_matrix"
    KRUSKAL_LIST = "kruskal_list"
    KRUSKAL_MATRIX = "kruskal_matrix"

    @classmethod
    def _missing_(cls, value):
        # accept "Dijkstra-List" and the historical "belman_*" spelling
        if isinstance(value, str):
            name = value.strip().lower().replace("-", "_")
            if name.startswith("belman_"):
                name = "bellman_" + name[len("belman_"):]
            for member in cls:
                if member.value == name:
                    return member
        return None

    @classmethod
    def parse(cls, value) -> "AlgorithmKind":
        """AlgorithmKind from a member or a selector string; ConfigError if unknown"""
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(f"Unknown algorithm type: {value}") from None

    @property
    def family(self) -> Family:
        for fam in Family:
            if self.value.startswith(fam.value):
                return fam
        raise AssertionError(self.value)

    @property
    def uses_matrix(self) -> bool:
        return "_matrix" in self.value

    @property
    def directed(self) -> bool:
        """shortest-path kinds run on directed graphs, MST kinds on undirected ones"""
        return self.family in (Family.DIJKSTRA, Family.BELLMAN_FORD)


def run_algorithm(kind, representation, start_vertex: int = 0):
    """
    Run the selected algorithm and return its result record

    representation must be a GraphStore for the *_list kinds and an
    IncidenceMatrix for the *_matrix kinds. start_vertex is ignored by Kruskal.
    """
    kind = AlgorithmKind.parse(kind)
    expected = IncidenceMatrix if kind.uses_matrix else GraphStore
    if not isinstance(representation, expected):
        raise TypeError(f"{kind.value} runs on {expected.__name__}, got {type(representation).__name__}")

    family = kind.family
    if family is Family.DIJKSTRA:
        return dijkstra(representation, start_vertex)
    if family is Family.BELLMAN_FORD:
        cache = kind is not AlgorithmKind.BELLMAN_FORD_MATRIX_NO_EDGE_LIST
        return bellman_ford(representation, start_vertex, cache_edges=cache)
    if family is Family.PRIM:
        return prim(representation, start_vertex)
    return kruskal(representation)


def build_representation(kind, store: GraphStore):
    """the representation `kind` runs on, derived from store when needed"""
    kind = AlgorithmKind.parse(kind)
    if kind.uses_matrix:
        return IncidenceMatrix.from_graph(store)
    return store
