from .dispatch import AlgorithmKind, Family, build_representation, run_algorithm
from .mst import kruskal, prim
from .results import KruskalEdge, KruskalResult, PrimResult, ShortestPathResult
from .shortest import bellman_ford, dijkstra

__all__ = [
    "AlgorithmKind",
    "Family",
    "build_representation",
    "run_algorithm",
    "dijkstra",
    "bellman_ford",
    "prim",
    "kruskal",
    "ShortestPathResult",
    "PrimResult",
    "KruskalEdge",
    "KruskalResult",
]
