"""
Minimum spanning trees: Prim and Kruskal

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23 (Kruskal, Prim).
"""

import logging

from ..dsu import DisjointSet
from ..graph import INFINITY
from ..heap import IndexedMinHeap
from .results import KruskalEdge, KruskalResult, PrimResult

logger = logging.getLogger(__name__)


def prim(rep, start: int = 0) -> PrimResult:
    """
    Prim's algorithm on an undirected representation

    The root gets parent=itself and weight 0. On a disconnected graph the
    vertices outside the root's component keep parent/weight None.
    """
    n = rep.num_vertices
    if not 0 <= start < n:
        raise ValueError(f"Start vertex {start} is out of range [0, {n - 1}]")
    key = [INFINITY] * n
    parent = [INFINITY] * n
    in_mst = [False] * n
    key[start] = 0
    parent[start] = start

    heap = IndexedMinHeap(n)
    heap.insert(start, 0)
    while not heap.is_empty():
        u, _ = heap.extract_min()
        in_mst[u] = True
        for v, w in rep.neighbors(u):
            if in_mst[v] or w >= key[v]:
                continue
            key[v] = w
            parent[v] = u
            if v in heap:
                heap.decrease_key(v, w)
            else:
                heap.insert(v, w)

    result = PrimResult.from_arrays(start, parent, key)
    if not result.is_spanning():
        logger.info("Prim reached %d of %d vertices; graph is disconnected",
                    sum(in_mst), n)
    return result


def kruskal(rep) -> KruskalResult:
    """
    Kruskal's algorithm

    Edges are taken in the representation's enumeration order and stably
    sorted by weight, so ties resolve the same way on every run. Stops after
    V-1 edges; a disconnected graph gives fewer (check result.is_spanning()).
    """
    n = rep.num_vertices
    edges = sorted(rep.edges(), key=lambda e: e[2])

    dsu = DisjointSet(n)
    result = KruskalResult(n)
    for u, v, w in edges:
        if result.edge_count == n - 1:
            break
        if dsu.unite(u, v):
            result.edges.append(KruskalEdge(u, v, w))

    if not result.is_spanning():
        logger.info("Kruskal selected %d of %d edges; graph is disconnected",
                    result.edge_count, n - 1)
    return result
