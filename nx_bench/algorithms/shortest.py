"""
Single-source shortest paths: Dijkstra and Bellman-Ford

Both run on any representation exposing ``num_vertices``, ``is_directed()``,
``neighbors(u)`` and ``edges()`` (GraphStore or IncidenceMatrix). Distances are
integers capped at INFINITY; an addition that would pass it is treated as an
infinitely long edge.
"""

import logging

from ..graph import INFINITY
from ..heap import IndexedMinHeap
from .results import ShortestPathResult

logger = logging.getLogger(__name__)


def _check_start(rep, start):
    if not 0 <= start < rep.num_vertices:
        raise ValueError(f"Start vertex {start} is out of range [0, {rep.num_vertices - 1}]")


def dijkstra(rep, start: int) -> ShortestPathResult:
    """
    Dijkstra with an indexed min-heap
    Weights must be non-negative; this is not checked
    """
    _check_start(rep, start)
    n = rep.num_vertices
    dist = [INFINITY] * n
    parent = [INFINITY] * n
    dist[start] = 0
    parent[start] = start

    heap = IndexedMinHeap(n)
    heap.insert(start, 0)
    while not heap.is_empty():
        u, d_u = heap.extract_min()
        for v, w in rep.neighbors(u):
            if d_u > INFINITY - w:
                continue
            alt = d_u + w
            if alt < dist[v]:
                dist[v] = alt
                parent[v] = u
                if v in heap:
                    heap.decrease_key(v, alt)
                else:
                    heap.insert(v, alt)

    return ShortestPathResult.from_arrays(start, dist, parent)


def _arcs(rep):
    """
    rep.edges() as directed arcs; an undirected edge is relaxable both ways
    """
    edges = rep.edges()
    if rep.is_directed():
        return edges
    return edges + [(v, u, w) for u, v, w in edges]


def _relax_all(arcs, dist, parent) -> bool:
    changed = False
    for u, v, w in arcs:
        d_u = dist[u]
        if d_u == INFINITY:
            continue
        alt = d_u + w
        if alt < dist[v]:
            dist[v] = alt
            parent[v] = u
            changed = True
    return changed


def bellman_ford(rep, start: int, cache_edges: bool = True) -> ShortestPathResult:
    """
    Bellman-Ford with early exit

    cache_edges=False asks the representation for its edge list on every pass
    (for an IncidenceMatrix that is a full rescan); the result is identical.
    Undirected edges are relaxed in both directions.

    After V-1 passes one more pass checks for a negative cycle. A cycle is
    reported on the result and logged, the distances are left as they are.
    """
    _check_start(rep, start)
    n = rep.num_vertices
    dist = [INFINITY] * n
    parent = [INFINITY] * n
    dist[start] = 0
    parent[start] = start

    arcs = _arcs(rep) if cache_edges else None
    passes = 0
    for _ in range(n - 1):
        passes += 1
        if not _relax_all(arcs if cache_edges else _arcs(rep), dist, parent):
            break
    logger.debug("Bellman-Ford settled after %d pass(es)", passes)

    negative_cycle = False
    for u, v, w in (arcs if cache_edges else _arcs(rep)):
        if dist[u] != INFINITY and dist[u] + w < dist[v]:
            negative_cycle = True
            break
    if negative_cycle:
        logger.warning("Graph contains a negative-weight cycle reachable from %d", start)

    return ShortestPathResult.from_arrays(start, dist, parent, negative_cycle)
