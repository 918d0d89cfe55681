"""
Random connected graph generators

Connectivity comes from a uniformly random labelled spanning tree (decoded from
a random Prüfer sequence); the remaining edge budget is filled from a shuffled
list of every pair not yet present. All randomness goes through the ``rng``
argument (a ``random.Random``), so a seeded instance gives a reproducible graph.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from .algorithms.dispatch import AlgorithmKind
from .dsu import DisjointSet
from .exceptions import ConfigError
from .graph import GraphStore
from .matrix import IncidenceMatrix

logger = logging.getLogger(__name__)

MAX_WEIGHT = 4096


def max_edges(num_vertices: int, directed: bool) -> int:
    if num_vertices < 2:
        return 0
    pairs = num_vertices * (num_vertices - 1)
    return pairs if directed else pairs // 2


def target_edge_count(num_vertices: int, density: float, directed: bool) -> int:
    """density is the fraction of the maximum possible number of edges"""
    return int(max_edges(num_vertices, directed) * density)


def random_prufer_sequence(n: int, rng: random.Random) -> List[int]:
    return [rng.randrange(n) for _ in range(max(n - 2, 0))]


def prufer_to_tree(sequence: Sequence[int]) -> List[Tuple[int, int]]:
    """
    Decode a Prüfer sequence of length n-2 into the n-1 edges of its tree

    Each step joins the lowest-indexed vertex of residual degree 1 to the next
    symbol and decrements both; the last two degree-1 vertices form the final edge.
    """
    n = len(sequence) + 2
    degree = [1] * n
    for node in sequence:
        if not 0 <= node < n:
            raise ValueError(f"Prüfer symbol {node} outside [0, {n})")
        degree[node] += 1

    edges = []
    for node in sequence:
        # the symbol itself still has degree >= 2 here, so it is never picked as the leaf
        leaf = degree.index(1)
        edges.append((node, leaf))
        degree[leaf] -= 1
        degree[node] -= 1

    u, v = (i for i, d in enumerate(degree) if d == 1)
    edges.append((u, v))
    return edges


def random_tree(num_vertices: int, rng: random.Random) -> List[Tuple[int, int]]:
    if num_vertices < 2:
        return []
    return prufer_to_tree(random_prufer_sequence(num_vertices, rng))


def _fill_from_candidates(store: GraphStore, candidates, budget: int, rng: random.Random) -> int:
    rng.shuffle(candidates)
    count = max(0, min(budget, len(candidates)))
    for u, v in candidates[:count]:
        store.add_edge(u, v, 0)
    logger.debug("Added %d of %d candidate edges", count, len(candidates))
    return count


def random_undirected_graph(num_vertices: int, target_edges: int, rng: random.Random) -> GraphStore:
    """
    Connected undirected graph with min(max(target_edges, V-1), V(V-1)/2) edges, all weight 0
    """
    store = GraphStore(num_vertices, directed=False)
    for u, v in random_tree(num_vertices, rng):
        store.add_undirected_edge(u, v, 0)

    candidates = [(i, j)
                  for i in range(num_vertices)
                  for j in range(i + 1, num_vertices)
                  if not store.has_edge(i, j)]
    _fill_from_candidates(store, candidates, target_edges - (num_vertices - 1), rng)
    return store


def orient_tree(num_vertices: int, tree_edges, start_vertex: int) -> List[Optional[int]]:
    """
    Depth-first parent pointers of an undirected tree rooted at start_vertex
    parent[start_vertex] is None
    """
    adj: List[List[int]] = [[] for _ in range(num_vertices)]
    for u, v in tree_edges:
        adj[u].append(v)
        adj[v].append(u)

    parent: List[Optional[int]] = [None] * num_vertices
    visited = [False] * num_vertices
    visited[start_vertex] = True
    stack = [(start_vertex, iter(adj[start_vertex]))]
    while stack:
        node, children = stack[-1]
        for child in children:
            if not visited[child]:
                visited[child] = True
                parent[child] = node
                stack.append((child, iter(adj[child])))
                break
        else:
            stack.pop()
    return parent


def random_directed_graph(num_vertices: int, target_edges: int, start_vertex: int,
                          rng: random.Random) -> GraphStore:
    """
    Directed graph in which every vertex is reachable from start_vertex
    The spanning tree is oriented away from start_vertex, extra arcs fill the budget
    """
    if not 0 <= start_vertex < num_vertices:
        raise ConfigError(f"Start vertex {start_vertex} must be less than vertex count {num_vertices}")
    store = GraphStore(num_vertices, directed=True)
    parent = orient_tree(num_vertices, random_tree(num_vertices, rng), start_vertex)
    for i, p in enumerate(parent):
        if p is not None:
            store.add_directed_edge(p, i, 0)

    candidates = [(i, j)
                  for i in range(num_vertices)
                  for j in range(num_vertices)
                  if i != j and not store.has_edge(i, j)]
    _fill_from_candidates(store, candidates, target_edges - (num_vertices - 1), rng)
    return store


def validate_parameters(vertex_count: int, density: float, start_vertex: int) -> None:
    if vertex_count <= 0:
        raise ConfigError("Cannot create graph with 0 vertices")
    if not 0 <= start_vertex < vertex_count:
        raise ConfigError(f"Start vertex {start_vertex} must be less than vertex count {vertex_count}")
    if not 0.0 <= density <= 1.0:
        raise ConfigError(f"Density must be in [0, 1] range, got {density}")


def build_random_graph(vertex_count: int, density_fraction: float, algorithm_kind, start_vertex: int = 0,
                       rng: Optional[random.Random] = None, min_weight: int = 1, max_weight: int = MAX_WEIGHT):
    """
    Generate the graph an algorithm kind runs on

    Shortest-path kinds get a directed graph reachable from start_vertex, MST
    kinds an undirected one. Weights are drawn from [min_weight, max_weight].
    Returns (store, matrix) where matrix is None for the list kinds.
    """
    kind = AlgorithmKind.parse(algorithm_kind)
    validate_parameters(vertex_count, density_fraction, start_vertex)
    if rng is None:
        rng = random.Random()

    target = target_edge_count(vertex_count, density_fraction, kind.directed)
    if kind.directed:
        store = random_directed_graph(vertex_count, target, start_vertex, rng)
    else:
        store = random_undirected_graph(vertex_count, target, rng)
    store.assign_random_weights(rng, min_weight, max_weight)
    logger.info("Generated %s graph: vertices=%d, edges=%d (target %d)",
                "directed" if kind.directed else "undirected", vertex_count, store.edge_count, target)

    matrix = IncidenceMatrix.from_graph(store) if kind.uses_matrix else None
    return store, matrix


def generate_connected_graph(num_vertices: int, density: float, directed: bool,
                             rng: Optional[random.Random] = None) -> GraphStore:
    """
    Connected graph built by random pair sampling instead of a Prüfer tree

    Random pairs in different components are joined (disjoint-set driven) until
    V-1 edges exist, then random absent pairs are added until
    V-1 + int((max - (V-1)) * density) edges. Weights are uniform in [1, 100].
    For directed graphs connectivity is weak, not reachability from a root.
    """
    if num_vertices <= 0:
        raise ConfigError("Cannot create graph with 0 vertices")
    if not 0.0 <= density <= 1.0:
        raise ConfigError(f"Density must be in [0, 1] range, got {density}")
    if rng is None:
        rng = random.Random()

    store = GraphStore(num_vertices, directed=directed)
    min_edges = num_vertices - 1
    target = min_edges + int((max_edges(num_vertices, directed) - min_edges) * density)

    dsu = DisjointSet(num_vertices)
    added = 0
    while added < min_edges:
        u = rng.randrange(num_vertices)
        v = rng.randrange(num_vertices)
        if u != v and dsu.unite(u, v):
            store.add_edge(u, v, rng.randint(1, 100))
            added += 1

    while added < target:
        u = rng.randrange(num_vertices)
        v = rng.randrange(num_vertices)
        if u != v and not store.has_edge(u, v):
            store.add_edge(u, v, rng.randint(1, 100))
            added += 1
    return store
