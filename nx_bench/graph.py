"""
Adjacency-list graph store over dense integer vertices

Each vertex owns a deque of outgoing Edge records. New edges are prepended, so
enumeration order is reverse insertion order; correctness never depends on it,
only the tie-break order seen by the algorithms does.
"""

import logging
import warnings
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import networkx as nx

from .exceptions import AllocationError, InconsistentGraph

logger = logging.getLogger(__name__)

# largest representable distance / weight; doubles as "unreachable"
INFINITY = 2**32 - 1


@dataclass
class Edge:
    target: int
    weight: int = 0


class GraphStore:
    """
    Adjacency-list graph with vertices 0..num_vertices-1

    Undirected graphs keep every edge as two directed entries of equal weight
    """

    def __init__(self, num_vertices: int, directed: bool = False):
        if num_vertices <= 0:
            raise AllocationError("Cannot create graph with 0 vertices")
        self.num_vertices = num_vertices
        self.directed = directed
        self._adj: List[deque] = [deque() for _ in range(num_vertices)]
        logger.debug("Created %s graph with %d vertices",
                     "directed" if directed else "undirected", num_vertices)

    def __len__(self) -> int:
        return self.num_vertices

    def __repr__(self) -> str:
        return (f"GraphStore(num_vertices={self.num_vertices}, "
                f"directed={self.directed}, edges={self.edge_count})")

    def is_directed(self) -> bool:
        return self.directed

    def _in_range(self, u: int) -> bool:
        return 0 <= u < self.num_vertices

    def _valid_pair(self, u: int, v: int) -> bool:
        return u != v and self._in_range(u) and self._in_range(v)

    def add_directed_edge(self, u: int, v: int, weight: int = 0) -> bool:
        """
        Prepend u -> v to u's list
        Returns False (and adds nothing) for a self-loop or an out-of-range endpoint
        """
        if not self._valid_pair(u, v):
            return False
        self._adj[u].appendleft(Edge(v, weight))
        return True

    def add_undirected_edge(self, u: int, v: int, weight: int = 0) -> bool:
        if not self._valid_pair(u, v):
            return False
        self._adj[u].appendleft(Edge(v, weight))
        self._adj[v].appendleft(Edge(u, weight))
        return True

    def add_edge(self, u: int, v: int, weight: int = 0) -> bool:
        """Add an edge the way this graph's kind expects"""
        if self.directed:
            return self.add_directed_edge(u, v, weight)
        return self.add_undirected_edge(u, v, weight)

    def get_edge(self, u: int, v: int) -> Optional[Edge]:
        if not (self._in_range(u) and self._in_range(v)):
            return None
        for edge in self._adj[u]:
            if edge.target == v:
                return edge
        return None

    def has_edge(self, u: int, v: int) -> bool:
        return self.get_edge(u, v) is not None

    def out_edges(self, u: int) -> Iterable[Edge]:
        return self._adj[u]

    def degree(self, u: int) -> int:
        return len(self._adj[u])

    def neighbors(self, u: int) -> Iterator[Tuple[int, int]]:
        """(target, weight) pairs in list order"""
        for edge in self._adj[u]:
            yield edge.target, edge.weight

    def edges(self) -> List[Tuple[int, int, int]]:
        """
        Logical edges in enumeration order
        Directed: every entry. Undirected: one (u, v, w) per pair with u < v
        """
        if self.directed:
            return [(u, e.target, e.weight)
                    for u in range(self.num_vertices) for e in self._adj[u]]
        return self.unique_edges()

    def unique_edges(self) -> List[Tuple[int, int, int]]:
        return [(u, e.target, e.weight)
                for u in range(self.num_vertices) for e in self._adj[u]
                if u < e.target]

    @property
    def num_entries(self) -> int:
        return sum(len(lst) for lst in self._adj)

    @property
    def edge_count(self) -> int:
        if self.directed:
            return self.num_entries
        return len(self.unique_edges())

    def assign_random_weights(self, rng, min_weight: int, max_weight: int,
                              symmetric: Optional[bool] = None) -> int:
        """
        Draw every weight uniformly from [min_weight, max_weight]

        With symmetric=True (the default for undirected graphs) one weight is
        drawn per unordered pair and copied onto the reverse entry. A missing
        reverse entry is reported as InconsistentGraph and skipped.
        Returns the number of inconsistencies found.
        """
        if min_weight > max_weight:
            raise ValueError(f"min_weight {min_weight} > max_weight {max_weight}")
        if symmetric is None:
            symmetric = not self.directed

        missing = 0
        for u in range(self.num_vertices):
            for edge in self._adj[u]:
                if not symmetric:
                    edge.weight = rng.randint(min_weight, max_weight)
                    continue
                if edge.target <= u:
                    continue
                edge.weight = rng.randint(min_weight, max_weight)
                reverse = self.get_edge(edge.target, u)
                if reverse is None:
                    missing += 1
                    warnings.warn(
                        f"Undirected edge {u}-{edge.target} has no mirror entry",
                        InconsistentGraph,
                        stacklevel=2,
                    )
                    continue
                reverse.weight = edge.weight
        return missing


def build_graph_from_edge_stream(vertex_count: int, edge_count: int, edges, directed: bool) -> GraphStore:
    """
    Build a GraphStore from (u, v, weight) triples

    Triples that are malformed, negative-weighted or out of range are skipped
    with an InconsistentGraph warning. edge_count is the declared number of
    edges; a mismatch with what was actually added is only logged.
    """
    store = GraphStore(vertex_count, directed=directed)
    added = 0
    for lineno, item in enumerate(edges, start=1):
        try:
            u, v, weight = (int(x) for x in item)
        except (TypeError, ValueError):
            warnings.warn(f"Skipping malformed edge #{lineno}: {item!r}", InconsistentGraph, stacklevel=2)
            continue
        if weight < 0:
            warnings.warn(f"Skipping negative-weight edge #{lineno}: {u}->{v} ({weight})",
                          InconsistentGraph, stacklevel=2)
            continue
        if not store.add_edge(u, v, weight):
            warnings.warn(f"Skipping self-loop or invalid vertex index in edge #{lineno}: {u}->{v}",
                          InconsistentGraph, stacklevel=2)
            continue
        added += 1

    if added != edge_count:
        logger.info("Declared %d edges, loaded %d", edge_count, added)
    return store


def convert_from_nx(G, weight="weight", default_weight=1):
    """
    NetworkX Graph/DiGraph -> (GraphStore, nodes)
    - nodes are relabeled to 0..n-1 in G.nodes order; nodes[i] is the label of vertex i
    - parallel edges of multigraphs collapse to the lightest one
    - non-integer weights are truncated
    """
    nodes = list(G.nodes())
    index = {n: i for i, n in enumerate(nodes)}
    store = GraphStore(len(nodes), directed=G.is_directed())

    best = {}
    for u, v, data in G.edges(data=True):
        if u == v:
            continue
        key = (index[u], index[v])
        if not store.directed and key[0] > key[1]:
            key = (key[1], key[0])
        w = int(data.get(weight, default_weight))
        if key not in best or w < best[key]:
            best[key] = w

    for (u, v), w in best.items():
        store.add_edge(u, v, w)
    return store, nodes


def convert_to_nx(store: GraphStore, nodes=None):
    """GraphStore -> NetworkX Graph/DiGraph with integer 'weight' attributes"""
    H = nx.DiGraph() if store.directed else nx.Graph()
    labels = list(nodes) if nodes is not None else list(range(store.num_vertices))
    H.add_nodes_from(labels)
    for u, v, w in store.edges():
        H.add_edge(labels[u], labels[v], weight=w)
    return H
