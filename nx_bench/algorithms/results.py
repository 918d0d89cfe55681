"""
Result records produced by the algorithm families

Absent values ("unreachable", "no parent") are None, so they never collide
with vertex 0 or a weight of 0.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from ..graph import INFINITY


def _optional(values: List[int]) -> List[Optional[int]]:
    return [None if x == INFINITY else x for x in values]


@dataclass
class ShortestPathResult:
    start: int
    distances: List[Optional[int]]
    parents: List[Optional[int]]
    negative_cycle: bool = False

    @classmethod
    def from_arrays(cls, start, dist, parent, negative_cycle=False):
        return cls(start, _optional(dist), _optional(parent), negative_cycle)

    @property
    def num_vertices(self) -> int:
        return len(self.distances)

    def is_reachable(self, v: int) -> bool:
        return self.distances[v] is not None

    def path_to(self, target: int) -> Optional[List[int]]:
        """vertices from start to target, None when target is unreachable"""
        if self.distances[target] is None:
            return None
        path = [target]
        while path[-1] != self.start:
            parent = self.parents[path[-1]]
            if parent is None or len(path) > self.num_vertices:
                # broken chain, only possible after a negative cycle
                return None
            path.append(parent)
        path.reverse()
        return path


@dataclass
class PrimResult:
    root: int
    parents: List[Optional[int]]
    weights: List[Optional[int]]

    @classmethod
    def from_arrays(cls, root, parent, key):
        return cls(root, _optional(parent), _optional(key))

    @property
    def num_vertices(self) -> int:
        return len(self.parents)

    @property
    def total_weight(self) -> int:
        return sum(w for w in self.weights if w is not None)

    def is_spanning(self) -> bool:
        return all(p is not None for p in self.parents)

    def tree_edges(self):
        """(parent, child, weight) for every non-root vertex in the tree"""
        return [(p, v, self.weights[v])
                for v, p in enumerate(self.parents)
                if p is not None and v != self.root]


class KruskalEdge(NamedTuple):
    u: int
    v: int
    weight: int


@dataclass
class KruskalResult:
    num_vertices: int
    edges: List[KruskalEdge] = field(default_factory=list)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def total_weight(self) -> int:
        return sum(e.weight for e in self.edges)

    def is_spanning(self) -> bool:
        return self.edge_count == self.num_vertices - 1
