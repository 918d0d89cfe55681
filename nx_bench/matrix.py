"""
Incidence-matrix view of a GraphStore

A V x E int64 table, one column per edge:
- undirected: +weight in both endpoint rows
- directed: -weight in the source row, +weight in the target row

The view is a snapshot; it holds no reference to the store it came from.
"""

import logging
import warnings
from typing import Iterator, List, Tuple

import numpy as np
from scipy import sparse

from .exceptions import AllocationError, InconsistentGraph

logger = logging.getLogger(__name__)


class IncidenceMatrix:

    def __init__(self, table: np.ndarray, directed: bool):
        table = np.array(table, dtype=np.int64)
        if table.ndim != 2 or table.shape[0] == 0:
            raise AllocationError(f"Incidence matrix needs at least one vertex row, got shape {table.shape}")
        self._m = table
        self._m.setflags(write=False)
        self.directed = directed

    @classmethod
    def from_graph(cls, store) -> "IncidenceMatrix":
        """
        Build the matrix from store.edges(), column j = j-th edge in enumeration order
        """
        edges = store.edges()
        table = np.zeros((store.num_vertices, len(edges)), dtype=np.int64)
        zero_columns = 0
        for col, (u, v, w) in enumerate(edges):
            if w == 0:
                zero_columns += 1
            if store.directed:
                table[u, col] = -w
                table[v, col] = w
            else:
                table[u, col] = w
                table[v, col] = w
        if zero_columns:
            warnings.warn(
                f"{zero_columns} zero-weight edge(s) cannot be encoded in the incidence matrix and are dropped",
                InconsistentGraph,
                stacklevel=2,
            )
        logger.info("Created %s incidence matrix: vertices=%d, edges=%d",
                    "directed" if store.directed else "undirected", *table.shape)
        return cls(table, store.directed)

    @property
    def num_vertices(self) -> int:
        return self._m.shape[0]

    @property
    def num_edges(self) -> int:
        return self._m.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._m.shape

    def is_directed(self) -> bool:
        return self.directed

    def to_numpy(self) -> np.ndarray:
        return self._m

    def to_sparse(self):
        """scipy CSC copy; columns are the natural access pattern for edges"""
        return sparse.csc_array(self._m)

    def __getitem__(self, key):
        return self._m[key]

    def neighbors(self, u: int) -> Iterator[Tuple[int, int]]:
        """
        (neighbour, weight) pairs reachable from u, in column order
        directed: columns where row u is negative; the target is the positive row
        undirected: columns where row u is non-zero; the neighbour is the other non-zero row
        """
        row = self._m[u]
        if self.directed:
            cols = np.flatnonzero(row < 0)
            if cols.size == 0:
                return iter(())
            block = self._m[:, cols]
            targets = np.argmax(block > 0, axis=0)
            weights = -row[cols]
        else:
            cols = np.flatnonzero(row)
            if cols.size == 0:
                return iter(())
            mask = self._m[:, cols] != 0
            mask[u, :] = False
            targets = np.argmax(mask, axis=0)
            weights = row[cols]
        return zip(targets.tolist(), weights.tolist())

    def edges(self) -> List[Tuple[int, int, int]]:
        """
        (u, v, weight) per non-empty column, rescanned from the table on every call
        undirected columns report u < v
        """
        # CSC keeps each column's non-zero rows sorted and contiguous
        S = self.to_sparse()
        indptr, rows, data = S.indptr.tolist(), S.indices.tolist(), S.data.tolist()
        result = []
        for col in range(self.num_edges):
            lo, hi = indptr[col], indptr[col + 1]
            if hi - lo != 2:
                continue
            a, b = rows[lo], rows[lo + 1]
            w_a, w_b = data[lo], data[lo + 1]
            if self.directed:
                if w_a < 0:
                    result.append((a, b, w_b))
                else:
                    result.append((b, a, w_a))
            else:
                result.append((a, b, w_a))
        return result

    def __repr__(self) -> str:
        return f"IncidenceMatrix(shape={self.shape}, directed={self.directed})"
