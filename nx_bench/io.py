"""
Edge-list file loader

Format: first line ``<num_vertices> <num_edges>``, then one
``<src> <dst> <weight>`` line per edge. Blank lines and lines starting with
``#`` are ignored. Bad edge lines are skipped with a warning.
"""

import logging
import warnings

from .exceptions import ConfigError, InconsistentGraph
from .graph import build_graph_from_edge_stream

logger = logging.getLogger(__name__)


def _edge_lines(f, path):
    for lineno, line in enumerate(f, start=2):
        parts = line.split()
        if not parts or parts[0].startswith("#"):
            continue
        if len(parts) != 3:
            warnings.warn(f"{path}:{lineno}: expected '<src> <dst> <weight>', got {line.strip()!r}",
                          InconsistentGraph, stacklevel=3)
            continue
        yield parts


def load_graph(path, directed: bool):
    """
    Load a GraphStore from an edge-list file
    Undirected graphs get every line as a symmetric pair of entries
    """
    try:
        f = open(path, "r")
    except OSError as e:
        raise ConfigError(f"Error opening file {path}") from e

    with f:
        header = f.readline().split()
        try:
            num_v, num_e = int(header[0]), int(header[1])
        except (IndexError, ValueError):
            raise ConfigError(f"Invalid file format in {path}: expected '<num_vertices> <num_edges>'") from None
        if num_v <= 0:
            raise ConfigError(f"Invalid vertex count in {path}: {num_v}")

        store = build_graph_from_edge_stream(num_v, num_e, _edge_lines(f, path), directed=directed)

    logger.info(f"Loaded {'directed' if directed else 'undirected'} graph from {path}: "
                f"vertices={store.num_vertices}, edges={store.edge_count}")
    return store


def write_graph(store, path) -> None:
    """write store in the format load_graph reads (one line per logical edge)"""
    edges = store.edges()
    with open(path, "w") as f:
        f.write(f"{store.num_vertices} {len(edges)}\n")
        for u, v, w in edges:
            f.write(f"{u} {v} {w}\n")
