"""
Exception types raised by nx_bench

Rooted at networkx's own base exception so callers that already catch
``nx.NetworkXException`` keep working
"""

import networkx as nx


class NxBenchError(nx.NetworkXException):
    """Base class for all nx_bench errors"""


class ConfigError(NxBenchError):
    """Fatal configuration problem, detected before any algorithm runs"""


class AllocationError(ConfigError, MemoryError):
    """A graph or view could not be created with the requested size"""


class InconsistentGraph(NxBenchError, UserWarning):
    """
    Recoverable data inconsistency, e.g. an undirected edge without its mirror
    Emitted with warnings.warn and skipped; never raised across the public API
    """


class HeapFull(NxBenchError, IndexError):
    """Insert into an IndexedMinHeap that is already at capacity"""
