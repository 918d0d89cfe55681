from importlib import import_module

# public name -> defining submodule
_EXPORTS = {
    "GraphStore": "nx_bench.graph",
    "Edge": "nx_bench.graph",
    "INFINITY": "nx_bench.graph",
    "build_graph_from_edge_stream": "nx_bench.graph",
    "convert_from_nx": "nx_bench.graph",
    "convert_to_nx": "nx_bench.graph",
    "IncidenceMatrix": "nx_bench.matrix",
    "IndexedMinHeap": "nx_bench.heap",
    "HeapItem": "nx_bench.heap",
    "DisjointSet": "nx_bench.dsu",
    "build_random_graph": "nx_bench.generators",
    "generate_connected_graph": "nx_bench.generators",
    "prufer_to_tree": "nx_bench.generators",
    "AlgorithmKind": "nx_bench.algorithms",
    "run_algorithm": "nx_bench.algorithms",
    "dijkstra": "nx_bench.algorithms",
    "bellman_ford": "nx_bench.algorithms",
    "prim": "nx_bench.algorithms",
    "kruskal": "nx_bench.algorithms",
    "ShortestPathResult": "nx_bench.algorithms",
    "PrimResult": "nx_bench.algorithms",
    "KruskalResult": "nx_bench.algorithms",
    "load_graph": "nx_bench.io",
    "RunConfig": "nx_bench.config",
    "NxBenchError": "nx_bench.exceptions",
    "ConfigError": "nx_bench.exceptions",
    "AllocationError": "nx_bench.exceptions",
    "InconsistentGraph": "nx_bench.exceptions",
    "HeapFull": "nx_bench.exceptions",
}

__all__ = list(_EXPORTS)


def __getattr__(name):
    """
    lazily expose the public API so importing one submodule does not pull in numpy/scipy/pydantic
    """
    if name in _EXPORTS:
        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module 'nx_bench' has no attribute {name!r}")
