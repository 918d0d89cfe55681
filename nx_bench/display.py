"""
Plain-text rendering of graphs, matrices and results
"""

from .algorithms.results import KruskalResult, PrimResult, ShortestPathResult

BREAK_LINE = "-" * 32
SECTION_LINE = "=" * 32


def _fmt(value) -> str:
    return "inf" if value is None else str(value)


def format_config(cfg) -> str:
    lines = [
        "==== CONFIGURATION ====",
        f"Algorithm: {cfg.alg_type.value}",
        f"Vertices: {cfg.num_v}",
        f"Density: {cfg.density:.2f}",
        f"Start vertex: {cfg.start_vertex}",
        f"Output matrix: {'true' if cfg.out_matrix else 'false'}",
        f"Output list: {'true' if cfg.out_list else 'false'}",
    ]
    if cfg.file_name:
        lines.append(f"Input file: {cfg.file_name}")
    if cfg.seed is not None:
        lines.append(f"Seed: {cfg.seed}")
    lines.append("=" * 24)
    return "\n".join(lines)


def format_adjacency(store) -> str:
    lines = []
    for u in range(store.num_vertices):
        row = "".join(f"-> ({v},{w:5d}) " for v, w in store.neighbors(u))
        lines.append(f"{u}:{row}")
    return "\n".join(lines)


def format_matrix(matrix) -> str:
    table = matrix.to_numpy()
    return "\n".join("".join(f"{x:5d}" for x in row) for row in table.tolist())


def format_path(result: ShortestPathResult, target: int) -> str:
    path = result.path_to(target)
    if path is None:
        return f"No path from {result.start} to {target}"
    return " -> ".join(str(v) for v in path)


def format_result(result) -> str:
    if isinstance(result, ShortestPathResult):
        lines = ["Distances:"]
        for v, (d, p) in enumerate(zip(result.distances, result.parents)):
            lines.append(f"  to {v}: {_fmt(d)} (parent: {_fmt(p)})")
        if result.negative_cycle:
            lines.append("  negative-weight cycle detected; distances are not final")
        return "\n".join(lines)

    if isinstance(result, PrimResult):
        lines = ["MST (Prim):"]
        for v, (p, w) in enumerate(zip(result.parents, result.weights)):
            if v == result.root:
                lines.append(f"  [root] {v}")
            elif p is None:
                lines.append(f"  {v} not reached")
            else:
                lines.append(f"  {p} - {v} (weight: {w})")
        lines.append(f"  total weight: {result.total_weight}")
        return "\n".join(lines)

    if isinstance(result, KruskalResult):
        lines = ["MST (Kruskal):"]
        lines.extend(f"  {e.u} - {e.v} (weight: {e.weight})" for e in result.edges)
        lines.append(f"  total weight: {result.total_weight}")
        if not result.is_spanning():
            lines.append(f"  only {result.edge_count} of {result.num_vertices - 1} edges; graph is disconnected")
        return "\n".join(lines)

    raise TypeError(f"Unknown result type: {type(result).__name__}")
