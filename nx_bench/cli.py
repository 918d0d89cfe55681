#!/usr/bin/env python3
"""
nx-bench command line

Reads a run configuration, generates (or loads) the graph, builds the
representation the selected algorithm needs, times the algorithm and prints
the results.

Example:
  nx-bench config/dijkstra.cfg --seed 42 --repeats 5 --warmup 1
"""

import argparse
import logging
import os
import random
import sys
from typing import List, Optional

from .algorithms.dispatch import AlgorithmKind, run_algorithm
from .config import read_config_file, resolve_path
from .display import BREAK_LINE, SECTION_LINE, format_adjacency, format_config, format_matrix, format_result
from .exceptions import ConfigError
from .generators import build_random_graph
from .io import load_graph
from .matrix import IncidenceMatrix
from .timing import fmt_ms, time_fn

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="nx-bench", description="shortest-path / MST benchmarks on list and matrix graphs")
    ap.add_argument("config", help="run configuration file")
    ap.add_argument("--seed", type=int, default=None, help="random seed (overrides .seed in the config)")
    ap.add_argument("--repeats", type=int, default=1, help="timed runs of the algorithm")
    ap.add_argument("--warmup", type=int, default=0, help="warmup runs (not timed)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def prepare_graph(cfg, rng, config_dir: str):
    """(store, matrix) for cfg; matrix is None unless the algorithm runs on one"""
    kind = cfg.alg_type
    if cfg.loads_file:
        path = resolve_path(cfg.file_name, [config_dir])
        print("2. Load graph from file and run algorithm")
        print(BREAK_LINE)
        store = load_graph(path, directed=kind.directed)
        if cfg.start_vertex >= store.num_vertices:
            raise ConfigError(f"Start vertex {cfg.start_vertex} must be less than vertex count {store.num_vertices}")
        matrix = IncidenceMatrix.from_graph(store) if kind.uses_matrix else None
        return store, matrix

    print("1. Generate random graph and run algorithm")
    print(BREAK_LINE)
    return build_random_graph(cfg.num_v, cfg.density, kind, cfg.start_vertex, rng=rng)


def run(cfg, rng: random.Random, config_dir: str = ".", repeats: int = 1, warmup: int = 0):
    """Execute one configured run, printing as it goes; returns the result record"""
    cfg.check_runnable()
    store, matrix = prepare_graph(cfg, rng, config_dir)

    if cfg.out_matrix and matrix is not None:
        print("Directed Incidence Matrix:" if matrix.directed else "Undirected Incidence Matrix:")
        print(format_matrix(matrix))
        print(BREAK_LINE)
    if cfg.out_list:
        print("Adjacency List:")
        print(format_adjacency(store))
        print(BREAK_LINE)

    kind: AlgorithmKind = cfg.alg_type
    representation = matrix if kind.uses_matrix else store
    # the other representation is not needed past this point
    del store, matrix

    results = []
    stats = time_fn(lambda: results.append(run_algorithm(kind, representation, cfg.start_vertex)),
                    repeats=repeats, warmup=warmup)
    result = results[-1]
    logger.info(f"{kind.value}: median {fmt_ms(stats['median'])} over {stats['runs']} run(s)")

    print(f"Results for {kind.value}:")
    print(format_result(result))
    print(f"Time: median {fmt_ms(stats['median'])} (min {fmt_ms(stats['min'])}, runs={stats['runs']})")
    print(SECTION_LINE)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.repeats < 1 or args.warmup < 0:
        parser.error("--repeats must be >= 1 and --warmup >= 0")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config_path = resolve_path(args.config, [os.path.dirname(os.path.abspath(sys.argv[0]))])
        print(f"Resolved config path: {config_path}")
        cfg = read_config_file(config_path)
        print(format_config(cfg))
        print("")

        seed = args.seed if args.seed is not None else cfg.seed
        rng = random.Random(seed)
        run(cfg, rng, config_dir=os.path.dirname(os.path.abspath(config_path)),
            repeats=args.repeats, warmup=args.warmup)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
