from __future__ import annotations

import argparse
import logging
import os
from typing import Optional, Sequence

from .generate import random_graph
from .kruskal import minimum_spanning_tree
from .viz import write_plotly_html

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_log_level() -> str:
    return os.environ.get("WUGRAPH_LOG_LEVEL", "WARNING").upper()


def _add_graph_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("nvertices", type=int, help="Number of vertices (labelled 0..n-1)")
    p.add_argument("-d", "--density", type=float, default=0.5, help="Fraction of all vertex pairs joined by an edge")
    p.add_argument("--min-weight", type=int, default=1, help="Smallest edge weight")
    p.add_argument("--max-weight", type=int, default=100, help="Largest edge weight")
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducible graphs")
    p.add_argument("--3d", action="store_true", help="Use a 3D plot")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="wugraph", description="Weighted undirected graphs + Kruskal minimum spanning trees")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=_env_log_level(),
        help="Logging level (default: $WUGRAPH_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_mst = sub.add_parser("mst", help="Generate a random graph and compute its minimum spanning tree")
    _add_graph_args(p_mst)
    p_mst.add_argument("--out", type=str, default=None, help="Optional output HTML path for a visualization")
    p_mst.add_argument("--verify", action="store_true", help="Cross-check the total weight against networkx")

    p_viz = sub.add_parser("visualize", help="Generate a random graph and render it to an HTML file")
    _add_graph_args(p_viz)
    p_viz.add_argument("--out", type=str, default="out/graph.html", help="Output HTML path")

    args = parser.parse_args(list(argv) if argv is not None else None)
    # argparse does not check defaults against choices.
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid WUGRAPH_LOG_LEVEL {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    graph = random_graph(
        args.nvertices,
        density=args.density,
        min_weight=args.min_weight,
        max_weight=args.max_weight,
        seed=args.seed,
    )
    use_3d = bool(args.__dict__.get("3d"))

    if args.cmd == "visualize":
        out = write_plotly_html(graph, out_path=args.out, title=f"Graph: {graph.vertex_count()} vertices", use_3d=use_3d)
        print(f"Wrote graph visualization: {out}")
        return 0

    if args.cmd == "mst":
        tree = minimum_spanning_tree(graph)
        total = tree.total_weight()
        print(f"Graph: vertices={graph.vertex_count()}, edges={graph.edge_count()}")
        print(f"Spanning forest: edges={tree.edge_count()}, total weight={total}")
        if tree.edge_count() < graph.vertex_count() - 1:
            print("  (graph is disconnected)")

        status = 0
        if args.verify:
            import networkx as nx

            expected = nx.minimum_spanning_tree(graph.to_networkx()).size(weight="weight")
            if expected == total:
                print(f"Verified against networkx: {expected}")
            else:
                print(f"MISMATCH: networkx reports total weight {expected}")
                status = 1

        if args.out:
            out = write_plotly_html(
                graph,
                out_path=args.out,
                tree=tree,
                title=f"MST: total weight {total}",
                use_3d=use_3d,
            )
            print(f"Wrote MST visualization: {out}")
        return status

    raise AssertionError("unreachable")
