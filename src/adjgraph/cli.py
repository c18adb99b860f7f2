"""
Command-line entry point.

  adjgraph graph.txt -k 3
  adjgraph graph.txt --display-all
  adjgraph graph.txt --path 1 4
  adjgraph graph.txt -k 3 --draw subgraphs --limit 5
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from adjgraph.config import MAX_VERTICES
from adjgraph.io.description import load_graph
from adjgraph.viz.draw import draw_graph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adjgraph",
        description="Load a graph description and enumerate its connected k-vertex subgraphs.",
    )
    parser.add_argument("input", type=Path, help="Graph description file")
    parser.add_argument("-k", "--size", type=int, default=None, help="Subgraph size to enumerate")
    parser.add_argument("--display-all", action="store_true", help="Print every vertex pair")
    parser.add_argument(
        "--path",
        nargs=2,
        type=int,
        metavar=("SRC", "DST"),
        help="Print a single vertex pair (1-based)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=MAX_VERTICES,
        help=f"Maximum number of vertices (default {MAX_VERTICES})",
    )
    parser.add_argument(
        "--draw",
        metavar="PREFIX",
        default=None,
        help="Save PNG drawings {PREFIX}_graph.png and {PREFIX}_sub{i}.png",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of subgraph drawings with --draw (default 10)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input.is_file():
        parser.error(f"input file not found: {args.input}")
    if args.capacity <= 0:
        parser.error("--capacity must be positive")

    graph = load_graph(args.input, capacity=args.capacity)
    print(f"[{args.input.name}] {len(graph)} vertices, {len(graph.edges())} arcs", file=sys.stderr)

    if args.display_all:
        graph.display_all(sys.stdout)
    if args.path is not None:
        graph.display(args.path[0], args.path[1], sys.stdout)

    subgraphs: List[List[int]] = []
    if args.size is not None:
        subgraphs = graph.enumerate_subgraphs(args.size)
        for sub in subgraphs:
            print(" ".join(str(v) for v in sub))
        print(f"[k={args.size}] {len(subgraphs)} connected subgraphs", file=sys.stderr)

    if args.draw:
        draw_graph(graph, with_payloads=True, save_path=f"{args.draw}_graph.png")
        for i, sub in enumerate(subgraphs[: max(0, args.limit)]):
            draw_graph(graph, highlight=sub, save_path=f"{args.draw}_sub{i}.png")
        print(f"[draw] wrote drawings with prefix {args.draw}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
