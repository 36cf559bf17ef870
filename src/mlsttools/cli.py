from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from mlsttools.config import LOG_LEVELS, load_settings
from mlsttools.core.graph import Graph
from mlsttools.errors import MLSTError
from mlsttools.io.cases import CASES, get_case
from mlsttools.io.graph6 import g6_to_graph
from mlsttools.report.text import (
    format_adjacency_matrix,
    format_combo_trace,
    format_comparison,
    format_result,
)
from mlsttools.compare import compare_strategies
from mlsttools.strategies import STRATEGIES
from mlsttools.utils.naming import describe_graph


def parse_edge_list(text: str) -> List[Tuple[int, int]]:
    """Parse '0-1,1-2 2-3' (comma or whitespace separated u-v pairs)."""
    edges = []
    for tok in text.replace(",", " ").split():
        try:
            u, v = tok.split("-")
            edges.append((int(u), int(v)))
        except ValueError:
            raise argparse.ArgumentTypeError(f"bad edge {tok!r}, expected u-v") from None
    return edges


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mlsttools",
        description="Maximum-leaf spanning trees: exhaustive, approximate and greedy strategies.",
    )
    src = parser.add_mutually_exclusive_group()
    src.add_argument("--case", help="named benchmark graph (see --list-cases)")
    src.add_argument("--g6", help="graph6 string")
    src.add_argument("--edges", type=parse_edge_list, help="edge list such as '0-1,1-2,2-3' (needs --n)")
    parser.add_argument("--n", type=int, help="vertex count for --edges")
    parser.add_argument(
        "--strategy",
        choices=list(STRATEGIES) + ["all"],
        default="all",
    )
    parser.add_argument("--mode", choices=["faithful", "corrected"], default="faithful",
                        help="expansion pass variant for the approximate strategy")
    parser.add_argument("--trace", action="store_true",
                        help="print every valid spanning tree met by exhaustive search")
    parser.add_argument("--matrix", action="store_true", help="print adjacency matrices")
    parser.add_argument("--max-subsets", type=int, default=None)
    parser.add_argument("--time-limit", type=float, default=None, help="seconds")
    parser.add_argument("--list-cases", action="store_true")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="overrides MLST_LOG_LEVEL")
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_graph(args, parser: argparse.ArgumentParser) -> Tuple[Graph, Optional[int]]:
    if args.g6:
        return g6_to_graph(args.g6), None
    if args.edges is not None:
        if args.n is None:
            parser.error("--edges needs --n")
        return Graph(args.n, args.edges), None
    case = get_case(args.case or "k4")
    return case.graph(), case.expected_max_leaves


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    _configure_logging(args.log_level or settings.log_level)

    if args.list_cases:
        for c in CASES.values():
            print(f"{c.name:<16} n={c.n:<3} m={len(c.edges):<3} best={c.expected_max_leaves}  {c.description}")
        return 0

    try:
        graph, expected = _load_graph(args, parser)
    except MLSTError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"Graph: {describe_graph(list(graph.edges), graph.n)}  n={graph.n} m={graph.number_of_edges()}")
    if expected is not None:
        print(f"Known maximum leaves: {expected}")
    if args.matrix:
        print(format_adjacency_matrix(graph.edges, graph.n, label="Adjacency Matrix of Input Graph:"))
    print()

    exhaustive_opts = {"max_subsets": args.max_subsets, "time_limit": args.time_limit}
    if args.trace:
        exhaustive_opts["trace"] = lambda t: print(format_combo_trace(t))
    options = {
        "exhaustive": exhaustive_opts,
        "approximate": {"mode": args.mode},
    }
    names = list(STRATEGIES) if args.strategy == "all" else [args.strategy]

    try:
        rows = compare_strategies(graph, names, options)
    except MLSTError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    failed = False
    for row in rows:
        if row.result is not None:
            print(format_result(row.result, matrix=args.matrix))
        else:
            failed = True
            print(f"[{row.strategy}] {type(row.error).__name__}: {row.error}")
        print()
    print(format_comparison(rows))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
