from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from mlsttools.core.leaves import SpanningTreeResult
from mlsttools.strategies.exhaustive import ComboTrace
from mlsttools.utils.naming import tree_name


def format_edges(edges: Iterable[Tuple[int, int]]) -> str:
    """'(0-1) (0-2) ...'"""
    return " ".join(f"({u}-{v})" for u, v in edges)


def format_degrees(degrees: Sequence[int]) -> str:
    """'0:3 1:1 ...'"""
    return " ".join(f"{v}:{d}" for v, d in enumerate(degrees))


def adjacency_matrix(edges: Iterable[Tuple[int, int]], n: int) -> List[List[int]]:
    """0/1 symmetric adjacency matrix of an edge set (duplicates collapse)."""
    mat = [[0] * n for _ in range(n)]
    for u, v in edges:
        mat[u][v] = 1
        mat[v][u] = 1
    return mat


def format_adjacency_matrix(edges: Iterable[Tuple[int, int]], n: int, label: str = "") -> str:
    mat = adjacency_matrix(edges, n)
    width = max(2, len(str(n - 1)))
    lines = []
    if label:
        lines.append(label)
    lines.append(" " * (width + 1) + " ".join(f"{i:>{width}}" for i in range(n)))
    for i, row in enumerate(mat):
        lines.append(f"{i:>{width}} " + " ".join(f"{x:>{width}}" for x in row))
    return "\n".join(lines)


def format_combo_trace(t: ComboTrace) -> str:
    """Trace line for one valid spanning tree met by exhaustive search."""
    line = (
        f"Valid Spanning Tree #{t.index} | Combination: {format_edges(t.edges)}"
        f" | Degrees: {format_degrees(t.degrees)} | Leaves: {t.leaves}"
    )
    if t.is_best:
        line += " [BEST SO FAR]"
    return line


def format_result(result: SpanningTreeResult, *, matrix: bool = False) -> str:
    lines = [
        f"[{result.strategy}] spanning tree with {result.leaves} leaves "
        f"({tree_name(list(result.edges), result.n)})",
        f"Edges: {format_edges(result.edges)}",
        f"Node Degrees: {format_degrees(result.degrees)}",
        f"Leaves: {', '.join(map(str, result.leaf_vertices)) or '-'}",
    ]
    if result.valid_trees is not None:
        lines.append(
            f"Valid spanning trees: {result.valid_trees} of {result.subsets_examined} subsets"
        )
    if result.expansion_edges is not None:
        lines.append(f"Expansion edges added: {result.expansion_edges}")
    if matrix:
        lines.append(
            format_adjacency_matrix(result.edges, result.n, label="Adjacency Matrix of Spanning Tree:")
        )
    return "\n".join(lines)


def format_comparison(rows) -> str:
    """Fixed-width table for a list of compare.ComparisonRow."""
    header = f"{'strategy':<12} {'leaves':>6} {'time_ms':>10}  status"
    lines = [header, "-" * len(header)]
    for r in rows:
        leaves = "-" if r.result is None else str(r.result.leaves)
        status = "ok" if r.error is None else f"{type(r.error).__name__}: {r.error}"
        lines.append(f"{r.strategy:<12} {leaves:>6} {r.seconds * 1000:>10.3f}  {status}")
    return "\n".join(lines)
