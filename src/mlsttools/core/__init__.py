from .unionfind import UnionFind
from .leaves import SpanningTreeResult, degree_table, count_leaves, leaf_count
from .graph import Graph, validate_edges

__all__ = [
    "UnionFind",
    "SpanningTreeResult",
    "degree_table",
    "count_leaves",
    "leaf_count",
    "Graph",
    "validate_edges",
]
