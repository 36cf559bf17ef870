"""
mlsttools: maximum-leaf spanning tree solvers (exhaustive search,
Solis-Oba style DFS expansion, greedy degree-ordered DFS), with the
graph and union-find primitives they share.
"""

from .errors import (
    MLSTError,
    InvalidInputError,
    DisconnectedGraphError,
    InfeasibleError,
    SearchCancelledError,
)
from .config import Settings, load_settings

# Core
from .core.unionfind import UnionFind
from .core.leaves import SpanningTreeResult, degree_table, count_leaves, leaf_count
from .core.graph import Graph

# Strategies
from .strategies import (
    MLSTStrategy,
    ExhaustiveSearchStrategy,
    ComboTrace,
    ApproximateExpansionStrategy,
    GreedyDegreeDFSStrategy,
    STRATEGIES,
    get_strategy,
)
from .compare import ComparisonRow, compare_strategies

# IO
from .io.graph6 import g6_to_nx, g6_to_graph, graph_to_g6
from .io.cases import BenchmarkCase, CASES, get_case, case_names

# Shared utilities
from .utils.connectivity import is_connected_edges, connected_components_edges, is_spanning_tree
from .utils.naming import tree_name, describe_graph


def solve(graph: Graph, strategy: str = "exhaustive", **options) -> SpanningTreeResult:
    """Build a spanning tree of *graph* with the named strategy."""
    return get_strategy(strategy, **options).solve(graph)


__all__ = [
    # Errors
    "MLSTError",
    "InvalidInputError",
    "DisconnectedGraphError",
    "InfeasibleError",
    "SearchCancelledError",
    # Config
    "Settings",
    "load_settings",
    # Core
    "UnionFind",
    "SpanningTreeResult",
    "degree_table",
    "count_leaves",
    "leaf_count",
    "Graph",
    # Strategies
    "MLSTStrategy",
    "ExhaustiveSearchStrategy",
    "ComboTrace",
    "ApproximateExpansionStrategy",
    "GreedyDegreeDFSStrategy",
    "STRATEGIES",
    "get_strategy",
    "solve",
    "ComparisonRow",
    "compare_strategies",
    # IO
    "g6_to_nx",
    "g6_to_graph",
    "graph_to_g6",
    "BenchmarkCase",
    "CASES",
    "get_case",
    "case_names",
    # Utils
    "is_connected_edges",
    "connected_components_edges",
    "is_spanning_tree",
    "tree_name",
    "describe_graph",
]
