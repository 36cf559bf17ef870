from .graph6 import g6_to_nx, g6_to_graph, graph_to_g6
from .cases import BenchmarkCase, CASES, case_names, get_case

__all__ = [
    "g6_to_nx",
    "g6_to_graph",
    "graph_to_g6",
    "BenchmarkCase",
    "CASES",
    "case_names",
    "get_case",
]
