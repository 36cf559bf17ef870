from .text import (
    format_edges,
    format_degrees,
    adjacency_matrix,
    format_adjacency_matrix,
    format_combo_trace,
    format_result,
    format_comparison,
)

__all__ = [
    "format_edges",
    "format_degrees",
    "adjacency_matrix",
    "format_adjacency_matrix",
    "format_combo_trace",
    "format_result",
    "format_comparison",
]
