from .connectivity import is_connected_edges, connected_components_edges, is_spanning_tree
from .combinations import IndexCombinations, edge_subsets
from .naming import tree_name, describe_graph

__all__ = [
    "is_connected_edges",
    "connected_components_edges",
    "is_spanning_tree",
    "IndexCombinations",
    "edge_subsets",
    "tree_name",
    "describe_graph",
]
