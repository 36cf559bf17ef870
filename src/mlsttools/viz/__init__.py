from .draw import draw_tree
from .layouts import base_layout, tree_layout

__all__ = ["draw_tree", "base_layout", "tree_layout"]
