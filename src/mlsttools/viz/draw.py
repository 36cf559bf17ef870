from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from mlsttools.core.graph import Graph
from mlsttools.core.leaves import SpanningTreeResult
from .layouts import base_layout, tree_layout


def draw_tree(
    graph: Graph,
    result: SpanningTreeResult,
    *,
    ax=None,
    layered: bool = False,
    seed: int = 7,
    node_size: int = 260,
    edge_width: float = 2.0,
    save_path: str | None = None,
):
    """
    Draw the input graph in light grey with the spanning tree on top.
    Leaves are drawn in a contrasting color.

    layered=True places the tree by depth from its highest-degree vertex.
    If save_path is set, the figure is written there and closed; otherwise
    the axes are returned for further use.
    """
    G = graph.to_networkx()
    T = result.as_networkx()

    if layered:
        root = max(range(result.n), key=lambda v: (result.degrees[v], -v))
        pos = tree_layout(T, root)
    else:
        pos = base_layout(G, seed=seed)

    fig = None
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()
    ax.set_title(f"{result.strategy}: {result.leaves} leaves  |V|={result.n}  |E|={graph.number_of_edges()}")

    leaves = set(result.leaf_vertices)
    colors = ["tab:orange" if v in leaves else "tab:blue" for v in G.nodes()]

    nx.draw_networkx_edges(G, pos=pos, ax=ax, edge_color="lightgrey", width=1.0)
    nx.draw_networkx_edges(T, pos=pos, ax=ax, edge_color="black", width=edge_width)
    nx.draw_networkx_nodes(G, pos=pos, ax=ax, node_color=colors, node_size=node_size)
    nx.draw_networkx_labels(G, pos=pos, ax=ax, font_size=9)

    if save_path:
        fig = fig or ax.figure
        fig.tight_layout()
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    return ax
