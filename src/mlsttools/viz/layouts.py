from __future__ import annotations

import networkx as nx


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable layout:
      - planar_layout if planar
      - otherwise spring_layout
    """
    is_planar, _ = nx.check_planarity(G)
    if is_planar and G.number_of_nodes() > 2:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def tree_layout(T: nx.Graph, root: int):
    """
    Layered placement of a tree: depth from *root* top to bottom, vertices
    of equal depth spread left to right by id.
    """
    layers = nx.single_source_shortest_path_length(T, root)
    by_depth: dict[int, list[int]] = {}
    for v, d in layers.items():
        by_depth.setdefault(d, []).append(v)
    pos = {}
    depth_max = max(by_depth) if by_depth else 0
    for d, verts in by_depth.items():
        verts.sort()
        for i, v in enumerate(verts):
            x = (i + 1) / (len(verts) + 1)
            y = 1.0 - (d / depth_max if depth_max else 0.0)
            pos[v] = (x, y)
    return pos
