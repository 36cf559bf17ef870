from __future__ import annotations

from mlsttools.core.unionfind import UnionFind


def is_connected_edges(
    edges: list[tuple[int, int]],
    vertices: set[int] | None = None,
) -> bool:
    """True iff the edges join every vertex into a single component.

    The vertex set is *vertices* when given (isolated vertices count and
    edges touching other labels are ignored), else the edge endpoints.
    An empty or single-vertex set is connected; two or more vertices with
    no edges between them are not.
    """
    if vertices is None:
        verts = {x for e in edges for x in e}
    else:
        verts = set(vertices)
    if len(verts) <= 1:
        return True

    # Labels need not be 0..k-1, so union over positions in a sorted index.
    index = {v: i for i, v in enumerate(sorted(verts))}
    uf = UnionFind(len(index))
    joined = 0
    for u, v in edges:
        if u in index and v in index and uf.union(index[u], index[v]):
            joined += 1
            if joined == len(index) - 1:
                return True
    return False


def connected_components_edges(
    edges: list[tuple[int, int]],
    n: int | None = None,
) -> list[tuple[set[int], list[tuple[int, int]]]]:
    """Return connected components as (vertex_set, edge_list) pairs.

    With *n*, every vertex of 0..n-1 appears, isolated ones as singleton
    components with no edges. Components are ordered by smallest vertex.
    """
    uf_size = n if n is not None else (max((max(e) for e in edges), default=-1) + 1)
    uf = UnionFind(uf_size)
    present: set[int] = set(range(n)) if n is not None else set()
    for u, v in edges:
        uf.union(u, v)
        present.add(u)
        present.add(v)

    by_root: dict[int, set[int]] = {}
    for v in sorted(present):
        by_root.setdefault(uf.find(v), set()).add(v)

    components: list[tuple[set[int], list[tuple[int, int]]]] = []
    for comp_verts in by_root.values():
        comp_edges = [(u, v) for u, v in edges if u in comp_verts]
        components.append((comp_verts, comp_edges))
    return components


def is_spanning_tree(edges: list[tuple[int, int]], n: int) -> bool:
    """Union-find certificate: exactly n-1 edges, no cycle, one component over 0..n-1."""
    if n <= 0 or len(edges) != n - 1:
        return False
    uf = UnionFind(n)
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            return False
        if not uf.union(u, v):
            return False
    return uf.component_count() == 1
