from __future__ import annotations

import logging
from typing import List, Tuple

from mlsttools.core.graph import Graph
from mlsttools.core.leaves import SpanningTreeResult, degree_table
from mlsttools.core.unionfind import UnionFind
from mlsttools.errors import InvalidInputError
from mlsttools.strategies.base import MLSTStrategy, dfs_discovery_edges, require_spanning


logger = logging.getLogger(__name__)

Edge = Tuple[int, int]

MODES = ("faithful", "corrected")
BRANCHING_DEGREE = 3


def seed_tree(graph: Graph, start: int = 0) -> List[Edge]:
    """DFS discovery edges from *start* in adjacency order; raises if not spanning."""
    tree, visited = dfs_discovery_edges(graph.n, start, lambda u, _seen: graph.adj[u])
    require_spanning(graph, visited, ApproximateExpansionStrategy.name)
    return tree


def expand(graph: Graph, tree_degrees: List[int], uf: UnionFind) -> List[Edge]:
    """
    Expansion pass: from every branching vertex u (tree degree >= 3), take
    each original-graph edge (u, v) whose endpoints lie in different sets,
    and union them. Returns the added edges.
    """
    added: List[Edge] = []
    for u in range(graph.n):
        if tree_degrees[u] < BRANCHING_DEGREE:
            continue
        for v in graph.adj[u]:
            if uf.union(u, v):
                added.append((u, v))
    return added


class ApproximateExpansionStrategy(MLSTStrategy):
    """
    DFS seed tree followed by an expansion pass around branching vertices,
    after the Solis-Oba 2-approximation scheme.

    mode="faithful": the baseline union covers every seed edge. The seed tree
    already spans, so all vertices share one set and the expansion pass can
    never add an edge; the result is the DFS seed tree.

    mode="corrected": the baseline union covers only the seed edges with a
    seed leaf at either end, and those edges are kept. The expansion pass then links
    branching vertices to every other set they touch, and the forest is
    completed into a spanning tree with seed edges in discovery order.
    """

    name = "approximate"

    def __init__(self, mode: str = "faithful"):
        if mode not in MODES:
            raise InvalidInputError(f"mode must be one of {MODES}, got {mode!r}")
        self.mode = mode

    def __repr__(self) -> str:
        return f"ApproximateExpansionStrategy(mode={self.mode!r})"

    def _solve(self, graph: Graph) -> SpanningTreeResult:
        n = graph.n
        seed = seed_tree(graph)
        deg = degree_table(seed, n)
        logger.debug("approximate: seed tree with %d edges, degrees %s", len(seed), deg)

        uf = UnionFind(n)
        if self.mode == "faithful":
            for u, v in seed:
                uf.union(u, v)
            added = expand(graph, deg, uf)
            tree = seed + added
        else:
            kept = [(u, v) for u, v in seed if deg[u] == 1 or deg[v] == 1]
            for u, v in kept:
                uf.union(u, v)
            added = expand(graph, deg, uf)
            completion = [(u, v) for u, v in seed if uf.union(u, v)]
            tree = kept + added + completion

        logger.debug("approximate (%s): expansion added %d edges", self.mode, len(added))
        return SpanningTreeResult.from_edges(self.name, n, tree, expansion_edges=len(added))
