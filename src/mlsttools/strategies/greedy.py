from __future__ import annotations

import logging
from typing import List, Set

from mlsttools.core.graph import Graph
from mlsttools.core.leaves import SpanningTreeResult
from mlsttools.strategies.base import MLSTStrategy, dfs_discovery_edges, require_spanning


logger = logging.getLogger(__name__)


def degree_order(vertices, degrees: List[int]) -> List[int]:
    """Sort by descending degree, ties by ascending vertex id."""
    return sorted(vertices, key=lambda v: (-degrees[v], v))


class GreedyDegreeDFSStrategy(MLSTStrategy):
    """
    DFS from the highest-degree vertex, always descending into the
    highest-degree unvisited neighbor first (degrees from the original graph,
    ties broken by smaller id). No optimality guarantee.
    """

    name = "greedy"

    def _solve(self, graph: Graph) -> SpanningTreeResult:
        degrees = graph.degrees()
        start = degree_order(range(graph.n), degrees)[0]

        def order(u: int, visited: Set[int]) -> List[int]:
            fresh = {v for v in graph.adj[u] if v not in visited}
            return degree_order(fresh, degrees)

        tree, visited = dfs_discovery_edges(graph.n, start, order)
        require_spanning(graph, visited, self.name)
        logger.debug("greedy: start=%d (degree %d), %d tree edges", start, degrees[start], len(tree))
        return SpanningTreeResult.from_edges(self.name, graph.n, tree)
