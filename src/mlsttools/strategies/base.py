from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Set, Tuple

from mlsttools.core.graph import Graph
from mlsttools.core.leaves import SpanningTreeResult
from mlsttools.errors import DisconnectedGraphError
from mlsttools.utils.connectivity import is_spanning_tree


Edge = Tuple[int, int]
NeighborOrder = Callable[[int, Set[int]], Iterable[int]]


def dfs_discovery_edges(n: int, start: int, order: NeighborOrder) -> Tuple[List[Edge], Set[int]]:
    """
    Iterative depth-first search from *start*.

    order(node, visited) is called once when node is entered and gives the
    candidates to try, in order. A candidate already visited by the time it
    comes up is skipped. Discovery order and recorded (parent, child) edges
    are the same as for the recursive formulation.

    Returns (discovery_edges, visited).
    """
    visited = {start}
    tree: List[Edge] = []
    stack = [(start, iter(order(start, visited)))]
    while stack:
        node, it = stack[-1]
        for nxt in it:
            if nxt not in visited:
                visited.add(nxt)
                tree.append((node, nxt))
                stack.append((nxt, iter(order(nxt, visited))))
                break
        else:
            stack.pop()
    return tree, visited


def require_spanning(graph: Graph, visited: Set[int], strategy: str) -> None:
    if len(visited) != graph.n:
        missing = sorted(set(range(graph.n)) - visited)
        shown = ", ".join(map(str, missing[:10])) + (", ..." if len(missing) > 10 else "")
        raise DisconnectedGraphError(
            f"{strategy}: DFS reached {len(visited)} of {graph.n} vertices "
            f"(unreached: {shown})",
            reached=len(visited),
            n=graph.n,
        )


class MLSTStrategy(ABC):
    """
    A way of building a spanning tree with many leaves.

    Subclasses implement _solve; solve() certifies the returned tree
    (n-1 edges, acyclic, spanning) before handing it to the caller.
    All working state lives inside a single solve() call.
    """

    name: str = "abstract"

    def solve(self, graph: Graph) -> SpanningTreeResult:
        result = self._solve(graph)
        if not is_spanning_tree(list(result.edges), graph.n):
            raise RuntimeError(
                f"{self.name} produced an edge set that is not a spanning tree: {result.edges}"
            )
        return result

    @abstractmethod
    def _solve(self, graph: Graph) -> SpanningTreeResult:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
