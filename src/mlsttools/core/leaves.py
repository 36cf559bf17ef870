from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import networkx as nx


Edge = Tuple[int, int]


def degree_table(edges: Iterable[Sequence[int]], n: int) -> List[int]:
    """Degree of each vertex 0..n-1 in the given edge set (multiplicity counted)."""
    deg = [0] * n
    for u, v in edges:
        deg[u] += 1
        deg[v] += 1
    return deg


def count_leaves(edges: Iterable[Sequence[int]], n: int) -> int:
    """Number of vertices with degree exactly 1. Isolated vertices are not leaves."""
    return sum(1 for d in degree_table(edges, n) if d == 1)


def leaf_count(edges: Iterable[Sequence[int]], n: int) -> Tuple[List[int], int]:
    """Return (degree_table, leaf_count) for an edge set on n vertices."""
    deg = degree_table(edges, n)
    return deg, sum(1 for d in deg if d == 1)


@dataclass(frozen=True)
class SpanningTreeResult:
    """
    A finished spanning tree and its evaluation.

    strategy:          name of the strategy that produced it
    edges:             n-1 tree edges, in the order the strategy chose them
    degrees:           degree of each vertex within the tree
    leaves:            number of degree-1 vertices
    valid_trees:       exhaustive only, spanning-tree subsets seen
    subsets_examined:  exhaustive only, (n-1)-subsets evaluated
    expansion_edges:   approximate only, edges added by the expansion pass
    """

    strategy: str
    n: int
    edges: Tuple[Edge, ...]
    degrees: Tuple[int, ...]
    leaves: int
    valid_trees: Optional[int] = None
    subsets_examined: Optional[int] = None
    expansion_edges: Optional[int] = None

    @classmethod
    def from_edges(cls, strategy: str, n: int, edges: Iterable[Sequence[int]], **stats) -> "SpanningTreeResult":
        tree = tuple((u, v) for u, v in edges)
        deg, leaves = leaf_count(tree, n)
        return cls(strategy=strategy, n=n, edges=tree, degrees=tuple(deg), leaves=leaves, **stats)

    @property
    def leaf_vertices(self) -> List[int]:
        return [v for v, d in enumerate(self.degrees) if d == 1]

    def as_networkx(self) -> nx.Graph:
        T = nx.Graph()
        T.add_nodes_from(range(self.n))
        T.add_edges_from(self.edges)
        return T
