from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from math import comb
from typing import Callable, List, Optional, Sequence, Tuple

from mlsttools.config import exhaustive_max_subsets, exhaustive_time_limit
from mlsttools.core.graph import Graph
from mlsttools.core.leaves import SpanningTreeResult, leaf_count
from mlsttools.core.unionfind import UnionFind
from mlsttools.errors import InfeasibleError, InvalidInputError, SearchCancelledError
from mlsttools.strategies.base import MLSTStrategy
from mlsttools.utils.combinations import edge_subsets


logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


@dataclass(frozen=True)
class ComboTrace:
    """One valid spanning tree met during exhaustive search (1-based index)."""

    index: int
    edges: Tuple[Edge, ...]
    degrees: Tuple[int, ...]
    leaves: int
    is_best: bool


def spans_all(edges: Sequence[Edge], n: int) -> bool:
    """True iff every vertex shares vertex 0's root after unioning *edges*."""
    uf = UnionFind(n)
    for u, v in edges:
        uf.union(u, v)
    root = uf.find(0)
    return all(uf.find(i) == root for i in range(1, n))


class ExhaustiveSearchStrategy(MLSTStrategy):
    """
    Exact MLST by enumerating every (n-1)-subset of the edge list.

    C(m, n-1) subsets, O(n) union-find work each. The first subset reaching
    the best leaf count wins; later ties do not replace it.

    Budget:
      max_subsets  stop after this many subsets (default MLST_EXHAUSTIVE_MAX_SUBSETS)
      time_limit   stop after this many seconds (default MLST_EXHAUSTIVE_TIME_LIMIT)
      cancel       zero-arg callable polled before every subset
    Hitting any of them raises SearchCancelledError with the incumbent.

    trace, if given, is called with a ComboTrace for every valid spanning tree.
    """

    name = "exhaustive"

    def __init__(
        self,
        *,
        max_subsets: Optional[int] = None,
        time_limit: Optional[float] = None,
        cancel: Optional[Callable[[], bool]] = None,
        trace: Optional[Callable[[ComboTrace], None]] = None,
    ):
        if max_subsets is not None and max_subsets <= 0:
            raise InvalidInputError("max_subsets must be positive.")
        if time_limit is not None and time_limit <= 0:
            raise InvalidInputError("time_limit must be positive.")
        self.max_subsets = max_subsets
        self.time_limit = time_limit
        self.cancel = cancel
        self.trace = trace

    def __repr__(self) -> str:
        return (
            f"ExhaustiveSearchStrategy(max_subsets={self.max_subsets!r}, "
            f"time_limit={self.time_limit!r})"
        )

    def _solve(self, graph: Graph) -> SpanningTreeResult:
        max_subsets = self.max_subsets if self.max_subsets is not None else exhaustive_max_subsets()
        time_limit = self.time_limit if self.time_limit is not None else exhaustive_time_limit()

        n = graph.n
        edges = graph.edges
        k = n - 1
        total = comb(len(edges), k)
        logger.info(
            "exhaustive: n=%d m=%d, %d subsets of size %d (budget %d)",
            n, len(edges), total, k, max_subsets,
        )

        deadline = time.monotonic() + time_limit if time_limit is not None else None
        best_edges: Optional[List[Edge]] = None
        best_leaves = -1
        examined = 0
        valid = 0

        def incumbent() -> Optional[SpanningTreeResult]:
            if best_edges is None:
                return None
            return SpanningTreeResult.from_edges(
                self.name, n, best_edges, valid_trees=valid, subsets_examined=examined
            )

        for _idx, subset in edge_subsets(edges, k):
            if examined >= max_subsets:
                raise SearchCancelledError(
                    f"exhaustive search stopped after {examined} of {total} subsets (subset budget)",
                    subsets_examined=examined,
                    best=incumbent(),
                )
            if deadline is not None and time.monotonic() > deadline:
                raise SearchCancelledError(
                    f"exhaustive search stopped after {examined} of {total} subsets "
                    f"(time limit {time_limit}s)",
                    subsets_examined=examined,
                    best=incumbent(),
                )
            if self.cancel is not None and self.cancel():
                raise SearchCancelledError(
                    f"exhaustive search cancelled after {examined} of {total} subsets",
                    subsets_examined=examined,
                    best=incumbent(),
                )

            examined += 1
            if not spans_all(subset, n):
                continue

            valid += 1
            deg, leaves = leaf_count(subset, n)
            improved = leaves > best_leaves
            if improved:
                best_leaves = leaves
                best_edges = subset
                logger.debug("exhaustive: new best, %d leaves at valid tree #%d", leaves, valid)
            if self.trace is not None:
                self.trace(ComboTrace(valid, tuple(subset), tuple(deg), leaves, improved))

        if best_edges is None:
            raise InfeasibleError(
                f"no spanning tree among {examined} subsets of {k} edges "
                f"(graph on {n} vertices with {len(edges)} edges is disconnected)",
                subsets_examined=examined,
            )

        logger.info(
            "exhaustive: %d valid spanning trees, best has %d leaves", valid, best_leaves
        )
        return SpanningTreeResult.from_edges(
            self.name, n, best_edges, valid_trees=valid, subsets_examined=examined
        )
