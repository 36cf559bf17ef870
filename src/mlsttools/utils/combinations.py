from __future__ import annotations

from itertools import combinations
from math import comb
from typing import Iterator, List, Sequence, Tuple


class IndexCombinations:
    """
    Lazy, restartable sequence of k-index combinations over range(m).

    Each iteration starts a fresh lexicographic walk; nothing is materialized.
    len() is C(m, k).
    """

    def __init__(self, m: int, k: int):
        if m < 0 or k < 0:
            raise ValueError("m and k must be non-negative.")
        self.m = m
        self.k = k

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return combinations(range(self.m), self.k)

    def __len__(self) -> int:
        return comb(self.m, self.k)


def edge_subsets(
    edges: Sequence[Tuple[int, int]], k: int
) -> Iterator[Tuple[Tuple[int, ...], List[Tuple[int, int]]]]:
    """Yield (indices, edge_subset) for every k-subset of the edge list, by index."""
    for idx in IndexCombinations(len(edges), k):
        yield idx, [edges[i] for i in idx]
