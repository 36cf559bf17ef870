"""
Named benchmark graphs with their known maximum leaf counts.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from mlsttools.core.graph import Graph
from mlsttools.errors import InvalidInputError


@dataclass(frozen=True)
class BenchmarkCase:
    name: str
    description: str
    n: int
    edges: Tuple[Tuple[int, int], ...]
    expected_max_leaves: Optional[int]

    def graph(self) -> Graph:
        return Graph(self.n, self.edges)


def _binary_tree_with_pendants() -> Tuple[Tuple[int, int], ...]:
    # binary tree on 0..14
    tree = [(p, c) for p in range(7) for c in (2 * p + 1, 2 * p + 2)]
    # pendant vertices 15..26 hung on 0..6, then 0..4
    pendants = [(p, 15 + i) for i, p in enumerate([0, 1, 2, 3, 4, 5, 6, 0, 1, 2, 3, 4])]
    extra = [(0, 27), (1, 28), (2, 29)]
    return tuple(tree + pendants + extra)


_CASES: List[BenchmarkCase] = [
    BenchmarkCase(
        "k4",
        "complete graph K4",
        4,
        ((0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)),
        3,
    ),
    BenchmarkCase(
        "path4",
        "path 0-1-2-3",
        4,
        ((0, 1), (1, 2), (2, 3)),
        2,
    ),
    BenchmarkCase(
        "star4",
        "star centred on 0 with leaves 1, 2, 3",
        4,
        ((0, 1), (0, 2), (0, 3)),
        3,
    ),
    BenchmarkCase(
        "cycle_chord",
        "4-cycle 0-1-2-3-0 with chord 0-2",
        4,
        ((0, 1), (1, 2), (2, 3), (3, 0), (0, 2)),
        3,
    ),
    BenchmarkCase(
        "prism",
        "triangles 0-1-2 and 3-4-5 joined by 2-3, 0-5 and 1-4",
        6,
        ((0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (2, 3), (0, 5), (1, 4)),
        4,
    ),
    BenchmarkCase(
        "square",
        "2x2 grid 0-1, 0-2, 1-3, 2-3",
        4,
        ((0, 1), (0, 2), (1, 3), (2, 3)),
        2,
    ),
    BenchmarkCase(
        "binary_tree",
        "complete binary tree with 3 levels rooted at 0",
        7,
        ((0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)),
        4,
    ),
    BenchmarkCase(
        "wheel5",
        "hub 0 with rim cycle 1-2-3-4-1",
        5,
        ((0, 1), (0, 2), (0, 3), (0, 4), (1, 2), (2, 3), (3, 4), (4, 1)),
        4,
    ),
    BenchmarkCase(
        "bowtie",
        "triangles 0-1-2 and 2-3-4 sharing articulation point 2",
        5,
        ((0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)),
        4,
    ),
    BenchmarkCase(
        "k5",
        "complete graph K5",
        5,
        tuple((i, j) for i in range(5) for j in range(i + 1, 5)),
        4,
    ),
    BenchmarkCase(
        "pendant_tree30",
        "binary tree on 0..14 with 15 pendant vertices (a tree on 30 vertices)",
        30,
        _binary_tree_with_pendants(),
        23,
    ),
]

CASES: Dict[str, BenchmarkCase] = {c.name: c for c in _CASES}


def case_names() -> List[str]:
    return list(CASES)


def get_case(name: str) -> BenchmarkCase:
    try:
        return CASES[name]
    except KeyError:
        raise InvalidInputError(
            f"unknown case {name!r}; available: {', '.join(CASES)}"
        ) from None
