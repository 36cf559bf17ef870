from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mlsttools.core.leaves import SpanningTreeResult


class MLSTError(Exception):
    """Base class for solver errors."""


class InvalidInputError(MLSTError, ValueError):
    """Vertex count, edge list or parameter rejected before any search runs."""


class DisconnectedGraphError(MLSTError):
    """A DFS-based strategy could not reach every vertex."""

    def __init__(self, message: str, *, reached: int, n: int):
        super().__init__(message)
        self.reached = reached
        self.n = n


class InfeasibleError(MLSTError):
    """Exhaustive search examined every (n-1)-subset and none spans the graph."""

    def __init__(self, message: str, *, subsets_examined: int):
        super().__init__(message)
        self.subsets_examined = subsets_examined


class SearchCancelledError(MLSTError, RuntimeError):
    """
    Exhaustive search stopped by its subset budget, time limit or cancel hook.

    best is the incumbent at the moment of cancellation (None if no valid
    spanning tree had been seen yet).
    """

    def __init__(
        self,
        message: str,
        *,
        subsets_examined: int,
        best: Optional["SpanningTreeResult"] = None,
    ):
        super().__init__(message)
        self.subsets_examined = subsets_examined
        self.best = best
