from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from mlsttools.core.graph import Graph
from mlsttools.core.leaves import SpanningTreeResult
from mlsttools.errors import MLSTError
from mlsttools.strategies import STRATEGIES, get_strategy


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonRow:
    """
    Outcome of one strategy on one graph.

    Exactly one of result / error is set. seconds is wall-clock time of
    solve(), including failed runs.
    """

    strategy: str
    result: Optional[SpanningTreeResult]
    seconds: float
    error: Optional[MLSTError] = None


def compare_strategies(
    graph: Graph,
    names: Optional[Sequence[str]] = None,
    options: Optional[Dict[str, dict]] = None,
) -> List[ComparisonRow]:
    """
    Run each named strategy (default: all registered) on the same graph.

    options maps a strategy name to constructor keyword arguments.
    Solver errors (MLSTError) are recorded on their row; anything else
    propagates.
    """
    names = list(STRATEGIES) if names is None else list(names)
    options = options or {}

    rows: List[ComparisonRow] = []
    for name in names:
        strategy = get_strategy(name, **options.get(name, {}))
        t0 = time.perf_counter()
        try:
            result = strategy.solve(graph)
        except MLSTError as exc:
            elapsed = time.perf_counter() - t0
            logger.info("%s failed after %.3f ms: %s", name, elapsed * 1000, exc)
            rows.append(ComparisonRow(name, None, elapsed, exc))
            continue
        elapsed = time.perf_counter() - t0
        logger.info("%s: %d leaves in %.3f ms", name, result.leaves, elapsed * 1000)
        rows.append(ComparisonRow(name, result, elapsed))
    return rows
