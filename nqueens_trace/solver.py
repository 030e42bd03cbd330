"""Solver facade and strategy registry.

``NQueensSolver`` is the object the replay front-end talks to: construct it
with the board size, then call one of the three ``solve_*`` methods. The
instance holds nothing but the size, so every call starts from a clean state
and two calls with the same size return identical traces.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .branch_and_bound import bnb_nqueens_trace
from .breadth_first import bfs_nqueens_trace
from .depth_first import dfs_nqueens_trace
from .trace import Trace

StrategyFn = Callable[[int], Trace]

STRATEGIES: Dict[str, StrategyFn] = {
    "DFS": dfs_nqueens_trace,
    "BFS": bfs_nqueens_trace,
    "BNB": bnb_nqueens_trace,
}


def strategy_names() -> List[str]:
    return list(STRATEGIES)


def get_strategy(name: str) -> StrategyFn:
    """Return a trace-producing search function by label.

    Parameters
    ----------
    name : str
        One of "DFS", "BFS", "BNB" (case-insensitive).

    Returns
    -------
    Callable[[int], Trace]
        The search function; call it with the board size.
    """
    try:
        return STRATEGIES[name.strip().upper()]
    except KeyError as exc:
        allowed = ", ".join(STRATEGIES)
        raise ValueError(f"Unknown strategy '{name}'. Allowed: {allowed}") from exc


class NQueensSolver:
    """Produce replayable search traces for an N×N board."""

    def __init__(self, size: int):
        self.size = size

    def solve_depth_first(self) -> Trace:
        return dfs_nqueens_trace(self.size)

    def solve_breadth_first(self) -> Trace:
        return bfs_nqueens_trace(self.size)

    def solve_branch_and_bound(self) -> Trace:
        return bnb_nqueens_trace(self.size)

    def solve(self, strategy: str) -> Trace:
        """Dispatch to the strategy registered under ``strategy``."""
        return get_strategy(strategy)(self.size)
