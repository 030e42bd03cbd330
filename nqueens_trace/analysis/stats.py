"""Typed result shapes and statistics helpers for trace analysis.

Everything here is derived by scanning a finished trace; the search engine
exposes no statistics of its own. Defines ``TypedDict`` structures for
experiment outputs and provides utilities to summarize traces and compute
aggregate statistics.
"""
from __future__ import annotations

import statistics
from typing import Dict, List, Optional, TypedDict

import pandas as pd

from nqueens_trace.trace import Action, Trace, is_success_step


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class TraceSummary(TypedDict):
    strategy: str
    size: int
    total_steps: int
    place: int
    remove: int
    check: int
    backtrack: int
    bound: int
    prune: int
    invalid_steps: int
    solution_found: bool
    solution: Optional[List[int]]
    min_bound: Optional[int]
    max_bound: Optional[int]
    time: float


# strategy label -> board size -> summary
ExperimentResults = Dict[str, Dict[int, TraceSummary]]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def count_actions(trace: Trace) -> Dict[str, int]:
    """Return ``{action tag: occurrences}`` with every tag present."""
    counts = {action.value: 0 for action in Action}
    for step in trace:
        counts[step.action.value] += 1
    return counts


def final_solution(trace: Trace) -> Optional[List[int]]:
    """Return the solved columns by row, or None when the search failed.

    Only the last step can announce success because every strategy stops as
    soon as it records one.
    """
    if not trace or not is_success_step(trace[-1]):
        return None
    queens = sorted(trace[-1].queens)
    return [queen.col for queen in queens]


def summarize_trace(trace: Trace, strategy: str, size: int, elapsed: float = 0.0) -> TraceSummary:
    """Condense a trace into the counters shown by the statistics panel.

    Parameters
    ----------
    trace : Trace
        Steps returned by one of the search strategies.
    strategy : str
        Registry label of the strategy that produced the trace.
    size : int
        Board dimension used for the run.
    elapsed : float, optional
        Wall-clock seconds spent producing the trace.
    """
    counts = count_actions(trace)
    bounds = [step.bound for step in trace if step.bound is not None]
    solution = final_solution(trace)
    return {
        "strategy": strategy,
        "size": size,
        "total_steps": len(trace),
        "place": counts["place"],
        "remove": counts["remove"],
        "check": counts["check"],
        "backtrack": counts["backtrack"],
        "bound": counts["bound"],
        "prune": counts["prune"],
        "invalid_steps": sum(1 for step in trace if not step.is_valid),
        "solution_found": solution is not None,
        "solution": solution,
        "min_bound": min(bounds) if bounds else None,
        "max_bound": max(bounds) if bounds else None,
        "time": elapsed,
    }


def trace_to_frame(trace: Trace) -> pd.DataFrame:
    """Tabulate a trace, one row per step, for plotting and ad-hoc analysis.

    Columns: ``step``, ``action``, ``row``, ``col``, ``is_valid``, ``queens``
    (queen count), ``bound``, ``cost``, ``level``. Metric columns hold
    ``NaN`` for strategies that do not fill them.
    """
    records = [
        {
            "step": index,
            "action": step.action.value,
            "row": step.current_position.row,
            "col": step.current_position.col,
            "is_valid": step.is_valid,
            "queens": len(step.queens),
            "bound": step.bound,
            "cost": step.cost,
            "level": step.level,
        }
        for index, step in enumerate(trace)
    ]
    columns = ["step", "action", "row", "col", "is_valid", "queens", "bound", "cost", "level"]
    return pd.DataFrame.from_records(records, columns=columns)


def compute_detailed_statistics(values: List[float], label: str = "") -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Parameters
    ----------
    values : List[float]
        Numeric values to summarize (e.g. trace lengths across sizes).
    label : str, optional
        Carried for debugging contexts; not used in calculations.

    Returns
    -------
    StatsSummary
        count, mean, median, std, min, max, q25, q75 and range. When
        ``values`` is empty, all numeric fields are ``None`` and ``count`` is 0
        to keep CSV generation consistent.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    min_val = min(values)
    max_val = max(values)

    return {
        "count": n,
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if n > 1 else 0,
        "min": min_val,
        "max": max_val,
        "q25": sorted_vals[n // 4] if n >= 4 else min_val,
        "q75": sorted_vals[3 * n // 4] if n >= 4 else max_val,
        "range": max_val - min_val,
    }
