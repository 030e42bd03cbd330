"""Experiment runners: every strategy, every board size, one trace each.

The searches are deterministic, so a single run per (strategy, N) pair is
enough. Outputs are structured dictionaries suitable for CSV export and
plotting. The optional validation hook re-checks every reported solution and
the queen-count invariants of ``place`` and ``backtrack`` steps.
"""
from __future__ import annotations

from time import perf_counter
from typing import List, Optional

from .stats import ExperimentResults, ProgressPrinter, summarize_trace
from nqueens_trace.board import Position, count_queens
from nqueens_trace.solver import get_strategy
from nqueens_trace.trace import Action, Trace
from nqueens_trace.utils import is_valid_solution


def validate_trace(trace: Trace, size: int, label: str) -> None:
    """Raise ``AssertionError`` if the trace breaks a structural invariant.

    Checks
    - each snapshot's queen list matches the bits set on its board;
    - a ``place`` step holds one queen more than the step before it, a
      ``backtrack`` step one queen fewer;
    - the final board of a successful trace is a valid solution with zero cost.
    """
    previous = None
    for index, step in enumerate(trace):
        if len(step.queens) != count_queens(step.board):
            raise AssertionError(f"{label} N={size}: step {index} queens do not match its board")
        if previous is not None:
            delta = count_queens(step.board) - count_queens(previous.board)
            if step.action is Action.PLACE and delta != 1:
                raise AssertionError(f"{label} N={size}: place step {index} changed queen count by {delta}")
            if step.action is Action.BACKTRACK and delta != -1:
                raise AssertionError(f"{label} N={size}: backtrack step {index} changed queen count by {delta}")
        previous = step

    summary = summarize_trace(trace, label, size)
    if summary["solution_found"]:
        queens = [Position(row, col) for row, col in enumerate(summary["solution"] or [])]
        if not is_valid_solution(queens, size):
            raise AssertionError(f"{label} N={size}: reported solution {summary['solution']} is invalid")
        last_cost = trace[-1].cost
        if last_cost is not None and last_cost != 0:
            raise AssertionError(f"{label} N={size}: success reported with cost {last_cost}")


def run_trace_experiments(
    N_values: List[int],
    strategies: List[str],
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> ExperimentResults:
    """Run every strategy on every board size and summarize the traces.

    Parameters
    ----------
    N_values : List[int]
        Board sizes, processed in the given order.
    strategies : List[str]
        Registry labels (``"DFS"``, ``"BFS"``, ``"BNB"``). Unknown labels
        raise ``ValueError`` before anything runs.
    progress_label : str | None
        When set, a ``ProgressPrinter`` reports one line per size.
    validate : bool
        When True, ``validate_trace`` is applied to every trace.

    Returns
    -------
    ExperimentResults
        ``{strategy: {N: TraceSummary}}``.
    """
    selected = [(label.strip().upper(), get_strategy(label)) for label in strategies]
    results: ExperimentResults = {label: {} for label, _ in selected}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")
        print(f"=== N = {N}, " + "+".join(label for label, _ in selected) + " ===")

        for label, search in selected:
            start = perf_counter()
            trace = search(N)
            elapsed = perf_counter() - start
            if validate:
                validate_trace(trace, N, label)
            summary = summarize_trace(trace, label, N, elapsed)
            results[label][N] = summary
            outcome = "solved" if summary["solution_found"] else "no solution"
            print(f"  [{label}] {outcome}: steps={summary['total_steps']}, time={elapsed:.4f}s")

    return results
