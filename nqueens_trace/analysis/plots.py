"""Visualization utilities for traces and experiment summaries.

Overview
--------
This module generates PNG charts from finished traces and from the
``ExperimentResults`` produced by ``run_trace_experiments``. It is designed to
degrade gracefully: if the plotting stack (matplotlib/numpy, seaborn) is
unavailable, public functions print a short message and return without
raising so upstream pipelines can continue.

Chart map
---------
- 01_trace_length_vs_N.png: total recorded steps per strategy (log scale).
- 02_action_breakdown.png: step counts per action tag, one bar group per
    strategy, for the largest N in the results.
- 03_time_vs_N.png: wall-clock time to produce each trace (log scale).
- bnb_bound_cost_N{N}.png: branch-and-bound bound and cost of every step
    that carries them, in trace order.
- board_step{index}_N{N}.png: heatmap of one board snapshot with the
    inspected cell outlined.
"""
from __future__ import annotations

import os
from typing import Any, List, Optional, cast

import pandas as pd

from . import settings
from .stats import ExperimentResults, trace_to_frame
from nqueens_trace.trace import Action, Step, Trace

try:
    import matplotlib.pyplot as plt  # type: ignore
    import numpy as np  # type: ignore
    import seaborn as sns  # type: ignore
    _PLOTS_AVAILABLE = True
except Exception:
    plt = cast(Any, None)  # type: ignore
    np = cast(Any, None)  # type: ignore
    sns = cast(Any, None)  # type: ignore
    _PLOTS_AVAILABLE = False

_MARKERS = {"DFS": "o", "BFS": "s", "BNB": "^"}
_LABELS = {"DFS": "Depth-first (backtracking)", "BFS": "Breadth-first", "BNB": "Branch and bound"}


def _date_suffix() -> str:
    """Return ``_<tag>_<run id>`` according to settings, or an empty string."""
    parts: List[str] = []
    run_tag = getattr(settings, "RUN_TAG", None)
    if run_tag:
        parts.append(str(run_tag))
    if getattr(settings, "DATE_IN_FILENAMES", False):
        run_id = getattr(settings, "RUN_ID", None)
        if run_id:
            parts.append(str(run_id))
    return ("_" + "_".join(parts)) if parts else ""


def plot_experiment_summary(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate the per-N comparison charts and return the written paths.

    Parameters
    ----------
    results : ExperimentResults
        ``{strategy: {N: TraceSummary}}`` as returned by the experiment runner.
    N_values : List[int]
        Ordered list of N values to display on the x-axis.
    out_dir : str
        Destination directory; will be created if missing.
    """
    if not _PLOTS_AVAILABLE:
        print("Plotting skipped: matplotlib/seaborn not installed.")
        return []
    os.makedirs(out_dir, exist_ok=True)
    suffix = _date_suffix()
    written: List[str] = []

    plt.figure(figsize=(12, 8))
    for strategy, per_n in results.items():
        xs = [N for N in N_values if N in per_n]
        ys = [max(per_n[N]["total_steps"], 1) for N in xs]
        plt.semilogy(xs, ys, marker=_MARKERS.get(strategy, "o"), linewidth=2, markersize=8,
                     label=_LABELS.get(strategy, strategy))
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Recorded steps (log scale)", fontsize=12)
    plt.title("Trace Length vs Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    fname = os.path.join(out_dir, f"01_trace_length_vs_N{suffix}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    written.append(fname)
    print(f"Saved trace-length chart: {fname}")

    largest = max(N_values) if N_values else None
    rows = []
    for strategy, per_n in results.items():
        entry = per_n.get(largest) if largest is not None else None
        if entry is None:
            continue
        for action in Action:
            rows.append({"strategy": strategy, "action": action.value, "count": entry[action.value]})
    if rows:
        frame = pd.DataFrame(rows)
        plt.figure(figsize=(12, 8))
        ax = sns.barplot(data=frame, x="action", y="count", hue="strategy")
        ax.set_yscale("symlog")
        ax.set_xlabel("Action", fontsize=12)
        ax.set_ylabel("Steps (symlog scale)", fontsize=12)
        ax.set_title(f"Action Breakdown (N={largest})", fontsize=14)
        fname = os.path.join(out_dir, f"02_action_breakdown{suffix}.png")
        plt.savefig(fname, bbox_inches="tight", dpi=150)
        plt.close()
        written.append(fname)
        print(f"Saved action-breakdown chart: {fname}")

    plt.figure(figsize=(12, 8))
    for strategy, per_n in results.items():
        xs = [N for N in N_values if N in per_n]
        ys = [max(per_n[N]["time"], 1e-6) for N in xs]
        plt.semilogy(xs, ys, marker=_MARKERS.get(strategy, "o"), linewidth=2, markersize=8,
                     label=_LABELS.get(strategy, strategy))
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Time to build trace [s] (log scale)", fontsize=12)
    plt.title("Trace Generation Time vs Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    fname = os.path.join(out_dir, f"03_time_vs_N{suffix}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    written.append(fname)
    print(f"Saved time chart: {fname}")

    return written


def plot_bound_progression(trace: Trace, size: int, out_dir: str) -> Optional[str]:
    """Plot bound and cost of every branch-and-bound step in trace order.

    Returns the written path, or None when the trace carries no metrics or
    the plotting stack is missing.
    """
    if not _PLOTS_AVAILABLE:
        print("Plotting skipped: matplotlib/seaborn not installed.")
        return None
    frame = trace_to_frame(trace).dropna(subset=["bound"])
    if frame.empty:
        print("No bound/cost data in trace; nothing to plot.")
        return None
    os.makedirs(out_dir, exist_ok=True)

    plt.figure(figsize=(12, 6))
    plt.plot(frame["step"], frame["bound"], linewidth=1, label="Bound")
    plt.plot(frame["step"], frame["cost"], linewidth=1, alpha=0.7, label="Cost")
    pruned = frame[frame["action"] == Action.PRUNE.value]
    if not pruned.empty:
        plt.scatter(pruned["step"], pruned["bound"], marker="x", color="red", label="Pruned")
    plt.xlabel("Step index", fontsize=12)
    plt.ylabel("Value", fontsize=12)
    plt.title(f"Branch and Bound: bound and cost per step (N={size})", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.5)
    fname = os.path.join(out_dir, f"bnb_bound_cost_N{size}{_date_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved bound/cost chart: {fname}")
    return fname


def plot_board_snapshot(step: Step, index: int, out_dir: str) -> Optional[str]:
    """Draw one board snapshot as a heatmap; queens are 1, empty cells 0."""
    if not _PLOTS_AVAILABLE:
        print("Plotting skipped: matplotlib/seaborn not installed.")
        return None
    os.makedirs(out_dir, exist_ok=True)
    grid = np.array(step.board, dtype=int)
    size = grid.shape[0]

    plt.figure(figsize=(6, 6))
    ax = sns.heatmap(grid, cmap="YlOrBr", cbar=False, linewidths=0.5, linecolor="gray",
                     square=True, annot=np.where(grid == 1, "Q", ""), fmt="")
    pos = step.current_position
    if pos.col >= 0:
        ax.add_patch(plt.Rectangle((pos.col, pos.row), 1, 1, fill=False, edgecolor="blue", linewidth=3))
    ax.set_title(f"Step {index}: {step.action.value} ({pos.row}, {pos.col})", fontsize=12)
    fname = os.path.join(out_dir, f"board_step{index}_N{size}{_date_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved board snapshot: {fname}")
    return fname
