"""CSV export utilities for experiment summaries.

Only aggregate counters are written; raw step sequences stay in memory.
Filenames carry the optional run tag and datestamp suffix configured in
``nqueens_trace.analysis.settings``.
"""
from __future__ import annotations

import csv
import os
from typing import List

from . import settings
from .stats import ExperimentResults, compute_detailed_statistics

SUMMARY_COLUMNS = [
    "n",
    "strategy",
    "solution_found",
    "solution",
    "total_steps",
    "place",
    "check",
    "backtrack",
    "bound",
    "prune",
    "remove",
    "invalid_steps",
    "min_bound",
    "max_bound",
    "time_seconds",
]


def _build_suffix() -> str:
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


def _format_optional(value) -> str:
    return "" if value is None else str(value)


def save_summary_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write one row per (N, strategy) and return the file path.

    Column names follow lowercase snake_case; ``solution`` is the list of
    columns by row joined with ``-`` (empty when no solution was found).
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"trace_summary{_build_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(SUMMARY_COLUMNS)
        for N in N_values:
            for strategy, per_n in results.items():
                entry = per_n.get(N)
                if entry is None:
                    continue
                solution = entry["solution"]
                writer.writerow([
                    N,
                    strategy,
                    entry["solution_found"],
                    "-".join(str(col) for col in solution) if solution else "",
                    entry["total_steps"],
                    entry["place"],
                    entry["check"],
                    entry["backtrack"],
                    entry["bound"],
                    entry["prune"],
                    entry["remove"],
                    entry["invalid_steps"],
                    _format_optional(entry["min_bound"]),
                    _format_optional(entry["max_bound"]),
                    f"{entry['time']:.6f}",
                ])

    print(f"Summary CSV saved: {filename}")
    return filename


def save_strategy_statistics_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write per-strategy statistics of trace length and time across sizes."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"strategy_statistics{_build_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "strategy",
            "metric",
            "count",
            "mean",
            "median",
            "std",
            "min",
            "max",
            "q25",
            "q75",
            "range",
        ])
        for strategy, per_n in results.items():
            entries = [per_n[N] for N in N_values if N in per_n]
            for metric, values in (
                ("total_steps", [float(e["total_steps"]) for e in entries]),
                ("time", [e["time"] for e in entries]),
            ):
                summary = compute_detailed_statistics(values, f"{strategy}_{metric}")
                writer.writerow([
                    strategy,
                    metric,
                    summary["count"],
                    _format_optional(summary["mean"]),
                    _format_optional(summary["median"]),
                    _format_optional(summary["std"]),
                    _format_optional(summary["min"]),
                    _format_optional(summary["max"]),
                    _format_optional(summary["q25"]),
                    _format_optional(summary["q75"]),
                    _format_optional(summary["range"]),
                ])

    print(f"Strategy statistics CSV saved: {filename}")
    return filename
