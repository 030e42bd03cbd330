"""
Analysis and tooling package for N-Queens traces.

This package contains:
- settings: global knobs (sizes, strategies, playback speed, output naming)
- stats: typed summaries, trace counters and aggregation helpers
- replay: terminal rendering and step-by-step playback of traces
- experiments: runs every strategy over a set of board sizes
- reporting: CSV exports of experiment summaries
- plots: all visualization utilities
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    TraceSummary,
    ExperimentResults,
    count_actions,
    final_solution,
    summarize_trace,
    trace_to_frame,
    compute_detailed_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "TraceSummary",
    "ExperimentResults",
    # utils
    "count_actions",
    "final_solution",
    "summarize_trace",
    "trace_to_frame",
    "compute_detailed_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
