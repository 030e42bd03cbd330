"""Command-line interface and high-level pipelines for N-Queens traces.

This module wires together configuration loading, trace generation, terminal
replay and the experiment/report/plot pipeline. It isolates I/O, argument
parsing and progress reporting from the search engine so that the rest of the
codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Tuple

from . import settings
from .experiments import run_trace_experiments, validate_trace
from .plots import plot_bound_progression, plot_board_snapshot, plot_experiment_summary
from .replay import TracePlayer
from .reporting import save_strategy_statistics_to_csv, save_summary_to_csv
from .stats import summarize_trace
from config_manager import ConfigManager
from nqueens_trace.solver import NQueensSolver, get_strategy, strategy_names


# ------------- Utils --------------------------------------------------------

def parse_strategy_filters(strategy_args: Optional[List[str]]) -> Optional[List[str]]:
    """Normalize strategy CLI inputs into a list of registry labels.

    Accepts repeated flags (e.g., ``-s DFS -s BNB``) and comma-separated lists
    (e.g., ``-s DFS,BFS``). Returns None when no filter is provided so that
    callers can fall back to the configured default set.
    """
    if not strategy_args:
        return None
    valid = set(strategy_names())
    selected: List[str] = []
    for entry in strategy_args:
        for token in entry.split(","):
            token = token.strip().upper()
            if token:
                if token not in valid:
                    raise ValueError(f"Unknown strategy '{token}'. Allowed: " + ", ".join(strategy_names()))
                selected.append(token)
    unique = list(dict.fromkeys(selected))  # preserve order, remove dups
    return unique or None


def parse_size_filters(size_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize board size CLI inputs (repeated or comma-separated) into ints."""
    if not size_args:
        return None
    sizes: List[int] = []
    for entry in size_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                sizes.append(int(token))
            except ValueError as exc:
                raise ValueError(f"Board size must be an integer, got '{token}'") from exc
    unique = list(dict.fromkeys(sizes))
    return unique or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into ``settings`` in-place."""
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        settings.STRATEGIES = parse_strategy_filters(config_mgr.get_strategies()) or settings.STRATEGIES
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)

    playback_settings = config_mgr.get_playback_settings()
    if playback_settings:
        if "speed_ms" in playback_settings:
            settings.set_playback_speed(playback_settings["speed_ms"])
        settings.PLAYBACK_BOARD_SIZE = int(playback_settings.get("board_size", settings.PLAYBACK_BOARD_SIZE))
        settings.PLAYBACK_STRATEGY = str(playback_settings.get("strategy", settings.PLAYBACK_STRATEGY)).upper()

    return config_mgr


# ------------- Pipelines ----------------------------------------------------

def main_solve(
    strategies: List[str],
    sizes: List[int],
    replay: bool = False,
    speed_ms: Optional[int] = None,
    validate: bool = False,
) -> None:
    """Solve each (strategy, size) pair, optionally replay it, print a summary."""
    for N in sizes:
        solver = NQueensSolver(N)
        for label in strategies:
            start = perf_counter()
            trace = solver.solve(label)
            elapsed = perf_counter() - start
            if validate:
                validate_trace(trace, N, label)
            if replay:
                TracePlayer(trace).play(speed_ms)
            summary = summarize_trace(trace, label, N, elapsed)
            _print_summary(summary)


def _print_summary(summary) -> None:
    label = summary["strategy"]
    N = summary["size"]
    print(f"=== {label} N={N} ===")
    print(f"  Total steps:      {summary['total_steps']}")
    print(f"  Placements:       {summary['place']}")
    print(f"  Backtracks:       {summary['backtrack']}")
    if summary["bound"] or summary["prune"]:
        print(f"  Bound steps:      {summary['bound']}")
        print(f"  Pruned:           {summary['prune']}")
    if summary["solution_found"]:
        print(f"  Solution (cols):  {summary['solution']}")
    else:
        print("  No solution found.")
    print(f"  Time:             {summary['time']:.4f}s")


def main_experiments(
    strategies: List[str],
    sizes: List[int],
    out_dir: str,
    plot: bool = False,
    validate: bool = False,
) -> None:
    """Run the experiment suite, export CSV summaries and optional charts."""
    results = run_trace_experiments(sizes, strategies, progress_label="Trace experiments", validate=validate)
    save_summary_to_csv(results, sizes, out_dir)
    save_strategy_statistics_to_csv(results, sizes, out_dir)
    if plot:
        plot_experiment_summary(results, sizes, out_dir)
        if "BNB" in strategies and sizes:
            N = sizes[0]
            bnb_trace = get_strategy("BNB")(N)
            plot_bound_progression(bnb_trace, N, out_dir)
            plot_board_snapshot(bnb_trace[-1], len(bnb_trace) - 1, out_dir)


def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of every strategy.

    Verifies that:
    - Each strategy solves N=4 with columns [1, 3, 0, 2] and N=6 with a valid
      placement, and that its trace passes ``validate_trace``.
    - No strategy reports a solution for N=3.
    - The experiment pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests across all strategies...")

    for label in strategy_names():
        search = get_strategy(label)
        for N in (4, 6):
            trace = search(N)
            validate_trace(trace, N, label)
            summary = summarize_trace(trace, label, N)
            if not summary["solution_found"]:
                raise AssertionError(f"{label} failed to find a solution for N={N}.")
            if N == 4 and summary["solution"] != [1, 3, 0, 2]:
                raise AssertionError(f"{label} returned an unexpected N=4 solution: {summary['solution']}.")
            print(f"  [{label}] N={N}: solution {summary['solution']}, steps={summary['total_steps']}")
        if summarize_trace(search(3), label, 3)["solution_found"]:
            raise AssertionError(f"{label} reported a solution for N=3.")

    results = run_trace_experiments([4, 5], strategy_names(), progress_label="Quick regression experiments")
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_summary_to_csv(results, [4, 5], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Summary CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Generate and replay N-Queens search traces.")
    parser.add_argument(
        "--strategy",
        "-s",
        action="append",
        help="Strategies to run: DFS, BFS, BNB (comma-separated or multiple flags). Default: from config.",
    )
    parser.add_argument(
        "--size",
        "-n",
        action="append",
        help="Board sizes (comma-separated or multiple flags). Default: playback size, or N_values with --experiments.",
    )
    parser.add_argument("--replay", action="store_true", help="Print every step of each trace with the board.")
    parser.add_argument("--speed", type=int, default=None, help="Replay delay in milliseconds (100-2000; 0 disables waiting).")
    parser.add_argument("--experiments", action="store_true", help="Run every strategy over the configured sizes and export CSV summaries.")
    parser.add_argument("--plot", action="store_true", help="With --experiments, also save charts.")
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Check trace invariants and solutions (extra assertions).")
    return parser


def resolve_selection(args) -> Tuple[List[str], List[int]]:
    """Combine CLI filters with configured defaults."""
    strategies = parse_strategy_filters(args.strategy)
    sizes = parse_size_filters(args.size)
    if strategies is None:
        strategies = list(settings.STRATEGIES) if args.experiments else [settings.PLAYBACK_STRATEGY]
    if sizes is None:
        sizes = list(settings.N_VALUES) if args.experiments else [settings.PLAYBACK_BOARD_SIZE]
    return strategies, sizes


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        apply_configuration(args.config)
        strategies, sizes = resolve_selection(args)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    speed = args.speed
    if speed is not None and speed > 0:
        speed = settings.set_playback_speed(speed)

    print(f"Selected strategies: {strategies}, sizes: {sizes}")

    try:
        if args.experiments:
            main_experiments(strategies, sizes, settings.OUT_DIR, plot=args.plot, validate=args.validate)
        else:
            main_solve(strategies, sizes, replay=args.replay, speed_ms=speed, validate=args.validate)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except ValueError as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc
