"""Tests for trace statistics, replay, reporting, configuration and CLI parsing."""

from pathlib import Path
import csv
import io
import json
import os
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_manager import ConfigManager
from nqueens_trace import Position, bnb_nqueens_trace, dfs_nqueens_trace
from nqueens_trace.analysis import settings
from nqueens_trace.analysis.cli import (
    apply_configuration,
    build_arg_parser,
    parse_size_filters,
    parse_strategy_filters,
    resolve_selection,
)
from nqueens_trace.analysis.experiments import run_trace_experiments, validate_trace
from nqueens_trace.analysis.replay import TracePlayer, format_step, render_board
from nqueens_trace.analysis.reporting import save_strategy_statistics_to_csv, save_summary_to_csv
from nqueens_trace.analysis.stats import (
    compute_detailed_statistics,
    count_actions,
    summarize_trace,
    trace_to_frame,
)
from nqueens_trace.board import empty_board, with_queen


class StatsTests(unittest.TestCase):

    def test_count_actions_has_every_tag(self):
        counts = count_actions(dfs_nqueens_trace(4))
        self.assertEqual(set(counts), {"place", "remove", "check", "backtrack", "bound", "prune"})
        self.assertEqual(sum(counts.values()), 58)

    def test_summary_of_solved_trace(self):
        summary = summarize_trace(dfs_nqueens_trace(4), "DFS", 4, 0.5)
        self.assertTrue(summary["solution_found"])
        self.assertEqual(summary["solution"], [1, 3, 0, 2])
        self.assertEqual(summary["backtrack"], 4)
        self.assertIsNone(summary["min_bound"])
        self.assertEqual(summary["time"], 0.5)

    def test_summary_of_failed_trace(self):
        summary = summarize_trace(bnb_nqueens_trace(3), "BNB", 3)
        self.assertFalse(summary["solution_found"])
        self.assertIsNone(summary["solution"])
        self.assertEqual(summary["total_steps"], 118)
        self.assertEqual(summary["max_bound"], 3)

    def test_trace_to_frame(self):
        frame = trace_to_frame(bnb_nqueens_trace(4))
        self.assertEqual(len(frame), 158)
        self.assertEqual(list(frame.columns), ["step", "action", "row", "col", "is_valid", "queens", "bound", "cost", "level"])
        self.assertEqual(frame.iloc[-1]["col"], -1)
        self.assertEqual(int((frame["action"] == "place").sum()), 52)

    def test_detailed_statistics(self):
        summary = compute_detailed_statistics([1.0, 2.0, 3.0, 4.0])
        self.assertEqual(summary["count"], 4)
        self.assertEqual(summary["mean"], 2.5)
        self.assertEqual(summary["range"], 3.0)
        self.assertEqual(compute_detailed_statistics([])["count"], 0)


class ReplayTests(unittest.TestCase):

    def test_render_board_marks_queens_and_cursor(self):
        board = with_queen(empty_board(3), 0, 1)
        text = render_board(board, Position(1, 2))
        self.assertEqual(text.splitlines(), [" .  Q  . ", " .  . [.]", " .  .  . "])

    def test_summary_position_highlights_nothing(self):
        self.assertNotIn("[", render_board(empty_board(2), Position(1, -1)))

    def test_format_step(self):
        trace = dfs_nqueens_trace(4)
        text = format_step(trace[-1], len(trace) - 1, len(trace))
        self.assertIn("Step 58/58", text)
        self.assertIn("SOLUSI DITEMUKAN", text)
        self.assertIn("Puzzle solved", text)

    def test_player_controls(self):
        trace = dfs_nqueens_trace(4)
        player = TracePlayer(trace)
        self.assertIs(player.current, trace[0])
        player.previous()
        self.assertEqual(player.index, 0)
        player.next()
        player.next()
        self.assertIs(player.current, trace[2])
        player.seek(1000)
        self.assertTrue(player.at_end)
        player.next()
        self.assertEqual(player.index, len(trace) - 1)
        player.reset()
        self.assertEqual(player.index, 0)

    def test_play_writes_every_remaining_step(self):
        trace = dfs_nqueens_trace(1)
        player = TracePlayer(trace)
        player.next()
        out = io.StringIO()
        shown = player.play(delay_ms=0, out=out)
        self.assertEqual(shown, len(trace) - 1)
        self.assertTrue(player.at_end)
        self.assertIn("PLACE", out.getvalue())

    def test_empty_trace(self):
        player = TracePlayer(())
        self.assertIsNone(player.current)
        self.assertEqual(player.play(delay_ms=0, out=io.StringIO()), 0)


class ExperimentAndReportingTests(unittest.TestCase):

    def setUp(self):
        self._date = settings.DATE_IN_FILENAMES
        settings.DATE_IN_FILENAMES = False

    def tearDown(self):
        settings.DATE_IN_FILENAMES = self._date

    def test_validate_trace_accepts_all_strategies(self):
        results = run_trace_experiments([4, 5], ["DFS", "BFS", "BNB"], validate=True)
        self.assertEqual(set(results), {"DFS", "BFS", "BNB"})
        self.assertEqual(results["BFS"][4]["total_steps"], 122)

    def test_validate_trace_rejects_broken_invariant(self):
        trace = dfs_nqueens_trace(4)
        with self.assertRaises(AssertionError):
            validate_trace(trace[:3] + trace[2:], 4, "DFS")

    def test_unknown_strategy_is_rejected(self):
        with self.assertRaises(ValueError):
            run_trace_experiments([4], ["DFS", "GA"])

    def test_csv_exports(self):
        results = run_trace_experiments([3, 4], ["DFS", "BNB"])
        with tempfile.TemporaryDirectory() as tmpdir:
            path = save_summary_to_csv(results, [3, 4], tmpdir)
            self.assertEqual(os.path.basename(path), "trace_summary.csv")
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
            self.assertEqual(len(rows), 4)
            dfs4 = next(r for r in rows if r["n"] == "4" and r["strategy"] == "DFS")
            self.assertEqual(dfs4["solution"], "1-3-0-2")
            self.assertEqual(dfs4["min_bound"], "")

            stats_path = save_strategy_statistics_to_csv(results, [3, 4], tmpdir)
            with open(stats_path, newline="") as f:
                stats_rows = list(csv.DictReader(f))
            self.assertEqual(len(stats_rows), 4)


class ConfigTests(unittest.TestCase):

    def setUp(self):
        self._saved = (
            list(settings.N_VALUES),
            list(settings.STRATEGIES),
            settings.OUT_DIR,
            settings.PLAYBACK_SPEED_MS,
            settings.PLAYBACK_BOARD_SIZE,
            settings.PLAYBACK_STRATEGY,
        )
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "config.json")
        with open(self.path, "w") as f:
            json.dump(
                {
                    "experiment_settings": {"N_values": ["4", 6], "strategies": ["bfs"], "output_dir": "out"},
                    "playback_settings": {"speed_ms": 5000, "board_size": 6, "strategy": "bnb"},
                },
                f,
            )

    def tearDown(self):
        (
            settings.N_VALUES,
            settings.STRATEGIES,
            settings.OUT_DIR,
            settings.PLAYBACK_SPEED_MS,
            settings.PLAYBACK_BOARD_SIZE,
            settings.PLAYBACK_STRATEGY,
        ) = self._saved
        self.tmpdir.cleanup()

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(os.path.join(self.tmpdir.name, "missing.json"))

    def test_apply_configuration(self):
        apply_configuration(self.path)
        self.assertEqual(settings.N_VALUES, [4, 6])
        self.assertEqual(settings.STRATEGIES, ["BFS"])
        self.assertEqual(settings.OUT_DIR, "out")
        self.assertEqual(settings.PLAYBACK_SPEED_MS, settings.MAX_SPEED_MS)
        self.assertEqual(settings.PLAYBACK_BOARD_SIZE, 6)
        self.assertEqual(settings.PLAYBACK_STRATEGY, "BNB")

    def test_update_setting_persists(self):
        mgr = ConfigManager(self.path)
        mgr.update_setting("playback_settings", "speed_ms", 300)
        self.assertEqual(ConfigManager(self.path).get_playback_settings()["speed_ms"], 300)

    def test_resolve_selection_defaults(self):
        apply_configuration(self.path)
        parser = build_arg_parser()
        self.assertEqual(resolve_selection(parser.parse_args([])), (["BNB"], [6]))
        self.assertEqual(resolve_selection(parser.parse_args(["--experiments"])), (["BFS"], [4, 6]))
        self.assertEqual(
            resolve_selection(parser.parse_args(["-s", "dfs,bfs", "-n", "5", "-n", "4,5"])),
            (["DFS", "BFS"], [5, 4]),
        )


class ArgumentParsingTests(unittest.TestCase):

    def test_strategy_filters(self):
        self.assertIsNone(parse_strategy_filters(None))
        self.assertEqual(parse_strategy_filters(["dfs,BNB", "dfs"]), ["DFS", "BNB"])
        with self.assertRaises(ValueError):
            parse_strategy_filters(["DFS,SA"])

    def test_size_filters(self):
        self.assertIsNone(parse_size_filters([]))
        self.assertEqual(parse_size_filters(["4,8", " 6 "]), [4, 8, 6])
        with self.assertRaises(ValueError):
            parse_size_filters(["four"])


if __name__ == "__main__":
    unittest.main()
