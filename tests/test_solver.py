"""Tests for the solver facade, the strategy registry and the wire form."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_trace import Action, NQueensSolver, Step, get_strategy, strategy_names
from nqueens_trace.branch_and_bound import bnb_nqueens_trace
from nqueens_trace.depth_first import dfs_nqueens_trace


class SolverFacadeTests(unittest.TestCase):

    def test_methods_match_module_functions(self):
        solver = NQueensSolver(5)
        self.assertEqual(solver.solve_depth_first(), dfs_nqueens_trace(5))
        self.assertEqual(solver.solve_branch_and_bound(), bnb_nqueens_trace(5))

    def test_instance_can_be_reused(self):
        solver = NQueensSolver(4)
        first = solver.solve_breadth_first()
        solver.solve_depth_first()
        self.assertEqual(solver.solve_breadth_first(), first)

    def test_solve_by_label(self):
        solver = NQueensSolver(4)
        self.assertEqual(solver.solve("bnb"), solver.solve_branch_and_bound())

    def test_traces_are_immutable(self):
        trace = NQueensSolver(4).solve_depth_first()
        self.assertIsInstance(trace, tuple)
        with self.assertRaises(AttributeError):
            trace[0].message = "changed"  # type: ignore[misc]
        with self.assertRaises(TypeError):
            trace[0].board[0][0] = 1  # type: ignore[index]


class RegistryTests(unittest.TestCase):

    def test_names(self):
        self.assertEqual(strategy_names(), ["DFS", "BFS", "BNB"])

    def test_lookup_is_case_insensitive(self):
        self.assertIs(get_strategy(" dfs "), dfs_nqueens_trace)

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            get_strategy("astar")


class WireFormatTests(unittest.TestCase):

    def test_action_values(self):
        self.assertEqual(
            [a.value for a in Action],
            ["place", "remove", "check", "backtrack", "bound", "prune"],
        )

    def test_dfs_step_omits_metrics(self):
        data = dfs_nqueens_trace(4)[2].to_dict()
        self.assertEqual(
            set(data),
            {"board", "queens", "currentPosition", "action", "isValid", "message"},
        )
        self.assertEqual(data["action"], "place")
        self.assertEqual(data["queens"], [{"row": 0, "col": 0}])
        self.assertEqual(data["board"][0], [1, 0, 0, 0])
        self.assertEqual(data["currentPosition"], {"row": 0, "col": 0})

    def test_bnb_step_includes_metrics(self):
        data = bnb_nqueens_trace(4)[-1].to_dict()
        self.assertEqual((data["bound"], data["cost"], data["level"]), (0, 0, 4))
        self.assertEqual(data["currentPosition"]["col"], -1)

    def test_step_is_hashable_value(self):
        step = dfs_nqueens_trace(1)[-1]
        self.assertIsInstance(step, Step)
        self.assertEqual(hash(step), hash(dfs_nqueens_trace(1)[-1]))


if __name__ == "__main__":
    unittest.main()
