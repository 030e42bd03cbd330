"""Tests for board helpers, the safety check, conflicts and the bound."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_trace.board import (
    Position,
    count_queens,
    empty_board,
    queens_from_board,
    with_queen,
    without_queen,
)
from nqueens_trace.utils import conflicts, is_safe, is_valid_solution, lower_bound


def _board_from_columns(columns):
    board = empty_board(len(columns))
    for row, col in enumerate(columns):
        if col is not None:
            board = with_queen(board, row, col)
    return board


class BoardTests(unittest.TestCase):

    def test_empty_board_shape(self):
        board = empty_board(5)
        self.assertEqual(len(board), 5)
        self.assertTrue(all(len(row) == 5 for row in board))
        self.assertEqual(count_queens(board), 0)

    def test_with_queen_leaves_original_untouched(self):
        board = empty_board(4)
        placed = with_queen(board, 1, 2)
        self.assertEqual(board[1][2], 0)
        self.assertEqual(placed[1][2], 1)
        # untouched rows are shared, not copied
        self.assertIs(placed[0], board[0])

    def test_without_queen_clears_cell(self):
        board = with_queen(with_queen(empty_board(4), 0, 1), 1, 3)
        cleared = without_queen(board, 0, 1)
        self.assertEqual(queens_from_board(cleared), (Position(1, 3),))
        self.assertEqual(count_queens(board), 2)

    def test_queens_from_board_is_row_major(self):
        board = _board_from_columns([1, 3, 0, 2])
        self.assertEqual(
            queens_from_board(board),
            (Position(0, 1), Position(1, 3), Position(2, 0), Position(3, 2)),
        )


class SafetyTests(unittest.TestCase):

    def test_first_row_always_safe(self):
        board = empty_board(4)
        self.assertTrue(all(is_safe(board, 0, col) for col in range(4)))

    def test_column_attack(self):
        board = _board_from_columns([1, None, None, None])
        self.assertFalse(is_safe(board, 2, 1))

    def test_diagonal_attacks(self):
        board = _board_from_columns([1, None, None, None])
        self.assertFalse(is_safe(board, 1, 0))  # upper-right of (1, 0)
        self.assertFalse(is_safe(board, 1, 2))  # upper-left of (1, 2)
        self.assertFalse(is_safe(board, 2, 3))
        self.assertTrue(is_safe(board, 1, 3))

    def test_only_earlier_rows_are_inspected(self):
        board = _board_from_columns([None, None, 0, None])
        self.assertTrue(is_safe(board, 1, 0))


class ConflictTests(unittest.TestCase):

    def test_no_conflicts_for_solution(self):
        queens = [Position(r, c) for r, c in enumerate([1, 3, 0, 2])]
        self.assertEqual(conflicts(queens), 0)

    def test_column_and_diagonal_pairs(self):
        self.assertEqual(conflicts([Position(0, 0), Position(1, 0)]), 1)
        self.assertEqual(conflicts([Position(0, 0), Position(1, 1)]), 1)
        self.assertEqual(conflicts([Position(0, 0), Position(1, 1), Position(2, 2)]), 3)

    def test_empty_and_single(self):
        self.assertEqual(conflicts([]), 0)
        self.assertEqual(conflicts([Position(0, 3)]), 0)

    def test_lower_bound(self):
        self.assertEqual(lower_bound([], 0, 4), 3)
        self.assertEqual(lower_bound([Position(0, 0), Position(1, 1)], 2, 4), 1 + 1)
        self.assertEqual(lower_bound([Position(0, 0)], 1, 1), 0)
        # remaining - 1 never goes negative
        self.assertEqual(lower_bound([Position(0, 0)], 1, 2), 0)

    def test_is_valid_solution(self):
        good = [Position(r, c) for r, c in enumerate([1, 3, 0, 2])]
        self.assertTrue(is_valid_solution(good, 4))
        self.assertFalse(is_valid_solution(good[:3], 4))
        self.assertFalse(is_valid_solution([Position(r, c) for r, c in enumerate([0, 1, 2, 3])], 4))
        self.assertFalse(is_valid_solution([], 0))


if __name__ == "__main__":
    unittest.main()
