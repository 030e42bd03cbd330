"""Board primitives shared by every search strategy.

Representation
--------------
Boards are N×N grids of occupancy bits stored as a tuple of row tuples, where
``board[row][col] == 1`` means a queen sits on ``(row, col)``. Grids are never
mutated: ``with_queen`` and ``without_queen`` return a new grid that shares all
untouched rows with the original. A step snapshot is therefore the grid value
itself, and no later move can change it.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

Row = Tuple[int, ...]
Board = Tuple[Row, ...]


class Position(NamedTuple):
    """Zero-based board coordinate."""

    row: int
    col: int


Queens = Tuple[Position, ...]


def empty_board(size: int) -> Board:
    """Return an ``size`` × ``size`` grid with no queens."""
    empty_row: Row = (0,) * size
    return (empty_row,) * size


def _set_cell(board: Board, row: int, col: int, value: int) -> Board:
    current = board[row]
    new_row = current[:col] + (value,) + current[col + 1:]
    return board[:row] + (new_row,) + board[row + 1:]


def with_queen(board: Board, row: int, col: int) -> Board:
    """Return a copy of ``board`` with a queen on ``(row, col)``."""
    return _set_cell(board, row, col, 1)


def without_queen(board: Board, row: int, col: int) -> Board:
    """Return a copy of ``board`` with ``(row, col)`` cleared."""
    return _set_cell(board, row, col, 0)


def queens_from_board(board: Board) -> Queens:
    """Scan the grid row by row and return the occupied cells in order."""
    return tuple(
        Position(row, col)
        for row, cells in enumerate(board)
        for col, cell in enumerate(cells)
        if cell == 1
    )


def count_queens(board: Board) -> int:
    return sum(sum(cells) for cells in board)


def board_to_lists(board: Board) -> list:
    """Plain nested lists, as consumed by JSON encoders and plotting code."""
    return [list(cells) for cells in board]
