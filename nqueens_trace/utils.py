"""Utility helpers for the N-Queens trace engine.

This module provides the low-level primitives the search strategies depend
upon: the safety check used by depth-first and breadth-first search, and the
conflict counter plus bound estimate used by branch-and-bound.

Representation
--------------
Boards are tuples of row tuples (see ``nqueens_trace.board``) and queen sets
are sequences of ``Position(row, col)``.
"""

from __future__ import annotations

from typing import Sequence

from .board import Board, Position


def is_safe(board: Board, row: int, col: int) -> bool:
    """Return True if a queen on ``(row, col)`` is attacked by no earlier row.

    Only rows ``0..row-1`` are inspected: same column, upper-left diagonal and
    upper-right diagonal. Pure, O(N).
    """
    size = len(board)

    for r in range(row):
        if board[r][col] == 1:
            return False

    r, c = row - 1, col - 1
    while r >= 0 and c >= 0:
        if board[r][c] == 1:
            return False
        r -= 1
        c -= 1

    r, c = row - 1, col + 1
    while r >= 0 and c < size:
        if board[r][c] == 1:
            return False
        r -= 1
        c += 1

    return True


def conflicts(queens: Sequence[Position]) -> int:
    """Count conflicting queen pairs in O(Q^2).

    A pair sharing a column adds one, and a pair sharing a diagonal adds one
    more, so the two tests are counted independently.
    """
    count = 0
    n = len(queens)
    for i in range(n):
        first = queens[i]
        for j in range(i + 1, n):
            second = queens[j]
            if first.col == second.col:
                count += 1
            if abs(first.row - second.row) == abs(first.col - second.col):
                count += 1
    return count


def lower_bound(queens: Sequence[Position], level: int, size: int) -> int:
    """Estimate the cost reachable from a partial assignment.

    ``conflicts(queens) + max(0, (size - level) - 1)``. The second term is a
    heuristic guess at future conflicts, not a proven admissible bound.
    """
    remaining = size - level
    return conflicts(queens) + max(0, remaining - 1)


def is_valid_solution(queens: Sequence[Position], size: int) -> bool:
    """Return True if ``queens`` is a complete, attack-free placement.

    Contract
    - Exactly ``size`` queens, one per row, all inside the board.
    - No two queens share a column or a diagonal.
    """
    if size <= 0 or len(queens) != size:
        return False
    rows = set()
    for queen in queens:
        if not (0 <= queen.row < size and 0 <= queen.col < size):
            return False
        rows.add(queen.row)
    if len(rows) != size:
        return False
    return conflicts(queens) == 0
