"""Depth-first backtracking search with a full step trace.

Entry point
-----------
- dfs_nqueens_trace(size): place one queen per row, trying columns left to
    right, descend recursively on every safe placement and back out of dead
    ends. The search stops at the first complete placement.

Trace contract
--------------
- An opening ``check`` step on the empty board announces the run.
- For every inspected cell: a valid ``check`` step, then either a ``place``
    step (safe) or an invalid ``check`` step (attacked).
- When a subtree holds no solution the placement is undone and an invalid
    ``backtrack`` step is emitted.
- On success a final ``check`` step at ``(size - 1, -1)`` carries the
    ``SOLUSI DITEMUKAN`` marker. An exhausted search ends without it.

All state (board, queens, recorder) is local to the call and threaded through
the recursion, so concurrent or repeated calls never interfere.
"""

from __future__ import annotations

from .board import Board, Position, Queens, empty_board, with_queen
from .messages import DFS_BACKTRACK, DFS_CHECK, DFS_PLACE, DFS_SOLVED, DFS_START, DFS_UNSAFE
from .trace import Action, Trace, TraceRecorder
from .utils import is_safe


def dfs_nqueens_trace(size: int) -> Trace:
    """Run depth-first backtracking and return the complete trace.

    Parameters
    ----------
    size : int
        Board dimension N. Values below 1 are not validated.

    Returns
    -------
    Trace
        Ordered, immutable steps. The last step carries the success marker
        iff a solution exists.

    Determinism and ordering
    ------------------------
    Rows are filled top to bottom and columns tried left to right, so the
    solution found is the lexicographically first one (N=4 gives columns
    ``[1, 3, 0, 2]``).
    """
    recorder = TraceRecorder()
    board = empty_board(size)

    recorder.record(
        board,
        (),
        Position(0, 0),
        Action.CHECK,
        True,
        DFS_START.format(size=size),
    )

    _descend(recorder, size, board, (), 0)
    return recorder.steps


def _descend(recorder: TraceRecorder, size: int, board: Board, queens: Queens, row: int) -> bool:
    """Try every column of ``row``; return True once a solution is recorded."""
    if row >= size:
        recorder.record(
            board,
            queens,
            Position(row - 1, -1),
            Action.CHECK,
            True,
            DFS_SOLVED.format(size=size),
        )
        return True

    for col in range(size):
        here = Position(row, col)
        recorder.record(board, queens, here, Action.CHECK, True, DFS_CHECK.format(row=row, col=col))

        if not is_safe(board, row, col):
            recorder.record(board, queens, here, Action.CHECK, False, DFS_UNSAFE.format(row=row, col=col))
            continue

        placed = with_queen(board, row, col)
        placed_queens = queens + (here,)
        recorder.record(placed, placed_queens, here, Action.PLACE, True, DFS_PLACE.format(row=row, col=col))

        if _descend(recorder, size, placed, placed_queens, row + 1):
            return True

        # undo by reusing the parent grid
        recorder.record(board, queens, here, Action.BACKTRACK, False, DFS_BACKTRACK.format(row=row, col=col))

    return False
