"""Breadth-first level expansion with a full step trace.

Partial placements are kept in an explicit FIFO queue of ``_State`` records.
Each dequeued state tries every column of its next row; safe children are
appended to the back of the queue, so all placements with ``k`` queens are
expanded before any placement with ``k + 1`` queens. The first complete state
dequeued ends the search.

Memory grows with the number of safe partial placements per level, unlike
depth-first search which only keeps the current path.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque

from .board import Board, Position, Queens, empty_board, with_queen
from .messages import BFS_CHECK, BFS_PLACE, BFS_SOLVED, BFS_START, BFS_UNSAFE
from .trace import Action, Trace, TraceRecorder
from .utils import is_safe


@dataclass(frozen=True)
class _State:
    """Queue entry: a partial placement and the next row to fill."""

    board: Board
    row: int
    queens: Queens


def bfs_nqueens_trace(size: int) -> Trace:
    """Run breadth-first search and return the complete trace.

    Parameters
    ----------
    size : int
        Board dimension N. Values below 1 are not validated.

    Returns
    -------
    Trace
        Ordered steps: an opening ``check``, then for every dequeued state a
        ``check`` per column followed by ``place`` (enqueued) or an invalid
        ``check`` (discarded). A success step at ``col == -1`` carrying the
        ``SOLUSI DITEMUKAN`` marker closes the trace when a solution exists.

    Notes
    -----
    Children are generated in ascending column order and the queue is FIFO,
    so the first complete state reached is the same lexicographically first
    solution that depth-first search finds.
    """
    recorder = TraceRecorder()
    initial = _State(empty_board(size), 0, ())
    queue: Deque[_State] = deque([initial])

    recorder.record(
        initial.board,
        (),
        Position(0, 0),
        Action.CHECK,
        True,
        BFS_START.format(size=size),
    )

    while queue:
        state = queue.popleft()
        row = state.row

        if row >= size:
            recorder.record(
                state.board,
                state.queens,
                Position(row - 1, -1),
                Action.CHECK,
                True,
                BFS_SOLVED.format(size=size),
            )
            break

        for col in range(size):
            here = Position(row, col)
            recorder.record(
                state.board, state.queens, here, Action.CHECK, True, BFS_CHECK.format(row=row, col=col)
            )

            if is_safe(state.board, row, col):
                child = _State(with_queen(state.board, row, col), row + 1, state.queens + (here,))
                recorder.record(
                    child.board, child.queens, here, Action.PLACE, True, BFS_PLACE.format(row=row, col=col)
                )
                queue.append(child)
            else:
                recorder.record(
                    state.board, state.queens, here, Action.CHECK, False, BFS_UNSAFE.format(row=row, col=col)
                )

    return recorder.steps
