"""Terminal replay of search traces.

Text counterpart of the board, step-information and playback-control panels
of the front-end: a trace is produced in full first, then stepped through with
``TracePlayer``.
"""
from __future__ import annotations

import sys
import time
from typing import Optional, TextIO

from . import settings
from nqueens_trace.board import Board, Position
from nqueens_trace.trace import Step, Trace, is_success_step


def render_board(board: Board, current_position: Optional[Position] = None) -> str:
    """Render a grid as text: ``Q`` for a queen, ``.`` for an empty cell.

    The inspected cell, if any, is wrapped in brackets. A position with
    ``col == -1`` (summary step) highlights nothing.
    """
    lines = []
    for row, cells in enumerate(board):
        parts = []
        for col, cell in enumerate(cells):
            mark = "Q" if cell == 1 else "."
            if current_position is not None and current_position == (row, col):
                parts.append(f"[{mark}]")
            else:
                parts.append(f" {mark} ")
        lines.append("".join(parts))
    return "\n".join(lines)


def format_step(step: Step, index: int, total: int) -> str:
    """Describe one step the way the step-information panel does."""
    pos = step.current_position
    status = "OK" if step.is_valid else "X"
    header = f"Step {index + 1}/{total}  {step.action.value.upper()} [{status}]  position=({pos.row}, {pos.col})  queens={len(step.queens)}"
    if step.bound is not None:
        header += f"  level={step.level} cost={step.cost} bound={step.bound}"
    lines = [header, render_board(step.board, pos), step.message]
    if is_success_step(step):
        lines.append(f"Puzzle solved: all {len(step.board)} queens placed safely.")
    return "\n".join(lines)


class TracePlayer:
    """Cursor over a finished trace with the usual playback controls.

    Parameters
    ----------
    trace : Trace
        Steps to replay. An empty trace yields ``current is None``.
    """

    def __init__(self, trace: Trace):
        self.trace = trace
        self.index = 0

    @property
    def current(self) -> Optional[Step]:
        return self.trace[self.index] if self.trace else None

    @property
    def at_end(self) -> bool:
        return not self.trace or self.index >= len(self.trace) - 1

    def next(self) -> Optional[Step]:
        if not self.at_end:
            self.index += 1
        return self.current

    def previous(self) -> Optional[Step]:
        if self.index > 0:
            self.index -= 1
        return self.current

    def reset(self) -> None:
        self.index = 0

    def seek(self, index: int) -> Optional[Step]:
        """Jump to ``index``, clamped to the trace bounds."""
        if self.trace:
            self.index = max(0, min(index, len(self.trace) - 1))
        return self.current

    def play(self, delay_ms: Optional[int] = None, out: Optional[TextIO] = None) -> int:
        """Write the current and every following step to ``out``.

        Waits ``delay_ms`` between steps (``settings.PLAYBACK_SPEED_MS`` when
        omitted; 0 disables waiting). Returns the number of steps shown.
        """
        stream = out if out is not None else sys.stdout
        delay = settings.PLAYBACK_SPEED_MS if delay_ms is None else delay_ms
        if not self.trace:
            return 0
        total = len(self.trace)
        shown = 0
        while True:
            stream.write(format_step(self.trace[self.index], self.index, total) + "\n\n")
            shown += 1
            if self.at_end:
                break
            if delay > 0:
                time.sleep(delay / 1000.0)
            self.index += 1
        return shown
