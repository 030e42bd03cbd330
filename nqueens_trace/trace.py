"""Trace records emitted by the search strategies.

Every strategy appends ``Step`` records to a ``TraceRecorder`` created for the
duration of a single solve call. Steps are frozen once recorded; the ordered
tuple returned by ``TraceRecorder.steps`` is the entire observable result of
a search.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .board import Board, Position, Queens, board_to_lists
from .messages import SUCCESS_MARKERS


class Action(str, Enum):
    """What a step did. Values are the wire tags used by the replay front-end."""

    PLACE = "place"
    REMOVE = "remove"
    CHECK = "check"
    BACKTRACK = "backtrack"
    BOUND = "bound"
    PRUNE = "prune"


@dataclass(frozen=True)
class Step:
    """One immutable entry of a search trace.

    ``current_position.col == -1`` marks a terminal/summary step that refers
    to no specific cell. ``bound``, ``cost`` and ``level`` are only filled in
    by branch-and-bound.
    """

    board: Board
    queens: Queens
    current_position: Position
    action: Action
    is_valid: bool
    message: str
    bound: Optional[int] = None
    cost: Optional[int] = None
    level: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase mapping consumed by the replay front-end."""
        data: Dict[str, Any] = {
            "board": board_to_lists(self.board),
            "queens": [{"row": q.row, "col": q.col} for q in self.queens],
            "currentPosition": {
                "row": self.current_position.row,
                "col": self.current_position.col,
            },
            "action": self.action.value,
            "isValid": self.is_valid,
            "message": self.message,
        }
        if self.bound is not None:
            data["bound"] = self.bound
        if self.cost is not None:
            data["cost"] = self.cost
        if self.level is not None:
            data["level"] = self.level
        return data


Trace = Tuple[Step, ...]


def is_success_step(step: Step) -> bool:
    """Return True if the step announces a solved board."""
    return any(marker in step.message for marker in SUCCESS_MARKERS)


class TraceRecorder:
    """Append-only step sink owned by one solve call."""

    def __init__(self) -> None:
        self._steps: List[Step] = []

    def record(
        self,
        board: Board,
        queens: Queens,
        position: Position,
        action: Action,
        is_valid: bool,
        message: str,
        bound: Optional[int] = None,
        cost: Optional[int] = None,
        level: Optional[int] = None,
    ) -> Step:
        step = Step(board, queens, position, action, is_valid, message, bound, cost, level)
        self._steps.append(step)
        return step

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> Trace:
        return tuple(self._steps)
