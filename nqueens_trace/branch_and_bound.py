"""Best-first branch-and-bound search with a full step trace.

Implementation overview
-----------------------
- Search nodes: ``_Node`` holds a partial placement (one queen per level, any
    column, conflicts allowed), its ``cost`` (conflicting pairs, see
    ``utils.conflicts``) and its ``bound`` (see ``utils.lower_bound``).
- Frontier: a binary heap keyed by ``(bound, sequence)``. The sequence number
    increases with every push, so nodes with equal bounds come out in the order
    they were inserted.
- Pruning: a node is only expanded, and a child only enqueued, while its bound
    is strictly below ``min_cost`` (the cost of the best complete placement
    seen, initially infinite).
- Termination: the first complete node with zero cost is the solution and ends
    the search; complete nodes with conflicts are dropped.

The bound is a heuristic (current conflicts plus ``remaining - 1``); it is not
a proven lower bound, so the search makes no optimality claim beyond returning
a conflict-free placement.

Trace contract
--------------
Opening ``bound`` step for the root. For every expanded node and every column:
``check`` (parent metrics), ``bound`` (child metrics, ``is_valid`` telling
whether the child is kept, drawn on the parent board since nothing is placed
yet), then ``place`` (child board) or ``prune`` (parent board). Nodes pruned
on extraction produce a ``prune`` step. The success step carries the
``SOLUSI OPTIMAL DITEMUKAN`` marker.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from itertools import count
from typing import List, Tuple

from .board import Board, Position, Queens, empty_board, with_queen
from .messages import (
    BNB_BOUND,
    BNB_BOUND_DROP,
    BNB_BOUND_KEEP,
    BNB_CHECK,
    BNB_PLACE,
    BNB_PRUNE_CHILD,
    BNB_PRUNE_NODE,
    BNB_SOLVED,
    BNB_START,
    format_cost,
)
from .trace import Action, Trace, TraceRecorder
from .utils import conflicts, lower_bound


@dataclass(frozen=True)
class _Node:
    board: Board
    queens: Queens
    level: int
    cost: int
    bound: int


def bnb_nqueens_trace(size: int) -> Trace:
    """Run best-first branch-and-bound and return the complete trace.

    Parameters
    ----------
    size : int
        Board dimension N. Values below 1 are not validated.

    Returns
    -------
    Trace
        Ordered steps with ``bound``, ``cost`` and ``level`` filled in. When a
        solution exists the last step is the success step and its ``cost`` is
        always 0.

    Complexity
    ----------
    Children are generated for every column, attacked or not, so the frontier
    grows by up to N nodes per expansion. N=8 records roughly 300k steps.
    """
    recorder = TraceRecorder()
    min_cost = math.inf
    sequence = count()

    root_queens: Queens = ()
    root = _Node(empty_board(size), root_queens, 0, 0, lower_bound(root_queens, 0, size))
    frontier: List[Tuple[int, int, _Node]] = [(root.bound, next(sequence), root)]

    recorder.record(
        root.board,
        root.queens,
        Position(0, 0),
        Action.BOUND,
        True,
        BNB_START.format(size=size),
        bound=root.bound,
        cost=root.cost,
        level=root.level,
    )

    while frontier:
        _, _, node = heapq.heappop(frontier)

        if node.bound >= min_cost:
            recorder.record(
                node.board,
                node.queens,
                Position(node.level, 0),
                Action.PRUNE,
                False,
                BNB_PRUNE_NODE.format(bound=node.bound, min_cost=format_cost(min_cost)),
                bound=node.bound,
                cost=node.cost,
                level=node.level,
            )
            continue

        if node.level >= size:
            if node.cost == 0:
                min_cost = node.cost
                recorder.record(
                    node.board,
                    node.queens,
                    Position(node.level - 1, -1),
                    Action.CHECK,
                    True,
                    BNB_SOLVED.format(cost=node.cost, bound=node.bound),
                    bound=node.bound,
                    cost=node.cost,
                    level=node.level,
                )
                break
            continue

        row = node.level
        for col in range(size):
            here = Position(row, col)
            recorder.record(
                node.board,
                node.queens,
                here,
                Action.CHECK,
                True,
                BNB_CHECK.format(row=row, col=col),
                bound=node.bound,
                cost=node.cost,
                level=node.level,
            )

            child_queens = node.queens + (here,)
            child_cost = conflicts(child_queens)
            child_bound = lower_bound(child_queens, row + 1, size)
            keep = child_bound < min_cost

            recorder.record(
                node.board,
                node.queens,
                here,
                Action.BOUND,
                keep,
                BNB_BOUND.format(
                    cost=child_cost,
                    bound=child_bound,
                    verdict=BNB_BOUND_KEEP if keep else BNB_BOUND_DROP,
                ),
                bound=child_bound,
                cost=child_cost,
                level=row + 1,
            )

            if keep:
                child = _Node(with_queen(node.board, row, col), child_queens, row + 1, child_cost, child_bound)
                heapq.heappush(frontier, (child.bound, next(sequence), child))
                recorder.record(
                    child.board,
                    child.queens,
                    here,
                    Action.PLACE,
                    True,
                    BNB_PLACE.format(row=row, col=col),
                    bound=child.bound,
                    cost=child.cost,
                    level=child.level,
                )
            else:
                recorder.record(
                    node.board,
                    node.queens,
                    here,
                    Action.PRUNE,
                    False,
                    BNB_PRUNE_CHILD.format(row=row, col=col, bound=child_bound, min_cost=format_cost(min_cost)),
                    bound=child_bound,
                    cost=child_cost,
                    level=node.level,
                )

    return recorder.steps
