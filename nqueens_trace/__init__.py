"""N-Queens search engines that record a replayable step trace."""

from .board import Position, empty_board, queens_from_board
from .branch_and_bound import bnb_nqueens_trace
from .breadth_first import bfs_nqueens_trace
from .depth_first import dfs_nqueens_trace
from .solver import NQueensSolver, get_strategy, strategy_names
from .trace import Action, Step, Trace, is_success_step
from .utils import conflicts, is_safe, is_valid_solution, lower_bound

__all__ = [
    "NQueensSolver",
    "get_strategy",
    "strategy_names",
    "dfs_nqueens_trace",
    "bfs_nqueens_trace",
    "bnb_nqueens_trace",
    "Action",
    "Step",
    "Trace",
    "is_success_step",
    "Position",
    "empty_board",
    "queens_from_board",
    "is_safe",
    "conflicts",
    "lower_bound",
    "is_valid_solution",
]
