"""Computer opponent: random, heuristic and minimax move selection."""

from .evaluation import evaluate_board, score_move
from .minimax import SEARCH_DEPTH, best_move, minimax, score_root_moves
from .player import ComputerPlayer, Difficulty, select_computer_move

__all__ = [
    "evaluate_board",
    "score_move",
    "SEARCH_DEPTH",
    "best_move",
    "minimax",
    "score_root_moves",
    "ComputerPlayer",
    "Difficulty",
    "select_computer_move",
]
