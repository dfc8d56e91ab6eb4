"""Mancala rules engine and computer opponent."""

from .errors import MancalaError, NoValidMovesError, PreconditionViolation
from .core import (
    GameState,
    MoveResult,
    create_initial_board,
    get_game_status,
    get_opponent_store,
    get_opposite_pit,
    get_player_pits,
    get_player_store,
    get_valid_moves,
    is_valid_move,
    make_move,
    play_move,
)
from .ai import ComputerPlayer, Difficulty, select_computer_move

__version__ = "0.1.0"

__all__ = [
    "MancalaError",
    "NoValidMovesError",
    "PreconditionViolation",
    "GameState",
    "MoveResult",
    "create_initial_board",
    "get_game_status",
    "get_opponent_store",
    "get_opposite_pit",
    "get_player_pits",
    "get_player_store",
    "get_valid_moves",
    "is_valid_move",
    "make_move",
    "play_move",
    "ComputerPlayer",
    "Difficulty",
    "select_computer_move",
]
