"""Board representation and game rules."""

from .board import (
    BOARD_SIZE,
    INITIAL_STONES,
    PITS_PER_PLAYER,
    PLAYER_1_PITS,
    PLAYER_1_STORE,
    PLAYER_2_PITS,
    PLAYER_2_STORE,
    Board,
    create_initial_board,
    format_board,
    get_opponent,
    get_opponent_store,
    get_opposite_pit,
    get_player_pits,
    get_player_store,
    side_stones,
    validate_board,
    validate_player,
)
from .rules import (
    MoveResult,
    get_game_result,
    get_scores,
    get_valid_moves,
    get_winner,
    is_game_over,
    is_valid_move,
    make_move,
)
from .game_state import GameState, LastMove, get_game_status, play_move

__all__ = [
    "BOARD_SIZE",
    "INITIAL_STONES",
    "PITS_PER_PLAYER",
    "PLAYER_1_PITS",
    "PLAYER_1_STORE",
    "PLAYER_2_PITS",
    "PLAYER_2_STORE",
    "Board",
    "create_initial_board",
    "format_board",
    "get_opponent",
    "get_opponent_store",
    "get_opposite_pit",
    "get_player_pits",
    "get_player_store",
    "side_stones",
    "validate_board",
    "validate_player",
    "MoveResult",
    "get_game_result",
    "get_scores",
    "get_valid_moves",
    "get_winner",
    "is_game_over",
    "is_valid_move",
    "make_move",
    "GameState",
    "LastMove",
    "get_game_status",
    "play_move",
]
