"""
Board layout for Kalah(6,4).

The board is a flat sequence of 14 stone counts:

      P2 Pits (12-7)
   [12][11][10][9][8][7]
[13]                    [6]  <- Stores
   [0] [1] [2] [3][4][5]
      P1 Pits (0-5)

Players are numbered 1 and 2. Every helper here is a pure function of
its arguments; boards are never mutated.
"""

from typing import List, Sequence

Board = List[int]

BOARD_SIZE = 14
PITS_PER_PLAYER = 6
INITIAL_STONES = 4

PLAYER_1_PITS = (0, 1, 2, 3, 4, 5)
PLAYER_2_PITS = (7, 8, 9, 10, 11, 12)
PLAYER_1_STORE = 6
PLAYER_2_STORE = 13

PLAYERS = (1, 2)


def validate_player(player: int) -> None:
    """Raise ValueError unless player is 1 or 2."""
    if player not in PLAYERS:
        raise ValueError(f"Invalid player {player}, must be 1 or 2")


def validate_board(board: Sequence[int]) -> None:
    """
    Check board shape and contents.

    Args:
        board: Candidate board

    Raises:
        ValueError: Wrong size or a negative stone count
    """
    if len(board) != BOARD_SIZE:
        raise ValueError(
            f"Board size {len(board)} doesn't match expected {BOARD_SIZE}"
        )
    if any(stones < 0 for stones in board):
        raise ValueError("Negative stone count not allowed")


def create_initial_board() -> Board:
    """
    Create the starting board.

    Returns:
        14-slot board with 4 stones in every pit and empty stores
    """
    board = [INITIAL_STONES] * BOARD_SIZE
    board[PLAYER_1_STORE] = 0
    board[PLAYER_2_STORE] = 0
    return board


def get_player_pits(player: int) -> List[int]:
    """Get pit indices for a player, in sowing order."""
    validate_player(player)
    return list(PLAYER_1_PITS if player == 1 else PLAYER_2_PITS)


def get_player_store(player: int) -> int:
    """Get store index for a player."""
    validate_player(player)
    return PLAYER_1_STORE if player == 1 else PLAYER_2_STORE


def get_opponent_store(player: int) -> int:
    """Get the store index of the other player."""
    validate_player(player)
    return PLAYER_2_STORE if player == 1 else PLAYER_1_STORE


def get_opponent(player: int) -> int:
    """The other player number."""
    validate_player(player)
    return 2 if player == 1 else 1


def get_opposite_pit(pit_index: int) -> int:
    """
    Get the pit facing pit_index across the board.

    Formula: opposite_of(pit_i) = 12 - pit_i

    Args:
        pit_index: Pit index (0-5 or 7-12)

    Returns:
        Opposite pit index
    """
    if pit_index in (PLAYER_1_STORE, PLAYER_2_STORE):
        raise ValueError(f"Cannot get opposite of store {pit_index}")
    if not 0 <= pit_index < BOARD_SIZE:
        raise ValueError(f"Pit index {pit_index} is off the board")

    return 2 * PITS_PER_PLAYER - pit_index


def side_stones(board: Sequence[int], player: int) -> int:
    """Stones remaining in a player's pits (store excluded)."""
    return sum(board[pit] for pit in get_player_pits(player))


def format_board(board: Sequence[int]) -> str:
    """Human-readable board with player 2's row on top."""
    p2_pits = [board[pit] for pit in reversed(PLAYER_2_PITS)]
    p1_pits = [board[pit] for pit in PLAYER_1_PITS]

    pit_width = 3
    p2_str = " ".join(f"{s:>{pit_width}}" for s in p2_pits)
    p1_str = " ".join(f"{s:>{pit_width}}" for s in p1_pits)
    store_width = len(p2_str)

    return (
        f"      {p2_str}\n"
        f"[{board[PLAYER_2_STORE]:>2}] {' ' * store_width} [{board[PLAYER_1_STORE]:>2}]\n"
        f"      {p1_str}"
    )
