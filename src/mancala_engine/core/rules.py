"""
Kalah game rules implementation.

Implements standard Kalah rules:
- Counter-clockwise sowing
- Skip opponent's store on every lap
- Capture when landing in empty own pit with stones opposite
- Extra turn when landing in own store
- Game ends when one side is empty; the other side sweeps its own pits
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..errors import PreconditionViolation
from .board import (
    BOARD_SIZE,
    PLAYER_1_PITS,
    PLAYER_1_STORE,
    PLAYER_2_PITS,
    PLAYER_2_STORE,
    Board,
    get_opponent_store,
    get_opposite_pit,
    get_player_pits,
    get_player_store,
    validate_board,
    validate_player,
)


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single move.

    distribution_path lists every index that received a stone, in
    placement order. It exists for animation by callers.
    """

    new_board: Board
    captured_stones: int
    extra_turn: bool
    game_over: bool
    winner: Optional[int]  # None while playing or on a tie
    distribution_path: Tuple[int, ...]


def is_valid_move(board: Sequence[int], pit_index: int, player: int) -> bool:
    """
    Check whether player may sow from pit_index.

    A move is legal if the chosen pit:
    - Belongs to the player
    - Contains at least one stone
    """
    if pit_index not in get_player_pits(player):
        return False

    return board[pit_index] > 0


def get_valid_moves(board: Sequence[int], player: int) -> List[int]:
    """
    Generate all legal moves for a player.

    Returns:
        Legal pit indices in fixed pit order
    """
    return [pit for pit in get_player_pits(player) if board[pit] > 0]


def is_game_over(board: Sequence[int]) -> bool:
    """Game ends when either player's six pits are all empty."""
    p1_empty = all(board[pit] == 0 for pit in PLAYER_1_PITS)
    p2_empty = all(board[pit] == 0 for pit in PLAYER_2_PITS)

    return p1_empty or p2_empty


def get_scores(board: Sequence[int]) -> Tuple[int, int]:
    """Store totals as (player 1, player 2)."""
    return board[PLAYER_1_STORE], board[PLAYER_2_STORE]


def get_winner(board: Sequence[int]) -> Optional[int]:
    """
    Player holding strictly more stones in store.

    Returns:
        1 or 2, or None on equal stores
    """
    p1_score, p2_score = get_scores(board)
    if p1_score > p2_score:
        return 1
    elif p2_score > p1_score:
        return 2
    return None


def _sweep_remaining(board: Board) -> None:
    """Move the non-empty side's pit stones into that side's own store."""
    if all(board[pit] == 0 for pit in PLAYER_1_PITS):
        pits, store = PLAYER_2_PITS, PLAYER_2_STORE
    else:
        pits, store = PLAYER_1_PITS, PLAYER_1_STORE

    for pit in pits:
        board[store] += board[pit]
        board[pit] = 0


def make_move(board: Sequence[int], pit_index: int, player: int) -> MoveResult:
    """
    Apply a move and return the resulting board and move metadata.

    Implements full Kalah rules:
    1. Pick up all stones from chosen pit
    2. Sow counter-clockwise, one stone per pit
    3. Skip opponent's store (without using up a stone)
    4. If last stone lands in own store: extra turn
    5. If last stone lands in own empty pit with stones opposite: capture
    6. If either side is now empty: sweep the other side into its store

    Args:
        board: Current board (left untouched)
        pit_index: Pit index to move from
        player: Player making the move (1 or 2)

    Returns:
        MoveResult with a new board

    Raises:
        PreconditionViolation: pit_index fails is_valid_move
    """
    validate_player(player)
    validate_board(board)

    if pit_index not in get_player_pits(player):
        raise PreconditionViolation(pit_index, player, "pit not owned by player")
    if board[pit_index] == 0:
        raise PreconditionViolation(pit_index, player, "pit is empty")

    # Create mutable board copy
    new_board = list(board)

    # Pick up stones
    stones_in_hand = new_board[pit_index]
    new_board[pit_index] = 0

    opponent_store = get_opponent_store(player)
    own_store = get_player_store(player)
    current_pos = pit_index
    path = []

    # Sow stones
    while stones_in_hand > 0:
        current_pos = (current_pos + 1) % BOARD_SIZE

        # Skip opponent's store
        if current_pos == opponent_store:
            continue

        new_board[current_pos] += 1
        path.append(current_pos)
        stones_in_hand -= 1

    captured = 0
    extra_turn = current_pos == own_store

    if not extra_turn and current_pos in get_player_pits(player):
        opposite_pit = get_opposite_pit(current_pos)
        # Landing pit was empty before this stone
        if new_board[current_pos] == 1 and new_board[opposite_pit] > 0:
            captured = new_board[opposite_pit] + 1
            new_board[opposite_pit] = 0
            new_board[current_pos] = 0
            new_board[own_store] += captured

    game_over = is_game_over(new_board)
    winner = None

    if game_over:
        _sweep_remaining(new_board)
        winner = get_winner(new_board)

    return MoveResult(
        new_board=new_board,
        captured_stones=captured,
        extra_turn=extra_turn,
        game_over=game_over,
        winner=winner,
        distribution_path=tuple(path),
    )


def get_game_result(board: Sequence[int]) -> Optional[str]:
    """
    Get human-readable game result.

    Returns:
        Result string or None if the game is still running
    """
    if not is_game_over(board):
        return None

    p1_score, p2_score = get_scores(board)
    value = p1_score - p2_score

    if value > 0:
        return f"Player 1 wins by {value}"
    elif value < 0:
        return f"Player 2 wins by {-value}"
    else:
        return "Tie game"
