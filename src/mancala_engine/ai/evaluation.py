"""Static board evaluation and one-ply move scoring."""

import random
from typing import Sequence

from ..core import (
    get_opponent,
    get_opponent_store,
    get_player_store,
    make_move,
    side_stones,
)

# Medium difficulty weights
EXTRA_TURN_BONUS = 100
CAPTURE_WEIGHT = 10
STORE_GAIN_WEIGHT = 5
JITTER = 10.0

# Stones still in pits are worth half a stone in store
PIT_STONE_WEIGHT = 0.5


def evaluate_board(board: Sequence[int], player: int) -> float:
    """
    Evaluate a board from player's perspective.

    Value = (own store - opponent store)
            + 0.5 * (own pit stones - opponent pit stones)

    Args:
        board: Board to evaluate
        player: Player whose advantage is measured

    Returns:
        Higher is better for player
    """
    score = board[get_player_store(player)] - board[get_opponent_store(player)]
    pit_diff = side_stones(board, player) - side_stones(board, get_opponent(player))
    return score + pit_diff * PIT_STONE_WEIGHT


def score_move(
    board: Sequence[int], move: int, player: int, rng: random.Random
) -> float:
    """
    Heuristic score for a single move, one ply deep.

    Prioritizes extra turns, then captures, then store gain, with
    +/-10 points of random jitter so play is not fully predictable.
    """
    result = make_move(board, move, player)
    store = get_player_store(player)

    score = 0.0
    if result.extra_turn:
        score += EXTRA_TURN_BONUS
    score += result.captured_stones * CAPTURE_WEIGHT
    score += (result.new_board[store] - board[store]) * STORE_GAIN_WEIGHT
    score += rng.uniform(-JITTER, JITTER)

    return score
