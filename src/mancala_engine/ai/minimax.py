"""
Depth-limited minimax search with alpha-beta pruning.

Plies follow the real turn order: a move that earns an extra turn hands
the next ply to the same player. Leaves are scored with evaluate_board
from the root player's perspective.

Root branches are independent, so they can be scored on a process pool.
Results are merged in pit order, which keeps the first-seen tie-break.
"""

import logging
from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple

from ..core import get_opponent, get_valid_moves, make_move
from ..errors import NoValidMovesError
from .evaluation import evaluate_board

logger = logging.getLogger(__name__)

SEARCH_DEPTH = 4  # Plies (2 full turns)


def minimax(
    board: Sequence[int],
    depth: int,
    alpha: float,
    beta: float,
    current_player: int,
    maximizing_player: int,
) -> float:
    """
    Minimax value of board with current_player to move.

    Args:
        board: Position to search
        depth: Remaining plies
        alpha: Best value the maximizer can already guarantee
        beta: Best value the minimizer can already guarantee
        current_player: Player to move at this node
        maximizing_player: Player the search is run for

    Returns:
        Backed-up evaluation from maximizing_player's perspective
    """
    if depth == 0:
        return evaluate_board(board, maximizing_player)

    valid_moves = get_valid_moves(board, current_player)

    # Game over - no valid moves
    if not valid_moves:
        return evaluate_board(board, maximizing_player)

    if current_player == maximizing_player:
        best_value = float("-inf")

        for move in valid_moves:
            value = _search_child(board, move, depth, alpha, beta, current_player, maximizing_player)
            best_value = max(best_value, value)
            alpha = max(alpha, value)

            if beta <= alpha:
                break

        return best_value

    best_value = float("inf")

    for move in valid_moves:
        value = _search_child(board, move, depth, alpha, beta, current_player, maximizing_player)
        best_value = min(best_value, value)
        beta = min(beta, value)

        if beta <= alpha:
            break

    return best_value


def _search_child(
    board: Sequence[int],
    move: int,
    depth: int,
    alpha: float,
    beta: float,
    current_player: int,
    maximizing_player: int,
) -> float:
    result = make_move(board, move, current_player)
    # Extra turn: same player moves again
    next_player = current_player if result.extra_turn else get_opponent(current_player)
    return minimax(result.new_board, depth - 1, alpha, beta, next_player, maximizing_player)


def _score_root_move(args: Tuple[Tuple[int, ...], int, int, int]) -> float:
    """Worker: full-window search below a single root move."""
    board, move, player, depth = args
    return _search_child(board, move, depth, float("-inf"), float("inf"), player, player)


def score_root_moves(
    board: Sequence[int],
    player: int,
    depth: int = SEARCH_DEPTH,
    workers: Optional[int] = None,
) -> List[Tuple[int, float]]:
    """
    Minimax value of every valid root move.

    Args:
        board: Current board
        player: Player to move (and maximize)
        depth: Search depth in plies, including the root move
        workers: Worker processes; None or 1 searches in-process

    Returns:
        [(move, value), ...] in pit order
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    moves = get_valid_moves(board, player)
    if not moves:
        raise NoValidMovesError(player)

    tasks = [(tuple(board), move, player, depth) for move in moves]

    if workers and workers > 1 and len(moves) > 1:
        logger.debug(f"Scoring {len(moves)} root moves on {workers} workers")
        # Pool.map preserves input order
        with Pool(processes=min(workers, len(moves))) as pool:
            values = pool.map(_score_root_move, tasks)
    else:
        values = [_score_root_move(task) for task in tasks]

    return list(zip(moves, values))


def best_move(
    board: Sequence[int],
    player: int,
    depth: int = SEARCH_DEPTH,
    workers: Optional[int] = None,
) -> int:
    """
    Root move with the highest minimax value; first seen wins ties.

    Raises:
        NoValidMovesError: player has no playable pit
    """
    scored = score_root_moves(board, player, depth=depth, workers=workers)

    chosen, chosen_value = scored[0]
    for move, value in scored[1:]:
        if value > chosen_value:
            chosen, chosen_value = move, value

    logger.debug(f"Minimax depth {depth} picked pit {chosen} (value {chosen_value})")
    return chosen
