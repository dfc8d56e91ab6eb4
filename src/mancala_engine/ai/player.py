"""
Computer opponent.

Three difficulty levels, all built on the rules engine:
- easy: uniformly random valid move
- medium: one-ply heuristic (extra turn > capture > store gain) plus jitter
- hard: 4-ply alpha-beta minimax
"""

import logging
import random
from enum import Enum
from typing import Optional, Sequence, Union

from ..core import get_valid_moves, validate_board, validate_player
from ..errors import NoValidMovesError
from .evaluation import score_move
from .minimax import SEARCH_DEPTH, best_move

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        """Accept a member or its name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r} (expected one of: {choices})") from None


class ComputerPlayer:
    """
    Move selector for a fixed difficulty.

    Randomness comes only from the injected rng, so a seeded
    random.Random makes easy and medium play reproducible.
    """

    def __init__(
        self,
        difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
        rng: Optional[random.Random] = None,
        depth: int = SEARCH_DEPTH,
        workers: Optional[int] = None,
    ):
        """
        Initialize computer player.

        Args:
            difficulty: easy, medium or hard
            rng: Random source (default: fresh unseeded random.Random)
            depth: Minimax depth for hard difficulty
            workers: Worker processes for hard root search (default: in-process)
        """
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.depth = depth
        self.workers = workers

    def select_move(self, board: Sequence[int], player: int) -> int:
        """
        Pick a pit for player.

        Raises:
            NoValidMovesError: player has no playable pit
        """
        validate_player(player)
        validate_board(board)

        valid_moves = get_valid_moves(board, player)
        if not valid_moves:
            raise NoValidMovesError(player)

        if self.difficulty is Difficulty.EASY:
            move = self.rng.choice(valid_moves)
        elif self.difficulty is Difficulty.MEDIUM:
            move = self._select_medium(board, player, valid_moves)
        else:
            move = best_move(board, player, depth=self.depth, workers=self.workers)

        logger.debug(f"Player {player} ({self.difficulty.value}) plays pit {move}")
        return move

    def _select_medium(self, board: Sequence[int], player: int, valid_moves) -> int:
        chosen = valid_moves[0]
        best_score = float("-inf")

        for move in valid_moves:
            score = score_move(board, move, player, self.rng)
            if score > best_score:
                best_score = score
                chosen = move

        return chosen


def select_computer_move(
    board: Sequence[int],
    player: int,
    difficulty: Union[str, Difficulty],
    rng: Optional[random.Random] = None,
) -> int:
    """
    Select a move for the computer player.

    Args:
        board: Current board
        player: Player the computer controls (1 or 2)
        difficulty: easy, medium or hard
        rng: Random source for easy/medium (default: fresh random.Random)

    Returns:
        Pit index owned by player holding at least one stone

    Raises:
        NoValidMovesError: player has no playable pit
    """
    return ComputerPlayer(difficulty, rng=rng).select_move(board, player)
