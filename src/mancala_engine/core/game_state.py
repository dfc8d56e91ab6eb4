"""
Game state wrapper used by front ends.

The rules engine only ever sees a board and a player number. GameState
bundles the extra bookkeeping a front end needs (whose turn it is,
player skins, the last move) and knows how to advance itself using
make_move.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..errors import PreconditionViolation
from .board import create_initial_board, format_board, get_opponent, validate_board, validate_player
from .rules import MoveResult, is_valid_move, make_move

PLAYER_TYPES = ("dog", "cat")


@dataclass(frozen=True)
class LastMove:
    """Pit most recently played and who played it."""

    pit_index: int
    player: int


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state representation.

    Board layout:
          P2 Pits (12-7)
       [12][11][10][9][8][7]
    [13]                    [6]  <- Stores
       [0] [1] [2] [3][4][5]
          P1 Pits (0-5)
    """

    board: Tuple[int, ...]
    current_player: int = 1
    player1_type: str = "dog"
    player2_type: str = "cat"
    game_over: bool = False
    winner: Optional[int] = None
    last_move: Optional[LastMove] = None

    def __post_init__(self) -> None:
        """Validate state invariants."""
        # Keep the board immutable even when built from a list
        object.__setattr__(self, "board", tuple(self.board))
        validate_board(self.board)
        validate_player(self.current_player)
        for skin in (self.player1_type, self.player2_type):
            if skin not in PLAYER_TYPES:
                raise ValueError(f"Unknown player type {skin!r}")

    @classmethod
    def new(cls, player1_type: str = "dog", player2_type: str = "cat") -> "GameState":
        """Fresh game with player 1 to move."""
        return cls(
            board=tuple(create_initial_board()),
            player1_type=player1_type,
            player2_type=player2_type,
        )

    def reset(self) -> "GameState":
        """Fresh board with player 1 to move, keeping both skins."""
        return replace(
            self,
            board=tuple(create_initial_board()),
            current_player=1,
            game_over=False,
            winner=None,
            last_move=None,
        )

    def switch_player_types(self) -> "GameState":
        """Swap the dog and cat skins between the two seats."""
        return replace(self, player1_type=self.player2_type, player2_type=self.player1_type)

    def player_type(self, player: int) -> str:
        validate_player(player)
        return self.player1_type if player == 1 else self.player2_type

    def __str__(self) -> str:
        if self.game_over:
            footer = get_game_status(self)
        else:
            footer = f"Player {self.current_player}'s turn"
        return f"\n{format_board(self.board)}\n\n{footer}\n"


def get_game_status(state: GameState) -> str:
    """One-line status message such as "Dog's turn" or "Cat wins!"."""
    if state.game_over:
        if state.winner is None:
            return "It's a tie!"
        return f"{state.player_type(state.winner).capitalize()} wins!"

    return f"{state.player_type(state.current_player).capitalize()}'s turn"


def play_move(state: GameState, pit_index: int) -> Tuple[GameState, MoveResult]:
    """
    Play pit_index for the player to move.

    The turn passes to the opponent unless the move earned an extra turn.

    Args:
        state: Current game state
        pit_index: Pit to sow from

    Returns:
        (next state, move result)

    Raises:
        PreconditionViolation: Game already over or move not valid
    """
    player = state.current_player
    if state.game_over:
        raise PreconditionViolation(pit_index, player, "game is over")
    if not is_valid_move(state.board, pit_index, player):
        raise PreconditionViolation(pit_index, player, "not a valid move")

    result = make_move(state.board, pit_index, player)

    next_player = player if result.extra_turn else get_opponent(player)
    next_state = replace(
        state,
        board=tuple(result.new_board),
        current_player=next_player,
        game_over=result.game_over,
        winner=result.winner,
        last_move=LastMove(pit_index=pit_index, player=player),
    )
    return next_state, result
