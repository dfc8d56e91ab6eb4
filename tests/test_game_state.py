"""Tests for game state representation."""

import pytest
from mancala_engine.core import GameState, LastMove, create_initial_board, get_game_status, play_move
from mancala_engine.errors import PreconditionViolation


def test_new_game_state():
    """Test fresh game creation."""
    state = GameState.new()

    assert list(state.board) == create_initial_board()
    assert state.current_player == 1
    assert state.player1_type == "dog"
    assert state.player2_type == "cat"
    assert state.game_over is False
    assert state.winner is None
    assert state.last_move is None


def test_state_validation():
    """Test state validation catches errors."""
    # Wrong board size
    with pytest.raises(ValueError):
        GameState(board=tuple([0] * 5))

    # Invalid player
    with pytest.raises(ValueError):
        GameState(board=tuple(create_initial_board()), current_player=3)

    # Negative stones
    board = create_initial_board()
    board[1] = -1
    with pytest.raises(ValueError):
        GameState(board=tuple(board))

    # Unknown skin
    with pytest.raises(ValueError):
        GameState.new(player1_type="fox")


def test_turn_passes_after_normal_move():
    state = GameState.new()

    next_state, result = play_move(state, 0)

    assert result.extra_turn is False
    assert next_state.current_player == 2
    assert next_state.last_move == LastMove(pit_index=0, player=1)
    assert next_state.board == tuple(result.new_board)
    # Original state untouched
    assert state.board[0] == 4


def test_extra_turn_keeps_player():
    """Pit 2 with four stones ends in player 1's store."""
    state = GameState.new()

    next_state, result = play_move(state, 2)

    assert result.extra_turn is True
    assert next_state.current_player == 1


def test_play_invalid_move():
    state = GameState.new()

    with pytest.raises(PreconditionViolation):
        play_move(state, 7)  # Player 2's pit


def test_game_over_recorded():
    board = (0, 0, 0, 0, 0, 1, 23, 0, 0, 0, 0, 0, 1, 23)
    state = GameState(board=board)

    final, result = play_move(state, 5)

    assert final.game_over is True
    assert final.winner is None
    assert result.game_over is True

    with pytest.raises(PreconditionViolation):
        play_move(final, 0)


def test_game_status_messages():
    """Test status line formatting."""
    state = GameState.new()
    assert get_game_status(state) == "Dog's turn"

    state = GameState.new(player1_type="cat", player2_type="dog")
    assert get_game_status(state) == "Cat's turn"

    board = tuple([0] * 6 + [30] + [0] * 6 + [18])
    assert get_game_status(GameState(board=board, game_over=True, winner=1)) == "Dog wins!"
    assert get_game_status(GameState(board=board, game_over=True, winner=2)) == "Cat wins!"
    assert get_game_status(GameState(board=board, game_over=True, winner=None)) == "It's a tie!"


def test_state_str():
    text = str(GameState.new())

    assert "Player 1's turn" in text
    assert "[ 0]" in text


def test_list_board_stored_as_tuple():
    """A list board is frozen into a tuple."""
    board = create_initial_board()
    state = GameState(board=board)

    board[0] = 99

    assert isinstance(state.board, tuple)
    assert state.board[0] == 4
    hash(state)


def test_reset_keeps_skins():
    state = GameState.new(player1_type="cat", player2_type="dog")
    played, _ = play_move(state, 0)

    fresh = played.reset()

    assert list(fresh.board) == create_initial_board()
    assert fresh.current_player == 1
    assert fresh.last_move is None
    assert fresh.game_over is False
    assert fresh.winner is None
    assert fresh.player1_type == "cat"
    assert fresh.player2_type == "dog"


def test_reset_after_game_over():
    board = (0, 0, 0, 0, 0, 1, 23, 0, 0, 0, 0, 0, 1, 23)
    final, _ = play_move(GameState(board=board), 5)

    fresh = final.reset()

    assert fresh.game_over is False
    assert get_game_status(fresh) == "Dog's turn"


def test_switch_player_types():
    """Skins swap seats; board and turn are untouched."""
    state, _ = play_move(GameState.new(), 0)

    switched = state.switch_player_types()

    assert switched.player1_type == "cat"
    assert switched.player2_type == "dog"
    assert switched.board == state.board
    assert switched.current_player == state.current_player
    assert get_game_status(switched) == "Dog's turn"
    assert state.player1_type == "dog"
