"""Tests for board layout helpers."""

import pytest
from mancala_engine.core import (
    create_initial_board,
    format_board,
    get_opponent,
    get_opponent_store,
    get_opposite_pit,
    get_player_pits,
    get_player_store,
    side_stones,
    validate_board,
)


def test_create_initial_board():
    """Test starting board creation."""
    board = create_initial_board()

    assert len(board) == 14
    assert sum(board) == 48

    for pit in list(range(0, 6)) + list(range(7, 13)):
        assert board[pit] == 4

    # Stores should be empty
    assert board[6] == 0
    assert board[13] == 0


def test_initial_board_is_fresh_list():
    """Each call returns an independent board."""
    first = create_initial_board()
    first[0] = 99

    assert create_initial_board()[0] == 4


def test_player_pits():
    """Test getting player pit indices."""
    assert get_player_pits(1) == [0, 1, 2, 3, 4, 5]
    assert get_player_pits(2) == [7, 8, 9, 10, 11, 12]


def test_player_stores():
    """Test getting store indices."""
    assert get_player_store(1) == 6
    assert get_player_store(2) == 13
    assert get_opponent_store(1) == 13
    assert get_opponent_store(2) == 6


def test_opponent():
    assert get_opponent(1) == 2
    assert get_opponent(2) == 1


def test_opposite_pit():
    """Test opposite pit calculation."""
    assert get_opposite_pit(0) == 12
    assert get_opposite_pit(1) == 11
    assert get_opposite_pit(5) == 7
    assert get_opposite_pit(7) == 5
    assert get_opposite_pit(12) == 0


def test_opposite_of_store_rejected():
    with pytest.raises(ValueError):
        get_opposite_pit(6)
    with pytest.raises(ValueError):
        get_opposite_pit(13)


def test_invalid_player_rejected():
    """Players are numbered 1 and 2 only."""
    for bad in (0, 3, -1):
        with pytest.raises(ValueError):
            get_player_pits(bad)
        with pytest.raises(ValueError):
            get_player_store(bad)


def test_board_validation():
    """Test validation catches malformed boards."""
    with pytest.raises(ValueError):
        validate_board([4] * 13)

    board = create_initial_board()
    board[3] = -1
    with pytest.raises(ValueError):
        validate_board(board)


def test_side_stones():
    board = create_initial_board()
    board[0] = 10

    assert side_stones(board, 1) == 30
    assert side_stones(board, 2) == 24


def test_format_board():
    """Player 2's row is printed right-to-left above player 1's."""
    board = [1, 2, 3, 4, 5, 6, 20, 7, 8, 9, 10, 11, 12, 30]
    lines = format_board(board).splitlines()

    assert lines[0].split() == ["12", "11", "10", "9", "8", "7"]
    assert "[30]" in lines[1] and "[20]" in lines[1]
    assert lines[2].split() == ["1", "2", "3", "4", "5", "6"]
