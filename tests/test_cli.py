"""Tests for the command line interface."""

import random

import pytest
from mancala_engine.ai import ComputerPlayer
from mancala_engine.cli.main import main, parse_board, play_game


def test_parse_board():
    board = parse_board("4,4,4,4,4,4,0, 4,4,4,4,4,4,0")

    assert board == [4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0]


def test_parse_board_rejects_bad_input():
    with pytest.raises(ValueError):
        parse_board("1,2,3")
    with pytest.raises(ValueError):
        parse_board("a,b,c,d,e,f,g,h,i,j,k,l,m,n")
    with pytest.raises(ValueError):
        parse_board("4,4,4,4,4,4,0,4,4,4,4,4,-4,0")


def test_play_game_finishes():
    """Computer vs computer runs to a finished, conserved board."""
    first = ComputerPlayer("easy", rng=random.Random(3))
    second = ComputerPlayer("hard", depth=2)

    final = play_game(first, second)

    assert final.game_over is True
    assert sum(final.board) == 48
    assert all(final.board[pit] == 0 for pit in range(14) if pit not in (6, 13))


def test_no_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1


def test_hint_command(capsys):
    main(["hint", "--board", "1,0,3,0,0,0,0,0,0,0,0,10,0,0", "--player", "1", "--depth", "2"])

    out = capsys.readouterr().out
    assert "Suggested move: pit 0" in out


def test_hint_bad_board_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["hint", "--board", "1,2", "--player", "1"])

    assert excinfo.value.code == 1
    assert "Board size" in capsys.readouterr().out


def test_simulate_command(capsys):
    main(["simulate", "--games", "3", "--p1", "easy", "--p2", "medium", "--seed", "11"])

    out = capsys.readouterr().out
    assert "Results over 3 games" in out


def test_play_command_quit(monkeypatch, capsys):
    answers = iter(["9", "x", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    main(["play", "--difficulty", "easy", "--seed", "1"])

    out = capsys.readouterr().out
    assert "Game abandoned" in out


def test_play_command_bracketed_input(monkeypatch, capsys):
    """Input that looks like rich markup is reported, not interpreted."""
    answers = iter(["[/x]", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    main(["play", "--difficulty", "easy", "--seed", "1"])

    out = capsys.readouterr().out
    assert "[/x]" in out
    assert "Game abandoned" in out


@pytest.mark.parametrize("interrupt", [EOFError, KeyboardInterrupt])
def test_play_command_end_of_input(monkeypatch, capsys, interrupt):
    """Closed stdin or Ctrl-C abandons the game quietly."""
    def fake_input(prompt=""):
        raise interrupt

    monkeypatch.setattr("builtins.input", fake_input)

    main(["play", "--difficulty", "easy", "--seed", "1"])

    assert "Game abandoned" in capsys.readouterr().out
