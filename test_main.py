"""
Tests for the console game loop.
"""

import pytest

import main
from main import TicTacToeGame
from logic.board import Board, Player
from logic.game_state import GameState


def scripted(*answers):
    """Stand-in for input() that replays the given answers."""
    remaining = list(answers)

    def read(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def test_bad_input_is_reprompted_and_human_can_win(capsys):
    game = TicTacToeGame(input_fn=scripted("abc", "4", "2"))
    game.game_state = GameState(board=Board.from_cells(human=[0, 1], machine=[3, 4]))

    game.start()

    out = capsys.readouterr().out
    assert "'abc' is not a cell number." in out
    assert "Cell 4 is already occupied by X" in out
    assert "You win! (cells (0, 1, 2))" in out
    assert game.game_state.winner == Player.HUMAN


def test_machine_answers_and_wins(capsys):
    game = TicTacToeGame(input_fn=scripted("7"))
    game.game_state = GameState(board=Board.from_cells(human=[0, 8], machine=[4, 5]))

    game.start()

    out = capsys.readouterr().out
    assert "Computer plays cell 3" in out
    assert "You lose. (cells (3, 4, 5))" in out
    assert game.game_state.winner == Player.MACHINE


def test_self_play_from_position_ends_in_tie(capsys):
    game = TicTacToeGame()
    game.game_state = GameState(board=Board.from_cells(human=[4], machine=[0]))

    played = game.play_self()

    assert len(played) == 7
    assert game.game_state.is_draw
    assert "Tie game!" in capsys.readouterr().out


def test_reset_respects_who_goes_first():
    game = TicTacToeGame(machine_first=True)
    game.game_state.reset(first_player=Player.HUMAN)

    game.reset()

    assert game.game_state.current_player == Player.MACHINE
    assert game.game_state.board == Board()


def test_main_stops_cleanly_on_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)

    assert main.main([]) == 0

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        main.main(["--log-level", "LOUD"])


def test_self_play_on_a_finished_game_plays_nothing(capsys):
    game = TicTacToeGame()
    game.game_state = GameState(board=Board.from_cells(human=[0, 1, 2], machine=[3, 4]))

    assert game.play_self() == []
    assert "You win! (cells (0, 1, 2))" in capsys.readouterr().out
