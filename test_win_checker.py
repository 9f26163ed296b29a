"""
Tests for win and tie detection.
"""

import pytest

from logic.board import Board, Player
from logic.win_checker import WinChecker, WIN_COMBOS, Outcome, OutcomeKind


@pytest.fixture
def checker():
    return WinChecker()


def test_catalogue_order():
    assert WIN_COMBOS == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (6, 4, 2),
    )


@pytest.mark.parametrize("combo_index", range(len(WIN_COMBOS)))
def test_every_line_wins(checker, combo_index):
    board = Board.from_cells(machine=WIN_COMBOS[combo_index])

    assert checker.check_win(board, Player.MACHINE) == combo_index
    assert checker.check_win(board, Player.HUMAN) is None


def test_no_winner_yet(checker):
    board = Board.from_cells(human=[0, 4], machine=[1])

    assert checker.check_win(board, Player.HUMAN) is None
    assert checker.check_win(board, Player.MACHINE) is None
    assert checker.evaluate(board) == Outcome(OutcomeKind.NON_TERMINAL)


def test_first_line_in_catalogue_is_reported(checker):
    # Row 0 and column 0 at once
    board = Board.from_cells(human=[0, 1, 2, 3, 6])
    assert checker.check_win(board, Player.HUMAN) == 0

    # Both diagonals at once
    board = Board.from_cells(machine=[0, 2, 4, 6, 8])
    assert checker.check_win(board, Player.MACHINE) == 6

    # Bottom row and right column at once
    board = Board.from_cells(machine=[2, 5, 6, 7, 8])
    assert checker.check_win(board, Player.MACHINE) == 2


def test_full_board_tie(checker):
    # X O X
    # X O O
    # O X X
    board = Board.from_cells(human=[1, 4, 5, 6], machine=[0, 2, 3, 7, 8])

    assert board.is_full()
    assert checker.check_win(board, Player.HUMAN) is None
    assert checker.check_win(board, Player.MACHINE) is None
    assert checker.check_tie(board)
    assert checker.evaluate(board) == Outcome(OutcomeKind.TIE)


def test_full_board_with_winner_is_not_a_tie(checker):
    # X X X
    # O O X
    # X O O
    board = Board.from_cells(human=[3, 4, 7, 8], machine=[0, 1, 2, 5, 6])

    assert board.is_full()
    assert not checker.check_tie(board)

    outcome = checker.evaluate(board)
    assert outcome.kind == OutcomeKind.WIN
    assert outcome.player == Player.MACHINE
    assert outcome.combo_index == 0
    assert outcome.winning_cells == (0, 1, 2)
    assert outcome.is_terminal


def test_get_winning_line(checker):
    assert checker.get_winning_line(7) == (6, 4, 2)


def _reachable_boards():
    """Every position reachable by legal alternating play, human first."""
    checker = WinChecker()
    seen = set()
    stack = [(Board(), Player.HUMAN)]

    while stack:
        board, player = stack.pop()
        if board in seen:
            continue
        seen.add(board)

        if checker.evaluate(board).is_terminal:
            continue
        for index in board.empty_cells():
            stack.append((board.apply_move(index, player), player.opposite()))

    return seen


def _has_line(board, player):
    return any(all(board.cell(i) == player for i in combo) for combo in WIN_COMBOS)


def test_reachable_boards():
    """
    On every reachable board a player has a line exactly when check_win
    says so, and never both players at once.
    """
    checker = WinChecker()
    boards = _reachable_boards()

    # Known count of distinct legal TicTacToe positions
    assert len(boards) == 5478

    for board in boards:
        human = checker.check_win(board, Player.HUMAN)
        machine = checker.check_win(board, Player.MACHINE)

        assert (human is not None) == _has_line(board, Player.HUMAN)
        assert (machine is not None) == _has_line(board, Player.MACHINE)
        assert human is None or machine is None
