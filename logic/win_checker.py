"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .board import Board, Player


# All possible winning lines as cell indices.
# Order matters: the first line a player completes is the one reported.
WIN_COMBOS: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (6, 4, 2),
)

# Same lines as an (8, 3) index array for vectorised checks
_COMBO_INDEX = np.array(WIN_COMBOS, dtype=np.intp)
_COMBO_INDEX.setflags(write=False)


class OutcomeKind(Enum):
    WIN = "win"
    TIE = "tie"
    NON_TERMINAL = "non_terminal"


@dataclass(frozen=True)
class Outcome:
    """
    Result of looking at a position.

    player and combo_index are only set for a WIN.
    """
    kind: OutcomeKind
    player: Optional[Player] = None
    combo_index: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.NON_TERMINAL

    @property
    def winning_cells(self) -> Optional[Tuple[int, int, int]]:
        """The three cells to highlight, or None if nobody won."""
        if self.combo_index is None:
            return None
        return WIN_COMBOS[self.combo_index]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 symbols of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WIN_COMBOS

    def check_win(self, board: Board, player: Player) -> Optional[int]:
        """
        Check if a player has completed a line.

        Args:
            board: The board to check.
            player: The player to check for.

        Returns:
            Index into WIN_COMBOS of the first completed line, or None.
        """
        completed = (board.cells[_COMBO_INDEX] == player.code).all(axis=1)
        if not completed.any():
            return None
        return int(np.argmax(completed))

    def check_tie(self, board: Board) -> bool:
        """
        Check if the game is a tie.

        A tie occurs when all cells are filled AND nobody has a line.
        """
        if not board.is_full():
            return False
        return (
            self.check_win(board, Player.HUMAN) is None
            and self.check_win(board, Player.MACHINE) is None
        )

    def evaluate(self, board: Board) -> Outcome:
        """
        Classify a position as a win, a tie, or still in play.

        Args:
            board: The board to classify.

        Returns:
            The Outcome. The human is checked first; on a board reached by
            legal play at most one player can have a line.
        """
        for player in (Player.HUMAN, Player.MACHINE):
            combo = self.check_win(board, player)
            if combo is not None:
                return Outcome(OutcomeKind.WIN, player=player, combo_index=combo)

        if board.is_full():
            return Outcome(OutcomeKind.TIE)

        return Outcome(OutcomeKind.NON_TERMINAL)

    def get_winning_line(self, combo_index: int) -> Tuple[int, int, int]:
        """Get the cells of a winning line by its index."""
        return WIN_COMBOS[combo_index]
