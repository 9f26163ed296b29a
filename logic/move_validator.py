"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

import numpy as np

from .config import GameConfig

if TYPE_CHECKING:
    from .board import Board

NUM_CELLS = GameConfig.NUM_CELLS


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. The target must be a cell index (0-8)
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: "Board",
        index: int,
        is_game_over: bool = False
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the symbol on (0-8).
            is_game_over: Whether the game has already finished.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell index must be an integer, got {index!r}"
            )

        if not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{NUM_CELLS - 1}."
            )

        occupant = board.cell(index)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)
