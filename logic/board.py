"""
Board model for TicTacToe.
Tracks which of the 9 cells are occupied, and by whom.
"""

from enum import Enum
from typing import Iterable, List, Optional
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig
from .errors import InvalidMoveError
from .move_validator import MoveValidator


# Value stored in the cell array for an empty cell
EMPTY = 0

NUM_CELLS = GameConfig.NUM_CELLS


class Player(Enum):
    """The two players in the game."""
    HUMAN = GameConfig.HUMAN_SYMBOL
    MACHINE = GameConfig.MACHINE_SYMBOL

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.MACHINE if self == Player.HUMAN else Player.HUMAN

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def code(self) -> int:
        """Integer stored in the board array for this player's cells."""
        return 1 if self == Player.HUMAN else 2

    @classmethod
    def from_code(cls, code: int) -> Optional["Player"]:
        if code == EMPTY:
            return None
        return cls.HUMAN if code == 1 else cls.MACHINE


_VALID_CODES = (EMPTY, Player.HUMAN.code, Player.MACHINE.code)

_validator = MoveValidator()


def _empty_cells_array() -> np.ndarray:
    return np.zeros(NUM_CELLS, dtype=np.int8)


@dataclass(eq=False)
class Board:
    """
    The 3x3 board as 9 cells in row-major order.

    Cell i sits at row i // 3, column i % 3. Each cell holds EMPTY or the
    code of the player occupying it.

    Boards are treated as values: apply_move() returns a new Board and
    never touches the one it was called on.
    """

    cells: np.ndarray = field(default_factory=_empty_cells_array)

    def __post_init__(self):
        raw = np.asarray(self.cells)
        if raw.shape != (NUM_CELLS,):
            raise ValueError(
                f"Board needs exactly {NUM_CELLS} cells, got shape {raw.shape}"
            )
        # Checked before the int8 cast, which would truncate or overflow
        if not np.isin(raw, _VALID_CODES).all():
            raise ValueError(f"Unknown cell values in {raw.tolist()}")

        # Always a private copy, so no two boards share cell storage
        self.cells = np.array(raw, dtype=np.int8)

    @classmethod
    def from_cells(
        cls,
        human: Iterable[int] = (),
        machine: Iterable[int] = ()
    ) -> "Board":
        """
        Build a board from the cells each player occupies.

        Args:
            human: Cell indices holding the human's symbol.
            machine: Cell indices holding the machine's symbol.

        Returns:
            The new Board.
        """
        board = cls()
        for index in human:
            board = board.apply_move(index, Player.HUMAN)
        for index in machine:
            board = board.apply_move(index, Player.MACHINE)
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __hash__(self):
        return hash(self.cells.tobytes())

    def cell(self, index: int) -> Optional[Player]:
        """Get the player occupying a cell, or None if it is empty."""
        return Player.from_code(int(self.cells[index]))

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return np.flatnonzero(self.cells == EMPTY).tolist()

    def is_full(self) -> bool:
        return not (self.cells == EMPTY).any()

    def count(self, player: Player) -> int:
        """How many cells the player occupies."""
        return int(np.count_nonzero(self.cells == player.code))

    def moves_played(self) -> int:
        return int(np.count_nonzero(self.cells))

    def apply_move(self, index: int, player: Player) -> "Board":
        """
        Place a player's symbol on a cell.

        Args:
            index: Cell index (0-8).
            player: Who is moving.

        Returns:
            A new Board with the move applied.

        Raises:
            InvalidMoveError: If the index is not a cell or the cell is taken.
        """
        result = _validator.validate_move(self, index)
        if not result.is_valid:
            raise InvalidMoveError(result.error_message)

        return self.with_move(index, player)

    def with_move(self, index: int, player: Player) -> "Board":
        """
        apply_move() without validation.

        Only for callers that already know the cell is empty, like the
        search walking empty_cells().
        """
        cells = self.cells.copy()
        cells[index] = player.code
        board = Board.__new__(Board)
        board.cells = cells
        return board

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self.cells)

    def render(self, config=GameConfig) -> str:
        """
        Text picture of the board, one row per line.

        Empty cells show their index so a player knows what to type.
        """
        symbols = []
        for index in range(NUM_CELLS):
            player = self.cell(index)
            symbols.append(str(index) if player is None else player.symbol)

        size = config.BOARD_SIZE
        rows = [
            " " + " | ".join(symbols[start:start + size])
            for start in range(0, NUM_CELLS, size)
        ]
        return ("\n" + "---+" * (size - 1) + "---\n").join(rows)

    def __str__(self):
        return self.render()
