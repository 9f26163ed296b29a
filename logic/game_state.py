"""
Game state management for TicTacToe.
Tracks the board, current player, and move history of one game.
"""

import logging
from typing import Optional, List
from dataclasses import dataclass, field

from .board import Board, Player
from .errors import InvalidMoveError
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome, OutcomeKind

logger = logging.getLogger(__name__)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board (owned by this game only)
    - Current player
    - Move history
    - Game status (ongoing, won, tie)
    """

    board: Board = field(default_factory=Board)

    # Current player's turn
    current_player: Player = Player.HUMAN

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    winning_combo: Optional[int] = None
    is_draw: bool = False
    is_game_over: bool = False

    def __post_init__(self):
        self._validator = MoveValidator()
        self._win_checker = WinChecker()

        # A game can start from a position that is already decided
        if self.board.moves_played() > 0:
            self._update_result()

    def make_move(self, index: int) -> Outcome:
        """
        Make a move for the current player.

        Args:
            index: Cell index (0-8).

        Returns:
            The Outcome of the position after the move.

        Raises:
            InvalidMoveError: If the game is over or the cell can't be used.
        """
        result = self._validator.validate_move(
            self.board, index, is_game_over=self.is_game_over
        )
        if not result.is_valid:
            raise InvalidMoveError(result.error_message)

        player = self.current_player
        self.board = self.board.apply_move(index, player)
        self.moves.append(Move(player=player, index=int(index), move_number=len(self.moves)))
        logger.debug("%s played cell %d", player.name, index)

        outcome = self._update_result()
        self.current_player = player.opposite()
        return outcome

    def _update_result(self) -> Outcome:
        outcome = self._win_checker.evaluate(self.board)

        if outcome.kind == OutcomeKind.WIN:
            self.winner = outcome.player
            self.winning_combo = outcome.combo_index
            self.is_game_over = True
            logger.info("Game over: %s wins on line %s", outcome.player.name, outcome.winning_cells)
        elif outcome.kind == OutcomeKind.TIE:
            self.is_draw = True
            self.is_game_over = True
            logger.info("Game over: tie")

        return outcome

    @property
    def outcome(self) -> Outcome:
        """The result as seen by a display: who won on which line, or a tie."""
        if self.winner is not None:
            return Outcome(OutcomeKind.WIN, player=self.winner, combo_index=self.winning_combo)
        if self.is_draw:
            return Outcome(OutcomeKind.TIE)
        return Outcome(OutcomeKind.NON_TERMINAL)

    def get_empty_cells(self) -> List[int]:
        return self.board.empty_cells()

    def reset(self, first_player: Player = Player.HUMAN):
        """Start a new game on a fresh board."""
        self.board = Board()
        self.current_player = first_player
        self.moves = []
        self.winner = None
        self.winning_combo = None
        self.is_draw = False
        self.is_game_over = False

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            winning_combo=self.winning_combo,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
