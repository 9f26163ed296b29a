"""
Logic module for TicTacToe.
Handles the board, game rules, and the minimax opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import GameError, InvalidMoveError, EmptyStateError
from .board import Board, Player, EMPTY
from .win_checker import WinChecker, WIN_COMBOS, Outcome, OutcomeKind
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, Move
from .ai_player import AIPlayer, ScoredMove
