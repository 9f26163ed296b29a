"""
Exceptions raised by the game logic.
"""


class GameError(Exception):
    """Base class for all game logic errors."""


class InvalidMoveError(GameError):
    """A move targets an out-of-range or already occupied cell."""


class EmptyStateError(GameError):
    """The search was asked for a move on a board that has none to give."""
