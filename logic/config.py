"""
Game configuration for TicTacToe.
All the settings for the board, the players, and the minimax search.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Subclass and override constants to change behaviour.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells numbered 0-8 in row-major order
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== PLAYER SETTINGS ====================
    HUMAN_SYMBOL = "O"
    MACHINE_SYMBOL = "X"

    # ==================== SEARCH SETTINGS ====================
    # Leaf scores, always from the machine's point of view.
    # The -10 / +20 pair is asymmetric on purpose (matches the reference game).
    HUMAN_WIN_SCORE = -10
    MACHINE_WIN_SCORE = 20
    TIE_SCORE = 0

    # Number of processes used to evaluate root moves (1 = serial search)
    SEARCH_WORKERS = 1

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SymmetricScoreConfig(GameConfig):
    """Same game, with a symmetric +10 / -10 leaf scoring."""

    MACHINE_WIN_SCORE = 10
