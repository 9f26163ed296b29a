"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board, Player
from .config import GameConfig
from .errors import EmptyStateError
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredMove:
    """
    A search result: a score, and the cell that earns it.

    Leaf positions carry a score only.
    """
    score: int
    move: Optional[int] = None


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive, with no pruning and no caching, and scores
    are always from the machine's point of view: the machine maximizes,
    the human minimizes. The AI will win if possible, block the opponent
    if needed, and never lose.
    """

    def __init__(self, config=GameConfig, workers: Optional[int] = None):
        """
        Initialize the AI player.

        Args:
            config: Game configuration providing the leaf scores.
            workers: Processes used to evaluate root moves. 1 searches serially.
        """
        self.config = config
        self.workers = config.SEARCH_WORKERS if workers is None else workers
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        self.player = Player.MACHINE
        self.win_checker = WinChecker()

        # Keep track of how many positions the last search visited (for debugging)
        self.moves_evaluated = 0

    def best_move(self, board: Board) -> int:
        """
        Get the machine's best move for the current position.

        Args:
            board: Current board, with the machine to move.

        Returns:
            Cell index to play.

        Raises:
            EmptyStateError: If the board is full or the game is already won.
        """
        result = self.minimax(board, self.player)
        if result.move is None:
            raise EmptyStateError("Game is already won, there is no move to make")

        logger.debug(
            "AI evaluated %d positions. Best move: %d (score: %d)",
            self.moves_evaluated, result.move, result.score
        )
        return result.move

    def minimax(self, board: Board, player: Player) -> ScoredMove:
        """
        Evaluate a position with the given player to move.

        Args:
            board: Position to evaluate. It is never modified.
            player: The player to move.

        Returns:
            The chosen ScoredMove. Its move is None when the position is
            already won.

        Raises:
            EmptyStateError: If the board is full.
        """
        if board.is_full():
            raise EmptyStateError("Board is full, there is no move to search")

        self.moves_evaluated = 0
        if self.workers > 1:
            return self._minimax_parallel(board, player)
        return self._minimax(board, player)

    def _minimax(self, board: Board, player: Player) -> ScoredMove:
        self.moves_evaluated += 1

        leaf = self._terminal_score(board)
        if leaf is not None:
            return leaf

        moves = []
        for index in board.empty_cells():
            # Each branch gets its own board, so siblings never see each other's moves
            result = self._minimax(board.with_move(index, player), player.opposite())
            moves.append(ScoredMove(result.score, index))

        return self._select(moves, player)

    def _minimax_parallel(self, board: Board, player: Player) -> ScoredMove:
        """Same search, with each root move scored in a worker process."""
        leaf = self._terminal_score(board)
        if leaf is not None:
            self.moves_evaluated = 1
            return leaf

        empty_cells = board.empty_cells()
        jobs = [(board.with_move(index, player), player.opposite(), self.config)
                for index in empty_cells]

        with ProcessPoolExecutor(max_workers=min(self.workers, len(jobs))) as executor:
            results = list(executor.map(_search_subtree, jobs))

        self.moves_evaluated = 1 + sum(count for _, count in results)
        moves = [ScoredMove(result.score, index)
                 for index, (result, _) in zip(empty_cells, results)]
        return self._select(moves, player)

    def _terminal_score(self, board: Board) -> Optional[ScoredMove]:
        """Leaf score for a won or full board, None while the game goes on."""
        if self.win_checker.check_win(board, Player.HUMAN) is not None:
            return ScoredMove(self.config.HUMAN_WIN_SCORE)
        if self.win_checker.check_win(board, Player.MACHINE) is not None:
            return ScoredMove(self.config.MACHINE_WIN_SCORE)
        if board.is_full():
            return ScoredMove(self.config.TIE_SCORE)
        return None

    def _select(self, moves: List[ScoredMove], player: Player) -> ScoredMove:
        """
        Pick the machine's highest or the human's lowest score.

        Only a strictly better score replaces the current pick, so ties go
        to the lowest cell index.
        """
        best = moves[0]
        for move in moves[1:]:
            if player == Player.MACHINE:
                if move.score > best.score:
                    best = move
            elif move.score < best.score:
                best = move
        return best


def _search_subtree(job: Tuple[Board, Player, object]) -> Tuple[ScoredMove, int]:
    """Worker entry point: serial search of one root move's subtree."""
    board, player, config = job
    ai = AIPlayer(config, workers=1)
    result = ai._minimax(board, player)
    return result, ai.moves_evaluated
