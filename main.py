"""
Main game loop for TicTacToe.

This script ties together:
- The board and game rules (logic.game_state, logic.win_checker)
- The minimax opponent (logic.ai_player)

Run this script to play TicTacToe against the computer in a terminal!
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from logic.config import GameConfig
from logic.board import Player
from logic.errors import InvalidMoveError
from logic.game_state import GameState
from logic.ai_player import AIPlayer

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    Console controller for one TicTacToe session.

    Game flow:
    1. Human (O) picks an empty cell
    2. If the game is not over, the computer (X) answers with its best move
    3. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        machine_first: bool = False,
        workers: Optional[int] = None,
        config=GameConfig,
        input_fn: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the game.

        Args:
            machine_first: If True, the computer makes the first move.
            workers: Processes for the minimax search (None = config default).
            config: Game configuration.
            input_fn: Where human moves are read from (default: input).
        """
        self.config = config
        self.machine_first = machine_first
        self.input_fn = input_fn if input_fn is not None else input
        self.game_state = GameState(current_player=self._first_player())
        self.ai = AIPlayer(config, workers=workers)

    def _first_player(self) -> Player:
        return Player.MACHINE if self.machine_first else Player.HUMAN

    def start(self):
        """Play one game to the end."""
        logger.info("New game, %s moves first", self.game_state.current_player.name)
        print(f"\nYou are {Player.HUMAN.symbol}, the computer is {Player.MACHINE.symbol}.")
        print("Type a cell number to play there.\n")

        while not self.game_state.is_game_over:
            if self.game_state.current_player == Player.MACHINE:
                self._machine_move()
            else:
                print(self.game_state.board.render(self.config))
                self._human_move()

        self._show_game_result()

    def _human_move(self):
        """Read cells until one is accepted."""
        while True:
            text = self.input_fn(f"Your move ({Player.HUMAN.symbol}): ").strip()
            try:
                index = int(text)
            except ValueError:
                print(f"'{text}' is not a cell number.")
                continue

            try:
                self.game_state.make_move(index)
            except InvalidMoveError as e:
                print(e)
                continue
            return

    def _machine_move(self):
        """Let the computer pick and play its move."""
        index = self.ai.best_move(self.game_state.board)
        self.game_state.make_move(index)
        print(f"Computer plays cell {index}")

    def _show_game_result(self):
        """Show the final game result."""
        print()
        print(self.game_state.board.render(self.config))

        outcome = self.game_state.outcome
        if outcome.player == Player.HUMAN:
            print(f"\nYou win! (cells {outcome.winning_cells})")
        elif outcome.player == Player.MACHINE:
            print(f"\nYou lose. (cells {outcome.winning_cells})")
        else:
            print("\nTie game!")

    def play_self(self) -> List[int]:
        """
        Let the computer play both sides from the current position.

        Returns:
            The cells played, in order.
        """
        played = []
        while not self.game_state.is_game_over:
            player = self.game_state.current_player
            index = self.ai.minimax(self.game_state.board, player).move
            self.game_state.make_move(index)
            played.append(index)
            print(f"{player.symbol} plays cell {index}")

        self._show_game_result()
        return played

    def reset(self):
        """Reset the game for a new round."""
        self.game_state.reset(first_player=self._first_player())


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against a minimax opponent")
    parser.add_argument(
        "--machine-first",
        action="store_true",
        help="Let the computer make the first move"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Watch the computer play both sides"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Processes used by the minimax search (default: %d)" % GameConfig.SEARCH_WORKERS
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    game = TicTacToeGame(machine_first=args.machine_first, workers=args.workers)

    try:
        if args.self_play:
            game.play_self()
        else:
            while True:
                game.start()
                again = game.input_fn("\nPlay again? [y/N] ").strip().lower()
                if again != "y":
                    break
                game.reset()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
