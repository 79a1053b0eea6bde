"""
Main script for terminal TicTacToe.

This script ties together:
- Logic (game state, win checking, move validation)
- Console (reading moves, drawing the board)

Run this script to play TicTacToe against a friend on the same terminal!
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from colorama import just_fix_windows_console

# Logic imports
from logic.game_state import GameState
from logic.move_validator import MoveValidator

# Console imports
from console.config import ConsoleConfig
from console.input_reader import InputReader
from console.renderer import BoardRenderer

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class TicTacToeGame:
    """
    Main controller for a game of TicTacToe.

    Game flow:
    1. Show the board and ask the current player for a move
    2. Reject anything that isn't a cell index and ask again
    3. Apply the move
    4. Repeat until someone wins or all 9 turns are used
    """

    def __init__(
        self,
        reader: Optional[InputReader] = None,
        renderer: Optional[BoardRenderer] = None,
        validator: Optional[MoveValidator] = None,
        output: Optional[TextIO] = None
    ):
        """
        Initialize the game.

        Args:
            reader: Where moves come from. Reads stdin if not provided.
            renderer: How the board is drawn.
            validator: How typed moves are checked.
            output: Where the board and messages go. Uses stdout if not provided.
        """
        self.reader = reader or InputReader()
        self.renderer = renderer or BoardRenderer()
        self.validator = validator or MoveValidator()
        self.output = output if output is not None else sys.stdout

        self.game_state = GameState()

    def _print(self, text: str):
        print(text, file=self.output)

    def play(self) -> GameState:
        """
        Play until the game is over.

        Returns:
            The finished game state.

        Raises:
            OSError: Reading a move failed or the input ended.
        """
        logger.info("Starting game (strict=%s)", self.validator.strict)

        while not self.game_state.is_game_over:
            self._print(self.renderer.render(self.game_state))
            self._print(self.renderer.prompt(self.game_state))

            line = self.reader.read_line()
            result = self.validator.parse_move(line, self.game_state)

            if not result.is_valid:
                logger.info("Rejected input %r: %s", line, result.error_message)
                self._print(self.renderer.error(result.error_message))
                continue

            self.game_state.apply_move(result.index)

        self._show_game_result()
        return self.game_state

    def _show_game_result(self):
        """Show the final board and who won."""
        self._print(self.renderer.render(self.game_state))
        self._print(self.renderer.result_message(self.game_state))
        logger.info(
            "Game over after %d turns, winner: %s",
            self.game_state.turn, self.game_state.winner.name
        )


def setup_logging(level: str, config: Optional[ConsoleConfig] = None):
    """Send log records to stderr so they don't mix with the board."""
    config = config or ConsoleConfig()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    root.addHandler(handler)


def main(argv=None) -> int:
    """Main entry point."""
    config = ConsoleConfig()

    parser = argparse.ArgumentParser(description="Two-player TicTacToe in the terminal")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print the board without colors"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject moves on occupied cells instead of spending the turn"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=config.LOG_LEVEL if config.LOG_LEVEL in LOG_LEVELS else "WARNING",
        help="Log level for messages on stderr (default: %(default)s)"
    )

    args = parser.parse_args(argv)

    setup_logging(args.log_level, config)

    use_color = config.USE_COLOR and not args.no_color
    if use_color:
        just_fix_windows_console()

    game = TicTacToeGame(
        renderer=BoardRenderer(config, use_color=use_color),
        validator=MoveValidator(strict=args.strict)
    )

    try:
        game.play()
    except KeyboardInterrupt:
        print(f"\n\nGame interrupted. {config.GOODBYE_MESSAGE}")
        return 130
    except OSError as e:
        logger.error("Could not read move: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
