"""
Board renderer for TicTacToe.
Turns a game state into the colored text shown in the terminal.
"""

from typing import Optional

from colorama import Style

from logic.cell import Cell
from logic.game_state import BOARD_SIZE, GameState
from .config import ConsoleConfig


class BoardRenderer:
    """
    Draws the board, the prompt and the final result.

    X is green, O is red. Empty cells are labelled with their index.
    Once the game is won the winning line is drawn bright.
    """

    def __init__(self, config: Optional[ConsoleConfig] = None, use_color: Optional[bool] = None):
        """
        Initialize the renderer.

        Args:
            config: Console configuration. Uses defaults if not provided.
            use_color: Force colors on or off, overriding the config.
        """
        self.config = config or ConsoleConfig()
        self.use_color = self.config.USE_COLOR if use_color is None else use_color

    def render(self, game_state: GameState) -> str:
        """
        Render the board.

        Args:
            game_state: The game to draw.

        Returns:
            One line per row, each followed by a separator line.
        """
        winning = set(game_state.winning_line() or [])
        lines = []

        for row in range(BOARD_SIZE):
            symbols = []
            for col in range(BOARD_SIZE):
                cell = game_state.grid[row, col]
                symbols.append(self._symbol(cell, row * BOARD_SIZE + col, (row, col) in winning))
            lines.append("".join(f"{s} " for s in symbols))
            lines.append(self.config.ROW_SEPARATOR)

        return "\n".join(lines)

    def _symbol(self, cell: Cell, index: int, highlight: bool) -> str:
        if cell == Cell.EMPTY:
            return str(index) if self.config.LABEL_EMPTY_CELLS else str(cell)

        if not self.use_color:
            return str(cell)

        color = self.config.X_COLOR if cell == Cell.X else self.config.O_COLOR
        if highlight:
            color += self.config.HIGHLIGHT_STYLE
        return f"{color}{cell}{Style.RESET_ALL}"

    def prompt(self, game_state: GameState) -> str:
        """Ask the current player for a move."""
        return self.config.PROMPT.format(player=game_state.current_player)

    def error(self, message: str) -> str:
        """Format a guidance message for bad input."""
        if not self.use_color:
            return message
        return f"{self.config.ERROR_COLOR}{message}{Style.RESET_ALL}"

    def result_message(self, game_state: GameState) -> str:
        """
        Describe how the game ended.

        Returns:
            "Player X wins!", "Player O wins!" or "It's a tie!".
        """
        if game_state.winner == Cell.EMPTY:
            return self.config.TIE_MESSAGE
        return self.config.WIN_MESSAGE.format(player=game_state.winner)
