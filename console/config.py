"""
Console configuration for TicTacToe.
All the settings for colors, messages and logging.

Environment overrides:
    TICTACTOE_NO_COLOR   any value turns colors off (NO_COLOR works too)
    TICTACTOE_LOG_LEVEL  DEBUG, INFO, WARNING or ERROR
"""

import os

from colorama import Fore, Style


class ConsoleConfig:
    """
    Configuration class for console settings.
    Class attributes are the defaults; instances pick up the environment.
    """

    # ==================== COLORS ====================
    USE_COLOR = True
    X_COLOR = Fore.GREEN
    O_COLOR = Fore.RED
    # Added on top of the mark color for the line that won
    HIGHLIGHT_STYLE = Style.BRIGHT
    ERROR_COLOR = Fore.YELLOW

    # ==================== BOARD LAYOUT ====================
    ROW_SEPARATOR = "-----"
    # Empty cells show their index so players know what to type
    LABEL_EMPTY_CELLS = True

    # ==================== MESSAGES ====================
    PROMPT = "Player {player}, enter your move (0-8):"
    WIN_MESSAGE = "Player {player} wins!"
    TIE_MESSAGE = "It's a tie!"
    GOODBYE_MESSAGE = "Goodbye!"

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    def __init__(self):
        if os.getenv("TICTACTOE_NO_COLOR") or os.getenv("NO_COLOR"):
            self.USE_COLOR = False
        self.LOG_LEVEL = (os.getenv("TICTACTOE_LOG_LEVEL") or self.LOG_LEVEL).upper()
