"""
Console module for TicTacToe.
Handles reading moves and drawing the board in the terminal.
"""

from .config import ConsoleConfig
from .input_reader import InputReader, InputClosedError
from .renderer import BoardRenderer
