"""
TicTacToe
=========
Two players take turns marking a 3x3 grid in the terminal.
The first to fill a row, column or diagonal with their mark wins;
after nine turns without a line the game is a tie.

X always moves first.
"""

__version__ = "1.0.0"
