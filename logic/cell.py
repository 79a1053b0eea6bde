"""
Cell values for the TicTacToe board.
"""

from enum import Enum


class Cell(Enum):
    """What a single board cell holds. X always moves first."""
    X = "X"
    O = "O"
    EMPTY = " "

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Cell.O if self == Cell.X else Cell.X

    def __str__(self) -> str:
        return self.value


# The two marks that can win, in turn order
PLAYERS = (Cell.X, Cell.O)
