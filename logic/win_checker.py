"""
Win checker for TicTacToe.
Derives the 8 lines of a grid and checks whether one of them is complete.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, PLAYERS

logger = logging.getLogger(__name__)


def line_is_complete(cells: Sequence[Cell], mark: Cell) -> bool:
    """
    Check if every cell of a line holds the given mark.

    Args:
        cells: The 3 cells of a row, column or diagonal.
        mark: The mark to look for. EMPTY never completes a line.

    Returns:
        True if all 3 cells equal mark.
    """
    if mark == Cell.EMPTY:
        return False
    return all(cell == mark for cell in cells)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def rows(self, grid: np.ndarray) -> List[Tuple[Cell, ...]]:
        return [tuple(row) for row in grid]

    def cols(self, grid: np.ndarray) -> List[Tuple[Cell, ...]]:
        return [tuple(col) for col in grid.T]

    def diagonals(self, grid: np.ndarray) -> List[Tuple[Cell, ...]]:
        """Top-left to bottom-right, then top-right to bottom-left."""
        return [tuple(np.diag(grid)), tuple(np.diag(np.fliplr(grid)))]

    def lines(self, grid: np.ndarray) -> Iterator[Tuple[Cell, ...]]:
        """
        Yield the cells of all 8 lines, in WINNING_LINES order.

        Args:
            grid: 3x3 array of Cell.
        """
        yield from self.rows(grid)
        yield from self.cols(grid)
        yield from self.diagonals(grid)

    def any_line_complete(self, grid: np.ndarray, mark: Cell) -> bool:
        """Check if mark holds any row, column or diagonal."""
        return any(line_is_complete(line, mark) for line in self.lines(grid))

    def is_complete(self, grid: np.ndarray) -> bool:
        """Check if either player holds a full line."""
        return any(self.any_line_complete(grid, mark) for mark in PLAYERS)

    def get_winning_line(
        self, grid: np.ndarray, mark: Optional[Cell] = None
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first complete line if there is one.

        Args:
            grid: 3x3 array of Cell.
            mark: Only consider lines held by this mark (default: either).

        Returns:
            The line as list of (row, col), or None.
        """
        for coords, line in zip(self.WINNING_LINES, self.lines(grid)):
            if mark is not None and line[0] != mark:
                continue
            if line_is_complete(line, line[0]):
                logger.debug("Winning line for %s: %s", line[0], coords)
                return coords
        return None
