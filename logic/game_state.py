"""
Game state management for TicTacToe.
Tracks the board, current player, turn count and the outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

BOARD_SIZE = 3
MAX_TURNS = BOARD_SIZE * BOARD_SIZE


class InvalidMoveError(ValueError):
    """Raised when a move index is not an int in 0-8."""


def new_grid() -> np.ndarray:
    """Create an empty 3x3 grid."""
    return np.full((BOARD_SIZE, BOARD_SIZE), Cell.EMPTY, dtype=object)


def check_index(index) -> None:
    """Raise InvalidMoveError unless index is an int in 0-8."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise InvalidMoveError(f"Move index must be an integer, got {index!r}")
    if not 0 <= index < MAX_TURNS:
        raise InvalidMoveError(f"Move index {index} is out of range 0-{MAX_TURNS - 1}")


def index_to_position(index: int) -> Tuple[int, int]:
    """Convert a flat index (0-8) to (row, col)."""
    return index // BOARD_SIZE, index % BOARD_SIZE


@dataclass(eq=False)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 grid (which marks are where)
    - Current player
    - How many turns have been consumed (0-9)
    - Game status (ongoing, won, tie)

    A finished game is never modified again; start a new one with GameState().
    """

    grid: np.ndarray = field(default_factory=new_grid)
    current_player: Cell = Cell.X
    winner: Cell = Cell.EMPTY
    turn: int = 0
    is_game_over: bool = False

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)

    def apply_move(self, index: int) -> bool:
        """
        Play the current player's mark at a flat index.

        An occupied cell is left as it is, but the turn is still consumed
        and the outcome is still evaluated.

        Args:
            index: Flat cell index (0-8), row = index // 3, col = index % 3.

        Returns:
            True if a mark was placed, False otherwise.

        Raises:
            InvalidMoveError: index is not an int in 0-8.
        """
        check_index(index)

        if self.is_game_over:
            logger.warning("Move at %d ignored, game is already over", index)
            return False

        row, col = index_to_position(index)
        mover = self.current_player

        placed = self.grid[row, col] == Cell.EMPTY
        if placed:
            self.grid[row, col] = mover
        else:
            logger.warning(
                "Cell %d is already taken by %s, %s loses the turn",
                index, self.grid[row, col], mover,
            )
        self.turn += 1

        if self.win_checker.any_line_complete(self.grid, mover):
            self.winner = mover
            self.is_game_over = True
            logger.debug("Turn %d: %s wins", self.turn, mover)
        elif self.is_tie():
            self.is_game_over = True
            logger.debug("Turn %d: tie", self.turn)
        else:
            self.current_player = mover.opposite()
            logger.debug("Turn %d: %s played %d, %s to move", self.turn, mover, index, self.current_player)

        return placed

    def is_complete(self) -> bool:
        """Check if X or O holds a full row, column or diagonal."""
        return self.win_checker.is_complete(self.grid)

    def is_tie(self) -> bool:
        """
        Check if all 9 turns are consumed.

        This is only a turn count: it is also True after a win on the
        ninth turn, so use `winner` to tell the two apart.
        """
        return self.turn == MAX_TURNS

    def game_over(self) -> bool:
        return self.is_game_over

    def cell_at(self, index: int) -> Cell:
        """
        Get the cell at a flat index.

        Raises:
            InvalidMoveError: index is not an int in 0-8.
        """
        check_index(index)
        row, col = index_to_position(index)
        return self.grid[row, col]

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of flat indices.
        """
        return [i for i in range(MAX_TURNS) if self.cell_at(i) == Cell.EMPTY]

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Coordinates of the line that won the game, or None."""
        if self.winner == Cell.EMPTY:
            return None
        return self.win_checker.get_winning_line(self.grid, self.winner)
