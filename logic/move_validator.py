"""
Move validator for TicTacToe.
Turns the text a player typed into a move index, or explains why it can't.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from .game_state import GameState, MAX_TURNS

# Plain ASCII digits with an optional sign, nothing else
MOVE_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves typed by a player.

    Rules:
    1. Input must be a whole number
    2. The number must be a cell index, 0-8
    3. In strict mode, the cell must be empty

    Without strict mode an occupied cell is passed on to the game,
    which spends the turn without placing a mark.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse_move(
        self,
        text: str,
        game_state: Optional[GameState] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            text: Raw line typed by the player.
            game_state: Current game state, needed for strict mode.

        Returns:
            ValidationResult with is_valid, index and error_message.
        """
        text = text.strip()
        if not MOVE_PATTERN.fullmatch(text):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid input, please enter a number between 0 and {MAX_TURNS - 1}"
            )

        index = int(text)
        if not 0 <= index < MAX_TURNS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{MAX_TURNS - 1}."
            )

        if self.strict and game_state is not None:
            if game_state.is_game_over:
                return ValidationResult(
                    is_valid=False,
                    error_message="Game is already over!"
                )
            if index not in game_state.get_empty_cells():
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Cell {index} is already taken by {game_state.cell_at(index)}"
                )

        return ValidationResult(is_valid=True, index=index)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of flat indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
