"""
Logic module for TicTacToe.
Handles the board, game rules, and move validation.
"""

from .cell import Cell, PLAYERS
from .game_state import GameState, InvalidMoveError
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, line_is_complete
