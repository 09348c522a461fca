"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board, GameStatus
from .config import EngineConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def validate_move(board: Board, index, status) -> ValidationResult:
    """
    Validate a move.

    Rules:
    1. Game must still be playing
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells

    Args:
        board: Current board.
        index: Cell to place a mark on.
        status: Current game status.

    Returns:
        ValidationResult with is_valid and error_message.
    """
    # Check if game is over
    if status != GameStatus.PLAYING:
        return ValidationResult(
            is_valid=False,
            error_message="Game is already over!"
        )

    # Check if index is on the board
    if (isinstance(index, bool) or not isinstance(index, int)
            or not 0 <= index < EngineConfig.CELL_COUNT):
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid cell {index!r}. Must be 0-{EngineConfig.CELL_COUNT - 1}."
        )

    # Check if cell is empty
    if board[index] is not None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Cell {index} is already occupied by {getattr(board[index], 'value', board[index])}"
        )

    return ValidationResult(is_valid=True)


def is_valid_move(board: Board, index, status) -> bool:
    """True if `index` is an empty cell and the game is still playing."""
    return validate_move(board, index, status).is_valid
