"""
Move validator for TicTacToe.
Validates that placements follow the rules.
"""

from enum import Enum
from typing import Optional, List, Sequence
from dataclasses import dataclass

from .piece import Piece


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    NO_LEGAL_MOVE = "no_legal_move"
    GAME_OVER = "game_over"
    NOT_YOUR_TURN = "not_your_turn"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: MoveError, message: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, error_message=message)


class MoveValidator:
    """
    Validates TicTacToe placements.

    Rules:
    1. The index must be on the board
    2. Can only place on empty cells
    """

    @staticmethod
    def validate_placement(board: Sequence[Piece], index: int) -> ValidationResult:
        """
        Validate a placement.

        Args:
            board: Flat row-major board.
            index: Cell index to place on.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # Check if index is on the board
        if not (0 <= index < len(board)):
            return ValidationResult.fail(
                MoveError.OUT_OF_BOUNDS,
                f"Invalid cell {index}. Must be 0-{len(board) - 1}."
            )

        # Check if cell is empty
        if board[index] != Piece.EMPTY:
            return ValidationResult.fail(
                MoveError.CELL_OCCUPIED,
                f"Cell {index} is already occupied by {board[index].name.lower()}"
            )

        return ValidationResult.ok()

    @staticmethod
    def get_valid_moves(board: Sequence[Piece]) -> List[int]:
        """
        Get all valid placements.

        Args:
            board: Flat row-major board.

        Returns:
            List of empty cell indices, ascending.
        """
        return [i for i, piece in enumerate(board) if piece == Piece.EMPTY]
