"""
Pieces that can occupy a TicTacToe cell.
"""

from enum import Enum
from typing import Tuple


class Piece(Enum):
    """What can occupy a cell."""
    EMPTY = 0
    CROSS = 1
    CIRCLE = 2

    def opposite(self) -> "Piece":
        """Get the other player's piece."""
        if self == Piece.CROSS:
            return Piece.CIRCLE
        if self == Piece.CIRCLE:
            return Piece.CROSS
        return Piece.EMPTY

    @property
    def symbol(self) -> str:
        return {Piece.EMPTY: " ", Piece.CROSS: "X", Piece.CIRCLE: "O"}[self]


# Crosses always open the game
STARTING_PIECE = Piece.CROSS

# Read-only view of the board handed out for drawing and searching
Board = Tuple[Piece, ...]
