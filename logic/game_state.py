"""
Game state management for TicTacToe.
Tracks the board, the piece count and whose turn it is.
"""

from typing import List
from dataclasses import dataclass, field

from .move_validator import MoveValidator, ValidationResult
from .piece import Board, Piece, STARTING_PIECE


@dataclass
class GameState:
    """
    The live state of a TicTacToe game.

    Tracks:
    - The board as a flat row-major list (index = row * width + col)
    - How many pieces have been placed
    - Whose turn it is

    Only the orchestrator writes to it. Everyone else works on
    snapshot() copies.
    """

    board_width: int = 3

    # Flat row-major board, filled in by reset()
    board: List[Piece] = field(default_factory=list)

    # Current player's turn
    current_player: Piece = STARTING_PIECE

    # Number of non-empty cells
    placed_pieces: int = 0

    def __post_init__(self):
        if not self.board:
            self.reset()
        elif len(self.board) != self.cell_count:
            raise ValueError(
                f"Board needs {self.cell_count} cells, got {len(self.board)}"
            )
        else:
            self.placed_pieces = sum(1 for p in self.board if p != Piece.EMPTY)

    @classmethod
    def from_board(cls, board, current_player: Piece = STARTING_PIECE) -> "GameState":
        """
        Build a state from an existing board.

        Args:
            board: Sequence of Pieces, length must be a perfect square.
            current_player: Whose turn it is.
        """
        width = int(round(len(board) ** 0.5))
        return cls(board_width=width, board=list(board), current_player=current_player)

    @property
    def cell_count(self) -> int:
        return self.board_width * self.board_width

    def reset(self):
        """Clear the board and give the turn to the starting piece."""
        self.board = [Piece.EMPTY] * self.cell_count
        self.placed_pieces = 0
        self.current_player = STARTING_PIECE

    def place(self, index: int, piece: Piece) -> ValidationResult:
        """
        Place a piece on the board.

        Args:
            index: Row-major cell index.
            piece: The piece to place.

        Returns:
            ValidationResult; the board is only changed when it is valid.
        """
        result = MoveValidator.validate_placement(self.board, index)
        if not result.is_valid:
            return result

        self.board[index] = piece
        self.placed_pieces += 1
        return result

    def advance_turn(self):
        """Hand the turn to the other piece."""
        self.current_player = self.current_player.opposite()

    def is_full(self) -> bool:
        """True when every cell holds a piece."""
        return self.placed_pieces == self.cell_count

    def snapshot(self) -> Board:
        """Immutable copy of the board."""
        return tuple(self.board)

    def format_board(self) -> str:
        """Text drawing of the board, cell indices shown on empty cells."""
        width = self.board_width
        pad = len(str(self.cell_count - 1))
        separator = "+" + "+".join(["-" * (pad + 2)] * width) + "+"

        lines = [separator]
        for row in range(width):
            cells = []
            for col in range(width):
                index = row * width + col
                piece = self.board[index]
                text = str(index) if piece == Piece.EMPTY else piece.symbol
                cells.append(f" {text:>{pad}} ")
            lines.append("|" + "|".join(cells) + "|")
            lines.append(separator)
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.format_board())
        print(f"Current turn: {self.current_player.symbol}")
