"""
Win checker for TicTacToe.
Checks if the last placed piece completed a winning run.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Piece


class Direction(Enum):
    """
    The four line families, each stored as its "negative" step (dx, dy).
    Declared in the order they are checked.
    """
    HORIZONTAL = (-1, 0)
    VERTICAL = (0, -1)
    DIAGONAL = (-1, -1)        # "\"
    ANTI_DIAGONAL = (-1, 1)    # "/"

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class WinningMove:
    """
    A completed run.

    anchor is the end of the run reached by stepping along direction,
    so the run is anchor, anchor - direction, anchor - 2 * direction, ...
    """
    piece: Piece
    anchor: Tuple[int, int]     # (x, y) = (column, row)
    direction: Direction

    def anchor_index(self, config: GameConfig) -> int:
        return config.cell_to_index(*self.anchor)

    def cells(self, board: Sequence[Piece], config: GameConfig) -> List[int]:
        """
        Reconstruct the whole run from the anchor.

        Args:
            board: The board the win was found on.
            config: Game configuration.

        Returns:
            Cell indices of the run, starting at the anchor.
        """
        x, y = self.anchor
        run = []
        while config.in_bounds(x, y) and board[config.cell_to_index(x, y)] == self.piece:
            run.append(config.cell_to_index(x, y))
            x -= self.direction.dx
            y -= self.direction.dy
        return run

    def end_cell(self, config: GameConfig) -> Tuple[int, int]:
        """Last cell of a PIECES_TO_WIN long line starting at the anchor."""
        steps = config.PIECES_TO_WIN - 1
        return (
            self.anchor[0] - self.direction.dx * steps,
            self.anchor[1] - self.direction.dy * steps,
        )


def count_line(
    board: Sequence[Piece],
    expected: Piece,
    x: int,
    y: int,
    dx: int,
    dy: int,
    config: GameConfig
) -> int:
    """
    Count pieces in a row starting at (x, y) and stepping by (dx, dy).
    Leaving the board ends the run.
    """
    if not config.in_bounds(x, y):
        return 0
    if board[config.cell_to_index(x, y)] != expected:
        return 0
    return 1 + count_line(board, expected, x + dx, y + dy, dx, dy, config)


def check_win(
    board: Sequence[Piece],
    placed_index: int,
    config: Optional[GameConfig] = None
) -> Optional[WinningMove]:
    """
    Check whether the piece just placed at placed_index won the game.

    Only the four lines through placed_index are inspected, so this must be
    called with the index that was just placed.

    Args:
        board: Flat row-major board.
        placed_index: Index of the piece that was just placed.
        config: Game configuration (board width, pieces to win).

    Returns:
        The WinningMove, or None if the placement did not complete a run.
    """
    config = config or GameConfig()
    piece = board[placed_index]
    if piece == Piece.EMPTY:
        return None

    x, y = config.index_to_cell(placed_index)

    for direction in Direction:
        dx, dy = direction.value

        # Origin counted once, by the backwards walk
        backwards = count_line(board, piece, x, y, dx, dy, config)
        forwards = count_line(board, piece, x - dx, y - dy, -dx, -dy, config)

        if backwards + forwards >= config.PIECES_TO_WIN:
            steps = backwards - 1
            anchor = (x + dx * steps, y + dy * steps)
            return WinningMove(piece=piece, anchor=anchor, direction=direction)

    return None
