"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, Dict, List, Sequence

from .config import ConfigError, GameConfig
from .move_validator import MoveValidator
from .piece import Piece
from .win_checker import check_win

# Returned when there is no empty cell to play
NO_MOVE = None

WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive: no pruning and no depth limit, every
    continuation is played out to a win, loss or full board. That is only
    affordable on small boards, so the config is validated up front.

    Ties are broken towards the lowest cell index, so the same board always
    gives the same move.
    """

    def __init__(self, piece: Piece = Piece.CIRCLE, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            piece: Which piece the AI plays (the maximizing side).
            config: Game configuration.

        Raises:
            ConfigError: If the board is too big to search exhaustively.
        """
        if piece == Piece.EMPTY:
            raise ValueError("AI needs a real piece to play")

        self.piece = piece
        self.config = config or GameConfig()
        self.config.validate()

        # Two-player configs skip this check in validate(), the AI does not
        if self.config.BOARD_WIDTH > self.config.MAX_AI_BOARD_WIDTH:
            raise ConfigError(
                f"Board width {self.config.BOARD_WIDTH} is too big for exhaustive search"
            )

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0
        self.last_scores: Dict[int, int] = {}

    def find_best_move(self, board: Sequence[Piece]) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            board: Flat row-major board. Not modified.

        Returns:
            Cell index of the best move, or NO_MOVE if the board is full.
        """
        scores = self.score_moves(board)
        self.last_scores = scores

        best_score = None
        best_move = NO_MOVE
        for index, score in scores.items():
            if best_score is None or score > best_score:
                best_score = score
                best_move = index

        if self.config.VERBOSE:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {best_move} (score: {best_score})"
            )

        return best_move

    def score_moves(self, board: Sequence[Piece]) -> Dict[int, int]:
        """
        Minimax score of every empty cell, for the AI's piece.

        Args:
            board: Flat row-major board. Not modified.

        Returns:
            {cell index: score} in ascending index order.
            +1 = forced win, 0 = draw, -1 = forced loss.
        """
        self.positions_evaluated = 0

        if len(board) != self.config.cell_count:
            raise ValueError(
                f"Board has {len(board)} cells, config expects {self.config.cell_count}"
            )

        # Private copy, the search places and removes pieces on it
        work = list(board)
        scores = {}

        for index in MoveValidator.get_valid_moves(work):
            work[index] = self.piece
            scores[index] = self._minimax(work, index, is_maximizing=False)
            work[index] = Piece.EMPTY

        return scores

    def _minimax(self, board: List[Piece], placed_index: int, is_maximizing: bool) -> int:
        """
        Minimax algorithm, without pruning.

        Args:
            board: Working board, restored before returning.
            placed_index: The cell that was just played.
            is_maximizing: True if it is the AI's turn to move.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        winner = check_win(board, placed_index, self.config)
        if winner is not None:
            return WIN_SCORE if winner.piece == self.piece else LOSS_SCORE

        empty_cells = MoveValidator.get_valid_moves(board)
        if not empty_cells:
            return DRAW_SCORE

        if is_maximizing:
            best = LOSS_SCORE - 1
            for index in empty_cells:
                board[index] = self.piece
                score = self._minimax(board, index, False)
                board[index] = Piece.EMPTY
                if score > best:
                    best = score
            return best

        best = WIN_SCORE + 1
        opponent = self.piece.opposite()
        for index in empty_cells:
            board[index] = opponent
            score = self._minimax(board, index, True)
            board[index] = Piece.EMPTY
            if score < best:
                best = score
        return best

    def get_move_suggestion(self, board: Sequence[Piece]) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Flat row-major board.

        Returns:
            A string describing the suggested move.
        """
        move = self.find_best_move(board)

        if move is NO_MOVE:
            return "No moves available!"

        x, y = self.config.index_to_cell(move)
        return f"Place {self.piece.symbol} on cell {move} (row {y}, column {x})"


def find_best_move(
    board: Sequence[Piece],
    piece: Piece,
    config: Optional[GameConfig] = None
) -> Optional[int]:
    """
    Best cell for piece to play on board, or NO_MOVE on a full board.

    Deterministic: the same board and piece always give the same cell.
    """
    return AIPlayer(piece, config).find_best_move(board)
