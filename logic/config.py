"""
Game configuration for TicTacToe.
Board size, win length, who starts and the AI timers.
"""

from typing import Tuple

from .piece import Piece


class ConfigError(ValueError):
    """Raised when a configuration can not be used to play a game."""


class GameConfig:
    """
    Configuration class for the game rules and pacing.
    Change these values (or pass overrides) to play a different variant!

    Example:
        GameConfig()                                  # classic 3x3
        GameConfig(board_width=3, pieces_to_win=2)    # quick game
        GameConfig(board_width=5, use_ai=False)       # two humans, big board
    """

    # ==================== BOARD SETTINGS ====================
    # The board is BOARD_WIDTH x BOARD_WIDTH cells
    BOARD_WIDTH = 3

    # Run length needed to win (None means the full board width)
    PIECES_TO_WIN = None

    # ==================== PLAYER SETTINGS ====================
    # True: the human plays crosses and moves first
    # False: the computer plays crosses and moves first
    PLAYER_START = True

    # Play against the computer (False = two humans take turns)
    USE_AI = True

    # Exhaustive search gets far too slow above this width
    MAX_AI_BOARD_WIDTH = 3

    # ==================== TIMING (seconds) ====================
    # Minimum time the computer "thinks" before its move is applied
    AI_THINK_TIME = 0.5

    # Time the finished game stays on screen before a new one starts
    RESTART_DELAY = 2.0

    # ==================== OUTPUT ====================
    VERBOSE = True

    def __init__(self, **overrides):
        """
        Initialize the configuration.

        Args:
            **overrides: Lower-case names of any setting above,
                e.g. board_width=3, use_ai=False.
        """
        for name, value in overrides.items():
            attr = name.upper()
            if not hasattr(GameConfig, attr) or attr.startswith("_"):
                raise ConfigError(f"Unknown setting: {name}")
            setattr(self, attr, value)

        if self.PIECES_TO_WIN is None:
            self.PIECES_TO_WIN = self.BOARD_WIDTH

        self.validate()

    def validate(self):
        """
        Check that the settings describe a playable game.

        Raises:
            ConfigError: If any setting is out of range.
        """
        if self.BOARD_WIDTH < 1:
            raise ConfigError(f"Board width must be positive, got {self.BOARD_WIDTH}")

        if not (1 <= self.PIECES_TO_WIN <= self.BOARD_WIDTH):
            raise ConfigError(
                f"Pieces to win must be 1-{self.BOARD_WIDTH}, got {self.PIECES_TO_WIN}"
            )

        if self.AI_THINK_TIME < 0 or self.RESTART_DELAY < 0:
            raise ConfigError("Timers can not be negative")

        if self.USE_AI and self.BOARD_WIDTH > self.MAX_AI_BOARD_WIDTH:
            raise ConfigError(
                f"AI and board width {self.BOARD_WIDTH} is disabled "
                f"(exhaustive search allows at most {self.MAX_AI_BOARD_WIDTH})"
            )

    @property
    def cell_count(self) -> int:
        return self.BOARD_WIDTH * self.BOARD_WIDTH

    @property
    def player_piece(self) -> Piece:
        """The human's piece (the first human when USE_AI is off)."""
        return Piece.CROSS if self.PLAYER_START else Piece.CIRCLE

    @property
    def computer_piece(self) -> Piece:
        """The computer's piece."""
        return self.player_piece.opposite()

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if a column/row pair lies on the board."""
        return 0 <= x < self.BOARD_WIDTH and 0 <= y < self.BOARD_WIDTH

    def index_to_cell(self, index: int) -> Tuple[int, int]:
        """
        Convert a cell index to a position.

        Args:
            index: Row-major cell index.

        Returns:
            (x, y) where x is the column and y is the row.
        """
        return index % self.BOARD_WIDTH, index // self.BOARD_WIDTH

    def cell_to_index(self, x: int, y: int) -> int:
        """Convert a column/row pair to a row-major cell index."""
        return y * self.BOARD_WIDTH + x

    def __repr__(self) -> str:
        return (
            f"GameConfig(board_width={self.BOARD_WIDTH}, "
            f"pieces_to_win={self.PIECES_TO_WIN}, "
            f"player_start={self.PLAYER_START}, use_ai={self.USE_AI})"
        )
