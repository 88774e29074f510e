"""
Logic module for TicTacToe.
Handles game state, rules, win detection and the AI opponent.
"""

__version__ = "1.0.0"

from .game_state import GameState, Piece
from .config import GameConfig, ConfigError
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinningMove, Direction, check_win
from .ai_player import AIPlayer, find_best_move, NO_MOVE
from .search_task import SearchTask
from .orchestrator import GameOrchestrator, GameStatus, GameResult
