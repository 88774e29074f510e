"""
Turn orchestration for TicTacToe.

Sequences the human and computer turns, checks for a winner after every
placement and restarts the game after a short cooldown. Drawing, input
mapping and the frame clock belong to the caller, which reports clicks
with cell_clicked() and time with update().
"""

from enum import Enum
from typing import Optional, List

from .ai_player import NO_MOVE
from .config import GameConfig
from .game_state import Board, GameState, Piece
from .move_validator import MoveError, ValidationResult
from .search_task import SearchTask
from .win_checker import WinningMove, check_win


class GameStatus(Enum):
    """Where the game currently is."""
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_SEARCH_RESULT = "awaiting_search_result"
    GAME_ENDED = "game_ended"


class GameResult(Enum):
    """How a finished game ended."""
    COMPUTER_WIN = "Computer won!"
    CROSSES_WIN = "Crosses win!"
    CIRCLES_WIN = "Circles win!"
    DRAW = "It's a draw :/"

    @property
    def message(self) -> str:
        return self.value


class GameOrchestrator:
    """
    Runs one game after another on a single board.

    Game flow:
    1. The human clicks an empty cell
    2. The placement is checked for a win or a full board
    3. The computer's search starts in the background
    4. After the think time the computer's move is applied and checked
    5. Repeat until someone wins or it's a draw, then restart
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the orchestrator and start the first game.

        Args:
            config: Game configuration (validated here).
        """
        self.config = config or GameConfig()
        self.config.validate()

        self.state = GameState(board_width=self.config.BOARD_WIDTH)
        self.status = GameStatus.AWAITING_HUMAN_MOVE

        self.winning_move: Optional[WinningMove] = None
        self.result: Optional[GameResult] = None
        self.end_message = ""

        self.search_task: Optional[SearchTask] = None
        self.last_search_error: Optional[ValidationResult] = None
        self.think_time = 0.0
        self.restart_timer = 0.0

        self.reset()

    # ==================== STATE ACCESS ====================

    @property
    def board(self) -> Board:
        """Read-only snapshot of the live board."""
        return self.state.snapshot()

    @property
    def current_player(self) -> Piece:
        return self.state.current_player

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.GAME_ENDED

    @property
    def search_pending(self) -> bool:
        return self.search_task is not None

    def is_computer_turn(self) -> bool:
        return self.config.USE_AI and self.state.current_player == self.config.computer_piece

    def winning_cells(self) -> List[int]:
        """Cells of the winning run, empty if nobody won."""
        if self.winning_move is None:
            return []
        return self.winning_move.cells(self.state.board, self.config)

    # ==================== GAME FLOW ====================

    def reset(self):
        """Start a new game."""
        self.state.reset()
        self.winning_move = None
        self.result = None
        self.end_message = ""
        self.restart_timer = 0.0
        self.search_task = None
        self.last_search_error = None
        self.think_time = 0.0
        self.status = GameStatus.AWAITING_HUMAN_MOVE

        if self.is_computer_turn():
            self._start_search()

    def cell_clicked(self, index: int) -> ValidationResult:
        """
        Handle the human clicking a cell.

        Args:
            index: Cell index under the mouse.

        Returns:
            ValidationResult; the turn only advances when it is valid.
        """
        if self.status == GameStatus.GAME_ENDED:
            return ValidationResult.fail(MoveError.GAME_OVER, "Game is already over!")

        if self.status == GameStatus.AWAITING_SEARCH_RESULT:
            return ValidationResult.fail(MoveError.NOT_YOUR_TURN, "Wait for the computer to move")

        result = self.state.place(index, self.state.current_player)
        if not result.is_valid:
            self._log(f"Ignoring click: {result.error_message}")
            return result

        self._after_placement(index)
        return result

    def update(self, elapsed: float):
        """
        Advance the timers by one frame.

        Args:
            elapsed: Seconds since the previous frame.
        """
        if self.status == GameStatus.GAME_ENDED:
            self.restart_timer += elapsed
            if self.restart_timer > self.config.RESTART_DELAY:
                self.reset()
            return

        if self.status == GameStatus.AWAITING_SEARCH_RESULT:
            self.think_time += elapsed
            if self.think_time < self.config.AI_THINK_TIME:
                return
            if not self.search_task.is_ready():
                return
            self._apply_search_result()

    # ==================== INTERNALS ====================

    def _start_search(self):
        """Kick off the computer's search on a snapshot of the board."""
        self.think_time = 0.0
        self.status = GameStatus.AWAITING_SEARCH_RESULT
        self.search_task = SearchTask.start(
            self.state.snapshot(),
            self.config.computer_piece,
            self.config
        )

    def _apply_search_result(self):
        """Place the computer's piece once its search has finished."""
        task = self.search_task
        self.search_task = None

        try:
            move = task.take_result()
        except Exception as e:
            self._log(f"WARNING: AI search failed: {e}, searching again")
            self._start_search()
            return

        if move is NO_MOVE:
            result = ValidationResult.fail(MoveError.NO_LEGAL_MOVE, "AI found no move")
        else:
            result = self.state.place(move, self.config.computer_piece)

        if not result.is_valid:
            self.last_search_error = result
            self._log(f"WARNING: Ignoring AI result: {result.error_message}, searching again")
            self._start_search()
            return

        self._log(f">>> Computer placed {self.config.computer_piece.symbol} on cell {move}")
        self._after_placement(move)

    def _after_placement(self, index: int):
        """Check the board after a piece landed on index and pick the next state."""
        self.state.advance_turn()
        self.winning_move = check_win(self.state.board, index, self.config)

        if self.winning_move is not None or self.state.is_full():
            self._end_game()
        elif self.is_computer_turn():
            self._start_search()
        else:
            self.status = GameStatus.AWAITING_HUMAN_MOVE

    def _end_game(self):
        """Record the result of a finished game."""
        self.status = GameStatus.GAME_ENDED
        self.restart_timer = 0.0

        if self.winning_move is None:
            self.result = GameResult.DRAW
        elif self.config.USE_AI and self.winning_move.piece == self.config.computer_piece:
            self.result = GameResult.COMPUTER_WIN
        elif self.winning_move.piece == Piece.CROSS:
            self.result = GameResult.CROSSES_WIN
        else:
            self.result = GameResult.CIRCLES_WIN

        self.end_message = self.result.message
        self._log(self.end_message)

    def _log(self, message: str):
        if self.config.VERBOSE:
            print(message)
