"""
Background search for the AI's move.

The search can take a noticeable moment, so it runs on its own thread while
the game loop keeps drawing. The loop polls is_ready() and collects the move
once with take_result().
"""

import threading
import time
from typing import Optional

from .ai_player import find_best_move
from .config import GameConfig
from .game_state import Board, Piece


class SearchTask:
    """
    Handle to one background minimax search.

    The worker only sees the board snapshot it was started with; the result
    travels back through the handle. No cancellation: a started search
    always runs to the end.
    """

    def __init__(self, snapshot: Board, piece: Piece, config: Optional[GameConfig] = None):
        """
        Create a search task (not started yet, see start()).

        Args:
            snapshot: Immutable copy of the board to search.
            piece: The piece to find a move for.
            config: Game configuration.
        """
        self.snapshot = tuple(snapshot)
        self.piece = piece
        self.config = config or GameConfig()

        self._done = threading.Event()
        self._result: Optional[int] = None
        self._error: Optional[BaseException] = None
        self._taken = False
        self._thread: Optional[threading.Thread] = None

        self.started_at: Optional[float] = None
        self.duration: Optional[float] = None

    @classmethod
    def start(cls, snapshot: Board, piece: Piece, config: Optional[GameConfig] = None) -> "SearchTask":
        """Create a task and start searching in the background."""
        task = cls(snapshot, piece, config)
        task._thread = threading.Thread(target=task._run, daemon=True, name="minimax-search")
        task.started_at = time.perf_counter()
        task._thread.start()
        return task

    def _run(self):
        """Runs on the worker thread."""
        try:
            self._result = find_best_move(self.snapshot, self.piece, self.config)
        except Exception as e:
            self._error = e
        finally:
            self.duration = time.perf_counter() - self.started_at
            self._done.set()

    def is_ready(self) -> bool:
        """Non-blocking check whether the search has finished."""
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the search finishes.

        Returns:
            True if finished, False if the timeout ran out first.
        """
        return self._done.wait(timeout)

    def take_result(self) -> Optional[int]:
        """
        Collect the chosen cell. Can only be called once.

        Returns:
            Cell index, or None if the board had no empty cell.

        Raises:
            RuntimeError: If the search is still running or the result
                was already taken.
            Exception: Whatever the search itself raised.
        """
        if not self.is_ready():
            raise RuntimeError("Search is still running")
        if self._taken:
            raise RuntimeError("Search result was already taken")

        self._taken = True
        if self._error is not None:
            raise self._error
        return self._result

    @property
    def is_taken(self) -> bool:
        return self._taken
