"""
Tests for the turn orchestrator: turn order, game end and restart.
Run with: pytest test_orchestrator.py
"""

import pytest

from logic.config import GameConfig, ConfigError
from logic.game_state import Piece
from logic.move_validator import MoveError
from logic.orchestrator import GameOrchestrator, GameStatus, GameResult
from logic.win_checker import Direction


X = Piece.CROSS
O = Piece.CIRCLE
_ = Piece.EMPTY


def make_game(**overrides):
    overrides.setdefault("verbose", False)
    return GameOrchestrator(GameConfig(**overrides))


def finish_search(game):
    """Wait for the computer's search and let the think time run out."""
    assert game.search_task is not None
    assert game.search_task.wait(timeout=60)
    game.update(game.config.AI_THINK_TIME)


def play(game, moves):
    for index in moves:
        result = game.cell_clicked(index)
        assert result.is_valid, result.error_message


class FinishedTask:
    """Stand-in for a search that already finished with a given move."""

    def __init__(self, move):
        self.move = move

    def is_ready(self):
        return True

    def take_result(self):
        return self.move


class FailedTask(FinishedTask):
    """Stand-in for a search whose worker raised."""

    def __init__(self, error):
        super().__init__(None)
        self.error = error

    def take_result(self):
        raise self.error


# ==================== START OF GAME ====================

def test_human_starts_by_default():
    game = make_game()

    assert game.status == GameStatus.AWAITING_HUMAN_MOVE
    assert game.board == (_,) * 9
    assert game.current_player == X
    assert not game.search_pending
    assert not game.is_game_over


def test_computer_first_starts_searching():
    game = make_game(board_width=2, pieces_to_win=2, player_start=False)

    assert game.status == GameStatus.AWAITING_SEARCH_RESULT
    assert game.search_pending

    finish_search(game)

    assert game.board == (X, _, _, _)
    assert game.status == GameStatus.AWAITING_HUMAN_MOVE
    assert game.current_player == O


def test_orchestrator_rejects_oversize_ai_board():
    with pytest.raises(ConfigError):
        make_game(board_width=4)


# ==================== HUMAN INPUT ====================

def test_clicks_ignored_while_computer_thinks():
    game = make_game(board_width=2, pieces_to_win=2, player_start=False)

    result = game.cell_clicked(3)

    assert not result.is_valid
    assert result.error == MoveError.NOT_YOUR_TURN
    assert game.board == (_,) * 4
    finish_search(game)


def test_invalid_clicks_do_not_advance_turn():
    game = make_game(use_ai=False)
    play(game, [4])

    occupied = game.cell_clicked(4)
    outside = game.cell_clicked(9)

    assert occupied.error == MoveError.CELL_OCCUPIED
    assert outside.error == MoveError.OUT_OF_BOUNDS
    assert game.current_player == O
    assert game.state.placed_pieces == 1
    assert game.status == GameStatus.AWAITING_HUMAN_MOVE


def test_two_players_alternate():
    game = make_game(use_ai=False)
    play(game, [0, 4, 8])

    assert game.board == (X, _, _, _, O, _, _, _, X)
    assert game.current_player == O
    assert game.status == GameStatus.AWAITING_HUMAN_MOVE
    assert not game.search_pending


def test_two_players_on_a_big_board():
    game = make_game(board_width=5, pieces_to_win=4, use_ai=False)
    play(game, [0, 5, 1, 6, 2, 7, 3])

    assert game.result == GameResult.CROSSES_WIN
    assert game.winning_cells() == [0, 1, 2, 3]


# ==================== COMPUTER TURN ====================

def test_human_move_starts_search_and_think_time_is_respected():
    game = make_game(ai_think_time=0.5)
    play(game, [4])

    assert game.status == GameStatus.AWAITING_SEARCH_RESULT
    assert game.search_task.wait(timeout=60)

    # Search is done but the minimum think time has not passed
    game.update(0.2)
    assert game.status == GameStatus.AWAITING_SEARCH_RESULT
    assert game.board.count(O) == 0

    game.update(0.4)
    assert game.status == GameStatus.AWAITING_HUMAN_MOVE
    assert game.current_player == X

    # Only a corner holds the draw against a centre opening
    assert game.board[0] == O
    assert game.state.placed_pieces == 2


def test_invalid_search_result_is_ignored():
    game = make_game(board_width=2, pieces_to_win=2)
    play(game, [0])
    game.search_task.wait(timeout=60)

    # Pretend the search answered with an occupied cell
    game.search_task = FinishedTask(0)
    game.update(game.config.AI_THINK_TIME)

    assert game.last_search_error.error == MoveError.CELL_OCCUPIED
    assert game.board == (X, _, _, _)
    assert game.status == GameStatus.AWAITING_SEARCH_RESULT
    assert not isinstance(game.search_task, FinishedTask)

    finish_search(game)
    assert game.board == (X, O, _, _)


def test_search_without_a_move_is_reported():
    game = make_game(board_width=2, pieces_to_win=2)
    play(game, [0])
    game.search_task.wait(timeout=60)

    game.search_task = FinishedTask(None)
    game.update(game.config.AI_THINK_TIME)

    assert game.last_search_error.error == MoveError.NO_LEGAL_MOVE
    assert game.board == (X, _, _, _)
    assert game.status == GameStatus.AWAITING_SEARCH_RESULT
    assert not isinstance(game.search_task, FinishedTask)

    finish_search(game)
    assert game.board == (X, O, _, _)


def test_failed_search_is_restarted():
    game = make_game(board_width=2, pieces_to_win=2)
    play(game, [0])
    game.search_task.wait(timeout=60)

    game.search_task = FailedTask(RuntimeError("worker crashed"))
    game.update(game.config.AI_THINK_TIME)

    assert game.status == GameStatus.AWAITING_SEARCH_RESULT
    assert game.search_pending
    assert not isinstance(game.search_task, FailedTask)

    # The next frames keep polling the fresh search
    game.update(0.0)
    finish_search(game)
    assert game.board == (X, O, _, _)


# ==================== END OF GAME ====================

def test_computer_win():
    game = make_game(board_width=2, pieces_to_win=2, player_start=False)
    finish_search(game)
    play(game, [1])
    finish_search(game)

    assert game.status == GameStatus.GAME_ENDED
    assert game.result == GameResult.COMPUTER_WIN
    assert game.end_message == "Computer won!"
    assert game.winning_move.piece == X
    assert game.winning_move.direction == Direction.VERTICAL
    assert game.winning_cells() == [0, 2]


def test_human_win_against_computer():
    game = make_game(board_width=2, pieces_to_win=2)
    play(game, [0])
    finish_search(game)
    assert game.board == (X, O, _, _)

    play(game, [2])

    assert game.result == GameResult.CROSSES_WIN
    assert game.end_message == "Crosses win!"
    assert not game.search_pending


def test_circles_win_two_players():
    game = make_game(use_ai=False)
    play(game, [0, 3, 1, 4, 8, 5])

    assert game.is_game_over
    assert game.result == GameResult.CIRCLES_WIN
    assert game.end_message == "Circles win!"
    assert game.winning_cells() == [3, 4, 5]


def test_full_board_without_a_line_is_a_draw():
    game = make_game(use_ai=False)
    play(game, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert game.status == GameStatus.GAME_ENDED
    assert game.result == GameResult.DRAW
    assert game.end_message == "It's a draw :/"
    assert game.winning_move is None
    assert game.winning_cells() == []


def test_clicks_ignored_after_game_end():
    game = make_game(use_ai=False)
    play(game, [0, 3, 1, 4, 2])

    result = game.cell_clicked(8)

    assert result.error == MoveError.GAME_OVER
    assert game.board[8] == _


def test_restart_after_cooldown():
    game = make_game(use_ai=False, restart_delay=2.0)
    play(game, [0, 3, 1, 4, 2])

    game.update(1.0)
    assert game.status == GameStatus.GAME_ENDED

    game.update(1.5)
    assert game.status == GameStatus.AWAITING_HUMAN_MOVE
    assert game.board == (_,) * 9
    assert game.result is None
    assert game.end_message == ""
    assert game.current_player == X


def test_restart_with_computer_first_searches_again():
    game = make_game(board_width=2, pieces_to_win=2, player_start=False, restart_delay=0.0)
    finish_search(game)
    play(game, [1])
    finish_search(game)
    assert game.is_game_over

    game.update(0.1)

    assert game.status == GameStatus.AWAITING_SEARCH_RESULT
    assert game.board == (_,) * 4
    finish_search(game)


# ==================== RESET ====================

def test_reset_drops_pending_search():
    game = make_game(board_width=2, pieces_to_win=2, player_start=False)
    first_task = game.search_task

    game.reset()

    assert game.search_task is not first_task
    first_task.wait(timeout=60)
    finish_search(game)
    assert game.board == (X, _, _, _)


def test_reset_twice_is_same_as_once():
    game = make_game(use_ai=False)
    play(game, [0, 4])

    game.reset()
    once = (game.board, game.status, game.current_player, game.result)
    game.reset()
    twice = (game.board, game.status, game.current_player, game.result)

    assert once == twice
    assert once[0] == (_,) * 9
