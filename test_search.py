"""
Tests for the minimax AI and the background search task.
Run with: pytest test_search.py

The empty-board test searches the whole game tree and takes a few seconds.
"""

import random

import pytest

from logic.ai_player import AIPlayer, find_best_move, NO_MOVE
from logic.config import GameConfig, ConfigError
from logic.game_state import Piece
from logic.search_task import SearchTask
from logic.win_checker import check_win


X = Piece.CROSS
O = Piece.CIRCLE
_ = Piece.EMPTY


@pytest.fixture
def quiet_config():
    return GameConfig(verbose=False)


def _play_out(board, mover, config):
    """Both sides play the AI's move until the game ends. Returns the winner or None."""
    board = list(board)
    while True:
        move = find_best_move(board, mover, config)
        assert move is not NO_MOVE
        assert board[move] == _
        board[move] = mover

        winning_move = check_win(board, move, config)
        if winning_move is not None:
            return winning_move.piece
        if _ not in board:
            return None
        mover = mover.opposite()


def _random_positions(count, seed=1234):
    """Random unfinished 3x3 positions, with the side to move."""
    rng = random.Random(seed)
    positions = []
    while len(positions) < count:
        board = [_] * 9
        mover = X
        for _turn in range(rng.randint(1, 7)):
            index = rng.choice([i for i, p in enumerate(board) if p == _])
            board[index] = mover
            mover = mover.opposite()
            if check_win(board, index) is not None:
                break
        else:
            positions.append((board, mover))
    return positions


def test_takes_the_win(quiet_config):
    board = [O, O, _,
             X, X, _,
             _, _, _]
    assert find_best_move(board, O, quiet_config) == 2


def test_blocks_the_opponent(quiet_config):
    board = [_, O, _,
             _, _, _,
             X, X, _]
    ai = AIPlayer(O, quiet_config)

    assert ai.find_best_move(board) == 8
    assert ai.last_scores[8] == 0
    assert all(score == -1 for index, score in ai.last_scores.items() if index != 8)


def test_ties_go_to_the_lowest_index():
    config = GameConfig(board_width=2, pieces_to_win=2, verbose=False)
    ai = AIPlayer(X, config)

    # The first mover wins from anywhere on a 2x2 board
    assert ai.score_moves([_] * 4) == {0: 1, 1: 1, 2: 1, 3: 1}
    assert ai.find_best_move([_] * 4) == 0


def test_search_does_not_touch_the_board(quiet_config):
    board = [X, _, _,
             _, O, _,
             _, _, X]
    before = list(board)
    find_best_move(board, O, quiet_config)
    assert board == before


def test_search_is_deterministic(quiet_config):
    for board, mover in _random_positions(10, seed=7):
        first = find_best_move(board, mover, quiet_config)
        second = find_best_move(tuple(board), mover, quiet_config)
        assert first == second


def test_never_picks_an_occupied_cell(quiet_config):
    for board, mover in _random_positions(25):
        move = find_best_move(board, mover, quiet_config)
        assert move is not NO_MOVE
        assert board[move] == _


def test_full_board_has_no_move(quiet_config):
    board = [X, O, X,
             X, O, O,
             O, X, X]
    assert find_best_move(board, O, quiet_config) is NO_MOVE


def test_one_free_cell_is_played(quiet_config):
    board = [X, O, X,
             X, O, O,
             O, X, _]
    assert find_best_move(board, X, quiet_config) == 8


def test_exhaustive_search_rejects_big_boards():
    config = GameConfig(board_width=4, use_ai=False, verbose=False)
    with pytest.raises(ConfigError):
        AIPlayer(O, config)


def test_board_size_must_match_config(quiet_config):
    with pytest.raises(ValueError):
        find_best_move([_] * 16, O, quiet_config)


def test_ai_needs_a_real_piece(quiet_config):
    with pytest.raises(ValueError):
        AIPlayer(Piece.EMPTY, quiet_config)


def test_move_suggestion(quiet_config):
    ai = AIPlayer(O, quiet_config)
    board = [O, O, _, X, X, _, _, _, _]
    assert ai.get_move_suggestion(board) == "Place O on cell 2 (row 0, column 2)"
    assert ai.get_move_suggestion([X, O, X, X, O, O, O, X, X]) == "No moves available!"


def test_optimal_play_after_center_opening_is_a_draw(quiet_config):
    board = [_, _, _,
             _, X, _,
             _, _, _]
    assert _play_out(board, O, quiet_config) is None


def test_empty_board_every_move_draws(quiet_config):
    ai = AIPlayer(X, quiet_config)
    move = ai.find_best_move([_] * 9)

    # Perfect play from any opening is a draw, so the first cell wins the tie
    assert move == 0
    assert set(ai.last_scores) == set(range(9))
    assert ai.last_scores[4] == max(ai.last_scores.values()) == 0
    assert ai.positions_evaluated > 0

    board = [_] * 9
    board[move] = X
    assert _play_out(board, O, quiet_config) is None


# ==================== SEARCH TASK ====================

def test_search_task_returns_the_move(quiet_config):
    board = (O, O, _, X, X, _, _, _, _)
    task = SearchTask.start(board, O, quiet_config)

    assert task.wait(timeout=30)
    assert task.is_ready()
    assert task.take_result() == 2
    assert task.is_taken
    assert task.duration is not None


def test_search_task_result_can_only_be_taken_once(quiet_config):
    task = SearchTask.start((X, O, X, X, O, O, O, X, _), X, quiet_config)
    task.wait(timeout=30)

    assert task.take_result() == 8
    with pytest.raises(RuntimeError):
        task.take_result()


def test_search_task_not_ready_before_start(quiet_config):
    task = SearchTask((_,) * 9, X, quiet_config)
    assert not task.is_ready()
    with pytest.raises(RuntimeError):
        task.take_result()


def test_search_task_reraises_worker_errors(quiet_config):
    # Wrong board size for the config, the search raises on the worker
    task = SearchTask.start((_,) * 4, X, quiet_config)
    task.wait(timeout=30)

    with pytest.raises(ValueError):
        task.take_result()


def test_search_task_snapshot_is_a_copy(quiet_config):
    board = [O, O, _, X, X, _, _, _, _]
    task = SearchTask.start(board, O, quiet_config)
    board[2] = X

    task.wait(timeout=30)
    assert task.snapshot[2] == _
    assert task.take_result() == 2
