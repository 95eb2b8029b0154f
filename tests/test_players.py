"""Tests for the computer players."""

import pytest

from dropfour.ai.minimax import MinimaxPlayer
from dropfour.ai.one_ply import OnePlyPlayer
from dropfour.ai.random_player import RandomPlayer
from dropfour.config import WIDTH
from dropfour.core.board import Board
from dropfour.game.controller import play_match
from dropfour.ui.menu import make_player


def test_random_player_range_and_seed():
    a = RandomPlayer(seed=7)
    b = RandomPlayer(seed=7)
    board = Board()
    moves_a = [a.choose_move(board) for _ in range(50)]
    moves_b = [b.choose_move(board) for _ in range(50)]
    assert moves_a == moves_b
    assert all(0 <= m < WIDTH for m in moves_a)


def test_random_player_ignores_board(drawn_board):
    player = RandomPlayer(seed=1)
    # every column is full, the player still answers
    assert 0 <= player.choose_move(drawn_board) < WIDTH


def test_one_ply_prefers_center_on_empty_board():
    player = OnePlyPlayer()
    player.start("R")
    assert player.choose_move(Board()) == 3
    assert player.last_info["nodes"] == WIDTH


def test_one_ply_falls_back_to_first_legal_column(drawn_board):
    drawn_board.remove_top(5)
    player = OnePlyPlayer()
    player.start("Y")
    assert player.choose_move(drawn_board) == 5


def test_one_ply_does_not_touch_board():
    board = Board.from_moves("3342")
    before = [c[:] for c in board.columns]
    player = OnePlyPlayer()
    player.start("R")
    player.choose_move(board)
    assert board.columns == before


def test_one_ply_on_full_board_raises(drawn_board):
    player = OnePlyPlayer()
    player.start("R")
    with pytest.raises(ValueError):
        player.choose_move(drawn_board)


def test_outcome_notifications_are_harmless():
    board = Board()
    for player in (RandomPlayer(), OnePlyPlayer(), MinimaxPlayer(depth=1)):
        player.start("Y")
        assert player.token == "Y"
        player.notify_win(board)
        player.notify_lose(board)
        player.notify_draw(board)


def test_minimax_vs_random_finishes():
    result = play_match(MinimaxPlayer(depth=2), RandomPlayer(seed=3))
    assert result.winner in ("R", "Y", None)
    assert result.plies == result.board.plies_played()
    assert result.board.winner() == result.winner


@pytest.mark.parametrize("kind", ["random", "one-ply", "minimax"])
def test_make_player(kind):
    player = make_player(kind, depth=1, seed=0)
    player.start("R")
    assert 0 <= player.choose_move(Board()) < WIDTH


def test_make_player_unknown_kind():
    with pytest.raises(ValueError):
        make_player("oracle")
