import pytest

from othello.board import Disc
from othello.cpu import (
    CpuLevel,
    evaluate_board,
    get_best_move,
    greedy_move,
    minimax,
    minimax_move,
    positional_score,
    random_move,
)
from othello.game import Game


def test_opponent():
    assert Disc.BLACK.opponent() is Disc.WHITE
    assert Disc.WHITE.opponent() is Disc.BLACK


def test_random_move():
    moves = [(0, 0), (1, 1), (2, 2)]
    assert random_move(moves) in moves


@pytest.mark.parametrize("level", list(CpuLevel))
def test_get_best_move_is_valid(level):
    game = Game()
    result = get_best_move(game, Disc.BLACK, level)
    assert result in game.valid_moves(Disc.BLACK)


@pytest.mark.parametrize("level", list(CpuLevel))
def test_get_best_move_white_is_valid(level):
    game = Game()
    game.make_move(2, 3, Disc.BLACK)
    result = get_best_move(game, Disc.WHITE, level)
    assert result in game.valid_moves(Disc.WHITE)


def test_get_best_move_without_moves():
    game = Game()
    for r in range(8):
        for c in range(8):
            game.board.place(r, c, Disc.WHITE)
    assert get_best_move(game, Disc.BLACK, CpuLevel.HARD) == (0, 0)


def test_get_best_move_does_not_change_game():
    game = Game()
    get_best_move(game, Disc.BLACK, CpuLevel.HARD)
    assert game.count_discs() == (2, 2)
    assert game.current_turn is Disc.BLACK


def test_greedy_move_takes_first_of_equal_moves():
    game = Game()
    moves = game.valid_moves(Disc.BLACK)
    assert greedy_move(game, moves, Disc.BLACK) == (2, 3)


def test_greedy_move_prefers_more_discs():
    game = Game()
    game.board.place(3, 5, Disc.WHITE)
    moves = game.valid_moves(Disc.BLACK)
    result = greedy_move(game, moves, Disc.BLACK)
    trial = game.copy()
    trial.make_move(*result, Disc.BLACK)
    best_count = trial.count_discs()[0]
    for move in moves:
        other = game.copy()
        other.make_move(*move, Disc.BLACK)
        assert other.count_discs()[0] <= best_count


def test_minimax_move_is_valid():
    game = Game()
    moves = game.valid_moves(Disc.BLACK)
    assert minimax_move(game, moves, Disc.BLACK) in moves


def test_evaluate_board_initial_is_balanced():
    game = Game()
    assert evaluate_board(game, Disc.BLACK) == 0
    assert evaluate_board(game, Disc.WHITE) == 0


def test_positional_score_initial():
    assert positional_score(Game(), Disc.BLACK) == 0


def test_positional_score_corner():
    game = Game()
    game.board.place(0, 0, Disc.BLACK)
    assert positional_score(game, Disc.BLACK) == 100
    assert positional_score(game, Disc.WHITE) == -100


def test_minimax_depth_zero_is_evaluation():
    game = Game()
    game.make_move(2, 3, Disc.BLACK)
    expected = evaluate_board(game, Disc.BLACK)
    assert minimax(game, 0, True, Disc.BLACK, float("-inf"), float("inf")) == expected


@pytest.mark.parametrize(
    "level, name",
    [(CpuLevel.EASY, "Easy"), (CpuLevel.MEDIUM, "Medium"), (CpuLevel.HARD, "Hard")],
)
def test_cpu_level_names_and_moves(level, name):
    game = Game()
    assert str(level) == name
    assert get_best_move(game, Disc.BLACK, level) in game.valid_moves(Disc.BLACK)