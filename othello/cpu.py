"""Computer opponents: random, greedy and minimax move choice."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from enum import Enum

from .board import SIZE, Disc
from .game import Game

SEARCH_DEPTH = 4

POSITION_VALUES = (
    (100, -20, 10, 5, 5, 10, -20, 100),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (10, -2, -1, -1, -1, -1, -2, 10),
    (5, -2, -1, -1, -1, -1, -2, 5),
    (5, -2, -1, -1, -1, -1, -2, 5),
    (10, -2, -1, -1, -1, -1, -2, 10),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (100, -20, 10, 5, 5, 10, -20, 100),
)

Move = tuple[int, int]


class CpuLevel(Enum):
    """How hard the computer plays."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    def __str__(self) -> str:
        return self.value


def get_best_move(game: Game, player: Disc, level: CpuLevel) -> Move:
    """Choose a move for ``player``; (0, 0) when there is none."""
    moves = game.valid_moves(player)
    if not moves:
        return (0, 0)
    if level is CpuLevel.EASY:
        return random_move(moves)
    if level is CpuLevel.MEDIUM:
        return greedy_move(game, moves, player)
    return minimax_move(game, moves, player)


def random_move(valid_moves: Sequence[Move]) -> Move:
    """Pick one of the moves at random."""
    return random.choice(valid_moves)


def greedy_move(game: Game, valid_moves: Sequence[Move], player: Disc) -> Move:
    """Pick the first move that leaves ``player`` with the most discs."""
    best = valid_moves[0]
    best_count = 0
    for row, col in valid_moves:
        trial = game.copy()
        trial.make_move(row, col, player)
        black, white = trial.count_discs()
        count = black if player is Disc.BLACK else white
        if count > best_count:
            best_count = count
            best = (row, col)
    return best


def minimax_move(game: Game, valid_moves: Sequence[Move], player: Disc) -> Move:
    """Pick the first move with the best minimax score."""
    best = valid_moves[0]
    best_score = -math.inf
    for row, col in valid_moves:
        trial = game.copy()
        trial.make_move(row, col, player)
        score = minimax(trial, SEARCH_DEPTH, False, player, -math.inf, math.inf)
        if score > best_score:
            best_score = score
            best = (row, col)
    return best


def minimax(game: Game, depth: int, maximizing: bool, player: Disc, alpha: float, beta: float) -> float:
    """Alpha-beta search, scored from the point of view of ``player``."""
    if depth == 0 or game.is_game_over():
        return evaluate_board(game, player)

    mover = player if maximizing else player.opponent()
    moves = game.valid_moves(mover)
    if not moves:
        return minimax(game, depth - 1, not maximizing, player, alpha, beta)

    if maximizing:
        best = -math.inf
        for row, col in moves:
            trial = game.copy()
            trial.make_move(row, col, mover)
            score = minimax(trial, depth - 1, False, player, alpha, beta)
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best

    best = math.inf
    for row, col in moves:
        trial = game.copy()
        trial.make_move(row, col, mover)
        score = minimax(trial, depth - 1, True, player, alpha, beta)
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return best


def evaluate_board(game: Game, player: Disc) -> int:
    """Score a position for ``player`` by discs, mobility and square values."""
    black, white = game.count_discs()
    mine, theirs = (black, white) if player is Disc.BLACK else (white, black)
    opponent = player.opponent()
    mobility = len(game.valid_moves(player)) - len(game.valid_moves(opponent))
    return (mine - theirs) + mobility * 5 + positional_score(game, player)


def positional_score(game: Game, player: Disc) -> int:
    """Sum of square values held by ``player`` minus those held by the opponent."""
    opponent = player.opponent()
    score = 0
    for r, values in enumerate(POSITION_VALUES):
        for c, value in enumerate(values):
            disc = game.board.disc_at(r, c)
            if disc is player:
                score += value
            elif disc is opponent:
                score -= value
    return score


assert len(POSITION_VALUES) == SIZE