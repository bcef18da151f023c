"""Othello rules: legal moves, flipping, turns and scoring."""

from __future__ import annotations

from collections.abc import Iterator

from .board import SIZE, Board, Disc

DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Game:
    """A game in progress: the board and whose turn it is."""

    def __init__(self) -> None:
        self.board = Board()
        self.current_turn = Disc.BLACK

    def copy(self) -> "Game":
        """Return an independent copy of the game."""
        clone = Game.__new__(Game)
        clone.board = self.board.copy()
        clone.current_turn = self.current_turn
        return clone

    def _captures(self, row: int, col: int, player: Disc) -> Iterator[list[tuple[int, int]]]:
        """Yield, for each direction that captures, the opponent discs it flips."""
        opponent = player.opponent()
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            line: list[tuple[int, int]] = []
            while True:
                disc = self.board.disc_at(r, c)
                if disc is opponent:
                    line.append((r, c))
                elif disc is player:
                    if line:
                        yield line
                    break
                else:
                    break
                r += dr
                c += dc

    def is_valid_move(self, row: int, col: int, player: Disc) -> bool:
        """Whether placing a disc of ``player`` at the square flips anything."""
        if self.board.disc_at(row, col) is not Disc.EMPTY:
            return False
        return next(self._captures(row, col, player), None) is not None

    def valid_moves(self, player: Disc) -> list[tuple[int, int]]:
        """All legal squares for ``player``, in row-major order."""
        return [
            (r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.is_valid_move(r, c, player)
        ]

    def make_move(self, row: int, col: int, player: Disc) -> bool:
        """Play a move if it is legal; return whether it was played."""
        if not self.is_valid_move(row, col, player):
            return False
        to_flip = [square for line in self._captures(row, col, player) for square in line]
        self.board.place(row, col, player)
        for r, c in to_flip:
            self.board.place(r, c, player)
        self.pass_turn()
        return True

    def pass_turn(self) -> None:
        """Hand the turn to the other side."""
        self.current_turn = self.current_turn.opponent()

    def is_game_over(self) -> bool:
        """True when neither side has a legal move."""
        return not self.valid_moves(Disc.BLACK) and not self.valid_moves(Disc.WHITE)

    def count_discs(self) -> tuple[int, int]:
        """Return the number of black and white discs on the board."""
        black = white = 0
        for r in range(SIZE):
            for c in range(SIZE):
                disc = self.board.disc_at(r, c)
                if disc is Disc.BLACK:
                    black += 1
                elif disc is Disc.WHITE:
                    white += 1
        return black, white