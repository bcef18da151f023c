"""The Othello board and the discs placed on it."""

from __future__ import annotations

from enum import Enum

SIZE = 8


class Disc(Enum):
    """The content of one square."""

    BLACK = "black"
    WHITE = "white"
    EMPTY = "empty"

    def opponent(self) -> "Disc":
        """Return the disc of the other side; anything but black faces black."""
        return Disc.WHITE if self is Disc.BLACK else Disc.BLACK

    def __str__(self) -> str:
        return "." if self is Disc.EMPTY else "●"


class Board:
    """An 8x8 grid of discs, set up with the four starting discs."""

    def __init__(self) -> None:
        self._grid = [[Disc.EMPTY] * SIZE for _ in range(SIZE)]
        self._grid[3][3] = Disc.WHITE
        self._grid[3][4] = Disc.BLACK
        self._grid[4][3] = Disc.BLACK
        self._grid[4][4] = Disc.WHITE

    @staticmethod
    def _on_board(row: int, col: int) -> bool:
        return 0 <= row < SIZE and 0 <= col < SIZE

    def disc_at(self, row: int, col: int) -> Disc | None:
        """Return the disc at a square, or None if the square is off the board."""
        if self._on_board(row, col):
            return self._grid[row][col]
        return None

    def place(self, row: int, col: int, disc: Disc) -> None:
        """Put a disc on a square; squares off the board are ignored."""
        if self._on_board(row, col):
            self._grid[row][col] = disc

    def copy(self) -> "Board":
        """Return an independent copy of the board."""
        clone = Board.__new__(Board)
        clone._grid = [list(row) for row in self._grid]
        return clone