"""Players: a human at the keyboard or the computer at some level."""

from __future__ import annotations

from dataclasses import dataclass

from .board import Disc
from .cpu import CpuLevel, get_best_move
from .game import Game


@dataclass(frozen=True)
class Player:
    """One side of the game; ``level`` is None for a human."""

    disc: Disc
    level: CpuLevel | None = None

    def is_human(self) -> bool:
        """Whether the moves of this player come from the keyboard."""
        return self.level is None

    def get_move(self, game: Game) -> tuple[int, int]:
        """Choose the computer's move; human moves come from the user interface."""
        if self.level is None:
            raise RuntimeError("a human player's move comes from the user interface")
        return get_best_move(game, self.disc, self.level)