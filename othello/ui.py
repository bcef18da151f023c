"""Full-screen terminal front end for playing Othello."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from blessed import Terminal

from .board import SIZE, Board, Disc
from .cpu import CpuLevel
from .game import Game
from .player import Player

CTRL_Q = "\x11"
BLACK_SYMBOL = "◯"
WHITE_SYMBOL = "●"
HELP_TEXT = "Use arrow keys to move, Enter/Space to place, 'Ctrl+Q' to quit."

_STEPS = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

_THINKING = {
    CpuLevel.EASY: (800, "thinking"),
    CpuLevel.MEDIUM: (1200, "analyzing"),
    CpuLevel.HARD: (2000, "calculating"),
}


def move_cursor(cursor: tuple[int, int], direction: str) -> tuple[int, int]:
    """Move the cursor one square, staying on the board."""
    try:
        dr, dc = _STEPS[direction]
    except KeyError:
        raise ValueError(f"unknown direction: {direction!r}") from None
    row, col = cursor
    return (
        min(max(row + dr, 0), SIZE - 1),
        min(max(col + dc, 0), SIZE - 1),
    )


def thinking_frames(level: CpuLevel) -> tuple[int, list[str]]:
    """Return the total thinking time in milliseconds and the animation frames."""
    total, word = _THINKING[level]
    return total, [f"CPU is {word}{'.' * dots}" for dots in (1, 2, 3)]


def winner_text(game: Game) -> str:
    """The closing line announcing the winner or a draw."""
    black, white = game.count_discs()
    if black > white:
        return f"{BLACK_SYMBOL} wins!"
    if white > black:
        return f"{WHITE_SYMBOL} wins!"
    return "It's a draw!"


def status_lines(game: Game) -> list[str]:
    """The lines shown under the board: turn, score and help."""
    black, white = game.count_discs()
    symbol = BLACK_SYMBOL if game.current_turn is Disc.BLACK else WHITE_SYMBOL
    return [
        f"Turn: {symbol}",
        f"{BLACK_SYMBOL}: {black} | {WHITE_SYMBOL}: {white}",
        HELP_TEXT,
    ]


class OthelloApp:
    """Menus, board drawing and keyboard handling on a blessed terminal."""

    def __init__(self, term: Terminal) -> None:
        self.term = term
        self.cursor = (0, 0)

    def _write(self, *parts: str) -> None:
        stream = self.term.stream
        stream.write("".join(parts))
        stream.flush()

    def _menu(self, lines: Sequence[tuple[int, int, str]]) -> None:
        term = self.term
        parts = [term.clear, term.home]
        parts.extend(term.move_xy(x, y) + text for x, y, text in lines)
        self._write(*parts)

    def _quit(self) -> None:
        raise SystemExit(0)

    def select_game_mode(self) -> CpuLevel | None:
        """Ask for the opponent: None for a second human, else the CPU level."""
        while True:
            self._menu([
                (0, 0, "Welcome to Othello!"),
                (0, 2, "Select game mode:"),
                (2, 3, "1. Player vs. Player"),
                (2, 4, "2. Player vs. CPU"),
                (0, 6, "Press 'Ctrl+Q' to quit."),
            ])
            key = self.term.inkey()
            if key == "1":
                return None
            if key == "2":
                return self.select_cpu_level()
            if key == CTRL_Q:
                self._quit()

    def select_cpu_level(self) -> CpuLevel | None:
        """Ask for the CPU level; 'b' goes back to the game mode menu."""
        levels = {"1": CpuLevel.EASY, "2": CpuLevel.MEDIUM, "3": CpuLevel.HARD}
        while True:
            self._menu([
                (0, 0, "Select CPU difficulty:"),
                (0, 2, "1. Easy - Random moves"),
                (0, 3, "2. Medium - Greedy strategy"),
                (0, 4, "3. Hard - Minimax algorithm"),
                (0, 6, "Press 'b' to go back, 'Ctrl+Q' to quit."),
            ])
            key = self.term.inkey()
            if key in levels:
                return levels[key]
            if key == "b":
                return self.select_game_mode()
            if key == CTRL_Q:
                self._quit()

    def run(self, player1: Player, player2: Player) -> Game:
        """Play one game until it ends or a human quits; return the final game."""
        game = Game()
        while True:
            self.draw_board(game.board)
            self.draw_info(game)

            disc = game.current_turn
            current = player1 if disc is Disc.BLACK else player2

            if game.is_game_over():
                self.draw_game_over(game)
                break

            if not game.valid_moves(disc):
                game.pass_turn()
                continue

            if current.is_human():
                move = self.human_move(game, disc)
                if move is None:
                    return game
            else:
                self.show_cpu_thinking(current.level)
                move = current.get_move(game)

            game.make_move(*move, disc)
        return game

    def human_move(self, game: Game, disc: Disc) -> tuple[int, int] | None:
        """Let the user pick a legal square; None when they quit."""
        term = self.term
        arrows = {
            term.KEY_UP: "up",
            term.KEY_DOWN: "down",
            term.KEY_LEFT: "left",
            term.KEY_RIGHT: "right",
        }
        while True:
            key = term.inkey()
            if key.code in arrows:
                self.cursor = move_cursor(self.cursor, arrows[key.code])
            elif key.code == term.KEY_ENTER or key in ("\r", "\n", " "):
                if game.is_valid_move(*self.cursor, disc):
                    return self.cursor
            elif key == CTRL_Q:
                return None
            self.draw_board(game.board)
            self.draw_info(game)

    def draw_board(self, board: Board) -> None:
        """Draw the grid with the cursor square highlighted."""
        term = self.term
        parts = [term.clear, term.home]
        for row in range(SIZE):
            for col in range(SIZE):
                disc = board.disc_at(row, col)
                background = term.on_yellow if (row, col) == self.cursor else term.on_green
                foreground = term.black if disc is Disc.BLACK else term.white
                parts.append(term.move_xy(col * 2 + 2, row + 1))
                parts.append(background + foreground + f"{disc} ")
        parts.append(term.normal)
        self._write(*parts)

    def draw_info(self, game: Game) -> None:
        """Draw the turn, the score and the help line under the board."""
        term = self.term
        turn, score, help_line = status_lines(game)
        self._write(
            term.move_xy(0, 10), term.white, turn, term.normal,
            term.move_xy(0, 11), term.white, score, term.normal,
            term.move_xy(0, 12), help_line,
        )

    def draw_game_over(self, game: Game) -> None:
        """Announce the result and wait for Ctrl+Q."""
        term = self.term
        self._write(
            term.move_xy(0, 14), "Game Over!",
            term.move_xy(0, 15), term.white, winner_text(game), term.normal,
            term.move_xy(0, 16), "Press 'Ctrl+Q' to exit.",
        )
        while term.inkey() != CTRL_Q:
            pass

    def show_cpu_thinking(self, level: CpuLevel) -> None:
        """Animate a short thinking message for the computer's turn."""
        term = self.term
        total, frames = thinking_frames(level)
        pause = total // len(frames) / 1000
        for frame in frames:
            self._write(
                term.move_xy(0, 13), term.clear_eol,
                term.yellow, frame, term.normal,
            )
            time.sleep(pause)
        self._write(term.move_xy(0, 13), term.clear_eol)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(prog="othello", description="Play Othello in the terminal.")
    parser.parse_args(argv)

    term = Terminal()
    app = OthelloApp(term)
    with term.fullscreen(), term.hidden_cursor(), term.raw():
        level = app.select_game_mode()
        app.run(Player(Disc.BLACK), Player(Disc.WHITE, level))
    return 0