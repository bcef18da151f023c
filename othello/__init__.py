"""Othello (Reversi): board, rules, CPU players and a terminal front end."""

__version__ = "0.1.0"