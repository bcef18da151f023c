# othello

Othello (Reversi) played full-screen in the terminal, either against a
friend at the same keyboard or against a computer opponent.

## Installation

```
pip install .
```

## Playing

```
othello
```

The command takes no options besides `--help`.

The game begins by asking for a game mode:

1. Player vs. Player
2. Player vs. CPU

If you pick the CPU, you then choose how strong it plays:

1. Easy: picks a random legal move
2. Medium: greedy, picks the first move that leaves it with the most discs
3. Hard: minimax search four plies deep with alpha-beta pruning, scoring
   positions by disc difference, mobility and fixed square values

Press `b` on the difficulty screen to return to the game mode screen.

You play black and always move first; the second human or the CPU plays
white. On screen, black discs are counted under `◯` and white discs under
`●`. While the CPU chooses its move, a short "thinking" message is shown.

When a player has no legal move, the turn passes to the other player. The
game ends once neither player can move, and the side with more discs wins
(or it is a draw). The final screen waits for Ctrl+Q before closing.

### Controls

| Key           | Action                      |
|---------------|-----------------------------|
| Arrow keys    | Move the cursor             |
| Enter / Space | Place a disc at the cursor  |
| Ctrl+Q        | Quit                        |

A disc is only placed on a legal square; other presses are ignored.

## Using the engine from Python

The rules and the computer players work without the terminal interface:

```python
from othello.board import Disc
from othello.game import Game
from othello.cpu import CpuLevel, get_best_move

game = Game()
print(game.valid_moves(Disc.BLACK))        # [(2, 3), (3, 2), (4, 5), (5, 4)]
game.make_move(2, 3, Disc.BLACK)

row, col = get_best_move(game, Disc.WHITE, CpuLevel.HARD)
game.make_move(row, col, Disc.WHITE)
print(game.count_discs())                  # (black, white)
```

- `othello.board`: `Disc` (`BLACK`, `WHITE`, `EMPTY`, with `opponent()`)
  and `Board` (`disc_at`, `place`, `copy`).
- `othello.game`: `Game` with `is_valid_move`, `valid_moves`, `make_move`
  (returns whether the move was legal and played), `pass_turn`,
  `is_game_over`, `count_discs` and `copy`.
- `othello.cpu`: `CpuLevel` and `get_best_move`, plus the strategies
  `random_move`, `greedy_move`, `minimax_move`, `minimax`,
  `evaluate_board` and `positional_score`.
- `othello.player`: `Player`, a frozen dataclass of a disc and an optional
  `CpuLevel` (`None` means a human); `get_move` raises `RuntimeError` for
  a human.
- `othello.ui`: the terminal front end (`OthelloApp`, `main`) and helpers
  `move_cursor`, `thinking_frames`, `winner_text` and `status_lines`.

## What it does not do

You cannot choose your colour, undo a move, or save and resume a game.
Quitting with Ctrl+Q ends the program rather than returning to the menu.

## Running the tests

```
pip install ".[test]"
pytest
```