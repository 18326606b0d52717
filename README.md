# campominado

A minesweeper game ("campo minado") played in the terminal. You pick a
difficulty, then uncover cells by typing their coordinates until you either
clear every safe cell or step on a mine. The game talks to the player in
Portuguese.

## Installing

```
pip install .
```

## Playing

```
campominado
```

The game first asks for a difficulty:

| Mode | Name    | Board   | Mines | Mines with `--classic` |
|------|---------|---------|-------|------------------------|
| 1    | Fácil   | 10 × 10 | 15    | 3                      |
| 2    | Médio   | 20 × 20 | 60    | 6                      |
| 3    | Difícil | 30 × 30 | 135   | 9                      |

Any other answer is refused and the question is asked again.

Each turn the board is shown with numbered rows and columns. Hidden cells are
shown as `x`. Type a cell as `row,col`, counting from 1, for example:

```
3,7
```

- A coordinate outside the board, or text that is not a `row,col` pair, is
  rejected and you are asked again.
- A cell that is already uncovered is rejected too.
- A safe cell shows how many of its eight neighbours hold a mine.
- Uncovering a cell with no neighbouring mines opens the surrounding area
  automatically, spreading until it reaches numbered cells.
- Uncovering a mine shows `B` and ends the game with "game over".

When every safe cell has been uncovered you win ("parabens, vc eh fera").
Either way the full board is printed at the end, with mines shown as `-1`.
If the input ends before the game does, the command exits with status 1.

### Options

- `--log PATH` — where to write the game log (default `log.txt`).
- `--classic` — the classic game: few mines, only the chosen cell is
  uncovered on each move (no automatic opening), the final board is printed
  without row and column numbers, and no log file is written.
- `--seed N` — seed for mine placement, to replay the same board.

## Game log

Unless `--classic` is given, every game writes a log file (`log.txt` in the
current directory by default). It records the date and time the game
started, the chosen difficulty and number of mines, the board and coordinate
of each move, the feedback given for rejected moves, the final result and
the complete solution board.

## Using it as a library

- `campominado.board` — `Difficulty` (with `size` and `mine_count()`),
  `Game` (`Game.new`, `reveal`, `view`, `revealed_count`, `is_won`,
  `is_lost`, `is_over`), `place_mines`, `adjacent_counts`, and the errors
  `OutOfBoundsError` and `AlreadyRevealedError` raised by `Game.reveal`.
- `campominado.render` — text rendering of the player's view and the
  solution board (`render_view`, `render_solution`,
  `render_solution_plain`, `column_header`, `row_label`).
- `campominado.gamelog` — `GameLog`, which writes the game record to a
  file, and `format_timestamp`.
- `campominado.cli` — the interactive loop (`run_game`, `read_mode`,
  `parse_coordinates`) and the `main` entry point.

```python
import random
from campominado.board import Difficulty, Game

game = Game.new(Difficulty.EASY, random.Random(1))
game.reveal(0, 0)          # zero-based row and column
print(game.view())
```

## Running the tests

```
pip install .[test]
pytest
```