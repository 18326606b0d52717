"""Minefield board: mine placement, neighbour counts and revealing cells."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

from campominado.render import MINE

HIDDEN = "x"
EXPLODED = "B"

_NEIGHBOUR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Difficulty(Enum):
    """Game modes, numbered as the player selects them."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def size(self) -> int:
        """Side length of the square board."""
        return {Difficulty.EASY: 10, Difficulty.MEDIUM: 20, Difficulty.HARD: 30}[self]

    def mine_count(self, classic: bool = False) -> int:
        """Number of mines; the classic game uses far fewer."""
        if classic:
            return {Difficulty.EASY: 3, Difficulty.MEDIUM: 6, Difficulty.HARD: 9}[self]
        return {Difficulty.EASY: 15, Difficulty.MEDIUM: 60, Difficulty.HARD: 135}[self]


class OutOfBoundsError(ValueError):
    """The coordinate lies outside the board."""


class AlreadyRevealedError(ValueError):
    """The coordinate has already been uncovered."""


def _neighbours(size: int, row: int, col: int) -> Iterator[tuple[int, int]]:
    for d_row, d_col in _NEIGHBOUR_OFFSETS:
        r, c = row + d_row, col + d_col
        if 0 <= r < size and 0 <= c < size:
            yield r, c


def place_mines(size: int, count: int, rng: random.Random | None = None) -> set[tuple[int, int]]:
    """Pick ``count`` distinct random cells of a ``size`` x ``size`` board."""
    if size <= 0:
        raise ValueError("board size must be positive")
    if not 0 <= count <= size * size:
        raise ValueError(f"cannot place {count} mines on a {size}x{size} board")
    rng = rng if rng is not None else random.Random()
    mines: set[tuple[int, int]] = set()
    while len(mines) < count:
        row = rng.randrange(size)
        col = rng.randrange(size)
        mines.add((row, col))
    return mines


def adjacent_counts(size: int, mines: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build the solution grid: ``MINE`` on mines, neighbour mine counts elsewhere."""
    mine_set = set(mines)
    for row, col in mine_set:
        if not (0 <= row < size and 0 <= col < size):
            raise OutOfBoundsError(f"mine at ({row},{col}) is outside the board")
    return [
        [
            MINE if (row, col) in mine_set
            else sum((r, c) in mine_set for r, c in _neighbours(size, row, col))
            for col in range(size)
        ]
        for row in range(size)
    ]


class Game:
    """State of one match: the solution, the player's view and what was uncovered."""

    def __init__(self, grid: Sequence[Sequence[int]], mine_count: int, cascade: bool = True) -> None:
        size = len(grid)
        if size == 0 or any(len(row) != size for row in grid):
            raise ValueError("grid must be a non-empty square")
        self.grid = [list(row) for row in grid]
        self.size = size
        self.mine_count = mine_count
        self.cascade = cascade
        self._view = [[HIDDEN] * size for _ in range(size)]
        self._uncovered: set[tuple[int, int]] = set()
        self._lost = False

    @classmethod
    def new(
        cls,
        difficulty: Difficulty,
        rng: random.Random | None = None,
        classic: bool = False,
    ) -> Game:
        """Start a random game; the classic game reveals one cell per move."""
        size = difficulty.size
        count = difficulty.mine_count(classic)
        grid = adjacent_counts(size, place_mines(size, count, rng))
        return cls(grid, count, cascade=not classic)

    def reveal(self, row: int, col: int) -> int:
        """Uncover the zero-based cell and return its value (``MINE`` for a mine)."""
        if self.is_over():
            raise RuntimeError("the game is over")
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfBoundsError(f"coordinate ({row + 1},{col + 1}) does not exist")
        if (row, col) in self._uncovered:
            raise AlreadyRevealedError(f"coordinate ({row + 1},{col + 1}) already revealed")

        self._uncovered.add((row, col))
        value = self.grid[row][col]
        if value == MINE:
            self._lost = True
            self._view[row][col] = EXPLODED
            return value

        self._view[row][col] = str(value)
        if value == 0 and self.cascade:
            self._flood(row, col)
        return value

    def _flood(self, row: int, col: int) -> None:
        pending = [(row, col)]
        while pending:
            current = pending.pop()
            for r, c in _neighbours(self.size, *current):
                value = self.grid[r][c]
                if value == MINE or self._view[r][c] != HIDDEN:
                    continue
                self._view[r][c] = str(value)
                self._uncovered.add((r, c))
                if value == 0:
                    pending.append((r, c))

    def view(self) -> list[list[str]]:
        """The board as the player sees it."""
        return [list(row) for row in self._view]

    def revealed_count(self) -> int:
        """Number of cells uncovered so far."""
        return len(self._uncovered)

    def is_won(self) -> bool:
        return not self._lost and self.revealed_count() >= self.size * self.size - self.mine_count

    def is_lost(self) -> bool:
        return self._lost

    def is_over(self) -> bool:
        return self._lost or self.revealed_count() >= self.size * self.size - self.mine_count