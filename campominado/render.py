"""Text rendering of minefield grids for the console and the game log."""

from __future__ import annotations

from collections.abc import Sequence

MINE = -1


def column_header(size: int) -> str:
    """Return the header line that numbers the columns from 1 to ``size``."""
    labels = (f" {number}" if number >= 9 else f" {number} " for number in range(1, size + 1))
    return "    " + "".join(labels)


def row_label(index: int) -> str:
    """Return the label printed before the row at zero-based ``index``."""
    number = index + 1
    return f" {number} " if index >= 9 else f" {number}  "


def _solution_cell(value: int) -> str:
    return f"{value} " if value == MINE else f" {value} "


def render_view(view: Sequence[Sequence[str]]) -> str:
    """Render the player's view: a column header, then labelled rows of characters."""
    lines = [column_header(len(view))]
    lines.extend(
        row_label(index) + "".join(f" {cell} " for cell in row)
        for index, row in enumerate(view)
    )
    return "\n".join(lines) + "\n"


def render_solution(grid: Sequence[Sequence[int]]) -> str:
    """Render the full board of numbers and mines with row and column labels."""
    lines = [column_header(len(grid))]
    lines.extend(
        row_label(index) + "".join(_solution_cell(value) for value in row)
        for index, row in enumerate(grid)
    )
    return "\n".join(lines) + "\n"


def render_solution_plain(grid: Sequence[Sequence[int]]) -> str:
    """Render the full board without any labels, one line per row."""
    return "".join("".join(_solution_cell(value) for value in row) + "\n" for row in grid)