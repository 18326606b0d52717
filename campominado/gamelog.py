"""Plain-text log of a minefield game session."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from os import PathLike
from pathlib import Path

from campominado.render import render_solution, render_view

_ENCODING = "utf-8"


def format_timestamp(moment: datetime) -> str:
    """Format the date and time lines written at the start of a log."""
    return (
        f"Data: {moment.day}/{moment.month}/{moment.year}\n"
        f"Hora: {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}\n\n"
    )


class GameLog:
    """Append-only record of a game, kept in a text file."""

    def __init__(self, path: str | PathLike[str] = "log.txt") -> None:
        self.path = Path(path)

    def _append(self, text: str) -> None:
        with self.path.open("a", encoding=_ENCODING) as handle:
            handle.write(text)

    def start(self, moment: datetime | None = None) -> None:
        """Create (or truncate) the log and write the opening line and timestamp."""
        when = moment if moment is not None else datetime.now()
        with self.path.open("w", encoding=_ENCODING) as handle:
            handle.write("Início do jogo: \n")
            handle.write(format_timestamp(when))

    def write_text(self, text: str) -> None:
        """Append ``text`` verbatim."""
        self._append(text)

    def write_intro(self, mode: int, mines: int) -> None:
        """Append the difficulty and the number of mines of the match."""
        self._append(f"|Dificuldade: {mode}        |Quantidade de bombas:{mines}\n\n")

    def write_move(self, view: Sequence[Sequence[str]], row: int, col: int) -> None:
        """Append the player's view and the one-based coordinate they typed."""
        self._append(
            "\n\n"
            + render_view(view)
            + f"Coordenada digitada pelo jogador: ({row},{col})\n"
        )

    def write_solution(self, grid: Sequence[Sequence[int]]) -> None:
        """Append the complete board with every mine shown."""
        self._append("\n\nMATRIZ ORIGINAL DO JOGO:\n" + render_solution(grid))