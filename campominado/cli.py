"""Console front end of the minefield game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from campominado.board import AlreadyRevealedError, Difficulty, Game, OutOfBoundsError
from campominado.gamelog import GameLog
from campominado.render import MINE, render_solution, render_solution_plain, render_view

_MENU = "1 - Facil\n2 - Medio\n3 - Dificil\n"
_SEPARATOR = "***********************************************\n"
_RETRY_NOTE = "(Jogador teve que digitar uma nova coordenada).\n"


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise EOFError("input ended before the game finished") from None


def read_mode(lines: Iterable[str], output: TextIO) -> Difficulty:
    """Ask for a game mode until the player types 1, 2 or 3."""
    source = iter(lines)
    output.write("Para iniciar o jogo selecione o modo. Digite:\n" + _MENU)
    while True:
        text = _next_line(source).strip()
        try:
            return Difficulty(int(text))
        except ValueError:
            output.write("Modo Indisponivel. Digite:\n" + _MENU)


def parse_coordinates(text: str) -> tuple[int, int]:
    """Parse a one-based ``row,col`` pair typed by the player."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise ValueError(f"expected 'row,col', got {text.strip()!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"expected 'row,col', got {text.strip()!r}") from None


def _mode_number(mode: Difficulty | int) -> int:
    return mode.value if isinstance(mode, Difficulty) else int(mode)


def run_game(
    game: Game,
    mode: Difficulty | int,
    lines: Iterable[str],
    output: TextIO,
    log: GameLog | None = None,
) -> bool:
    """Play ``game`` with moves read from ``lines``; return True when the player wins."""
    source = iter(lines)
    number = _mode_number(mode)
    detailed = game.cascade

    if detailed:
        prompt = "Digite as coordenadas que deseja verificar. Ex: x,y\n"
        missing = "\n\n-> COORDENADA DIGITADA NAO EXISTE. Digite novamente!\n"
        repeated = "\n\n-> COORDENADA DIGITADA JA DESCOBERTA. Digite novamente!\n"
    else:
        prompt = "Digite as coordenadas que deseja verificar:\nx,y\n"
        missing = "\n\n-> COORDENADA NAO EXISTE. Digite novamente!\n"
        repeated = "\n\n-> COORDENADA JA SELECIONADA. Digite novamente!\n"

    def log_feedback(message: str) -> None:
        if log is not None:
            log.write_text("Feedback dado ao usuário: \n")
            log.write_text(message + _RETRY_NOTE)

    while not game.is_over():
        output.write(_SEPARATOR)
        output.write(f"|Dificuldade: {number}        |Quantidade de bombas:{game.mine_count}\n")
        output.write(render_view(game.view()))
        output.write(prompt)

        text = _next_line(source)
        try:
            row, col = parse_coordinates(text)
        except ValueError:
            output.write(missing)
            log_feedback("-> COORDENADA DIGITADA NÃO EXISTE. Digite novamente!\n")
            output.write("\n")
            continue

        try:
            value = game.reveal(row - 1, col - 1)
        except OutOfBoundsError:
            output.write(missing)
            if log is not None:
                log.write_move(game.view(), row, col)
            log_feedback("-> COORDENADA DIGITADA NÃO EXISTE. Digite novamente!\n")
        except AlreadyRevealedError:
            output.write(repeated)
            if log is not None:
                log.write_move(game.view(), row, col)
            log_feedback("-> COORDENADA DIGITADA JÁ DESCOBERTA. Digite novamente!\n")
        else:
            if value != MINE:
                output.write("\n\nUHU! Sem bomba por aqui!\n")
            if log is not None:
                log.write_move(game.view(), row, col)
        output.write("\n")

    output.write(render_view(game.view()))
    won = game.is_won()
    if won:
        output.write("\nparabens, vc eh fera\n\n")
        if log is not None:
            log.write_text("Feedback dado ao usuário: \nparabens, vc eh fera")
            log.write_text("\n\nRESULTADO: JOGADOR GANHOU!\n")
    else:
        output.write("\ngame over\n\n")
        if log is not None:
            log.write_text("Feedback dado ao usuário: \ngame over")
            log.write_text("\n\nRESULTADO: JOGADOR PERDEU!\n")

    output.write("MATRIZ ORIGINAL DO JOGO:\n")
    if log is not None:
        log.write_solution(game.grid)
    output.write(render_solution(game.grid) if detailed else render_solution_plain(game.grid))
    return won


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive game on standard input and output."""
    parser = argparse.ArgumentParser(prog="campominado", description="Minefield game.")
    parser.add_argument("--log", default="log.txt", help="path of the game log file")
    parser.add_argument(
        "--classic",
        action="store_true",
        help="few mines, one cell per move and no log file",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for mine placement")
    args = parser.parse_args(argv)

    output = sys.stdout
    lines = iter(sys.stdin)
    log: GameLog | None = None

    try:
        if not args.classic:
            log = GameLog(args.log)
            try:
                log.start()
            except OSError:
                output.write("Arquivo não pode ser criado! \n\n")
                log = None
            else:
                output.write("Arquivo log.txt criado com sucesso! \n\n")

        output.write("************ BEM VINDO(A) AO CAMPO MINADO! ************\n")
        mode = read_mode(lines, output)
        game = Game.new(mode, random.Random(args.seed), classic=args.classic)

        if log is not None:
            log.write_intro(mode.value, game.mine_count)
            log.write_text("Histórico completo da partida do usuário: \n")

        run_game(game, mode, lines, output, log)
    except EOFError:
        output.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())