"""Command-line start menu and text-mode game loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from .database import DEFAULT_PATH, DatabaseError, DatabaseManager
from .session import COMPUTER_NAME, GameSession, Outcome

MIN_SIZE = 10
MAX_SIZE = 50
MODES = {"pvp": "PvP", "pvc": "PvC"}

HELP_LINE = "Podaj: wiersz kolumna (od 0), n - nowa gra, q - koniec"


@dataclass(frozen=True)
class MenuChoice:
    """Settings chosen before a game starts."""

    mode: str
    player1_name: str
    player2_name: str
    vs_computer: bool
    board_size: int


def _board_size(text: str) -> int:
    try:
        size = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise argparse.ArgumentTypeError(f"board size must be between {MIN_SIZE} and {MAX_SIZE}")
    return size


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gomoku", description="Five in a row.")
    parser.add_argument("mode", type=str.lower, choices=sorted(MODES),
                        help="pvp: play a friend, pvc: play the computer")
    parser.add_argument("--player1", default=None, help="name of the first player")
    parser.add_argument("--player2", default=None, help="name of the second player (pvp only)")
    parser.add_argument("--size", type=_board_size, default=MIN_SIZE,
                        help=f"board size, {MIN_SIZE}-{MAX_SIZE}")
    parser.add_argument("--db", default=DEFAULT_PATH, help="path of the results database")
    return parser.parse_args(argv)


def menu_choice(args: argparse.Namespace) -> MenuChoice:
    """Turn parsed arguments into game settings, filling in default names."""
    mode = MODES[args.mode]
    if mode == "PvP":
        return MenuChoice(mode, args.player1 or "Gracz 1", args.player2 or "Gracz 2", False, args.size)
    return MenuChoice(mode, args.player1 or "Gracz", COMPUTER_NAME, True, args.size)


def _open_database(path: str) -> DatabaseManager | None:
    db = DatabaseManager(path)
    try:
        db.connect()
        db.create_tables()
    except DatabaseError as exc:
        print(f"Blad polaczenia z baza: {exc}", file=sys.stderr)
        db.close()
        return None
    return db


def _play(session: GameSession) -> None:
    print(session.title)
    while True:
        session.game.board.display()
        print(session.status)
        try:
            line = input("> ")
        except EOFError:
            break
        command = line.strip().lower()
        if command in ("q", "quit"):
            break
        if command in ("n", "new"):
            session.new_game()
            continue
        try:
            row, col = (int(part) for part in command.split())
        except ValueError:
            print(HELP_LINE)
            continue
        outcome = session.click(row, col)
        if outcome is Outcome.INVALID:
            print("Niedozwolony ruch")
        elif outcome is Outcome.IGNORED:
            print("Koniec gry! Wpisz n, aby zagrac ponownie.")
        elif outcome in (Outcome.WIN, Outcome.DRAW):
            session.game.board.display()
            print(session.message)


def main(argv: list[str] | None = None) -> int:
    choice = menu_choice(parse_args(argv))
    args_db = parse_args(argv).db
    db = _open_database(args_db)
    try:
        session = GameSession(
            choice.player1_name,
            choice.player2_name,
            choice.board_size,
            choice.vs_computer,
            choice.mode,
            db,
        )
        _play(session)
    finally:
        if db is not None:
            db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())