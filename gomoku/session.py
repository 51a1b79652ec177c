"""A playable game session: turns, computer replies, results and saving."""

from __future__ import annotations

import logging
from enum import Enum

from .board import Player
from .database import DatabaseError, DatabaseManager
from .game import Game

log = logging.getLogger(__name__)

COMPUTER_NAME = "Komputer"
TITLE_PREFIX = "Kółko i krzyżyk "


class Outcome(Enum):
    """What a click on a cell led to."""

    IGNORED = "ignored"
    INVALID = "invalid"
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


class GameSession:
    """Drives one game window: players take turns by clicking cells."""

    def __init__(
        self,
        player1_name: str,
        player2_name: str,
        size: int,
        vs_computer: bool,
        mode: str,
        db: DatabaseManager | None = None,
    ) -> None:
        self.player1 = Player(player1_name, "X")
        self.player2 = Player(player2_name, "O")
        self.size = size
        self.vs_computer = vs_computer
        self.mode = mode
        self.db = db
        self.game = Game(self.player1, self.player2, size, vs_computer)
        self.finished = False
        self.message = ""
        self.last_computer_move: tuple[int, int] | None = None
        self.game.reset_game()
        self._show_turn()

    @property
    def title(self) -> str:
        return TITLE_PREFIX + self.mode

    def _show_turn(self) -> None:
        self.status = f"Teraz gra: {self.game.current_player.name}"

    def _finish(self, message: str) -> None:
        self.message = message
        self.finished = True

    def click(self, row: int, col: int) -> Outcome:
        """Play the current player's move at (row, col) and report the result."""
        if self.finished:
            return Outcome.IGNORED
        if not self.game.make_move(row, col):
            return Outcome.INVALID

        winner = self.game.check_winner()
        if winner:
            self.save_game(winner)
            player = self.player1 if winner == 1 else self.player2
            self._finish(f"{player.name}({player.symbol}) wygrywa!")
            return Outcome.WIN
        if self.game.is_draw():
            self.save_game(0)
            self._finish("Remis!")
            return Outcome.DRAW

        self.game.switch_player()
        self._show_turn()
        if self.vs_computer and self.game.current_player.name == COMPUTER_NAME:
            return self._computer_turn()
        return Outcome.CONTINUE

    def _computer_turn(self) -> Outcome:
        self.last_computer_move = self.game.computer_move()

        winner = self.game.check_winner()
        if winner:
            self.save_game(winner)
            name = self.player1.name if winner == 1 else self.player2.name
            self._finish(f"{name} wygrywa!")
            self.status = f"Koniec gry! {name} wygrał!"
            return Outcome.WIN
        if self.game.is_draw():
            self.save_game(1)
            self._finish("Remis!")
            self.status = "Koniec gry! Remis!"
            return Outcome.DRAW

        self.game.switch_player()
        self._show_turn()
        return Outcome.CONTINUE

    def new_game(self) -> None:
        """Start another game; the starting side alternates between games."""
        self.finished = False
        self.message = ""
        self.last_computer_move = None
        self.game.reset_game()
        self._show_turn()

    def save_game(self, winner_flag: int) -> int | None:
        """Store the finished game; 1 or 2 names the winner, anything else a draw.

        Returns the match id, or None when there is no database or saving failed.
        """
        if self.db is None:
            return None
        try:
            p1_id = self.db.get_player(self.player1.name)
            p2_id = self.db.get_player(self.player2.name)
            winner_id = {1: p1_id, 2: p2_id}.get(winner_flag, -1)
            history = self.game.move_history
            match_id = self.db.save_match(p1_id, p2_id, winner_id, len(history))
            for turn, move in enumerate(history, start=1):
                player_id = p1_id if move.player is self.player1 else p2_id
                self.db.save_move(match_id, player_id, turn, move.row, move.col)
        except DatabaseError as exc:
            log.warning("could not save the game: %s", exc)
            return None
        log.debug("game saved as match %s", match_id)
        return match_id