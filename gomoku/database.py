"""SQLite storage for players, matches and moves."""

from __future__ import annotations

import logging
import os
import sqlite3
from typing import Any, Sequence

log = logging.getLogger(__name__)

DEFAULT_PATH = "mainDB.db"

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS Gracze(
id INTEGER PRIMARY KEY AUTOINCREMENT,
nazwa TEXT UNIQUE NOT NULL
)""",
    """CREATE TABLE IF NOT EXISTS Mecze(
id INTEGER PRIMARY KEY AUTOINCREMENT,
gracz1_id INTEGER,
gracz2_id INTEGER,
zwyciezca_id INTEGER,
liczba_ruchow INTEGER,
data_rozgrywki DATETIME DEFAULT CURRENT_TIMESTAMP,
FOREIGN KEY(gracz1_id) REFERENCES Gracze(id),
FOREIGN KEY(gracz2_id) REFERENCES Gracze(id),
FOREIGN KEY(zwyciezca_id) REFERENCES Gracze(id)
)""",
    """CREATE TABLE IF NOT EXISTS Ruchy(
id INTEGER PRIMARY KEY AUTOINCREMENT,
mecz_id INTEGER,
gracz_id INTEGER,
numer_tury INTEGER,
wiersz INTEGER,
kolumna INTEGER,
FOREIGN KEY(mecz_id) REFERENCES Mecze(id),
FOREIGN KEY(gracz_id) REFERENCES Gracze(id)
)""",
)


class DatabaseError(Exception):
    """Raised when the game database cannot be opened or queried."""


class DatabaseManager:
    """Stores game results in an SQLite file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def connect(self) -> DatabaseManager:
        if self._conn is not None:
            return self
        try:
            self._conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot connect to {os.fspath(self.path)}: {exc}") from exc
        log.debug("connected to %s", os.fspath(self.path))
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> DatabaseManager:
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _execute(self, sql: str, params: Sequence[Any] = (), action: str = "query") -> sqlite3.Cursor:
        if self._conn is None:
            raise DatabaseError("database is not connected")
        try:
            with self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(f"{action} failed: {exc}") from exc

    def create_tables(self) -> None:
        for statement in _SCHEMA:
            self._execute(statement, action="creating tables")

    def get_player(self, name: str) -> int:
        """Return the id of the named player, adding the player if new."""
        row = self._execute(
            "SELECT id FROM Gracze WHERE nazwa = ?", (name,), "looking up player"
        ).fetchone()
        if row is not None:
            return row[0]
        cursor = self._execute("INSERT INTO Gracze (nazwa) VALUES (?)", (name,), "adding player")
        return cursor.lastrowid

    def save_match(
        self, player1_id: int, player2_id: int, winner_id: int | None, moves_count: int
    ) -> int:
        """Store a match and return its id; a winner of -1 or None records a draw."""
        winner = None if winner_id is None or winner_id == -1 else winner_id
        cursor = self._execute(
            "INSERT INTO Mecze (gracz1_id, gracz2_id, zwyciezca_id, liczba_ruchow) "
            "VALUES (?, ?, ?, ?)",
            (player1_id, player2_id, winner, moves_count),
            "saving match",
        )
        return cursor.lastrowid

    def save_move(self, match_id: int, player_id: int, turn_number: int, row: int, col: int) -> None:
        self._execute(
            "INSERT INTO Ruchy (mecz_id, gracz_id, numer_tury, wiersz, kolumna) "
            "VALUES (?, ?, ?, ?, ?)",
            (match_id, player_id, turn_number, row, col),
            "saving move",
        )

    def clear_database(self) -> None:
        """Delete every row and reset the id counters."""
        for table in ("Ruchy", "Mecze", "Gracze", "sqlite_sequence"):
            self._execute(f"DELETE FROM {table}", action=f"clearing {table}")