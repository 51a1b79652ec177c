"""Five-in-a-row in the terminal, against a friend or the computer, with match history in SQLite."""

__version__ = "0.1.0"

__all__ = ["board", "game", "database", "session", "cli"]