"""Game board and players."""

from __future__ import annotations

import sys
from dataclasses import dataclass

EMPTY = " "
DEFAULT_SIZE = 10


class Board:
    """Square grid of single-character cells; a space marks an empty cell."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 0:
            raise ValueError(f"board size must not be negative, got {size}")
        self.size = size
        self._grid = [[EMPTY] * size for _ in range(size)]

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    @staticmethod
    def _format_row(row: list[str]) -> str:
        return "".join(f"{cell} " for cell in row)

    def render(self) -> str:
        """Return the board as text, one line per row, each cell followed by a space."""
        return "".join(self._format_row(row) + "\n" for row in self._grid)

    def display(self) -> None:
        """Write the board to standard output, one line per row."""
        out = sys.stdout
        for row in self._grid:
            out.write(self._format_row(row))
            out.write("\n")
        out.flush()

    def update_cell(self, row: int, col: int, symbol: str) -> None:
        """Set a cell; coordinates outside the board are ignored."""
        if self._in_bounds(row, col):
            self._grid[row][col] = symbol

    def is_cell_empty(self, row: int, col: int) -> bool:
        """True if the cell lies on the board and holds no symbol."""
        return self._in_bounds(row, col) and self._grid[row][col] == EMPTY

    def is_full(self) -> bool:
        return all(cell != EMPTY for row in self._grid for cell in row)

    def cell(self, row: int, col: int) -> str:
        """Return the symbol at a cell; raise IndexError outside the board."""
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        return self._grid[row][col]

    def clear(self) -> None:
        for row in self._grid:
            row[:] = [EMPTY] * self.size


@dataclass
class Player:
    """A named player who places one symbol on the board."""

    name: str
    symbol: str

    def make_move(self, board: Board, row: int, col: int) -> None:
        board.update_cell(row, col, self.symbol)