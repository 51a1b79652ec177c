"""Five-in-a-row game rules and a simple computer opponent."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product

from .board import DEFAULT_SIZE, EMPTY, Board, Player

WIN_LENGTH = 5
WIN_SCORE = 100_000_000
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


@dataclass(frozen=True)
class MoveRecord:
    """One move made during a game."""

    player: Player
    row: int
    col: int


def _scan(board: Board, row: int, col: int, dr: int, dc: int, symbol: str) -> tuple[int, bool]:
    """Count symbols in a line from (row, col), excluding it; report an open end."""
    count = 0
    r, c = row + dr, col + dc
    while 0 <= r < board.size and 0 <= c < board.size:
        cell = board.cell(r, c)
        if cell == symbol:
            count += 1
        elif cell == EMPTY:
            return count, True
        else:
            break
        r += dr
        c += dc
    return count, False


def calculate_score(board: Board, row: int, col: int, symbol: str) -> int:
    """Score placing `symbol` at (row, col) by the lines it would form."""
    score = 0
    for dr, dc in DIRECTIONS:
        forward, forward_open = _scan(board, row, col, dr, dc, symbol)
        backward, backward_open = _scan(board, row, col, -dr, -dc, symbol)
        length = forward + backward + 1
        open_ends = int(forward_open) + int(backward_open)

        if length >= WIN_LENGTH:
            score += WIN_SCORE
        elif length == 4:
            if open_ends == 2:
                score += 500_000
            elif open_ends == 1:
                score += 10_000
        elif length == 3:
            if open_ends == 2:
                score += 5_000
            elif open_ends == 1:
                score += 100
        elif length == 2 and open_ends == 2:
            score += 50
    return score


class Game:
    """A game between two players on a square board."""

    def __init__(
        self,
        player1: Player,
        player2: Player,
        board_size: int = DEFAULT_SIZE,
        vs_computer: bool = False,
    ) -> None:
        self.player1 = player1
        self.player2 = player2
        self.board = Board(board_size)
        self.current_player = player1
        self.vs_computer = vs_computer
        self._player1_next = True
        self._history: list[MoveRecord] = []

    @property
    def move_history(self) -> list[MoveRecord]:
        return list(self._history)

    def switch_player(self) -> None:
        self.current_player = self.player2 if self.current_player is self.player1 else self.player1

    def _holds(self, row: int, col: int, symbol: str) -> bool:
        return 0 <= row < self.board.size and 0 <= col < self.board.size and self.board.cell(row, col) == symbol

    def check_winner(self) -> int:
        """Return 1 if X has five in a line, 2 for any other symbol, 0 for none."""
        size = self.board.size
        for row, col in product(range(size), repeat=2):
            symbol = self.board.cell(row, col)
            if symbol == EMPTY:
                continue
            for dr, dc in DIRECTIONS:
                if all(self._holds(row + dr * k, col + dc * k, symbol) for k in range(1, WIN_LENGTH)):
                    return 1 if symbol == "X" else 2
        return 0

    def is_draw(self) -> bool:
        return self.board.is_full()

    def make_move(self, row: int, col: int) -> bool:
        """Place the current player's symbol; False if the cell is taken or off the board."""
        if not self.board.is_cell_empty(row, col):
            return False
        self._history.append(MoveRecord(self.current_player, row, col))
        self.current_player.make_move(self.board, row, col)
        return True

    def computer_move(self) -> tuple[int, int] | None:
        """Play the best-scoring cell for the current player and return it."""
        size = self.board.size
        center = size // 2
        if self.board.is_cell_empty(center, center):
            self.make_move(center, center)
            return center, center

        own = self.current_player.symbol
        opponent = "O" if own == "X" else "X"
        best: tuple[int, int] | None = None
        best_score = -1

        for row, col in product(range(size), repeat=2):
            if not self.board.is_cell_empty(row, col):
                continue
            attack = calculate_score(self.board, row, col, own)
            defense = calculate_score(self.board, row, col, opponent)
            if attack >= WIN_SCORE:
                score = attack
            elif defense >= WIN_SCORE:
                score = defense
            else:
                score = int(attack + defense * 1.1)
            score += 100 - (abs(row - center) + abs(col - center))
            if score > best_score:
                best_score = score
                best = (row, col)

        if best is not None:
            self.make_move(*best)
        return best

    def reset_game(self) -> None:
        """Clear the board, alternate the starting player and let the computer open."""
        self.board.clear()
        self._history.clear()
        self.current_player = self.player1 if self._player1_next else self.player2
        self._player1_next = not self._player1_next
        if self.vs_computer and self.current_player is self.player2:
            self.computer_move()
            self.switch_player()