# gomoku

Five-in-a-row on a square board of 10 to 50 cells a side, played in the
terminal. Two people can play each other, or one person can play the
computer. Finished games, with each of their moves, are stored in an
SQLite database.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Playing

The game mode is a required argument:

    gomoku pvp      # two players at one terminal
    gomoku pvc      # one player against the computer

Options:

- `--player1 NAME` – name of the first player (default `Gracz 1` in
  `pvp`, `Gracz` in `pvc`)
- `--player2 NAME` – name of the second player, used in `pvp` only
  (default `Gracz 2`); in `pvc` the second player is always `Komputer`
- `--size N` – board size, 10 to 50 (default 10)
- `--db PATH` – results database (default `mainDB.db` in the current
  directory)

Player 1 plays `X`, player 2 plays `O`. The board is printed before every
turn. At the prompt type a row and a column, counted from 0 (for example
`4 5`), `n` to start a new game or `q` to quit. The first player with five
symbols in a row, horizontally, vertically or diagonally, wins; a full
board with no such row is a draw. Each new game alternates which player
opens, and when the computer opens it takes the centre of the board.
Messages are in Polish.

If the database cannot be opened, an error is printed and the game is
played without saving results.

## Using the library

```python
from gomoku.board import Board, Player
from gomoku.game import Game

alice = Player("Alice", "X")
bob = Player("Bob", "O")
game = Game(alice, bob, 10, False)

game.make_move(4, 4)
game.switch_player()
print(game.check_winner())   # 0 while no one has five in a row
print(game.board.render())
```

- `Board` holds the grid: `update_cell`, `is_cell_empty`, `is_full`,
  `cell`, `clear`, `render` and `display`.
- `Game` applies the rules: `make_move`, `switch_player`, `check_winner`
  (1 when `X` has five in a row, 2 for the other symbol, 0 otherwise),
  `is_draw`, `computer_move`, `reset_game` and `move_history`.
- `calculate_score` rates a cell for a symbol; the computer player picks
  the empty cell with the best score for attack and defence, preferring
  cells near the centre.

`gomoku.database.DatabaseManager` stores players, matches and moves and
raises `DatabaseError` when a query fails:

```python
from gomoku.database import DatabaseManager

with DatabaseManager("games.db") as db:
    db.create_tables()
    p1 = db.get_player("Alice")
    p2 = db.get_player("Bob")
    match_id = db.save_match(p1, p2, p1, 9)
    db.save_move(match_id, p1, 1, 4, 4)
```

`gomoku.session.GameSession` runs a game from start to end: `click(row,
col)` plays a move and returns an `Outcome` (`IGNORED`, `INVALID`,
`CONTINUE`, `WIN` or `DRAW`), lets the computer answer in `pvc` games,
and saves finished games through the database; `new_game()` starts the
next one. A draw reached by the computer's move is saved with player 1 as
the winner.

## What it does not do

There is no graphical window and no statistics view: stored matches can
only be read from the SQLite file with other tools.