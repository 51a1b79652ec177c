import pytest

from gomoku.board import Player
from gomoku.game import WIN_SCORE, Game, MoveRecord, calculate_score


@pytest.fixture
def players():
    return Player("Gracz 1", "X"), Player("Gracz 2", "O")


@pytest.fixture
def game(players):
    return Game(players[0], players[1], 10)


def place(game, cells, symbol):
    for r, c in cells:
        game.board.update_cell(r, c, symbol)


def test_empty_board_has_no_winner(game):
    assert game.check_winner() == 0


@pytest.mark.parametrize(
    "cells",
    [
        [(0, c) for c in range(5)],
        [(r, 9) for r in range(3, 8)],
        [(k, k) for k in range(5)],
        [(k, 9 - k) for k in range(5)],
    ],
)
def test_five_x_wins_for_player_one(game, cells):
    place(game, cells, "X")
    assert game.check_winner() == 1


def test_five_o_wins_for_player_two(game):
    place(game, [(r, 2) for r in range(5, 10)], "O")
    assert game.check_winner() == 2


def test_four_in_a_row_is_not_a_win(game):
    place(game, [(3, c) for c in range(4)], "X")
    assert game.check_winner() == 0


def test_make_move_records_history(game, players):
    assert game.make_move(1, 2) is True
    assert game.board.cell(1, 2) == "X"
    assert game.move_history == [MoveRecord(players[0], 1, 2)]


def test_make_move_rejects_taken_and_outside_cells(game):
    game.make_move(1, 1)
    assert game.make_move(1, 1) is False
    assert game.make_move(10, 0) is False
    assert len(game.move_history) == 1


def test_switch_player(game, players):
    game.switch_player()
    assert game.current_player is players[1]
    game.switch_player()
    assert game.current_player is players[0]


def test_draw_when_board_full(players):
    game = Game(players[0], players[1], 3)
    assert not game.is_draw()
    place(game, [(r, c) for r in range(3) for c in range(3)], "X")
    assert game.is_draw()


def test_score_open_two(game):
    place(game, [(5, 5)], "X")
    assert calculate_score(game.board, 5, 6, "X") == 50


def test_score_open_four(game):
    place(game, [(5, 2), (5, 3), (5, 4)], "X")
    assert calculate_score(game.board, 5, 5, "X") == 500_000


def test_score_five_is_win(game):
    place(game, [(5, c) for c in range(1, 5)], "X")
    assert calculate_score(game.board, 5, 5, "X") >= WIN_SCORE


def test_score_blocked_line_is_lower(game):
    place(game, [(5, 2), (5, 3), (5, 4)], "X")
    open_score = calculate_score(game.board, 5, 5, "X")
    game.board.update_cell(5, 1, "O")
    assert calculate_score(game.board, 5, 5, "X") < open_score


def test_computer_opens_in_center(game, players):
    assert game.computer_move() == (5, 5)
    assert game.move_history == [MoveRecord(players[0], 5, 5)]


def test_computer_blocks_opponent_four(game):
    game.switch_player()
    place(game, [(5, 5)], "O")
    place(game, [(2, c) for c in range(1, 5)], "X")
    move = game.computer_move()
    assert move in {(2, 0), (2, 5)}
    assert game.board.cell(*move) == "O"


def test_reset_alternates_starter_and_computer_opens(players):
    game = Game(players[0], players[1], 10, vs_computer=True)
    game.make_move(0, 0)
    game.reset_game()
    assert game.current_player is players[0]
    assert game.move_history == []
    assert not game.board.is_full() and game.board.is_cell_empty(0, 0)

    game.reset_game()
    history = game.move_history
    assert len(history) == 1
    assert history[0].player is players[1]
    assert game.current_player is players[0]
    assert game.board.cell(history[0].row, history[0].col) == "O"


def test_reset_without_computer_does_not_move(players):
    game = Game(players[0], players[1], 10)
    game.reset_game()
    game.reset_game()
    assert game.current_player is players[1]
    assert game.move_history == []