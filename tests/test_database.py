import sqlite3

import pytest

from gomoku.database import DatabaseError, DatabaseManager


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(tmp_path / "games.db")
    manager.connect()
    manager.create_tables()
    yield manager
    manager.close()


def read_rows(path, sql):
    conn = sqlite3.connect(path)
    try:
        return conn.execute(sql).fetchall()
    finally:
        conn.close()


def test_get_player_is_stable(db):
    first = db.get_player("Gracz 1")
    second = db.get_player("Gracz 2")
    assert first != second
    assert db.get_player("Gracz 1") == first
    assert db.get_player("Gracz 2") == second


def test_save_match_with_winner_and_draw(db):
    p1 = db.get_player("Ala")
    p2 = db.get_player("Komputer")
    won = db.save_match(p1, p2, p1, 9)
    drawn = db.save_match(p1, p2, -1, 100)
    db.close()
    rows = read_rows(
        db.path,
        "SELECT id, gracz1_id, gracz2_id, zwyciezca_id, liczba_ruchow FROM Mecze ORDER BY id",
    )
    assert rows == [(won, p1, p2, p1, 9), (drawn, p1, p2, None, 100)]


def test_match_gets_timestamp(db):
    p1 = db.get_player("Ala")
    db.save_match(p1, p1, None, 0)
    db.close()
    [(stamp,)] = read_rows(db.path, "SELECT data_rozgrywki FROM Mecze")
    assert stamp is not None and len(stamp) > 0


def test_save_moves(db):
    p1 = db.get_player("Ala")
    p2 = db.get_player("Ola")
    match = db.save_match(p1, p2, p2, 2)
    db.save_move(match, p1, 1, 4, 5)
    db.save_move(match, p2, 2, 6, 7)
    db.close()
    rows = read_rows(
        db.path,
        "SELECT mecz_id, gracz_id, numer_tury, wiersz, kolumna FROM Ruchy ORDER BY numer_tury",
    )
    assert rows == [(match, p1, 1, 4, 5), (match, p2, 2, 6, 7)]


def test_clear_database_resets_ids(db):
    first = db.get_player("Ala")
    db.get_player("Ola")
    match = db.save_match(first, first, -1, 0)
    db.save_move(match, first, 1, 0, 0)
    db.clear_database()
    assert db.get_player("Zosia") == first
    db.close()
    assert read_rows(db.path, "SELECT COUNT(*) FROM Mecze") == [(0,)]
    assert read_rows(db.path, "SELECT COUNT(*) FROM Ruchy") == [(0,)]


def test_create_tables_is_idempotent(db):
    player = db.get_player("Ala")
    db.create_tables()
    assert db.get_player("Ala") == player


def test_queries_before_connect_raise(tmp_path):
    manager = DatabaseManager(tmp_path / "x.db")
    with pytest.raises(DatabaseError):
        manager.get_player("Ala")


def test_connect_to_missing_directory_raises(tmp_path):
    manager = DatabaseManager(tmp_path / "missing" / "x.db")
    with pytest.raises(DatabaseError):
        manager.connect()


def test_context_manager_closes(tmp_path):
    with DatabaseManager(tmp_path / "ctx.db") as manager:
        manager.create_tables()
        assert manager.is_open
        player = manager.get_player("Ala")
    assert not manager.is_open
    with pytest.raises(DatabaseError):
        manager.get_player("Ala")
    assert read_rows(manager.path, "SELECT id, nazwa FROM Gracze") == [(player, "Ala")]


def test_missing_tables_raise(tmp_path):
    with DatabaseManager(tmp_path / "bare.db") as manager:
        with pytest.raises(DatabaseError):
            manager.save_move(1, 1, 1, 0, 0)