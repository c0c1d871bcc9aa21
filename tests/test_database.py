"""Tests for the database module."""


def test_table_creation(temp_db):
    """Verify the key/value table exists after init."""
    tables = temp_db.conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table'"
    ).fetchall()
    names = {t["name"] for t in tables}
    assert "kv_store" in names


def test_missing_key_returns_none(temp_db):
    assert temp_db.get_item("nope") is None


def test_set_and_get(temp_db):
    temp_db.set_item("k", "[1, 2]")
    assert temp_db.get_item("k") == "[1, 2]"


def test_overwrite(temp_db):
    temp_db.set_item("k", "a")
    temp_db.set_item("k", "b")
    assert temp_db.get_item("k") == "b"
    count = temp_db.conn.execute("SELECT COUNT(*) FROM kv_store").fetchone()[0]
    assert count == 1


def test_context_manager(tmp_path):
    from models.database import Database
    path = tmp_path / "nested" / "t.db"
    with Database(str(path)) as db:
        db.set_item("k", "v")
    with Database(str(path)) as db:
        assert db.get_item("k") == "v"
