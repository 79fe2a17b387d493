"""Test database functionality."""

import sqlite3
from collections.abc import Generator
from pathlib import Path

import pytest

from trilib.platform.db.db_manager import DatabaseManager


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """Create a database manager with in-memory database.

    Yields:
        DatabaseManager: Database manager instance.
    """
    manager = DatabaseManager(":memory:")  # Use in-memory database for isolation
    manager.connect()
    yield manager
    manager.close()


def _insert_track(conn: sqlite3.Connection, path: str) -> int:
    cursor = conn.execute("INSERT INTO tracks (path, duration_ms) VALUES (?, ?)", (path, 1000))
    assert cursor.lastrowid is not None
    return cursor.lastrowid


def _count(conn: sqlite3.Connection, table: str) -> int:
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def test_schema_is_created(db_manager: DatabaseManager) -> None:
    conn = db_manager.require_connection()
    tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}

    assert {"tracks", "track_artworks"} <= tables


def test_transaction_commits(db_manager: DatabaseManager) -> None:
    with db_manager.transaction() as conn:
        _ = _insert_track(conn, "a.flac")

    assert _count(db_manager.require_connection(), "tracks") == 1


def test_transaction_rolls_back_on_error(db_manager: DatabaseManager) -> None:
    with pytest.raises(sqlite3.IntegrityError):
        with db_manager.transaction() as conn:
            _ = _insert_track(conn, "a.flac")
            _ = _insert_track(conn, "a.flac")

    assert _count(db_manager.require_connection(), "tracks") == 0


def test_deleting_track_cascades_to_artwork(db_manager: DatabaseManager) -> None:
    with db_manager.transaction() as conn:
        track_id = _insert_track(conn, "a.flac")
        _ = conn.execute(
            "INSERT INTO track_artworks (track_id, position, mime_type, picture_type, image) VALUES (?, 0, ?, 3, ?)",
            (track_id, "image/png", b"png"),
        )
    with db_manager.transaction() as conn:
        _ = conn.execute("DELETE FROM tracks WHERE id = ?", (track_id,))

    assert _count(db_manager.require_connection(), "track_artworks") == 0


def test_file_database_creates_parent_directory(tmp_path: Path) -> None:
    db_path = tmp_path / "nested" / "trilib.db"

    with DatabaseManager(db_path) as manager:
        assert manager.conn is not None

    assert db_path.exists()
    assert manager.conn is None


def test_require_connection_connects_lazily() -> None:
    manager = DatabaseManager(":memory:")

    conn = manager.require_connection()

    assert manager.conn is conn
    manager.close()
