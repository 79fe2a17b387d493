"""Database manager for trilib."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, final

from trilib.config.paths import default_db_path
from trilib.platform.filesystem import ensure_parent_directory
from trilib.platform.logging import logger


_SCHEMA: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS tracks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        path TEXT NOT NULL UNIQUE,
        duration_ms INTEGER NOT NULL,
        title TEXT,
        artist TEXT,
        album TEXT,
        genre TEXT,
        album_artist TEXT,
        composer TEXT,
        track_number INTEGER,
        track_max INTEGER,
        disc_number INTEGER,
        disc_max INTEGER,
        release_date TEXT,
        memo TEXT,
        lyrics TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS track_artworks (
        track_id INTEGER NOT NULL,
        position INTEGER NOT NULL,
        mime_type TEXT NOT NULL,
        picture_type INTEGER NOT NULL,
        description TEXT NOT NULL DEFAULT '',
        image BLOB NOT NULL,
        PRIMARY KEY (track_id, position),
        FOREIGN KEY (track_id) REFERENCES tracks (id) ON DELETE CASCADE
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_tracks_path ON tracks(path)",
)

_PRAGMAS: tuple[str, ...] = (
    "PRAGMA foreign_keys = ON",
    "PRAGMA synchronous = NORMAL",
    "PRAGMA busy_timeout = 30000",
)


@final
class DatabaseManager:
    """Own the SQLite connection, schema and transaction boundaries.

    ``":memory:"`` keeps the database in process; ``None`` selects the file
    under the data directory.
    """

    db_path: str | Path
    conn: sqlite3.Connection | None

    def __init__(self, db_path: Path | str | None = None) -> None:
        if db_path is None:
            self.db_path = default_db_path()
        elif db_path == ":memory:":
            self.db_path = db_path
        else:
            self.db_path = Path(db_path)
        self.conn = None

    def connect(self) -> None:
        """Open the connection and create missing tables."""
        if isinstance(self.db_path, Path):
            _ = ensure_parent_directory(self.db_path)
        try:
            self.conn = sqlite3.connect(self.db_path, timeout=30.0, isolation_level="IMMEDIATE")
        except sqlite3.OperationalError as e:
            logger.error("Failed to open database %s: %s", self.db_path, e)
            if "unable to open database file" in str(e):
                raise PermissionError(f"Unable to open database at {self.db_path}") from e
            raise

        try:
            for pragma in _PRAGMAS:
                _ = self.conn.execute(pragma)
            for statement in _SCHEMA:
                _ = self.conn.execute(statement)
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to prepare database schema: %s", e)
            self.conn.rollback()
            raise
        logger.debug("Database schema ready at %s", self.db_path)

    def require_connection(self) -> sqlite3.Connection:
        """Return the open connection, connecting lazily on first use."""
        if self.conn is None:
            self.connect()
        assert self.conn is not None
        return self.conn

    def close(self) -> None:
        if self.conn is None:
            return
        try:
            self.conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to close database connection: %s", e)
        else:
            self.conn = None

    def __enter__(self) -> "DatabaseManager":
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any | None,
    ) -> None:
        self.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the enclosed statements atomically.

        Commits when the block exits normally and rolls back on any exception,
        including ``KeyboardInterrupt``.
        """
        conn = self.require_connection()
        if not conn.in_transaction:
            _ = conn.execute("BEGIN IMMEDIATE")
        try:
            yield conn
        except BaseException:
            conn.rollback()
            raise
        conn.commit()


__all__ = ["DatabaseManager"]
