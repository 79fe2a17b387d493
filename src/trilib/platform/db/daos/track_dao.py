"""Data access for the tracks table.

Where: platform/db/daos/track_dao.py
What: Read and write rows of the ``tracks`` table.
Why: Keep SQL in one place; transaction boundaries belong to the caller.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from trilib.platform.logging import logger


METADATA_COLUMNS: Final[tuple[str, ...]] = (
    "title",
    "artist",
    "album",
    "genre",
    "album_artist",
    "composer",
    "track_number",
    "track_max",
    "disc_number",
    "disc_max",
    "release_date",
    "memo",
    "lyrics",
)

SqlValue = str | int | None


@dataclass(slots=True, frozen=True)
class TrackRow:
    id: int
    path: str
    duration_ms: int
    metadata: dict[str, SqlValue]


class TrackDAO:
    """Data access object for the tracks table."""

    _SELECT_SQL: Final[str] = (
        f"SELECT id, path, duration_ms, {', '.join(METADATA_COLUMNS)} FROM tracks WHERE path = ?"
    )
    _INSERT_SQL: Final[str] = (
        f"INSERT INTO tracks (path, duration_ms, {', '.join(METADATA_COLUMNS)}) "
        f"VALUES (?, ?, {', '.join('?' for _ in METADATA_COLUMNS)})"
    )
    _UPDATE_METADATA_SQL: Final[str] = (
        f"UPDATE tracks SET {', '.join(f'{column} = ?' for column in METADATA_COLUMNS)}, "
        "updated_at = CURRENT_TIMESTAMP WHERE path = ?"
    )

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn: sqlite3.Connection = conn

    def fetch(self, path: str) -> TrackRow | None:
        """Fetch a track row by library-relative path."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(self._SELECT_SQL, (path,))
            row = cursor.fetchone()
        except sqlite3.Error as exc:
            logger.error("Failed to fetch track %s: %s", path, exc)
            raise
        if row is None:
            return None
        track_id, stored_path, duration_ms, *values = row
        return TrackRow(
            id=track_id,
            path=stored_path,
            duration_ms=duration_ms,
            metadata=dict(zip(METADATA_COLUMNS, values, strict=True)),
        )

    def exists(self, path: str) -> bool:
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("SELECT 1 FROM tracks WHERE path = ?", (path,))
            return cursor.fetchone() is not None
        except sqlite3.Error as exc:
            logger.error("Failed to probe track %s: %s", path, exc)
            raise

    def list_paths(self, prefix: str | None = None) -> list[str]:
        """Return stored paths equal to ``prefix`` or below it, sorted; all paths when ``prefix`` is empty."""

        try:
            cursor = self.conn.cursor()
            if prefix:
                # substr keeps the match case-sensitive, unlike LIKE.
                directory = f"{prefix}/"
                _ = cursor.execute(
                    "SELECT path FROM tracks WHERE path = ? OR substr(path, 1, ?) = ? ORDER BY path",
                    (prefix, len(directory), directory),
                )
            else:
                _ = cursor.execute("SELECT path FROM tracks ORDER BY path")
            return [row[0] for row in cursor.fetchall()]
        except sqlite3.Error as exc:
            logger.error("Failed to list tracks under %s: %s", prefix or "<all>", exc)
            raise

    def insert(self, path: str, duration_ms: int, values: Sequence[SqlValue]) -> int:
        """Insert a track and return its id."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(self._INSERT_SQL, (path, duration_ms, *values))
            assert cursor.lastrowid is not None
            return cursor.lastrowid
        except sqlite3.Error as exc:
            logger.error("Failed to insert track %s: %s", path, exc)
            raise

    def update_metadata(self, path: str, values: Sequence[SqlValue]) -> bool:
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(self._UPDATE_METADATA_SQL, (*values, path))
            return cursor.rowcount > 0
        except sqlite3.Error as exc:
            logger.error("Failed to update metadata of %s: %s", path, exc)
            raise

    def update_duration(self, path: str, duration_ms: int) -> bool:
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                "UPDATE tracks SET duration_ms = ?, updated_at = CURRENT_TIMESTAMP WHERE path = ?",
                (duration_ms, path),
            )
            return cursor.rowcount > 0
        except sqlite3.Error as exc:
            logger.error("Failed to update duration of %s: %s", path, exc)
            raise

    def delete(self, path: str) -> bool:
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("DELETE FROM tracks WHERE path = ?", (path,))
            return cursor.rowcount > 0
        except sqlite3.Error as exc:
            logger.error("Failed to delete track %s: %s", path, exc)
            raise


__all__ = ["METADATA_COLUMNS", "TrackDAO", "TrackRow"]
