"""SQLite adapters."""

from .sqlite_repository import SqliteTrackRepository

__all__ = ["SqliteTrackRepository"]
