"""Exceptions raised by the check feature and its adapters."""

from __future__ import annotations


class TrackPathError(ValueError):
    """Raised when a string is not a valid library-relative track path."""


class TrackFileNotFoundError(FileNotFoundError):
    """Raised when a track file is absent from a library."""


class TrackReadError(RuntimeError):
    """Raised when a track file exists but its tags or sidecars cannot be read."""


class TrackWriteError(RuntimeError):
    """Raised when tags cannot be written back to a track file."""


class DbTrackNotFoundError(LookupError):
    """Raised when the database holds no row for a track that must exist."""


class DbTrackAlreadyExistsError(ValueError):
    """Raised when registering a track that the database already holds."""


class LibraryFileExistsError(FileExistsError):
    """Raised when a copy would clobber an existing library file."""


__all__ = [
    "DbTrackAlreadyExistsError",
    "DbTrackNotFoundError",
    "LibraryFileExistsError",
    "TrackFileNotFoundError",
    "TrackPathError",
    "TrackReadError",
    "TrackWriteError",
]
