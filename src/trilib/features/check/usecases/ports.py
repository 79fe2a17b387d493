"""Ports for the check feature."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Protocol

from ..domain.metadata import EditableMetadata, TrackArtwork, TrackSnapshot
from ..domain.models import ResolutionOutcome
from ..domain.track_path import LibraryTrackPath


class PcLibraryPort(Protocol):
    """The canonical audio files on the PC."""

    def list_tracks(self, target: str | None) -> list[LibraryTrackPath]:
        """Return tracks under ``target`` (file or directory); a missing target yields an empty list."""

        ...

    def exists(self, track: LibraryTrackPath) -> bool:
        ...

    def read_snapshot(self, track: LibraryTrackPath) -> TrackSnapshot:
        """Read tags, duration, artwork and lyrics.

        Raises:
            TrackFileNotFoundError: The file is absent.
            TrackReadError: The file exists but could not be read.
        """

        ...

    def write_metadata(self, track: LibraryTrackPath, metadata: EditableMetadata) -> None:
        """Rewrite the editable tags (and lyrics sidecar) of the file."""

        ...

    def delete(self, track: LibraryTrackPath) -> None:
        ...


class TrackRepositoryPort(Protocol):
    """Canonical metadata, durations and artwork held by the database."""

    def list_paths(self, target: str | None) -> list[LibraryTrackPath]:
        ...

    def exists(self, track: LibraryTrackPath) -> bool:
        ...

    def get(self, track: LibraryTrackPath) -> TrackSnapshot | None:
        ...

    def register(self, track: LibraryTrackPath, snapshot: TrackSnapshot) -> None:
        """Insert a new row with metadata, duration and artwork."""

        ...

    def save_metadata(self, track: LibraryTrackPath, metadata: EditableMetadata) -> None:
        ...

    def save_duration(self, track: LibraryTrackPath, duration_ms: int) -> None:
        ...

    def replace_artworks(self, track: LibraryTrackPath, artworks: Sequence[TrackArtwork]) -> None:
        ...

    def delete(self, track: LibraryTrackPath) -> None:
        ...

    def transaction(self) -> AbstractContextManager[object]:
        """Scope for one decision's writes; committed on normal exit."""

        ...


class DapLibraryPort(Protocol):
    """Copies of the PC files on the mounted DAP."""

    def list_tracks(self, target: str | None) -> list[LibraryTrackPath]:
        ...

    def exists(self, track: LibraryTrackPath) -> bool:
        ...

    def matches_pc(self, track: LibraryTrackPath) -> bool:
        """Return True when the DAP copy is byte-identical to the PC file."""

        ...

    def copy_from_pc(self, track: LibraryTrackPath) -> None:
        """Copy a track that the DAP does not hold yet."""

        ...

    def overwrite_from_pc(self, track: LibraryTrackPath) -> None:
        ...

    def delete(self, track: LibraryTrackPath) -> None:
        ...


class PromptPort(Protocol):
    """Line-oriented operator channel."""

    def show(self, message: str = "") -> None:
        ...

    def choose(self, choices: Sequence[str], message: str) -> str:
        """Return one of ``choices``; implementations re-prompt until the answer is valid."""

        ...


class TrackResolver(Protocol):
    """One stage of the per-track pipeline."""

    def resolve(self, track: LibraryTrackPath) -> ResolutionOutcome:
        ...


__all__ = [
    "DapLibraryPort",
    "PcLibraryPort",
    "PromptPort",
    "TrackRepositoryPort",
    "TrackResolver",
]
