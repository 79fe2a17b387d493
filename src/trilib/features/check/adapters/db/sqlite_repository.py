"""SQLite-backed track repository for the check feature."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import date

from trilib.platform.db.daos import METADATA_COLUMNS, ArtworkDAO, ArtworkRow, TrackDAO, TrackRow
from trilib.platform.db.daos.track_dao import SqlValue
from trilib.platform.db.db_manager import DatabaseManager

from ...domain.errors import DbTrackAlreadyExistsError, DbTrackNotFoundError
from ...domain.metadata import EditableMetadata, TrackArtwork, TrackSnapshot
from ...domain.track_path import LibraryTrackPath


class SqliteTrackRepository:
    """Bridge the check use cases to the ``tracks`` and ``track_artworks`` tables."""

    _db_manager: DatabaseManager
    _tracks: TrackDAO
    _artworks: ArtworkDAO

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db_manager = db_manager
        conn = self._db_manager.require_connection()
        self._tracks = TrackDAO(conn)
        self._artworks = ArtworkDAO(conn)

    @contextmanager
    def transaction(self) -> Iterator[object]:
        with self._db_manager.transaction() as conn:
            yield conn

    def list_paths(self, target: str | None) -> list[LibraryTrackPath]:
        prefix = target.strip("/") if target else None
        return [LibraryTrackPath(path) for path in self._tracks.list_paths(prefix)]

    def exists(self, track: LibraryTrackPath) -> bool:
        return self._tracks.exists(track.value)

    def get(self, track: LibraryTrackPath) -> TrackSnapshot | None:
        row = self._tracks.fetch(track.value)
        if row is None:
            return None
        return TrackSnapshot(
            metadata=_row_to_metadata(row),
            duration_ms=row.duration_ms,
            artworks=tuple(
                TrackArtwork(
                    image=artwork.image,
                    mime_type=artwork.mime_type,
                    picture_type=artwork.picture_type,
                    description=artwork.description,
                )
                for artwork in self._artworks.fetch_for_track(row.id)
            ),
        )

    def register(self, track: LibraryTrackPath, snapshot: TrackSnapshot) -> None:
        if self._tracks.exists(track.value):
            raise DbTrackAlreadyExistsError(f"{track} is already registered")
        track_id = self._tracks.insert(track.value, snapshot.duration_ms, _metadata_to_values(snapshot.metadata))
        self._artworks.replace_for_track(track_id, _artwork_rows(snapshot.artworks))

    def save_metadata(self, track: LibraryTrackPath, metadata: EditableMetadata) -> None:
        if not self._tracks.update_metadata(track.value, _metadata_to_values(metadata)):
            raise DbTrackNotFoundError(f"{track} is not registered")

    def save_duration(self, track: LibraryTrackPath, duration_ms: int) -> None:
        if not self._tracks.update_duration(track.value, duration_ms):
            raise DbTrackNotFoundError(f"{track} is not registered")

    def replace_artworks(self, track: LibraryTrackPath, artworks: Sequence[TrackArtwork]) -> None:
        row = self._tracks.fetch(track.value)
        if row is None:
            raise DbTrackNotFoundError(f"{track} is not registered")
        self._artworks.replace_for_track(row.id, _artwork_rows(artworks))

    def delete(self, track: LibraryTrackPath) -> None:
        _ = self._tracks.delete(track.value)


def _metadata_to_values(metadata: EditableMetadata) -> list[SqlValue]:
    values: list[SqlValue] = []
    for column in METADATA_COLUMNS:
        value = getattr(metadata, column)
        values.append(value.isoformat() if isinstance(value, date) else value)
    return values


def _row_to_metadata(row: TrackRow) -> EditableMetadata:
    values = dict(row.metadata)
    release_date = values.pop("release_date")
    return EditableMetadata(
        **values,
        release_date=date.fromisoformat(str(release_date)) if release_date else None,
    )


def _artwork_rows(artworks: Sequence[TrackArtwork]) -> list[ArtworkRow]:
    return [
        ArtworkRow(
            mime_type=artwork.mime_type,
            picture_type=artwork.picture_type,
            description=artwork.description,
            image=artwork.image,
        )
        for artwork in artworks
    ]


__all__ = ["SqliteTrackRepository"]
