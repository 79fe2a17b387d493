"""Data access for the track_artworks table.

Where: platform/db/daos/artwork_dao.py
What: Store the ordered picture set of each track.
Why: Artwork is compared and replaced as a whole set, never picture by picture.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from dataclasses import dataclass

from trilib.platform.logging import logger


@dataclass(slots=True, frozen=True)
class ArtworkRow:
    mime_type: str
    picture_type: int
    description: str
    image: bytes


class ArtworkDAO:
    """Data access object for the track_artworks table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn: sqlite3.Connection = conn

    def fetch_for_track(self, track_id: int) -> list[ArtworkRow]:
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                """
                SELECT mime_type, picture_type, description, image
                FROM track_artworks
                WHERE track_id = ?
                ORDER BY position
                """,
                (track_id,),
            )
            return [
                ArtworkRow(mime_type=mime, picture_type=kind, description=desc, image=bytes(image))
                for mime, kind, desc, image in cursor.fetchall()
            ]
        except sqlite3.Error as exc:
            logger.error("Failed to fetch artwork for track %d: %s", track_id, exc)
            raise

    def replace_for_track(self, track_id: int, artworks: Sequence[ArtworkRow]) -> None:
        """Swap the stored set for ``artworks``, keeping their order."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("DELETE FROM track_artworks WHERE track_id = ?", (track_id,))
            _ = cursor.executemany(
                """
                INSERT INTO track_artworks (track_id, position, mime_type, picture_type, description, image)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    (track_id, position, row.mime_type, row.picture_type, row.description, row.image)
                    for position, row in enumerate(artworks)
                ],
            )
        except sqlite3.Error as exc:
            logger.error("Failed to replace artwork for track %d: %s", track_id, exc)
            raise


__all__ = ["ArtworkDAO", "ArtworkRow"]
