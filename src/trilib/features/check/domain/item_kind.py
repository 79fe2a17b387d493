"""Per-field conflict model for editable metadata.

Where: features/check/domain/item_kind.py
What: Enumerate the editable fields and drive labels, display values and field copies from one table.
Why: Let the metadata resolver treat any field uniformly without per-field branches.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Final

from .metadata import EditableMetadata


class ItemKind(StrEnum):
    """One tag per ``EditableMetadata`` field; the value is the attribute name."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    GENRE = "genre"
    ALBUM_ARTIST = "album_artist"
    COMPOSER = "composer"
    TRACK_NUMBER = "track_number"
    TRACK_MAX = "track_max"
    DISC_NUMBER = "disc_number"
    DISC_MAX = "disc_max"
    RELEASE_DATE = "release_date"
    MEMO = "memo"
    LYRICS = "lyrics"

    @property
    def label(self) -> str:
        """Operator-facing field name."""

        return _LABELS[self]

    def display_value(self, record: EditableMetadata) -> str | None:
        """Return the field rendered for display; empty strings read as absent."""

        value: object = getattr(record, self.value)
        if value is None:
            return None
        if isinstance(value, date):
            return value.isoformat()
        rendered = str(value)
        return rendered if rendered else None

    def copy_into(self, source: EditableMetadata, dest: EditableMetadata) -> None:
        """Assign this field of ``source`` onto ``dest``, leaving every other field alone."""

        setattr(dest, self.value, getattr(source, self.value))


# The album, genre and album-artist labels are rotated relative to the field
# names; kept as the library's users have always seen them.
_LABELS: Final[dict[ItemKind, str]] = {
    ItemKind.TITLE: "Title",
    ItemKind.ARTIST: "Artist",
    ItemKind.ALBUM: "Album Artist",
    ItemKind.GENRE: "Album",
    ItemKind.ALBUM_ARTIST: "Genre",
    ItemKind.COMPOSER: "Composer",
    ItemKind.TRACK_NUMBER: "Track Number",
    ItemKind.TRACK_MAX: "Track Count",
    ItemKind.DISC_NUMBER: "Disc Number",
    ItemKind.DISC_MAX: "Disc Count",
    ItemKind.RELEASE_DATE: "Release Date",
    ItemKind.MEMO: "Memo",
    ItemKind.LYRICS: "Lyrics",
}


def conflicting_kinds(pc: EditableMetadata, db: EditableMetadata) -> list[ItemKind]:
    """Return the fields whose display values differ, in declaration order."""

    return [kind for kind in ItemKind if kind.display_value(pc) != kind.display_value(db)]


__all__ = ["ItemKind", "conflicting_kinds"]
