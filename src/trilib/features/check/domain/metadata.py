"""Track data compared across stores: editable tags, duration and embedded artwork."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Final


PICTURE_TYPE_NAMES: Final[tuple[str, ...]] = (
    "Other",
    "32x32 file icon",
    "Other file icon",
    "Cover (front)",
    "Cover (back)",
    "Leaflet page",
    "Media",
    "Lead artist",
    "Artist",
    "Conductor",
    "Band",
    "Composer",
    "Lyricist",
    "Recording location",
    "During recording",
    "During performance",
    "Screen capture",
    "Bright coloured fish",
    "Illustration",
    "Band logotype",
    "Publisher logotype",
)


@dataclass(slots=True)
class EditableMetadata:
    """Operator-editable fields of a track. Every field is independently optional."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    album_artist: str | None = None
    composer: str | None = None
    track_number: int | None = None
    track_max: int | None = None
    disc_number: int | None = None
    disc_max: int | None = None
    release_date: date | None = None
    memo: str | None = None
    lyrics: str | None = None


@dataclass(slots=True, frozen=True)
class TrackArtwork:
    """An embedded picture."""

    image: bytes
    mime_type: str
    picture_type: int = 3
    description: str = ""

    @property
    def picture_type_name(self) -> str:
        if 0 <= self.picture_type < len(PICTURE_TYPE_NAMES):
            return PICTURE_TYPE_NAMES[self.picture_type]
        return f"Unknown ({self.picture_type})"

    def describe(self) -> str:
        """One-line summary used when listing artwork conflicts."""

        label = f"{self.picture_type_name}, {self.mime_type}, {len(self.image)} bytes"
        if self.description:
            label += f", {self.description!r}"
        return label


@dataclass(slots=True)
class TrackSnapshot:
    """Everything the check compares for one track as read from a single store."""

    metadata: EditableMetadata
    duration_ms: int
    artworks: tuple[TrackArtwork, ...] = field(default_factory=tuple)


def artworks_match(first: Iterable[TrackArtwork], second: Iterable[TrackArtwork]) -> bool:
    """Compare two artwork sets ignoring order, keeping duplicates significant."""

    return Counter(first) == Counter(second)


__all__ = [
    "EditableMetadata",
    "PICTURE_TYPE_NAMES",
    "TrackArtwork",
    "TrackSnapshot",
    "artworks_match",
]
