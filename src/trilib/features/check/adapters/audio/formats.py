"""Format-specific tag handlers.

Where: features/check/adapters/audio/formats.py
What: Read and write editable tags, duration and embedded pictures for each supported container.
Why: Separate format logic from the codec facade so adding a container touches a single class.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar

from mutagen.flac import FLAC, Picture
from mutagen.id3 import APIC, COMM, ID3, TALB, TCOM, TCON, TDRC, TIT2, TPE1, TPE2, TPOS, TRCK
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4, MP4Cover

from ...domain.metadata import EditableMetadata, TrackArtwork, TrackSnapshot
from ._tag_utils import (
    first_text,
    format_date,
    format_position,
    parse_date,
    parse_int,
    parse_position,
)

__all__ = [
    "BaseTagHandler",
    "FlacHandler",
    "M4aHandler",
    "Mp3Handler",
]


class BaseTagHandler(abc.ABC):
    """Shared open/read/save flow; subclasses map fields onto their tag scheme."""

    FILE_CLASS: ClassVar[type[Any] | None] = None

    def _open(self, path: Path) -> Any:
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        return self.FILE_CLASS(path)

    def read(self, path: Path) -> TrackSnapshot:
        audio = self._open(path)
        return TrackSnapshot(
            metadata=self._read_metadata(audio),
            duration_ms=int(audio.info.length * 1000),
            artworks=tuple(self._read_artworks(audio)),
        )

    def write(self, path: Path, metadata: EditableMetadata) -> None:
        audio = self._open(path)
        if audio.tags is None:
            audio.add_tags()
        self._write_metadata(audio, metadata)
        audio.save()

    @abc.abstractmethod
    def _read_metadata(self, audio: Any) -> EditableMetadata:
        raise NotImplementedError

    @abc.abstractmethod
    def _read_artworks(self, audio: Any) -> list[TrackArtwork]:
        raise NotImplementedError

    @abc.abstractmethod
    def _write_metadata(self, audio: Any, metadata: EditableMetadata) -> None:
        raise NotImplementedError


class FlacHandler(BaseTagHandler):
    """FLAC files: Vorbis comments plus native picture blocks."""

    FILE_CLASS: ClassVar[type[Any] | None] = FLAC

    TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "title": "TITLE",
        "artist": "ARTIST",
        "album": "ALBUM",
        "genre": "GENRE",
        "album_artist": "ALBUMARTIST",
        "composer": "COMPOSER",
        "memo": "DESCRIPTION",
    }
    NUMBER_FIELDS: ClassVar[dict[str, str]] = {
        "track_number": "TRACKNUMBER",
        "track_max": "TOTALTRACKS",
        "disc_number": "DISCNUMBER",
        "disc_max": "TOTALDISCS",
    }
    DATE_FIELD: ClassVar[str] = "DATE"

    def _read_metadata(self, audio: Any) -> EditableMetadata:
        tags = audio.tags

        def get(key: str) -> str | None:
            if tags is None:
                return None
            return first_text(tags.get(key))

        metadata = EditableMetadata(
            **{name: get(key) for name, key in self.TEXT_FIELDS.items()},
            release_date=parse_date(get(self.DATE_FIELD)),
        )
        # TRACKNUMBER and DISCNUMBER may carry an "n/m" pair instead of a separate total.
        track_number, track_total = parse_position(get("TRACKNUMBER"))
        disc_number, disc_total = parse_position(get("DISCNUMBER"))
        metadata.track_number = track_number
        metadata.track_max = parse_int(get("TOTALTRACKS")) or track_total
        metadata.disc_number = disc_number
        metadata.disc_max = parse_int(get("TOTALDISCS")) or disc_total
        return metadata

    def _write_metadata(self, audio: Any, metadata: EditableMetadata) -> None:
        tags = audio.tags
        values: dict[str, str | None] = {
            key: getattr(metadata, name) for name, key in self.TEXT_FIELDS.items()
        }
        for name, key in self.NUMBER_FIELDS.items():
            number: int | None = getattr(metadata, name)
            values[key] = str(number) if number else None
        values[self.DATE_FIELD] = format_date(metadata.release_date)

        for key, value in values.items():
            if value:
                tags[key] = [value]
            elif key in tags:
                del tags[key]

    def _read_artworks(self, audio: Any) -> list[TrackArtwork]:
        return [_picture_to_artwork(picture) for picture in audio.pictures]


class Mp3Handler(BaseTagHandler):
    """MP3 files using ID3v2 frames."""

    FILE_CLASS: ClassVar[type[Any] | None] = MP3

    TEXT_FRAMES: ClassVar[dict[str, type[Any]]] = {
        "title": TIT2,
        "artist": TPE1,
        "album": TALB,
        "genre": TCON,
        "album_artist": TPE2,
        "composer": TCOM,
    }

    @staticmethod
    def _frame_text(tags: ID3 | None, frame_id: str) -> str | None:
        if tags is None:
            return None
        for frame in tags.getall(frame_id):
            text = first_text([str(value) for value in frame.text])
            if text:
                return text
        return None

    @staticmethod
    def _comment(tags: ID3 | None) -> str | None:
        if tags is None:
            return None
        for frame in tags.getall("COMM"):
            if frame.desc == "":
                return first_text(list(frame.text))
        return None

    def _read_metadata(self, audio: Any) -> EditableMetadata:
        tags: ID3 | None = audio.tags
        track_number, track_max = parse_position(self._frame_text(tags, "TRCK"))
        disc_number, disc_max = parse_position(self._frame_text(tags, "TPOS"))
        return EditableMetadata(
            **{name: self._frame_text(tags, frame.__name__) for name, frame in self.TEXT_FRAMES.items()},
            track_number=track_number,
            track_max=track_max,
            disc_number=disc_number,
            disc_max=disc_max,
            release_date=parse_date(self._frame_text(tags, "TDRC")),
            memo=self._comment(tags),
        )

    def _read_artworks(self, audio: Any) -> list[TrackArtwork]:
        if audio.tags is None:
            return []
        return [
            TrackArtwork(
                image=bytes(frame.data),
                mime_type=frame.mime,
                picture_type=int(frame.type),
                description=frame.desc,
            )
            for frame in audio.tags.getall("APIC")
            if isinstance(frame, APIC)
        ]

    def _write_metadata(self, audio: Any, metadata: EditableMetadata) -> None:
        tags: ID3 = audio.tags
        text_values: dict[type[Any], str | None] = {
            frame: getattr(metadata, name) for name, frame in self.TEXT_FRAMES.items()
        }
        text_values[TRCK] = format_position(metadata.track_number, metadata.track_max)
        text_values[TPOS] = format_position(metadata.disc_number, metadata.disc_max)
        text_values[TDRC] = format_date(metadata.release_date)

        for frame, value in text_values.items():
            tags.delall(frame.__name__)
            if value:
                tags.add(frame(encoding=3, text=[value]))

        for key in [key for key in tags.keys() if key.startswith("COMM::")]:
            del tags[key]
        if metadata.memo:
            tags.add(COMM(encoding=3, lang="eng", desc="", text=[metadata.memo]))


class M4aHandler(BaseTagHandler):
    """M4A/AAC files using MP4 atoms."""

    FILE_CLASS: ClassVar[type[Any] | None] = MP4

    TEXT_ATOMS: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album": "\xa9alb",
        "genre": "\xa9gen",
        "album_artist": "aART",
        "composer": "\xa9wrt",
        "memo": "\xa9cmt",
    }
    _COVER_MIME: ClassVar[dict[int, str]] = {
        MP4Cover.FORMAT_JPEG: "image/jpeg",
        MP4Cover.FORMAT_PNG: "image/png",
    }

    @staticmethod
    def _pair(tags: Any, key: str) -> tuple[int | None, int | None]:
        values = tags.get(key) if tags is not None else None
        if not values:
            return None, None
        number, total = values[0]
        return (number or None), (total or None)

    def _read_metadata(self, audio: Any) -> EditableMetadata:
        tags = audio.tags

        def get(key: str) -> str | None:
            if tags is None:
                return None
            return first_text(tags.get(key))

        track_number, track_max = self._pair(tags, "trkn")
        disc_number, disc_max = self._pair(tags, "disk")
        return EditableMetadata(
            **{name: get(atom) for name, atom in self.TEXT_ATOMS.items()},
            track_number=track_number,
            track_max=track_max,
            disc_number=disc_number,
            disc_max=disc_max,
            release_date=parse_date(get("\xa9day")),
        )

    def _read_artworks(self, audio: Any) -> list[TrackArtwork]:
        if audio.tags is None:
            return []
        return [
            TrackArtwork(
                image=bytes(cover),
                mime_type=self._COVER_MIME.get(cover.imageformat, "image/jpeg"),
                picture_type=3,
            )
            for cover in audio.tags.get("covr", [])
        ]

    def _write_metadata(self, audio: Any, metadata: EditableMetadata) -> None:
        tags = audio.tags
        values: dict[str, list[Any] | None] = {
            atom: [value] if (value := getattr(metadata, name)) else None
            for name, atom in self.TEXT_ATOMS.items()
        }
        release = format_date(metadata.release_date)
        values["\xa9day"] = [release] if release else None
        if metadata.track_number or metadata.track_max:
            values["trkn"] = [(metadata.track_number or 0, metadata.track_max or 0)]
        else:
            values["trkn"] = None
        if metadata.disc_number or metadata.disc_max:
            values["disk"] = [(metadata.disc_number or 0, metadata.disc_max or 0)]
        else:
            values["disk"] = None

        for atom, value in values.items():
            if value is not None:
                tags[atom] = value
            elif atom in tags:
                del tags[atom]


def _picture_to_artwork(picture: Picture) -> TrackArtwork:
    return TrackArtwork(
        image=bytes(picture.data),
        mime_type=picture.mime,
        picture_type=int(picture.type),
        description=picture.desc,
    )
