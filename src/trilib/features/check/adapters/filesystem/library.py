"""Local filesystem adapters for the PC library and the DAP.

Where: features/check/adapters/filesystem/library.py
What: List, probe, read, copy, overwrite and delete tracks below a library root, moving ``.lrc`` lyrics with them.
Why: Both libraries share one layout; only the PC side reads tags and only the DAP side copies from the PC.
"""

from __future__ import annotations

import filecmp
import shutil
from pathlib import Path
from typing import Final

from trilib.platform.filesystem import ensure_parent_directory, prune_empty_parents
from trilib.platform.logging import logger

from ...domain.errors import LibraryFileExistsError, TrackFileNotFoundError, TrackReadError, TrackWriteError
from ...domain.metadata import EditableMetadata, TrackSnapshot
from ...domain.track_path import LibraryTrackPath
from ..audio import SUPPORTED_AUDIO_EXTENSIONS, MutagenTagCodec


LYRICS_SUFFIX: Final[str] = ".lrc"


class LocalLibrary:
    """Audio files below ``root`` addressed by library-relative paths."""

    root: Path

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_of(self, track: LibraryTrackPath) -> Path:
        return track.abs(self.root)

    def lyrics_path_of(self, track: LibraryTrackPath) -> Path:
        return self.path_of(track).with_suffix(LYRICS_SUFFIX)

    def list_tracks(self, target: str | None) -> list[LibraryTrackPath]:
        start = self.root
        if target:
            start = LibraryTrackPath(target.strip("/")).abs(self.root)

        if start.is_file():
            candidates = [start]
        elif start.is_dir():
            candidates = [path for path in start.rglob("*") if path.is_file()]
        else:
            return []

        return sorted(
            LibraryTrackPath.from_path(path, self.root)
            for path in candidates
            if path.suffix.lower() in SUPPORTED_AUDIO_EXTENSIONS
        )

    def exists(self, track: LibraryTrackPath) -> bool:
        return self.path_of(track).is_file()

    def delete(self, track: LibraryTrackPath) -> None:
        path = self.path_of(track)
        path.unlink(missing_ok=True)
        self.lyrics_path_of(track).unlink(missing_ok=True)
        prune_empty_parents(path, stop_at=self.root)
        logger.debug("Deleted %s", path)


class PcLibrary(LocalLibrary):
    """The canonical library: tags are read from and written to these files."""

    _codec: MutagenTagCodec

    def __init__(self, root: Path, codec: MutagenTagCodec | None = None) -> None:
        super().__init__(root)
        self._codec = codec or MutagenTagCodec()

    def read_snapshot(self, track: LibraryTrackPath) -> TrackSnapshot:
        path = self.path_of(track)
        if not path.is_file():
            raise TrackFileNotFoundError(str(path))

        snapshot = self._codec.read(path)
        lyrics_path = self.lyrics_path_of(track)
        if lyrics_path.is_file():
            try:
                snapshot.metadata.lyrics = lyrics_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise TrackReadError(f"{lyrics_path.name}: {exc}") from exc
        else:
            snapshot.metadata.lyrics = None
        return snapshot

    def write_metadata(self, track: LibraryTrackPath, metadata: EditableMetadata) -> None:
        self._codec.write(self.path_of(track), metadata)

        lyrics_path = self.lyrics_path_of(track)
        try:
            if metadata.lyrics:
                _ = lyrics_path.write_text(metadata.lyrics, encoding="utf-8")
            else:
                lyrics_path.unlink(missing_ok=True)
        except OSError as exc:
            raise TrackWriteError(f"{lyrics_path.name}: {exc}") from exc


class DapLibrary(LocalLibrary):
    """The player's copy of the library, refreshed from ``pc``."""

    _pc: LocalLibrary

    def __init__(self, root: Path, pc: LocalLibrary) -> None:
        super().__init__(root)
        self._pc = pc

    def matches_pc(self, track: LibraryTrackPath) -> bool:
        return filecmp.cmp(self._pc.path_of(track), self.path_of(track), shallow=False)

    def copy_from_pc(self, track: LibraryTrackPath) -> None:
        destination = self.path_of(track)
        if destination.exists():
            raise LibraryFileExistsError(f"Destination already exists: {destination}")
        self._transfer(track)

    def overwrite_from_pc(self, track: LibraryTrackPath) -> None:
        self._transfer(track)

    def _transfer(self, track: LibraryTrackPath) -> None:
        source = self._pc.path_of(track)
        destination = self.path_of(track)
        _ = ensure_parent_directory(destination)
        _ = shutil.copyfile(source, destination)

        source_lyrics = self._pc.lyrics_path_of(track)
        destination_lyrics = self.lyrics_path_of(track)
        if source_lyrics.is_file():
            _ = shutil.copyfile(source_lyrics, destination_lyrics)
        else:
            destination_lyrics.unlink(missing_ok=True)
        logger.debug("Copied %s → %s", source, destination)


__all__ = ["DapLibrary", "LYRICS_SUFFIX", "LocalLibrary", "PcLibrary"]
