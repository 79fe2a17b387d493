"""Tag codec facade.

Where: features/check/adapters/audio/codec.py
What: Dispatch tag reads and writes to the handler for a file's extension.
Why: Give the library adapter one entry point and one error vocabulary for every format.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Final, final

from mutagen import MutagenError

from trilib.platform.logging import logger

from ...domain.errors import TrackReadError, TrackWriteError
from ...domain.metadata import EditableMetadata, TrackSnapshot
from .formats import BaseTagHandler, FlacHandler, M4aHandler, Mp3Handler


SUPPORTED_AUDIO_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {".flac", ".mp3", ".m4a", ".aac", ".ogg", ".wma", ".wav"}
)


@final
class MutagenTagCodec:
    """Read and write track tags with mutagen."""

    _HANDLERS: ClassVar[dict[str, type[BaseTagHandler]]] = {
        ".flac": FlacHandler,
        ".mp3": Mp3Handler,
        ".m4a": M4aHandler,
    }

    def __init__(self) -> None:
        self._handlers: dict[str, BaseTagHandler] = {
            extension: handler() for extension, handler in self._HANDLERS.items()
        }

    def read(self, path: Path) -> TrackSnapshot:
        """Read tags, duration and pictures; lyrics are left to the caller.

        Raises:
            TrackReadError: Unsupported format or unreadable tags.
        """
        handler = self._handlers.get(path.suffix.lower())
        if handler is None:
            raise TrackReadError(f"Unsupported audio format: {path.suffix or path.name}")
        try:
            snapshot = handler.read(path)
        except (MutagenError, OSError, ValueError) as exc:
            logger.error("Failed to read tags from %s: %s", path, exc)
            raise TrackReadError(str(exc) or exc.__class__.__name__) from exc
        logger.debug("Read tags from %s: %s", path, snapshot.metadata)
        return snapshot

    def write(self, path: Path, metadata: EditableMetadata) -> None:
        """Rewrite the editable tags of ``path``.

        Raises:
            TrackWriteError: Unsupported format or the file could not be saved.
        """
        handler = self._handlers.get(path.suffix.lower())
        if handler is None:
            raise TrackWriteError(f"Unsupported audio format: {path.suffix or path.name}")
        try:
            handler.write(path, metadata)
        except (MutagenError, OSError, ValueError) as exc:
            logger.error("Failed to write tags to %s: %s", path, exc)
            raise TrackWriteError(str(exc) or exc.__class__.__name__) from exc
        logger.debug("Wrote tags to %s", path)


__all__ = ["MutagenTagCodec", "SUPPORTED_AUDIO_EXTENSIONS"]
