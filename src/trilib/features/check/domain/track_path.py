"""Library-relative track identity shared by the PC library, the database and the DAP."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from .errors import TrackPathError


@dataclass(slots=True, frozen=True, order=True)
class LibraryTrackPath:
    """Forward-slash path of a track relative to a library root, e.g. ``artist/album/01 song.flac``."""

    value: str

    def __post_init__(self) -> None:
        value = self.value
        if not value:
            raise TrackPathError("track path must not be empty")
        if "\\" in value:
            raise TrackPathError(f"track path must use forward slashes: {value!r}")
        if value.startswith("/"):
            raise TrackPathError(f"track path must be relative: {value!r}")
        for segment in value.split("/"):
            if segment in {"", ".", ".."}:
                raise TrackPathError(f"track path has an invalid segment: {value!r}")

    @classmethod
    def from_path(cls, path: Path, root: Path) -> "LibraryTrackPath":
        """Build the identity of ``path`` located under the library ``root``."""

        try:
            relative = path.relative_to(root)
        except ValueError as exc:
            raise TrackPathError(f"{path} is not inside {root}") from exc
        return cls(relative.as_posix())

    def abs(self, root: Path) -> Path:
        """Return the absolute location of this track under ``root``."""

        return root.joinpath(*PurePosixPath(self.value).parts)

    def is_within(self, target: str | None) -> bool:
        """Return True when this track equals ``target`` or lives below it; ``None`` matches all."""

        if target is None:
            return True
        prefix = target.strip("/")
        if not prefix:
            return True
        return self.value == prefix or self.value.startswith(prefix + "/")

    @property
    def suffix(self) -> str:
        return PurePosixPath(self.value).suffix.lower()

    def __str__(self) -> str:
        return self.value


__all__ = ["LibraryTrackPath"]
