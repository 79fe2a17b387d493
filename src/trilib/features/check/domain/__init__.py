"""Domain types for the library check."""

from .errors import (
    DbTrackAlreadyExistsError,
    DbTrackNotFoundError,
    LibraryFileExistsError,
    TrackFileNotFoundError,
    TrackPathError,
    TrackReadError,
    TrackWriteError,
)
from .issues import CheckIssue, IssueKind
from .item_kind import ItemKind, conflicting_kinds
from .metadata import EditableMetadata, TrackArtwork, TrackSnapshot, artworks_match
from .models import CheckReport, CheckRequest, ResolutionOutcome, TrackIssues
from .track_path import LibraryTrackPath

__all__ = [
    "CheckIssue",
    "CheckReport",
    "CheckRequest",
    "DbTrackAlreadyExistsError",
    "DbTrackNotFoundError",
    "EditableMetadata",
    "IssueKind",
    "ItemKind",
    "LibraryFileExistsError",
    "LibraryTrackPath",
    "ResolutionOutcome",
    "TrackArtwork",
    "TrackFileNotFoundError",
    "TrackIssues",
    "TrackPathError",
    "TrackReadError",
    "TrackSnapshot",
    "TrackWriteError",
    "artworks_match",
    "conflicting_kinds",
]
