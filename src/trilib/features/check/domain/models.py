"""Data structures describing a check run and its results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .issues import CheckIssue
from .track_path import LibraryTrackPath


class ResolutionOutcome(StrEnum):
    """Result of a single resolution stage for one track."""

    RESOLVED = "resolved"
    DELETED = "deleted"
    UNRESOLVED = "unresolved"
    TERMINATED = "terminated"


@dataclass(slots=True, frozen=True)
class CheckRequest:
    """Inputs of a check run."""

    target: str | None = None
    ignore_dap_content: bool = False
    assume_yes: bool = False


@dataclass(slots=True, frozen=True)
class TrackIssues:
    """Issues found for one track during the pre-scan."""

    track: LibraryTrackPath
    issues: tuple[CheckIssue, ...]


@dataclass(slots=True)
class CheckReport:
    """Aggregate of a check run."""

    total: int = 0
    clean: list[LibraryTrackPath] = field(default_factory=list)
    resolved: list[LibraryTrackPath] = field(default_factory=list)
    deleted: list[LibraryTrackPath] = field(default_factory=list)
    unresolved: list[LibraryTrackPath] = field(default_factory=list)
    not_visited: list[LibraryTrackPath] = field(default_factory=list)
    findings: list[TrackIssues] = field(default_factory=list)
    aborted_at: LibraryTrackPath | None = None

    @property
    def terminated(self) -> bool:
        return self.aborted_at is not None

    def record(self, track: LibraryTrackPath, outcome: ResolutionOutcome) -> None:
        """File ``track`` under the bucket matching ``outcome``."""

        match outcome:
            case ResolutionOutcome.RESOLVED:
                self.resolved.append(track)
            case ResolutionOutcome.DELETED:
                self.deleted.append(track)
            case ResolutionOutcome.UNRESOLVED:
                self.unresolved.append(track)
            case ResolutionOutcome.TERMINATED:
                self.aborted_at = track


__all__ = ["CheckReport", "CheckRequest", "ResolutionOutcome", "TrackIssues"]
