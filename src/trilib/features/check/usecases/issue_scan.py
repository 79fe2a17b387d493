"""Non-interactive pre-scan listing the issues of each track."""

from __future__ import annotations

from ..domain.errors import TrackFileNotFoundError, TrackReadError
from ..domain.issues import (
    DAP_NOT_EXISTS,
    DB_NOT_EXISTS,
    PC_DAP_CONTENT_MISMATCH,
    PC_DB_ARTWORK_MISMATCH,
    PC_DB_DURATION_MISMATCH,
    PC_DB_METADATA_MISMATCH,
    PC_NOT_EXISTS,
    CheckIssue,
)
from ..domain.item_kind import conflicting_kinds
from ..domain.metadata import artworks_match
from ..domain.track_path import LibraryTrackPath
from .ports import DapLibraryPort, PcLibraryPort, TrackRepositoryPort


class IssueScanner:
    """Collect every issue of a track in pipeline order without touching any store."""

    _pc: PcLibraryPort
    _db: TrackRepositoryPort
    _dap: DapLibraryPort
    _ignore_dap_content: bool

    def __init__(
        self,
        *,
        pc: PcLibraryPort,
        db: TrackRepositoryPort,
        dap: DapLibraryPort,
        ignore_dap_content: bool = False,
    ) -> None:
        self._pc = pc
        self._db = db
        self._dap = dap
        self._ignore_dap_content = ignore_dap_content

    def scan(self, track: LibraryTrackPath) -> list[CheckIssue]:
        try:
            pc = self._pc.read_snapshot(track)
        except TrackFileNotFoundError:
            pc = None
        except TrackReadError as exc:
            return [CheckIssue.pc_read_failed(exc)]

        db = self._db.get(track)
        dap_exists = self._dap.exists(track)

        issues: list[CheckIssue] = []
        if pc is None:
            issues.append(PC_NOT_EXISTS)
        if db is None:
            issues.append(DB_NOT_EXISTS)
        if not dap_exists:
            issues.append(DAP_NOT_EXISTS)
        if issues:
            return issues

        assert pc is not None and db is not None
        if pc.duration_ms != db.duration_ms:
            issues.append(PC_DB_DURATION_MISMATCH)
        if not artworks_match(pc.artworks, db.artworks):
            issues.append(PC_DB_ARTWORK_MISMATCH)
        if conflicting_kinds(pc.metadata, db.metadata):
            issues.append(PC_DB_METADATA_MISMATCH)
        if not self._ignore_dap_content and not self._dap.matches_pc(track):
            issues.append(PC_DAP_CONTENT_MISMATCH)
        return issues


__all__ = ["IssueScanner"]
