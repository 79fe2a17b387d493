"""Issue taxonomy: every kind of divergence the check can report for a track."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class IssueKind(StrEnum):
    PC_NOT_EXISTS = "pc_not_exists"
    PC_READ_FAILED = "pc_read_failed"
    DB_NOT_EXISTS = "db_not_exists"
    DAP_NOT_EXISTS = "dap_not_exists"
    PC_DB_METADATA_MISMATCH = "pc_db_metadata_mismatch"
    PC_DB_DURATION_MISMATCH = "pc_db_duration_mismatch"
    PC_DB_ARTWORK_MISMATCH = "pc_db_artwork_mismatch"
    PC_DAP_CONTENT_MISMATCH = "pc_dap_content_mismatch"


_DESCRIPTIONS: Final[dict[IssueKind, str]] = {
    IssueKind.PC_NOT_EXISTS: "The file does not exist in the PC library.",
    IssueKind.PC_READ_FAILED: "Failed to read the file in the PC library.",
    IssueKind.DB_NOT_EXISTS: "The track is not registered in the database.",
    IssueKind.DAP_NOT_EXISTS: "The file does not exist on the DAP.",
    IssueKind.PC_DB_METADATA_MISMATCH: "Metadata differs between the PC file and the database.",
    IssueKind.PC_DB_DURATION_MISMATCH: "Duration differs between the PC file and the database.",
    IssueKind.PC_DB_ARTWORK_MISMATCH: "Artwork differs between the PC file and the database.",
    IssueKind.PC_DAP_CONTENT_MISMATCH: "File content differs between the PC library and the DAP.",
}


@dataclass(slots=True, frozen=True)
class CheckIssue:
    """A single divergence; only ``PC_READ_FAILED`` carries a cause."""

    kind: IssueKind
    cause: str | None = None

    @classmethod
    def pc_read_failed(cls, cause: object) -> "CheckIssue":
        return cls(IssueKind.PC_READ_FAILED, str(cause) or type(cause).__name__)

    def __str__(self) -> str:
        text = _DESCRIPTIONS[self.kind]
        if self.cause:
            text = f"{text} ({self.cause})"
        return text


PC_NOT_EXISTS: Final[CheckIssue] = CheckIssue(IssueKind.PC_NOT_EXISTS)
DB_NOT_EXISTS: Final[CheckIssue] = CheckIssue(IssueKind.DB_NOT_EXISTS)
DAP_NOT_EXISTS: Final[CheckIssue] = CheckIssue(IssueKind.DAP_NOT_EXISTS)
PC_DB_METADATA_MISMATCH: Final[CheckIssue] = CheckIssue(IssueKind.PC_DB_METADATA_MISMATCH)
PC_DB_DURATION_MISMATCH: Final[CheckIssue] = CheckIssue(IssueKind.PC_DB_DURATION_MISMATCH)
PC_DB_ARTWORK_MISMATCH: Final[CheckIssue] = CheckIssue(IssueKind.PC_DB_ARTWORK_MISMATCH)
PC_DAP_CONTENT_MISMATCH: Final[CheckIssue] = CheckIssue(IssueKind.PC_DAP_CONTENT_MISMATCH)


__all__ = [
    "CheckIssue",
    "DAP_NOT_EXISTS",
    "DB_NOT_EXISTS",
    "IssueKind",
    "PC_DAP_CONTENT_MISMATCH",
    "PC_DB_ARTWORK_MISMATCH",
    "PC_DB_DURATION_MISMATCH",
    "PC_DB_METADATA_MISMATCH",
    "PC_NOT_EXISTS",
]
