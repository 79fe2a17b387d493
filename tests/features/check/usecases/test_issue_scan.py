"""Tests for the non-interactive pre-scan."""

from __future__ import annotations

from check_fakes import FakeDapLibrary, FakePcLibrary, FakeTrackRepository, snapshot, track
from trilib.features.check.domain import IssueKind, TrackArtwork
from trilib.features.check.usecases import IssueScanner

SONG = track("Artist/Album/01 Song.flac")


def _kinds(scanner: IssueScanner) -> list[IssueKind]:
    return [issue.kind for issue in scanner.scan(SONG)]


def test_consistent_track_has_no_issues(pc: FakePcLibrary, db: FakeTrackRepository, dap: FakeDapLibrary) -> None:
    pc.add(SONG, snapshot())
    db.add(SONG, snapshot())
    dap.files.add(SONG)

    assert _kinds(IssueScanner(pc=pc, db=db, dap=dap)) == []


def test_existence_issues_hide_content_comparisons(
    pc: FakePcLibrary, db: FakeTrackRepository, dap: FakeDapLibrary
) -> None:
    db.add(SONG, snapshot(duration_ms=1))

    assert _kinds(IssueScanner(pc=pc, db=db, dap=dap)) == [IssueKind.PC_NOT_EXISTS, IssueKind.DAP_NOT_EXISTS]


def test_mismatches_are_listed_in_pipeline_order(
    pc: FakePcLibrary, db: FakeTrackRepository, dap: FakeDapLibrary
) -> None:
    pc.add(SONG, snapshot(duration_ms=1, title="New", artworks=[TrackArtwork(image=b"x", mime_type="image/png")]))
    db.add(SONG, snapshot(duration_ms=2, title="Old"))
    dap.files.add(SONG)
    dap.stale.add(SONG)

    assert _kinds(IssueScanner(pc=pc, db=db, dap=dap)) == [
        IssueKind.PC_DB_DURATION_MISMATCH,
        IssueKind.PC_DB_ARTWORK_MISMATCH,
        IssueKind.PC_DB_METADATA_MISMATCH,
        IssueKind.PC_DAP_CONTENT_MISMATCH,
    ]


def test_ignore_dap_content_skips_byte_comparison(
    pc: FakePcLibrary, db: FakeTrackRepository, dap: FakeDapLibrary
) -> None:
    pc.add(SONG, snapshot())
    db.add(SONG, snapshot())
    dap.files.add(SONG)
    dap.stale.add(SONG)

    assert _kinds(IssueScanner(pc=pc, db=db, dap=dap, ignore_dap_content=True)) == []


def test_unreadable_pc_file_is_reported_alone(
    pc: FakePcLibrary, db: FakeTrackRepository, dap: FakeDapLibrary
) -> None:
    pc.unreadable[SONG] = "not an audio file"

    issues = IssueScanner(pc=pc, db=db, dap=dap).scan(SONG)

    assert [issue.kind for issue in issues] == [IssueKind.PC_READ_FAILED]
    assert issues[0].cause == "not an audio file"
