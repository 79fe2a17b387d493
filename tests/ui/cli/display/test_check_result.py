"""Tests for the check summary display."""

from io import StringIO

from rich.console import Console

from trilib.features.check.domain import CheckReport, LibraryTrackPath
from trilib.ui.cli.display import CheckReportDisplay


def _display() -> tuple[CheckReportDisplay, StringIO]:
    buffer = StringIO()
    return CheckReportDisplay(Console(file=buffer, force_terminal=False, width=120)), buffer


def test_summary_lists_counts_and_unresolved_tracks() -> None:
    display, buffer = _display()
    report = CheckReport(
        total=6,
        clean=[LibraryTrackPath("e.flac"), LibraryTrackPath("f.flac")],
        resolved=[LibraryTrackPath("a.flac")],
        unresolved=[LibraryTrackPath("[Live]/b.flac")],
        not_visited=[LibraryTrackPath("c.flac"), LibraryTrackPath("d.flac")],
        aborted_at=LibraryTrackPath("b2.flac"),
    )

    display.show_report(report)

    output = buffer.getvalue()
    assert "Total tracks: 6" in output
    assert "No issues: 2" in output
    assert "Resolved: 1" in output
    assert "Unresolved: 1" in output
    assert "[Live]/b.flac" in output
    assert "Not visited: 2" in output
    assert "Aborted at: b2.flac" in output
    assert "Deleted" not in output


def test_quiet_prints_nothing() -> None:
    display, buffer = _display()

    display.show_report(CheckReport(total=1), quiet=True)

    assert buffer.getvalue() == ""
