"""Use case orchestrating a full library check.

Where: features/check/usecases/check_runner.py
What: Resolve the target set, pre-scan it, confirm with the operator and drive each flagged track through the stages.
Why: Keep batch control (ordering, abort, reporting) apart from the per-stage decisions.
"""

from __future__ import annotations

from collections.abc import Sequence
from logging import Logger, getLogger
from typing import Final

from ..domain.models import CheckReport, CheckRequest, ResolutionOutcome, TrackIssues
from ..domain.track_path import LibraryTrackPath
from .events import CheckEvent
from .issue_scan import IssueScanner
from .ports import DapLibraryPort, PcLibraryPort, PromptPort, TrackRepositoryPort, TrackResolver


PROGRESS_INTERVAL: Final[int] = 100


class CheckRunner:
    """Run Existence, DataMatch and DapContent over every flagged track, in path order."""

    _pc: PcLibraryPort
    _db: TrackRepositoryPort
    _dap: DapLibraryPort
    _prompt: PromptPort
    _scanner: IssueScanner
    _stages: tuple[TrackResolver, ...]
    _logger: Logger

    def __init__(
        self,
        *,
        pc: PcLibraryPort,
        db: TrackRepositoryPort,
        dap: DapLibraryPort,
        prompt: PromptPort,
        scanner: IssueScanner,
        stages: Sequence[TrackResolver],
        logger: Logger | None = None,
    ) -> None:
        self._pc = pc
        self._db = db
        self._dap = dap
        self._prompt = prompt
        self._scanner = scanner
        self._stages = tuple(stages)
        self._logger = logger or getLogger(__name__)

    def run(self, request: CheckRequest) -> CheckReport:
        """Check every track under ``request.target`` and return the run report."""

        self._logger.info(
            "Check start",
            extra={
                "check_event": CheckEvent.RUN_START,
                "target": request.target,
                "ignore_dap_content": request.ignore_dap_content,
            },
        )
        tracks = self.list_targets(request.target)
        report = CheckReport(total=len(tracks))
        report.findings = self.scan(tracks)

        flagged = {finding.track for finding in report.findings}
        report.clean.extend(track for track in tracks if track not in flagged)
        self._logger.info(
            "Scan complete",
            extra={
                "check_event": CheckEvent.SCAN_COMPLETE,
                "total_tracks": len(tracks),
                "flagged": len(flagged),
            },
        )

        if not report.findings:
            self._prompt.show("No issues found.")
            self._log_finished(report)
            return report

        self._show_findings(report.findings)
        if not request.assume_yes:
            answer = self._prompt.choose(["y", "n"], "Resolve these issues?")
            if answer == "n":
                report.not_visited.extend(finding.track for finding in report.findings)
                self._log_finished(report)
                return report

        _ = self.resolve_tracks([finding.track for finding in report.findings], report)
        self._log_finished(report)
        return report

    def list_targets(self, target: str | None) -> list[LibraryTrackPath]:
        """Union of the PC, DAP and database listings under ``target``, sorted by path."""

        tracks: set[LibraryTrackPath] = set()
        tracks.update(self._pc.list_tracks(target))
        tracks.update(self._dap.list_tracks(target))
        tracks.update(self._db.list_paths(target))
        return sorted(tracks)

    def scan(self, tracks: Sequence[LibraryTrackPath]) -> list[TrackIssues]:
        """Collect issues for every track without prompting."""

        total = len(tracks)
        findings: list[TrackIssues] = []
        for index, track in enumerate(tracks, start=1):
            if index % PROGRESS_INTERVAL == 0:
                self._prompt.show(f"Checking... ({index}/{total})")
            issues = self._scanner.scan(track)
            if issues:
                findings.append(TrackIssues(track=track, issues=tuple(issues)))
        return findings

    def resolve_tracks(
        self,
        tracks: Sequence[LibraryTrackPath],
        report: CheckReport | None = None,
    ) -> CheckReport:
        """Drive ``tracks`` through the stages; an abort leaves the remainder not visited."""

        if report is None:
            report = CheckReport(total=len(tracks))

        total = len(tracks)
        for index, track in enumerate(tracks, start=1):
            self._prompt.show("====")
            self._prompt.show(f"{track} ({index}/{total})")
            self._logger.debug(
                "Resolving %s",
                track,
                extra={
                    "check_event": CheckEvent.TRACK_START,
                    "track_path": str(track),
                    "sequence": index,
                    "total_tracks": total,
                },
            )

            outcome = self._resolve_track(track)
            report.record(track, outcome)
            self._logger.debug(
                "%s: %s",
                track,
                outcome,
                extra={
                    "check_event": CheckEvent.TRACK_OUTCOME,
                    "track_path": str(track),
                    "outcome": outcome.value,
                    "sequence": index,
                    "total_tracks": total,
                },
            )

            if outcome is ResolutionOutcome.TERMINATED:
                report.not_visited.extend(tracks[index:])
                break
        return report

    def _resolve_track(self, track: LibraryTrackPath) -> ResolutionOutcome:
        for stage in self._stages:
            outcome = stage.resolve(track)
            match outcome:
                case ResolutionOutcome.RESOLVED:
                    continue
                case ResolutionOutcome.DELETED | ResolutionOutcome.UNRESOLVED | ResolutionOutcome.TERMINATED:
                    return outcome
        return ResolutionOutcome.RESOLVED

    def _show_findings(self, findings: Sequence[TrackIssues]) -> None:
        for finding in findings:
            self._prompt.show(f"# {finding.track}")
            for issue in finding.issues:
                self._prompt.show(f"---- {issue}")
        self._prompt.show("")
        self._prompt.show(f"{len(findings)} track(s) with issues.")

    def _log_finished(self, report: CheckReport) -> None:
        extra: dict[str, object] = {
            "check_event": CheckEvent.RUN_COMPLETE,
            "clean": len(report.clean),
            "resolved": len(report.resolved),
            "deleted": len(report.deleted),
            "unresolved": len(report.unresolved),
            "not_visited": len(report.not_visited),
        }
        if report.aborted_at is None:
            self._logger.info("Check complete", extra=extra)
            return

        extra["check_event"] = CheckEvent.RUN_TERMINATED
        extra["track_path"] = str(report.aborted_at)
        self._logger.info("Check aborted at %s", report.aborted_at, extra=extra)


__all__ = ["CheckRunner", "PROGRESS_INTERVAL"]
