"""Structured log event names emitted by the check use cases."""

from __future__ import annotations

from enum import StrEnum


class CheckEvent(StrEnum):
    """Values for the ``check_event`` extra understood by the console handler."""

    RUN_START = "check.run.start"
    SCAN_COMPLETE = "check.scan.complete"
    RUN_COMPLETE = "check.run.complete"
    RUN_TERMINATED = "check.run.terminated"
    TRACK_START = "check.track.start"
    TRACK_OUTCOME = "check.track.outcome"


__all__ = ["CheckEvent"]
