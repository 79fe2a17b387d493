"""Rich console handler for structured check events.

Where: platform/logging/handlers.py
What: Render ``check_event`` log records with icons, colours and compact track paths.
Why: Keep the per-track progress readable between interactive prompts.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CheckEventRichHandler(RichHandler):
    """Rich handler that styles check events and falls back to plain rendering."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "check.run.start": ("🔍", "cyan"),
        "check.scan.complete": ("📋", "cyan"),
        "check.run.complete": ("✅", "green"),
        "check.run.terminated": ("⛔", "red"),
        "check.track.start": ("🎧", "blue"),
        "check.track.outcome": ("•", "white"),
    }
    _OUTCOME_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "resolved": ("✔", "green"),
        "deleted": ("🗑", "magenta"),
        "unresolved": ("…", "yellow"),
        "terminated": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_track(self, track_path: str) -> Text:
        """Render a library-relative track path, keeping only the trailing segments."""

        parts = [part for part in track_path.split("/") if part]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT :]

        text = Text()
        if truncated:
            _ = text.append("…/", style=Style(color="magenta"))
        for index, part in enumerate(parts):
            if index:
                _ = text.append("/", style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white"))
        return text

    def _render_check_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured check events; ``None`` for ordinary records."""

        event = getattr(record, "check_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        if event == "check.track.outcome":
            outcome = str(getattr(record, "outcome", ""))
            icon, color = self._OUTCOME_STYLES.get(outcome, (icon, color))

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "check.run.start":
            _ = body.append("Check start")
            details: list[str] = []
            target = getattr(record, "target", None)
            details.append(f"target={target}" if target else "target=<library>")
            if getattr(record, "ignore_dap_content", False):
                details.append("ignore-dap-content")
            _ = body.append(" [" + ", ".join(details) + "]")
        elif event == "check.scan.complete":
            total = getattr(record, "total_tracks", None)
            flagged = getattr(record, "flagged", None)
            _ = body.append("Scan complete")
            if isinstance(total, int) and isinstance(flagged, int):
                _ = body.append(f" [tracks={total}, with issues={flagged}]")
        elif event in {"check.run.complete", "check.run.terminated"}:
            _ = body.append("Check complete" if event == "check.run.complete" else "Check aborted")
            metrics = [
                f"{name}={value}"
                for name in ("clean", "resolved", "deleted", "unresolved", "not_visited")
                if isinstance(value := getattr(record, name, None), int)
            ]
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        else:
            sequence = getattr(record, "sequence", None)
            total = getattr(record, "total_tracks", None)
            if isinstance(sequence, int) and isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            if event == "check.track.outcome":
                _ = body.append(f"{getattr(record, 'outcome', 'unknown')} ")

        track_path = getattr(record, "track_path", None)
        if track_path:
            if event not in {"check.track.start", "check.track.outcome"}:
                _ = body.append(" @ ")
            _ = body.append_text(self._format_track(str(track_path)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for check events."""

        check_text = self._render_check_event(record)
        if check_text is not None:
            return check_text
        return super().render_message(record, message)


__all__ = ["CheckEventRichHandler"]
