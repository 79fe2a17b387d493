"""Display utilities for check run reports."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from trilib.features.check.domain import CheckReport


@final
class CheckReportDisplay:
    """Render the end-of-run summary of a check."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_report(self, report: CheckReport, *, quiet: bool = False) -> None:
        """Print counts per outcome and list the tracks left unresolved."""

        if quiet:
            return

        self.console.print("\n[bold]Check Summary:[/bold]")
        self.console.print(f"Total tracks: {report.total}")
        self.console.print(f"No issues: {len(report.clean)}")
        self.console.print(f"[green]Resolved: {len(report.resolved)}[/green]")
        if report.deleted:
            self.console.print(f"[cyan]Deleted: {len(report.deleted)}[/cyan]")
        if report.unresolved:
            self.console.print(f"[yellow]Unresolved: {len(report.unresolved)}[/yellow]")
            for track in report.unresolved:
                self.console.print(f"[yellow]  • {escape(str(track))}[/yellow]", highlight=False)
        if report.not_visited:
            self.console.print(f"[dim]Not visited: {len(report.not_visited)}[/dim]")
        if report.aborted_at is not None:
            self.console.print(f"[red]Aborted at: {escape(str(report.aborted_at))}[/red]", highlight=False)
