"""Display management for CLI interface."""

from trilib.ui.cli.display.check_result import CheckReportDisplay

__all__ = ["CheckReportDisplay"]
