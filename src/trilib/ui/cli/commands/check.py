"""Check command implementation for the CLI."""

from __future__ import annotations

from typing import final

from trilib.application.services.check_service import CheckLibraryService, CheckServiceRequest
from trilib.features.check.domain import CheckReport
from trilib.ui.cli.args.options import CheckArgs
from trilib.ui.cli.display.check_result import CheckReportDisplay


@final
class CheckCommand:
    """Command that runs an interactive library check."""

    def __init__(self, args: CheckArgs) -> None:
        self.args = args
        self.service = CheckLibraryService(
            pc_root=args.pc_lib,
            dap_root=args.dap_lib,
            db_path=args.db_path,
        )
        self.display = CheckReportDisplay()

    def execute(self) -> CheckReport:
        """Execute the check command."""

        request = CheckServiceRequest(
            target=self.args.target,
            ignore_dap_content=self.args.ignore_dap_content,
            assume_yes=self.args.assume_yes,
        )
        try:
            report = self.service.run(request)
        finally:
            self.service.close()
        self.display.show_report(report, quiet=self.args.quiet)
        return report
