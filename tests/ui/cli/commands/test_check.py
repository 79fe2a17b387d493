"""Tests for the check command."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from trilib.application.services.check_service import CheckServiceRequest
from trilib.features.check.domain import CheckReport
from trilib.ui.cli.args.options import CheckArgs
from trilib.ui.cli.commands import CheckCommand


def _args(tmp_path: Path, **overrides: object) -> CheckArgs:
    values: dict[str, object] = {
        "command": "check",
        "target": "Artist",
        "pc_lib": tmp_path / "pc",
        "dap_lib": tmp_path / "dap",
        "db_path": None,
        "ignore_dap_content": True,
        "assume_yes": False,
        "verbose": False,
        "quiet": True,
    }
    values.update(overrides)
    return CheckArgs(**values)  # pyright: ignore[reportArgumentType]


def test_execute_runs_service_and_closes_it(mocker: MockerFixture, tmp_path: Path) -> None:
    service_cls = mocker.patch("trilib.ui.cli.commands.check.CheckLibraryService")
    report = CheckReport(total=3)
    service_cls.return_value.run.return_value = report
    display = mocker.patch("trilib.ui.cli.commands.check.CheckReportDisplay")

    result = CheckCommand(_args(tmp_path)).execute()

    assert result is report
    service_cls.assert_called_once_with(pc_root=tmp_path / "pc", dap_root=tmp_path / "dap", db_path=None)
    service_cls.return_value.run.assert_called_once_with(
        CheckServiceRequest(target="Artist", ignore_dap_content=True, assume_yes=False)
    )
    service_cls.return_value.close.assert_called_once()
    display.return_value.show_report.assert_called_once_with(report, quiet=True)


def test_execute_closes_service_on_failure(mocker: MockerFixture, tmp_path: Path) -> None:
    service_cls = mocker.patch("trilib.ui.cli.commands.check.CheckLibraryService")
    service_cls.return_value.run.side_effect = RuntimeError("boom")
    _ = mocker.patch("trilib.ui.cli.commands.check.CheckReportDisplay")

    with pytest.raises(RuntimeError):
        _ = CheckCommand(_args(tmp_path)).execute()

    service_cls.return_value.close.assert_called_once()
