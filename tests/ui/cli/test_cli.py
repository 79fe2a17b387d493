"""Tests for CLI functionality."""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from trilib.features.check.domain import CheckReport
from trilib.ui.cli import CommandProcessor


@pytest.fixture
def mock_args(mocker: MockerFixture) -> MagicMock:
    """Replace argument processing with a canned result."""

    return mocker.patch("trilib.ui.cli.cli.ArgumentParser.process_args")


def test_process_command_runs_check(mocker: MockerFixture, mock_args: MagicMock) -> None:
    command = mocker.patch("trilib.ui.cli.cli.CheckCommand")
    command.return_value.execute.return_value = CheckReport()

    CommandProcessor.process_command(["check"])

    mock_args.assert_called_once_with(["check"])
    command.assert_called_once_with(mock_args.return_value)
    command.return_value.execute.assert_called_once()


def test_unexpected_error_exits_with_one(mocker: MockerFixture, mock_args: MagicMock) -> None:
    command = mocker.patch("trilib.ui.cli.cli.CheckCommand")
    command.return_value.execute.side_effect = RuntimeError("disk vanished")
    mock_logger = mocker.patch("trilib.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["check"])

    assert exc_info.value.code == 1
    mock_logger.error.assert_called_once()


def test_keyboard_interrupt_exits_with_130(mocker: MockerFixture, mock_args: MagicMock) -> None:
    command = mocker.patch("trilib.ui.cli.cli.CheckCommand")
    command.return_value.execute.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["check"])

    assert exc_info.value.code == 130
