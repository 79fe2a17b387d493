"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from trilib.config.config import ConfigError
from trilib.platform.logging import DEFAULT_LOG_FILE
from trilib.ui.cli.args import ArgumentParser, CheckArgs


@pytest.fixture
def libraries(tmp_path: Path) -> tuple[Path, Path]:
    pc_lib = tmp_path / "pc"
    dap_lib = tmp_path / "dap"
    pc_lib.mkdir()
    dap_lib.mkdir()
    return pc_lib, dap_lib


@pytest.fixture
def mock_config(mocker: MockerFixture, libraries: tuple[Path, Path]) -> MagicMock:
    mock = mocker.patch("trilib.ui.cli.args.parser.Config")
    configuration = mock.load.return_value
    configuration.log_file = None
    configuration.db_path = None
    configuration.require_libraries.return_value = libraries
    return mock


def test_create_parser() -> None:
    """Argument parser should expose the check subcommand and its flags."""

    parser = ArgumentParser.create_parser()

    defaults: Namespace = parser.parse_args(["check"])
    assert defaults.command == "check"
    assert defaults.target is None
    assert not defaults.ignore_dap_content and not defaults.assume_yes

    all_flags = parser.parse_args(["check", "Artist/Album", "-i", "-y", "--verbose"])
    assert all_flags.target == "Artist/Album"
    assert all_flags.ignore_dap_content and all_flags.assume_yes and all_flags.verbose


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_process_args_check(
    mocker: MockerFixture, mock_config: MagicMock, libraries: tuple[Path, Path]
) -> None:
    """Configured libraries are used and logging is attached to the default log file."""

    mock_setup_logger = mocker.patch("trilib.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["check", "Artist", "--ignore-dap-content"])

    assert isinstance(args, CheckArgs)
    assert (args.pc_lib, args.dap_lib) == (libraries[0].resolve(), libraries[1].resolve())
    assert args.target == "Artist"
    assert args.ignore_dap_content and not args.assume_yes
    assert args.db_path is None
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


def test_process_args_overrides(
    mocker: MockerFixture, mock_config: MagicMock, tmp_path: Path
) -> None:
    """Command line roots win over the configuration and quiet lowers the console level."""

    mock_setup_logger = mocker.patch("trilib.ui.cli.args.parser.setup_logger")
    custom_log_path = tmp_path / "custom.log"
    mock_config.load.return_value.log_file = custom_log_path
    other_pc = tmp_path / "other_pc"
    other_dap = tmp_path / "other_dap"
    other_pc.mkdir()
    other_dap.mkdir()

    args = ArgumentParser.process_args(
        [
            "check",
            "--pc-lib",
            str(other_pc),
            "--dap-lib",
            str(other_dap),
            "--db",
            str(tmp_path / "trilib.db"),
            "--yes",
            "--quiet",
        ]
    )

    assert isinstance(args, CheckArgs)
    assert args.pc_lib == other_pc.resolve()
    assert args.dap_lib == other_dap.resolve()
    assert args.db_path == tmp_path / "trilib.db"
    assert args.assume_yes and args.quiet
    mock_config.load.return_value.require_libraries.assert_not_called()
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR
    assert mock_setup_logger.call_args.kwargs["log_file"] == custom_log_path


def test_missing_library_configuration_exits(mocker: MockerFixture, mock_config: MagicMock) -> None:
    _ = mocker.patch("trilib.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.require_libraries.side_effect = ConfigError("pc_lib must be set")

    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["check"])

    assert exc_info.value.code == 1


def test_nonexistent_library_root_exits(mocker: MockerFixture, mock_config: MagicMock, tmp_path: Path) -> None:
    _ = mocker.patch("trilib.ui.cli.args.parser.setup_logger")

    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["check", "--pc-lib", str(tmp_path / "missing")])

    assert exc_info.value.code == 1
