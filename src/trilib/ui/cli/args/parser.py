"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from trilib.config.config import Config, ConfigError
from trilib.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from trilib.ui.cli.args.options import CheckArgs, CLIArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="trilib - Keep a PC music library, its database and a DAP copy consistent.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        check_parser = subparsers.add_parser(
            "check",
            help="Find and interactively resolve inconsistencies between PC, database and DAP",
        )
        _ = check_parser.add_argument(
            "target",
            nargs="?",
            type=str,
            default=None,
            help="Track or directory to check, relative to a library root (defaults to everything)",
            metavar="PATH",
        )
        _ = check_parser.add_argument(
            "-i",
            "--ignore-dap-content",
            action="store_true",
            help="Skip the byte-for-byte comparison of DAP files against the PC",
        )
        _ = check_parser.add_argument(
            "-y",
            "--yes",
            action="store_true",
            dest="assume_yes",
            help="Start resolving without asking for confirmation after the scan",
        )
        _ = check_parser.add_argument(
            "--pc-lib",
            type=str,
            help="PC library root (overrides pc_lib in the configuration)",
            metavar="PC_LIB",
        )
        _ = check_parser.add_argument(
            "--dap-lib",
            type=str,
            help="DAP library root (overrides dap_lib in the configuration)",
            metavar="DAP_LIB",
        )
        _ = check_parser.add_argument(
            "--db",
            type=str,
            dest="db_path",
            help="SQLite database file (overrides db_path in the configuration)",
            metavar="DB_PATH",
        )
        _ = check_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show per-track progress events",
        )
        _ = check_parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the library roots are not configured or do not exist.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "check":
            return ArgumentParser._process_check(parsed_args, configuration)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_check(parsed_args: argparse.Namespace, configuration: Config) -> CheckArgs:
        pc_lib = ArgumentParser._optional_path(parsed_args.pc_lib)
        dap_lib = ArgumentParser._optional_path(parsed_args.dap_lib)

        if pc_lib is None or dap_lib is None:
            try:
                configured_pc, configured_dap = configuration.require_libraries()
            except ConfigError as e:
                logger.error("%s", e)
                sys.exit(1)
            pc_lib = pc_lib or configured_pc
            dap_lib = dap_lib or configured_dap

        for name, root in (("PC library", pc_lib), ("DAP library", dap_lib)):
            if not root.is_dir():
                logger.error("%s does not exist or is not a directory: %s", name, root)
                sys.exit(1)

        db_path = ArgumentParser._optional_path(parsed_args.db_path) or configuration.db_path

        return CheckArgs(
            command="check",
            target=parsed_args.target,
            pc_lib=pc_lib.resolve(),
            dap_lib=dap_lib.resolve(),
            db_path=db_path,
            ignore_dap_content=parsed_args.ignore_dap_content,
            assume_yes=parsed_args.assume_yes,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _optional_path(value: str | None) -> Path | None:
        if value is None or not value.strip():
            return None
        return Path(value).expanduser()
