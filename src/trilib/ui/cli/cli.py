"""Command line interface for trilib."""

import sys
from typing import final

from trilib.platform.logging import logger
from trilib.ui.cli.args import ArgumentParser
from trilib.ui.cli.args.options import CLIArgs
from trilib.ui.cli.commands import CheckCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            _ = CheckCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
