"""Command line argument handling package."""

from trilib.ui.cli.args.parser import ArgumentParser
from trilib.ui.cli.args.options import CheckArgs, CLIArgs

__all__ = ["ArgumentParser", "CLIArgs", "CheckArgs"]
