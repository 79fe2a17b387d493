"""Command execution package for CLI."""

from trilib.ui.cli.commands.check import CheckCommand

__all__ = ["CheckCommand"]
