"""Command line interface for trilib."""

from trilib.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
