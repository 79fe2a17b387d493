"""Operator prompt adapters."""

from .console import ConsolePrompt

__all__ = ["ConsolePrompt"]
