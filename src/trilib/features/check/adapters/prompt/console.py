"""Rich console implementation of the operator prompt."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.text import Text


@final
class ConsolePrompt:
    """Print check output and read single-key choices from the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def show(self, message: str = "") -> None:
        self.console.print(Text(message))

    def choose(self, choices: Sequence[str], message: str) -> str:
        """Ask until the answer matches one of ``choices``, ignoring case and surrounding blanks."""

        allowed = {choice.lower(): choice for choice in choices}
        prompt = Text(f"{message} [{'/'.join(choices)}]: ", style="bold")
        while True:
            answer = self.console.input(prompt).strip().lower()
            if answer in allowed:
                return allowed[answer]
            self.console.print(Text(f"Enter one of: {', '.join(choices)}", style="yellow"))


__all__ = ["ConsolePrompt"]
