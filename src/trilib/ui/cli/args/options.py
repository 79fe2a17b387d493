"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CheckArgs:
    """Command line arguments for the ``check`` subcommand."""

    command: Literal["check"]
    target: str | None
    pc_lib: Path
    dap_lib: Path
    db_path: Path | None
    ignore_dap_content: bool
    assume_yes: bool
    verbose: bool
    quiet: bool


CLIArgs = CheckArgs

__all__ = ["CLIArgs", "CheckArgs"]
