"""Operator menu helpers shared by the resolvers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from ..domain.issues import CheckIssue
from ..domain.models import ResolutionOutcome
from .ports import PromptPort


@dataclass(slots=True, frozen=True)
class MenuOption:
    key: str
    label: str


SKIP: Final[MenuOption] = MenuOption("0", "Leave unresolved")
ABORT: Final[MenuOption] = MenuOption("-", "Abort the check")
SELECT_OPERATION: Final[str] = "Select an operation"


def show_issues(prompt: PromptPort, issues: Iterable[CheckIssue]) -> None:
    """Print the issue block that heads every decision."""

    prompt.show("----")
    for issue in issues:
        prompt.show(str(issue))
    prompt.show("")


def ask(prompt: PromptPort, options: Sequence[MenuOption], message: str = SELECT_OPERATION) -> str:
    """List ``options`` and return the key the operator picked."""

    for option in options:
        prompt.show(f"{option.key}: {option.label}")
    return prompt.choose([option.key for option in options], message)


def passive_outcome(choice: str) -> ResolutionOutcome:
    """Map the skip and abort keys onto their outcomes."""

    if choice == ABORT.key:
        return ResolutionOutcome.TERMINATED
    return ResolutionOutcome.UNRESOLVED


def resolve_read_failure(prompt: PromptPort, error: Exception) -> ResolutionOutcome:
    """Report an unreadable PC file; the operator may only skip or abort."""

    show_issues(prompt, [CheckIssue.pc_read_failed(error)])
    return passive_outcome(ask(prompt, [SKIP, ABORT]))


__all__ = [
    "ABORT",
    "MenuOption",
    "SELECT_OPERATION",
    "SKIP",
    "ask",
    "passive_outcome",
    "resolve_read_failure",
    "show_issues",
]
