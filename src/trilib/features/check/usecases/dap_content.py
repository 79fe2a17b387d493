"""DAP content stage: make the DAP copy byte-identical to the PC file."""

from __future__ import annotations

from logging import Logger, getLogger

from ..domain.issues import PC_DAP_CONTENT_MISMATCH
from ..domain.models import ResolutionOutcome
from ..domain.track_path import LibraryTrackPath
from .menu import ABORT, SKIP, MenuOption, ask, passive_outcome, show_issues
from .ports import DapLibraryPort, PromptPort


class DapContentResolver:
    """Compare PC and DAP bytes and offer to overwrite the DAP copy.

    With ``ignore_content`` set the stage always resolves; useful when the DAP
    copies are transcoded or otherwise expected to differ.
    """

    _dap: DapLibraryPort
    _prompt: PromptPort
    _ignore_content: bool
    _logger: Logger

    def __init__(
        self,
        *,
        dap: DapLibraryPort,
        prompt: PromptPort,
        ignore_content: bool = False,
        logger: Logger | None = None,
    ) -> None:
        self._dap = dap
        self._prompt = prompt
        self._ignore_content = ignore_content
        self._logger = logger or getLogger(__name__)

    def resolve(self, track: LibraryTrackPath) -> ResolutionOutcome:
        if self._ignore_content or not self._dap.exists(track):
            return ResolutionOutcome.RESOLVED
        if self._dap.matches_pc(track):
            return ResolutionOutcome.RESOLVED

        show_issues(self._prompt, [PC_DAP_CONTENT_MISMATCH])
        choice = ask(self._prompt, [MenuOption("1", "Overwrite the DAP file with the PC file"), SKIP, ABORT])
        if choice != "1":
            return passive_outcome(choice)

        self._dap.overwrite_from_pc(track)
        self._logger.info("Overwrote %s on the DAP", track)
        return ResolutionOutcome.RESOLVED


__all__ = ["DapContentResolver"]
