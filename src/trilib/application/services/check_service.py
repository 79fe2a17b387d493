"""Application service to check and reconcile the music library."""

from __future__ import annotations

from dataclasses import dataclass
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from trilib.features.check.adapters.audio import MutagenTagCodec
from trilib.features.check.adapters.db import SqliteTrackRepository
from trilib.features.check.adapters.filesystem import DapLibrary, PcLibrary
from trilib.features.check.adapters.prompt import ConsolePrompt
from trilib.features.check.domain import CheckReport, CheckRequest, LibraryTrackPath, TrackPathError
from trilib.features.check.usecases import (
    CheckRunner,
    DapContentResolver,
    DataMatchResolver,
    ExistenceResolver,
    IssueScanner,
)
from trilib.features.check.usecases.ports import PromptPort, TrackRepositoryPort
from trilib.platform.db.db_manager import DatabaseManager


@dataclass(slots=True)
class CheckServiceRequest:
    """Parameters describing a check run."""

    target: Path | str | None = None
    ignore_dap_content: bool = False
    assume_yes: bool = False


@final
class CheckLibraryService:
    """Application façade wiring adapters into the check use case."""

    _pc: PcLibrary
    _dap: DapLibrary
    _repository: TrackRepositoryPort
    _prompt: PromptPort
    _db_manager: DatabaseManager | None
    _logger: Logger

    def __init__(
        self,
        *,
        pc_root: Path,
        dap_root: Path,
        db_path: Path | str | None = None,
        repository: TrackRepositoryPort | None = None,
        prompt: PromptPort | None = None,
        codec: MutagenTagCodec | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._db_manager = None
        if repository is None:
            self._db_manager = DatabaseManager(db_path)
            repository = SqliteTrackRepository(self._db_manager)

        self._repository = repository
        self._pc = PcLibrary(pc_root, codec)
        self._dap = DapLibrary(dap_root, self._pc)
        self._prompt = prompt or ConsolePrompt()
        self._logger = logger or getLogger(__name__)

    def run(self, request: CheckServiceRequest) -> CheckReport:
        """Build the stage pipeline for ``request`` and run it."""

        domain_request = CheckRequest(
            target=self.normalize_target(request.target),
            ignore_dap_content=request.ignore_dap_content,
            assume_yes=request.assume_yes,
        )
        ports = {"pc": self._pc, "db": self._repository, "dap": self._dap}
        runner = CheckRunner(
            **ports,
            prompt=self._prompt,
            scanner=IssueScanner(**ports, ignore_dap_content=request.ignore_dap_content),
            stages=[
                ExistenceResolver(**ports, prompt=self._prompt, logger=self._logger),
                DataMatchResolver(**ports, prompt=self._prompt, logger=self._logger),
                DapContentResolver(
                    dap=self._dap,
                    prompt=self._prompt,
                    ignore_content=request.ignore_dap_content,
                    logger=self._logger,
                ),
            ],
            logger=self._logger,
        )
        return runner.run(domain_request)

    def normalize_target(self, target: Path | str | None) -> str | None:
        """Turn a CLI target into a library-relative path; ``None`` selects the whole library.

        Absolute targets must lie inside the PC or DAP library root.
        """

        if target is None:
            return None
        path = Path(target)
        if path.is_absolute():
            resolved = path.resolve()
            for root in (self._pc.root, self._dap.root):
                if resolved.is_relative_to(root.resolve()):
                    path = resolved.relative_to(root.resolve())
                    break
            else:
                raise TrackPathError(f"{target} is outside the PC and DAP libraries")

        raw = path.as_posix()
        if raw in {"", "."}:
            return None
        return LibraryTrackPath(raw).value

    def close(self) -> None:
        """Release the database connection opened by this service."""

        if self._db_manager is not None:
            self._db_manager.close()


__all__ = ["CheckLibraryService", "CheckServiceRequest"]
