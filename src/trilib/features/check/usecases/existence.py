"""Existence stage: make sure the track is present in the PC library, the database and the DAP.

Where: features/check/usecases/existence.py
What: Probe the three stores, report what is missing and apply the operator's decision.
Why: The later stages assume the track exists everywhere; anything else is settled here first.
"""

from __future__ import annotations

from logging import Logger, getLogger

from ..domain.errors import TrackFileNotFoundError, TrackReadError
from ..domain.issues import DAP_NOT_EXISTS, DB_NOT_EXISTS, PC_NOT_EXISTS
from ..domain.metadata import TrackSnapshot
from ..domain.models import ResolutionOutcome
from ..domain.track_path import LibraryTrackPath
from .menu import ABORT, SKIP, MenuOption, ask, passive_outcome, resolve_read_failure, show_issues
from .ports import DapLibraryPort, PcLibraryPort, PromptPort, TrackRepositoryPort


class ExistenceResolver:
    """Resolve missing-store combinations for one track."""

    _pc: PcLibraryPort
    _db: TrackRepositoryPort
    _dap: DapLibraryPort
    _prompt: PromptPort
    _logger: Logger

    def __init__(
        self,
        *,
        pc: PcLibraryPort,
        db: TrackRepositoryPort,
        dap: DapLibraryPort,
        prompt: PromptPort,
        logger: Logger | None = None,
    ) -> None:
        self._pc = pc
        self._db = db
        self._dap = dap
        self._prompt = prompt
        self._logger = logger or getLogger(__name__)

    def resolve(self, track: LibraryTrackPath) -> ResolutionOutcome:
        try:
            snapshot: TrackSnapshot | None = self._pc.read_snapshot(track)
        except TrackFileNotFoundError:
            snapshot = None
        except TrackReadError as exc:
            self._logger.warning("Failed to read %s: %s", track, exc)
            return resolve_read_failure(self._prompt, exc)

        db_exists = self._db.exists(track)
        dap_exists = self._dap.exists(track)

        match (snapshot is not None, db_exists, dap_exists):
            case (True, True, True):
                return ResolutionOutcome.RESOLVED
            case (True, True, False):
                return self._resolve_missing_dap(track)
            case (True, False, True):
                assert snapshot is not None
                return self._resolve_missing_db(track, snapshot)
            case (True, False, False):
                assert snapshot is not None
                return self._resolve_missing_db_and_dap(track, snapshot)
            case (False, True, True):
                return self._resolve_missing_pc(track)
            case (False, True, False):
                return self._resolve_missing_pc_and_dap(track)
            case (False, False, True):
                return self._resolve_missing_pc_and_db(track)
            case _:
                self._logger.info("%s no longer exists in any store", track)
                return ResolutionOutcome.DELETED

    def _resolve_missing_dap(self, track: LibraryTrackPath) -> ResolutionOutcome:
        show_issues(self._prompt, [DAP_NOT_EXISTS])
        choice = ask(self._prompt, [MenuOption("1", "Copy the PC file to the DAP"), SKIP, ABORT])
        match choice:
            case "1":
                self._dap.copy_from_pc(track)
                self._logger.info("Copied %s to the DAP", track)
                return ResolutionOutcome.RESOLVED
            case _:
                return passive_outcome(choice)

    def _resolve_missing_db(self, track: LibraryTrackPath, snapshot: TrackSnapshot) -> ResolutionOutcome:
        show_issues(self._prompt, [DB_NOT_EXISTS])
        choice = ask(
            self._prompt,
            [
                MenuOption("1", "Register the PC file in the database"),
                MenuOption("2", "Delete the file from the PC library and the DAP"),
                SKIP,
                ABORT,
            ],
        )
        match choice:
            case "1":
                self._register(track, snapshot)
                return ResolutionOutcome.RESOLVED
            case "2":
                self._pc.delete(track)
                self._dap.delete(track)
                self._logger.info("Deleted %s from the PC library and the DAP", track)
                return ResolutionOutcome.DELETED
            case _:
                return passive_outcome(choice)

    def _resolve_missing_db_and_dap(self, track: LibraryTrackPath, snapshot: TrackSnapshot) -> ResolutionOutcome:
        show_issues(self._prompt, [DB_NOT_EXISTS, DAP_NOT_EXISTS])
        choice = ask(
            self._prompt,
            [
                MenuOption("1", "Register the PC file in the database and copy it to the DAP"),
                MenuOption("2", "Delete the file from the PC library"),
                SKIP,
                ABORT,
            ],
        )
        match choice:
            case "1":
                self._register(track, snapshot)
                self._dap.copy_from_pc(track)
                self._logger.info("Copied %s to the DAP", track)
                return ResolutionOutcome.RESOLVED
            case "2":
                self._pc.delete(track)
                self._logger.info("Deleted %s from the PC library", track)
                return ResolutionOutcome.DELETED
            case _:
                return passive_outcome(choice)

    def _resolve_missing_pc(self, track: LibraryTrackPath) -> ResolutionOutcome:
        show_issues(self._prompt, [PC_NOT_EXISTS])
        choice = ask(
            self._prompt,
            [MenuOption("2", "Delete the track from the database and the DAP"), SKIP, ABORT],
        )
        match choice:
            case "2":
                self._delete_from_db(track)
                self._dap.delete(track)
                self._logger.info("Deleted %s from the DAP", track)
                return ResolutionOutcome.DELETED
            case _:
                return passive_outcome(choice)

    def _resolve_missing_pc_and_dap(self, track: LibraryTrackPath) -> ResolutionOutcome:
        show_issues(self._prompt, [PC_NOT_EXISTS, DAP_NOT_EXISTS])
        choice = ask(self._prompt, [MenuOption("2", "Delete the track from the database"), SKIP, ABORT])
        match choice:
            case "2":
                self._delete_from_db(track)
                return ResolutionOutcome.DELETED
            case _:
                return passive_outcome(choice)

    def _resolve_missing_pc_and_db(self, track: LibraryTrackPath) -> ResolutionOutcome:
        show_issues(self._prompt, [PC_NOT_EXISTS, DB_NOT_EXISTS])
        choice = ask(self._prompt, [MenuOption("2", "Delete the file from the DAP"), SKIP, ABORT])
        match choice:
            case "2":
                self._dap.delete(track)
                self._logger.info("Deleted %s from the DAP", track)
                return ResolutionOutcome.DELETED
            case _:
                return passive_outcome(choice)

    def _register(self, track: LibraryTrackPath, snapshot: TrackSnapshot) -> None:
        with self._db.transaction():
            self._db.register(track, snapshot)
        self._logger.info("Registered %s in the database", track)

    def _delete_from_db(self, track: LibraryTrackPath) -> None:
        with self._db.transaction():
            self._db.delete(track)
        self._logger.info("Deleted %s from the database", track)


__all__ = ["ExistenceResolver"]
