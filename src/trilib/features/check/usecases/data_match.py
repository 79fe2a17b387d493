"""Data-match stage: reconcile duration, artwork and editable metadata between the PC file and the database.

Where: features/check/usecases/data_match.py
What: Compare in a fixed order and let the operator pick a side, wholesale or one field at a time.
Why: The PC file and the database are both authoritative for different edits; only the operator knows which won.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import Logger, getLogger

from ..domain.errors import DbTrackNotFoundError, TrackFileNotFoundError, TrackReadError
from ..domain.issues import PC_DB_ARTWORK_MISMATCH, PC_DB_DURATION_MISMATCH, PC_DB_METADATA_MISMATCH
from ..domain.item_kind import ItemKind, conflicting_kinds
from ..domain.metadata import EditableMetadata, TrackArtwork, TrackSnapshot, artworks_match
from ..domain.models import ResolutionOutcome
from ..domain.track_path import LibraryTrackPath
from .menu import ABORT, SKIP, MenuOption, ask, passive_outcome, resolve_read_failure, show_issues
from .ports import DapLibraryPort, PcLibraryPort, PromptPort, TrackRepositoryPort


_PC_TO_DB = MenuOption("1", "Apply the PC value to the database")
_DB_TO_PC = MenuOption("2", "Apply the database value to the PC file")


@dataclass(slots=True)
class _FieldDecisions:
    """Per-field choices collected before anything is written."""

    to_db: list[ItemKind] = field(default_factory=list)
    to_pc: list[ItemKind] = field(default_factory=list)
    skipped: list[ItemKind] = field(default_factory=list)


@dataclass(slots=True)
class _StagePlan:
    """Every write accepted for one track; applied only once the last prompt has been answered."""

    duration_ms: int | None = None
    artworks: tuple[TrackArtwork, ...] | None = None
    fields: _FieldDecisions = field(default_factory=_FieldDecisions)

    @property
    def writes_db(self) -> bool:
        return self.duration_ms is not None or self.artworks is not None or bool(self.fields.to_db)


class DataMatchResolver:
    """Resolve duration, artwork and metadata mismatches for a track held by both PC and database."""

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
        """Ask about each mismatch in turn, then write every accepted change.

        Aborting at any prompt leaves the database and the files untouched,
        including changes accepted at earlier prompts of this track.
        """
        try:
            pc = self._pc.read_snapshot(track)
        except (TrackFileNotFoundError, TrackReadError) as exc:
            self._logger.warning("Failed to read %s: %s", track, exc)
            return resolve_read_failure(self._prompt, exc)

        db = self._db.get(track)
        if db is None:
            raise DbTrackNotFoundError(f"{track} is not registered in the database")

        plan = _StagePlan()
        if not self._plan_duration(pc, db, plan):
            return ResolutionOutcome.TERMINATED
        if not self._plan_artwork(pc.artworks, db.artworks, plan):
            return ResolutionOutcome.TERMINATED
        outcome = self._plan_metadata(pc.metadata, db.metadata, plan)
        if outcome is ResolutionOutcome.TERMINATED:
            return outcome

        self._apply(track, pc.metadata, db.metadata, plan)
        return outcome

    def _plan_duration(self, pc: TrackSnapshot, db: TrackSnapshot, plan: _StagePlan) -> bool:
        """Return ``False`` when the operator aborts."""
        if pc.duration_ms == db.duration_ms:
            return True

        show_issues(self._prompt, [PC_DB_DURATION_MISMATCH])
        self._prompt.show(f"* Duration: {pc.duration_ms} ms | {db.duration_ms} ms")
        self._prompt.show("(PC | DB)")
        self._prompt.show("")
        choice = ask(self._prompt, [MenuOption("1", "Apply the PC duration to the database"), ABORT])
        if choice == ABORT.key:
            return False
        plan.duration_ms = pc.duration_ms
        return True

    def _plan_artwork(
        self,
        pc: tuple[TrackArtwork, ...],
        db: tuple[TrackArtwork, ...],
        plan: _StagePlan,
    ) -> bool:
        if artworks_match(pc, db):
            return True

        show_issues(self._prompt, [PC_DB_ARTWORK_MISMATCH])
        for side, artworks in (("PC", pc), ("DB", db)):
            self._prompt.show(f"[{side}] {len(artworks)} picture(s)")
            for artwork in artworks:
                self._prompt.show(f"  - {artwork.describe()}")
        self._prompt.show("")
        choice = ask(self._prompt, [MenuOption("1", "Apply the PC artwork to the database"), ABORT])
        if choice == ABORT.key:
            return False
        plan.artworks = pc
        return True

    def _plan_metadata(
        self,
        pc: EditableMetadata,
        db: EditableMetadata,
        plan: _StagePlan,
    ) -> ResolutionOutcome:
        conflicts = conflicting_kinds(pc, db)
        if not conflicts:
            return ResolutionOutcome.RESOLVED

        show_issues(self._prompt, [PC_DB_METADATA_MISMATCH])
        for kind in conflicts:
            if kind is ItemKind.LYRICS:
                self._prompt.show(f"* {kind.label} differ")
            else:
                self._prompt.show(f"* {kind.label}: {_shown(kind, pc)} | {_shown(kind, db)}")
        self._prompt.show("(PC | DB)")
        self._prompt.show("")

        choice = ask(
            self._prompt,
            [
                MenuOption("1", "Apply every PC value to the database"),
                MenuOption("2", "Apply every database value to the PC file"),
                MenuOption("3", "Decide field by field"),
                SKIP,
                ABORT,
            ],
        )
        match choice:
            case "1":
                plan.fields = _FieldDecisions(to_db=list(ItemKind))
            case "2":
                plan.fields = _FieldDecisions(to_pc=list(ItemKind))
            case "3":
                collected = self._collect_field_decisions(conflicts, pc, db)
                if collected is None:
                    return ResolutionOutcome.TERMINATED
                plan.fields = collected
            case _:
                return passive_outcome(choice)

        if plan.fields.skipped:
            return ResolutionOutcome.UNRESOLVED
        return ResolutionOutcome.RESOLVED

    def _collect_field_decisions(
        self,
        conflicts: list[ItemKind],
        pc: EditableMetadata,
        db: EditableMetadata,
    ) -> _FieldDecisions | None:
        """Ask about every conflicting field; ``None`` when the operator aborts."""

        decisions = _FieldDecisions()
        for kind in conflicts:
            self._prompt.show("----")
            self._prompt.show(kind.label)
            self._prompt.show(f"[PC] {_shown(kind, pc)}")
            self._prompt.show(f"[DB] {_shown(kind, db)}")
            self._prompt.show("")
            choice = ask(
                self._prompt,
                [_PC_TO_DB, _DB_TO_PC, MenuOption(SKIP.key, "Leave this field unresolved"), ABORT],
            )
            match choice:
                case "1":
                    decisions.to_db.append(kind)
                case "2":
                    decisions.to_pc.append(kind)
                case "0":
                    decisions.skipped.append(kind)
                case _:
                    return None
        return decisions

    def _apply(
        self,
        track: LibraryTrackPath,
        pc: EditableMetadata,
        db: EditableMetadata,
        plan: _StagePlan,
    ) -> None:
        decisions = plan.fields
        # Database first, in one transaction; file rewrites follow the commit.
        if plan.writes_db:
            with self._db.transaction():
                if plan.duration_ms is not None:
                    self._db.save_duration(track, plan.duration_ms)
                if plan.artworks is not None:
                    self._db.replace_artworks(track, plan.artworks)
                if decisions.to_db:
                    merged = replace(db)
                    for kind in decisions.to_db:
                        kind.copy_into(pc, merged)
                    self._db.save_metadata(track, merged)
            if plan.duration_ms is not None:
                self._logger.info("Updated duration of %s to %d ms", track, plan.duration_ms)
            if plan.artworks is not None:
                self._logger.info("Replaced artwork of %s in the database", track)
            if decisions.to_db:
                self._logger.info(
                    "Updated %s in the database: %s",
                    track,
                    ", ".join(kind.value for kind in decisions.to_db),
                )

        if decisions.to_pc:
            merged = replace(pc)
            for kind in decisions.to_pc:
                kind.copy_into(db, merged)
            self._pc.write_metadata(track, merged)
            self._logger.info(
                "Updated %s in the PC library: %s",
                track,
                ", ".join(kind.value for kind in decisions.to_pc),
            )
            if self._dap.exists(track):
                self._dap.overwrite_from_pc(track)
                self._logger.info("Refreshed %s on the DAP", track)


def _shown(kind: ItemKind, record: EditableMetadata) -> str:
    value = kind.display_value(record)
    return "None" if value is None else value


__all__ = ["DataMatchResolver"]
