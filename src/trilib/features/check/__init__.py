"""Library check: compare the PC library, the database and the DAP, then reconcile them interactively."""

from .domain import CheckReport, CheckRequest, LibraryTrackPath, ResolutionOutcome
from .usecases import CheckRunner

__all__ = ["CheckReport", "CheckRequest", "CheckRunner", "LibraryTrackPath", "ResolutionOutcome"]
