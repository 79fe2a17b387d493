"""Application services orchestrating feature use cases."""

from trilib.application.services.check_service import CheckLibraryService, CheckServiceRequest

__all__ = ["CheckLibraryService", "CheckServiceRequest"]
