"""Local filesystem adapters."""

from .library import DapLibrary, LocalLibrary, PcLibrary

__all__ = ["DapLibrary", "LocalLibrary", "PcLibrary"]
