"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    parent = path.parent
    return ensure_directory(parent)


def prune_empty_parents(path: Path, *, stop_at: Path) -> None:
    """Remove empty directories above ``path`` up to, but excluding, ``stop_at``."""

    current = path.parent
    while current != stop_at and current.is_relative_to(stop_at):
        try:
            if any(current.iterdir()):
                return
            current.rmdir()
        except OSError:
            return
        current = current.parent


__all__ = ["ensure_directory", "ensure_parent_directory", "prune_empty_parents"]
