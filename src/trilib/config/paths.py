"""Locations of the configuration file, the database and the log file.

Everything defaults to directories beside the checkout so a check can run
from a cloned repository without installation:

- config: ``<repo_root>/config/config.toml``, or ``$TRILIB_CONFIG``
- database: ``<repo_root>/.data/trilib.db``; ``$TRILIB_DATA_DIR`` moves the directory
- log: ``<repo_root>/logs/trilib.log``
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final


CONFIG_ENV_VAR: Final[str] = "TRILIB_CONFIG"
DATA_DIR_ENV_VAR: Final[str] = "TRILIB_DATA_DIR"
DB_FILE_NAME: Final[str] = "trilib.db"
LOG_FILE_NAME: Final[str] = "trilib.log"
_REPO_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Return the first of ``explicit_path``, a non-blank ``env_var`` value or the default, resolved."""

    if explicit_path is not None:
        candidate = Path(explicit_path)
    else:
        mapping = os.environ if env is None else env
        override = mapping.get(env_var, "").strip() if env_var else ""
        candidate = Path(override) if override else default_factory()
    return candidate.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (this file by default) to the first directory holding a repo marker.

    Falls back to the current working directory when no marker is found.
    """
    origin = (start or Path(__file__).resolve()).parent
    for directory in (origin, *origin.parents):
        if any((directory / marker).exists() for marker in _REPO_MARKERS):
            return directory
    return Path.cwd()


def default_config_path() -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_data_dir() -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=DATA_DIR_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / ".data",
    )


def default_db_path() -> Path:
    """Database used when neither the configuration nor the command line names one."""

    return default_data_dir() / DB_FILE_NAME


def default_log_file() -> Path:
    return (_detect_repo_root() / "logs" / LOG_FILE_NAME).resolve()


__all__ = [
    "CONFIG_ENV_VAR",
    "DATA_DIR_ENV_VAR",
    "DB_FILE_NAME",
    "default_config_path",
    "default_data_dir",
    "default_db_path",
    "default_log_file",
    "resolve_overridable_path",
]
