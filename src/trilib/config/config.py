"""Configuration management for trilib.

Where: config/config.py
What: TOML-backed settings naming the PC library, the DAP library, the database and the log file.
Why: Library roots change per machine and must not be hard coded into the check.
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from trilib.config.file_ops import write_text_file
from trilib.config.paths import default_config_path
from trilib.platform.logging import logger


class ConfigError(ValueError):
    """Raised when the configuration cannot support the requested operation."""


# (key, description, example) in file order.
_TOML_LAYOUT: Final[tuple[tuple[str, str, str], ...]] = (
    (
        "pc_lib",
        "Root directory of the music library on the PC (required for check)",
        'pc_lib = "/home/user/Music"',
    ),
    (
        "dap_lib",
        "Root directory of the music library on the mounted DAP (required for check)",
        'dap_lib = "/media/user/DAP/Music"',
    ),
    (
        "db_path",
        "SQLite database file (optional, defaults to <repo_root>/.data/trilib.db)",
        'db_path = "/home/user/.local/share/trilib/trilib.db"',
    ),
    (
        "log_file",
        "Log file path (optional)",
        'log_file = "/path/to/logs/trilib.log"',
    ),
)


def _optional_path() -> Any:
    return field(default=None, metadata={"path": True})


def _to_toml_string(value: Path | str) -> str:
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class Config:
    """Application configuration."""

    pc_lib: Path | None = _optional_path()
    dap_lib: Path | None = _optional_path()
    db_path: Path | None = _optional_path()
    log_file: Path | None = _optional_path()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        # TOML yields strings; blank strings mean "unset".
        for f in fields(self):
            if not f.metadata.get("path"):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def require_libraries(self) -> tuple[Path, Path]:
        """Return the PC and DAP library roots or raise ``ConfigError`` naming the missing keys."""

        missing = [name for name in ("pc_lib", "dap_lib") if getattr(self, name) is None]
        if missing:
            source = self._loaded_from or default_config_path()
            raise ConfigError(f"{', '.join(missing)} must be set in {source}")
        assert self.pc_lib is not None and self.dap_lib is not None
        return self.pc_lib, self.dap_lib

    def save(self) -> None:
        """Write the configuration to the default location, commenting out unset keys."""

        target = default_config_path()
        try:
            write_text_file(target, self.to_toml())
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)

    def to_toml(self) -> str:
        values = asdict(self)
        lines = ["# trilib Configuration File", ""]
        for key, description, example in _TOML_LAYOUT:
            lines.append(f"# {description}")
            lines.append(f"# Example: {example}")
            if values[key] is not None:
                lines.append(f"{key} = {_to_toml_string(values[key])}")
            lines.append("")
        return "\n".join(lines)

    @classmethod
    def _read(cls, config_file: Path) -> "Config":
        with open(config_file, "rb") as f:
            raw = tomllib.load(f)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        logger.debug("Configuration loaded from %s", config_file)
        return cls(**{key: value for key, value in raw.items() if key in known})

    @classmethod
    def load(cls) -> "Config":
        """Return the process-wide configuration.

        The first call reads the TOML file, or writes a commented template when
        the file does not exist yet.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        try:
            if config_file.exists():
                instance = cls._read(config_file)
            else:
                instance = cls()
                instance.save()
                logger.info("Created default configuration at %s", config_file)
        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config", "ConfigError"]
