"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point repository-root detection at a temporary directory and reset the config singleton."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    monkeypatch.delenv("TRILIB_CONFIG", raising=False)
    monkeypatch.delenv("TRILIB_DATA_DIR", raising=False)

    import trilib.config.paths as paths
    from trilib.config.config import Config

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.setattr(Config, "_instance", None)
    monkeypatch.setattr(Config, "_loaded_from", None)
    yield tmp_path
