"""Test configuration management."""

from pathlib import Path

import pytest

from trilib.config.config import Config, ConfigError
from trilib.config.paths import default_config_path


def test_load_creates_default_config(repo_root: Path) -> None:
    """A missing file is created with every optional key commented out."""

    config = Config.load()

    assert config.pc_lib is None and config.dap_lib is None
    assert default_config_path() == repo_root / "config" / "config.toml"
    content = default_config_path().read_text(encoding="utf-8")
    assert "# Example: pc_lib" in content
    assert "\npc_lib =" not in content


def test_save_load_toml(repo_root: Path) -> None:
    _ = repo_root
    Config(
        pc_lib=Path("/music/pc"),
        dap_lib=Path("/media/dap/Music"),
        db_path=Path("/data/trilib.db"),
        log_file=Path("/logs/trilib.log"),
    ).save()

    loaded = Config.load()

    assert loaded.pc_lib == Path("/music/pc")
    assert loaded.dap_lib == Path("/media/dap/Music")
    assert loaded.db_path == Path("/data/trilib.db")
    assert loaded.log_file == Path("/logs/trilib.log")
    assert loaded.require_libraries() == (Path("/music/pc"), Path("/media/dap/Music"))


def test_singleton_behavior(repo_root: Path) -> None:
    _ = repo_root

    assert Config.load() is Config.load()


def test_unknown_keys_are_ignored(repo_root: Path) -> None:
    _ = repo_root
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('pc_lib = "/music"\nlegacy_option = true\n', encoding="utf-8")

    loaded = Config.load()

    assert loaded.pc_lib == Path("/music")


def test_string_paths_are_converted() -> None:
    config = Config(pc_lib="~/Music", dap_lib="  ")  # pyright: ignore[reportArgumentType]

    assert config.pc_lib == Path("~/Music").expanduser()
    assert config.dap_lib is None


def test_require_libraries_names_missing_keys(repo_root: Path) -> None:
    _ = repo_root

    with pytest.raises(ConfigError, match="dap_lib"):
        _ = Config(pc_lib=Path("/music")).require_libraries()


def test_path_values_are_escaped(repo_root: Path) -> None:
    _ = repo_root
    Config(pc_lib=Path('/music/"quoted"')).save()

    assert Config.load().pc_lib == Path('/music/"quoted"')
