"""
Summary: Architecture checks keeping the check domain and use cases free of I/O layers.
Why: Resolvers must stay testable against in-memory ports without mutagen, SQLite or a terminal.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
CHECK_DIR = REPO_ROOT / "src" / "trilib" / "features" / "check"
FORBIDDEN_IMPORTS: tuple[str, ...] = (
    "trilib.platform",
    "trilib.config",
    ".adapters",
    "import mutagen",
    "from mutagen",
    "import sqlite3",
    "from rich",
)


@pytest.mark.parametrize("layer", ["domain", "usecases"])
def test_inner_layers_do_not_import_io_packages(layer: str) -> None:
    """Ensure domain and use case modules only depend on ports."""

    offending: list[str] = []
    for path in (CHECK_DIR / layer).rglob("*.py"):
        contents = path.read_text(encoding="utf-8")
        offending.extend(
            f"{path.relative_to(REPO_ROOT)}: {needle}" for needle in FORBIDDEN_IMPORTS if needle in contents
        )
    assert offending == [], f"{layer} modules must not import I/O layers; found: {', '.join(offending)}"


def test_where_headers_name_their_own_module() -> None:
    """Header ``Where:`` lines must match the module location after moves and renames."""

    package_root = REPO_ROOT / "src" / "trilib"
    mismatched: list[str] = []
    for path in package_root.rglob("*.py"):
        for line in path.read_text(encoding="utf-8").splitlines()[:8]:
            if line.startswith("Where: "):
                expected = path.relative_to(package_root).as_posix()
                if line.removeprefix("Where: ").strip() != expected:
                    mismatched.append(f"{expected} says {line!r}")
    assert mismatched == []


def test_where_headers_follow_a_summary_line() -> None:
    """Modules with a Where/What/Why header open with a one-line summary and a blank line."""

    package_root = REPO_ROOT / "src" / "trilib"
    malformed: list[str] = []
    for path in package_root.rglob("*.py"):
        lines = path.read_text(encoding="utf-8").splitlines()
        if not any(line.startswith("Where: ") for line in lines[:8]):
            continue
        summary = lines[0].removeprefix('"""').strip()
        bare_path = summary.endswith(".py")
        if not summary or bare_path or summary.startswith(("Where:", "What:", "Why:")) or lines[1] != "":
            malformed.append(path.relative_to(package_root).as_posix())
    assert malformed == []
