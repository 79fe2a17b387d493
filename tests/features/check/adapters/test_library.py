"""Tests for the filesystem-backed PC and DAP libraries."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from check_fakes import snapshot, track
from trilib.features.check.adapters.audio import MutagenTagCodec
from trilib.features.check.adapters.filesystem import DapLibrary, PcLibrary
from trilib.features.check.domain import (
    EditableMetadata,
    LibraryFileExistsError,
    TrackFileNotFoundError,
)

SONG = track("Artist/Album/01 Song.flac")


@pytest.fixture
def roots(tmp_path: Path) -> tuple[Path, Path]:
    pc_root = tmp_path / "pc"
    dap_root = tmp_path / "dap"
    pc_root.mkdir()
    dap_root.mkdir()
    return pc_root, dap_root


def _write(path: Path, content: bytes | str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        _ = path.write_bytes(content)
    else:
        _ = path.write_text(content, encoding="utf-8")
    return path


def test_list_tracks_filters_audio_and_target(roots: tuple[Path, Path]) -> None:
    pc_root, _ = roots
    _write(pc_root / "Artist" / "Album" / "01 Song.flac", b"a")
    _write(pc_root / "Artist" / "Album" / "01 Song.lrc", "lyrics")
    _write(pc_root / "Artist" / "Album" / "cover.jpg", b"jpg")
    _write(pc_root / "Other" / "02.MP3", b"b")
    library = PcLibrary(pc_root)

    assert [str(t) for t in library.list_tracks(None)] == ["Artist/Album/01 Song.flac", "Other/02.MP3"]
    assert library.list_tracks("Other/02.MP3") == [track("Other/02.MP3")]
    assert library.list_tracks("Artist/") == [SONG]
    assert library.list_tracks("Missing") == []


def test_read_snapshot_adds_sidecar_lyrics(roots: tuple[Path, Path], mocker: MockerFixture) -> None:
    pc_root, _ = roots
    _write(SONG.abs(pc_root), b"audio")
    _write(SONG.abs(pc_root).with_suffix(".lrc"), "[00:00.00] line")
    codec = mocker.Mock(spec=MutagenTagCodec)
    codec.read.return_value = snapshot()

    result = PcLibrary(pc_root, codec).read_snapshot(SONG)

    assert result.metadata.lyrics == "[00:00.00] line"
    codec.read.assert_called_once_with(SONG.abs(pc_root))


def test_read_snapshot_of_missing_file_raises(roots: tuple[Path, Path], mocker: MockerFixture) -> None:
    pc_root, _ = roots
    codec = mocker.Mock(spec=MutagenTagCodec)

    with pytest.raises(TrackFileNotFoundError):
        _ = PcLibrary(pc_root, codec).read_snapshot(SONG)
    codec.read.assert_not_called()


def test_write_metadata_updates_or_removes_lyrics(roots: tuple[Path, Path], mocker: MockerFixture) -> None:
    pc_root, _ = roots
    _write(SONG.abs(pc_root), b"audio")
    codec = mocker.Mock(spec=MutagenTagCodec)
    library = PcLibrary(pc_root, codec)
    lyrics_path = SONG.abs(pc_root).with_suffix(".lrc")

    library.write_metadata(SONG, EditableMetadata(title="T", lyrics="new words"))
    assert lyrics_path.read_text(encoding="utf-8") == "new words"

    library.write_metadata(SONG, EditableMetadata(title="T", lyrics=None))
    assert not lyrics_path.exists()
    assert codec.write.call_count == 2


def test_delete_removes_sidecar_and_empty_directories(roots: tuple[Path, Path]) -> None:
    pc_root, _ = roots
    _write(SONG.abs(pc_root), b"audio")
    _write(SONG.abs(pc_root).with_suffix(".lrc"), "words")
    library = PcLibrary(pc_root)

    library.delete(SONG)

    assert not (pc_root / "Artist").exists()
    assert pc_root.exists()


def test_dap_copy_overwrite_and_compare(roots: tuple[Path, Path]) -> None:
    pc_root, dap_root = roots
    _write(SONG.abs(pc_root), b"original")
    _write(SONG.abs(pc_root).with_suffix(".lrc"), "words")
    pc = PcLibrary(pc_root)
    dap = DapLibrary(dap_root, pc)

    dap.copy_from_pc(SONG)
    assert dap.exists(SONG)
    assert dap.matches_pc(SONG)
    assert SONG.abs(dap_root).with_suffix(".lrc").read_text(encoding="utf-8") == "words"

    _ = SONG.abs(pc_root).write_bytes(b"retagged")
    SONG.abs(pc_root).with_suffix(".lrc").unlink()
    assert not dap.matches_pc(SONG)

    dap.overwrite_from_pc(SONG)
    assert dap.matches_pc(SONG)
    assert not SONG.abs(dap_root).with_suffix(".lrc").exists()


def test_dap_copy_refuses_to_clobber(roots: tuple[Path, Path]) -> None:
    pc_root, dap_root = roots
    _write(SONG.abs(pc_root), b"pc")
    _write(SONG.abs(dap_root), b"dap")
    dap = DapLibrary(dap_root, PcLibrary(pc_root))

    with pytest.raises(LibraryFileExistsError):
        dap.copy_from_pc(SONG)
    assert SONG.abs(dap_root).read_bytes() == b"dap"
