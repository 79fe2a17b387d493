"""Tests for library-relative track paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from trilib.features.check.domain import LibraryTrackPath, TrackPathError


@pytest.mark.parametrize(
    "value",
    ["", "/abs/song.flac", "artist\\song.flac", "artist//song.flac", "artist/./song.flac", "../song.flac", "artist/"],
)
def test_rejects_malformed_paths(value: str) -> None:
    with pytest.raises(TrackPathError):
        _ = LibraryTrackPath(value)


def test_from_path_and_abs_round_trip(tmp_path: Path) -> None:
    file_path = tmp_path / "Artist" / "Album" / "01 Song.flac"

    track = LibraryTrackPath.from_path(file_path, tmp_path)

    assert track.value == "Artist/Album/01 Song.flac"
    assert track.abs(tmp_path) == file_path


def test_from_path_outside_root_raises(tmp_path: Path) -> None:
    with pytest.raises(TrackPathError):
        _ = LibraryTrackPath.from_path(Path("/elsewhere/song.flac"), tmp_path)


def test_is_within_matches_exact_file_and_directory_prefix() -> None:
    track = LibraryTrackPath("Artist/Album/01.flac")

    assert track.is_within(None)
    assert track.is_within("Artist")
    assert track.is_within("Artist/Album/")
    assert track.is_within("Artist/Album/01.flac")
    assert not track.is_within("Art")
    assert not track.is_within("Other")


def test_paths_sort_lexicographically_and_hash_by_value() -> None:
    paths = [LibraryTrackPath("b/1.mp3"), LibraryTrackPath("a/2.mp3"), LibraryTrackPath("a/1.mp3")]

    assert [str(p) for p in sorted(paths)] == ["a/1.mp3", "a/2.mp3", "b/1.mp3"]
    assert {LibraryTrackPath("a/1.mp3"), LibraryTrackPath("a/1.mp3")} == {LibraryTrackPath("a/1.mp3")}


def test_suffix_is_lowercased() -> None:
    assert LibraryTrackPath("a/Song.FLAC").suffix == ".flac"
