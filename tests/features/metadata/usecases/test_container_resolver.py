"""
Summary: Resolve container packages end to end with the real DTA reader and texture codec.
Why: Container resolution is all-or-nothing and must not leave stray textures behind.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PIL import Image

from songinfo.features.metadata.adapters import DtaReaderAdapter, HmxBitmapCodec
from songinfo.features.metadata.adapters.hmx_bitmap import HEADER
from songinfo.features.metadata.domain import TextureEncoding
from songinfo.features.metadata.usecases import ResolutionEvent, SongsDtaResolver, generated_asset_path
from songinfo.shared.song_info import NOT_CHARTED, DrumType

# One byte-swapped 4x4 DXT1 block of pure red.
RED_BLOCK_XBOX = b"\xf8\x00\x00\x00\x00\x00\x00\x00"

OPENER = """\
(opener
   (name "Opener")
   (artist "The Band")
   (album_name "First Light")
   (genre rock)
   (year_released 1999)
   (author "Charter Person")
   (game_origin rb3)
   (song_length 150000)
   (hopo_threshold 170)
   (song (name "songs/opener/opener") (tracks ((drum (0 1)))))
)
"""

CLOSER = """\
; second entry without optional fields
(closer
   (name "Closer")
   (artist "The Band")
   (song (name "songs/closer/closer"))
)
"""


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "textures"


@pytest.fixture
def resolver(output_dir: Path) -> SongsDtaResolver:
    return SongsDtaResolver(DtaReaderAdapter(), HmxBitmapCodec(), output_dir=output_dir)


def _texture(folder: Path, song_path: str, payload: bytes = RED_BLOCK_XBOX) -> Path:
    target = folder / generated_asset_path(song_path) / "_keep.png_xbox"
    target.parent.mkdir(parents=True, exist_ok=True)
    header = HEADER.pack(1, 4, TextureEncoding.DXT1, 0, 4, 4, 2)
    _ = target.write_bytes(header + payload)
    return target


def _container(tmp_path: Path, dta: str) -> Path:
    folder = tmp_path / "pack"
    folder.mkdir()
    _ = (folder / "songs.dta").write_text(dta, encoding="utf-8")
    return folder


def test_single_entry_resolves_with_album_art(
    resolver: SongsDtaResolver, tmp_path: Path, output_dir: Path
) -> None:
    folder = _container(tmp_path, OPENER)
    _ = _texture(folder, "songs/opener/opener")

    songs = resolver.resolve(folder)

    assert songs is not None
    assert len(songs) == 1
    song = songs[0]
    assert song.folder == folder / "songs" / "opener"
    assert song.name == "Opener"
    assert song.artist == "The Band"
    assert song.album == "First Light"
    assert song.genre == "rock"
    assert song.year == "1999"
    assert song.charter == "Charter Person"
    assert song.source == "rb3"
    assert song.song_length == 150.0
    assert song.hopo_frequency == 170
    assert song.drum_type is DrumType.FOUR_LANE
    assert song.part_difficulties["guitar"] == NOT_CHARTED
    assert song.fetched is True

    assert song.album_art_path is not None
    assert song.album_art_path.parent == output_dir
    assert list(output_dir.glob("*.png")) == [song.album_art_path]
    with Image.open(song.album_art_path) as image:
        assert image.size == (4, 4)
        assert image.convert("RGB").getpixel((0, 0)) == (255, 0, 0)


def test_entries_resolve_in_order_with_defaults(
    resolver: SongsDtaResolver, tmp_path: Path, output_dir: Path
) -> None:
    folder = _container(tmp_path, OPENER + CLOSER)
    _ = _texture(folder, "songs/opener/opener")
    _ = _texture(folder, "songs/closer/closer")

    songs = resolver.resolve(folder)

    assert songs is not None
    assert [song.name for song in songs] == ["Opener", "Closer"]
    closer = songs[1]
    assert closer.source == "custom"
    assert closer.song_length is None
    assert closer.album is None
    assert len(list(output_dir.glob("*.png"))) == 2


def test_completion_is_logged_with_count(
    resolver: SongsDtaResolver, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    folder = _container(tmp_path, OPENER)
    _ = _texture(folder, "songs/opener/opener")
    caplog.set_level(logging.INFO, logger="songinfo")

    _ = resolver.resolve(folder)

    completed = [
        record
        for record in caplog.records
        if getattr(record, "resolution_event", None) == ResolutionEvent.CONTAINER_COMPLETE
    ]
    assert len(completed) == 1
    assert getattr(completed[0], "song_count") == 1


def test_corrupt_texture_fails_whole_package(
    resolver: SongsDtaResolver,
    tmp_path: Path,
    output_dir: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A later failure removes textures already written for earlier entries."""

    folder = _container(tmp_path, OPENER + CLOSER)
    _ = _texture(folder, "songs/opener/opener")
    broken = folder / generated_asset_path("songs/closer/closer") / "_keep.png_xbox"
    broken.parent.mkdir(parents=True)
    _ = broken.write_bytes(b"\x01\x04")
    caplog.set_level(logging.ERROR, logger="songinfo")

    assert resolver.resolve(folder) is None
    assert list(output_dir.glob("*.png")) == []
    assert "Failed to parse songs.dta" in caplog.text


def test_missing_texture_fails_package(resolver: SongsDtaResolver, tmp_path: Path) -> None:
    folder = _container(tmp_path, OPENER)

    assert resolver.resolve(folder) is None


def test_missing_required_field_fails_package(
    resolver: SongsDtaResolver,
    tmp_path: Path,
    output_dir: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    folder = _container(tmp_path, OPENER + '(nameless (artist "Nobody") (song (name "songs/nameless/nameless")))\n')
    _ = _texture(folder, "songs/opener/opener")
    caplog.set_level(logging.ERROR, logger="songinfo")

    assert resolver.resolve(folder) is None
    assert list(output_dir.glob("*.png")) == []
    errors = [getattr(record, "field_name", None) for record in caplog.records]
    assert "name" in errors


def test_missing_dta_returns_none(resolver: SongsDtaResolver, tmp_path: Path) -> None:
    assert resolver.resolve(tmp_path) is None


def test_malformed_dta_returns_none(resolver: SongsDtaResolver, tmp_path: Path) -> None:
    folder = _container(tmp_path, "(opener (name \"Opener\"")

    assert resolver.resolve(folder) is None


def test_empty_dta_yields_no_songs(resolver: SongsDtaResolver, tmp_path: Path) -> None:
    folder = _container(tmp_path, "; nothing here\n")

    assert resolver.resolve(folder) == []


@pytest.mark.parametrize(
    ("song_path", "expected"),
    [
        ("songs/opener/opener", Path("songs/opener/gen/opener")),
        ("songs/pack_a/track/extra", Path("songs/pack_a/gen/track")),
    ],
)
def test_generated_asset_path(song_path: str, expected: Path) -> None:
    assert generated_asset_path(song_path) == expected


@pytest.mark.parametrize("song_path", ["", "songs", "songs/opener"])
def test_generated_asset_path_rejects_short_paths(song_path: str) -> None:
    with pytest.raises(ValueError):
        _ = generated_asset_path(song_path)


def test_entries_sharing_a_name_resolve_independently(
    resolver: SongsDtaResolver, tmp_path: Path, output_dir: Path
) -> None:
    """Each entry is read from its own array, not looked up again by name."""

    folder = _container(
        tmp_path,
        '(a (name "A") (artist "X") (song (name "songs/first/a")))\n'
        '(a (name "B") (artist "Y") (song (name "songs/second/b")))\n',
    )
    _ = _texture(folder, "songs/first/a")
    _ = _texture(folder, "songs/second/b")

    songs = resolver.resolve(folder)

    assert songs is not None
    assert [(song.name, song.artist) for song in songs] == [("A", "X"), ("B", "Y")]
    assert [song.folder for song in songs] == [folder / "songs" / "first", folder / "songs" / "second"]
    assert songs[0].album_art_path != songs[1].album_art_path
    assert len(list(output_dir.glob("*.png"))) == 2


def test_missing_song_length_is_reported(
    resolver: SongsDtaResolver, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Entries without a length still resolve, with a warning naming the entry."""

    folder = _container(tmp_path, CLOSER)
    _ = _texture(folder, "songs/closer/closer")
    caplog.set_level(logging.WARNING, logger="songinfo")

    songs = resolver.resolve(folder)

    assert songs is not None
    assert songs[0].song_length is None
    warnings = [
        record
        for record in caplog.records
        if getattr(record, "resolution_event", None) == ResolutionEvent.CONTAINER_MISSING_LENGTH
    ]
    assert len(warnings) == 1
    assert "closer" in warnings[0].getMessage()
