"""
Summary: Exercise the DTA tokenizer against container-style metadata arrays.
Why: Container resolution depends on exact node types coming out of the reader.
"""

from __future__ import annotations

import io

import pytest

from songinfo.features.metadata.adapters.dta import (
    DtaParseError,
    DtaReaderAdapter,
    decode_dta_bytes,
    parse_data_array,
)
from songinfo.features.metadata.domain import ArrayKind, DataArray, Symbol

SONGS_DTA = """
; exported by a packaging tool
(nightflight
   (name "Night Flight")
   (artist "The Examples")
   (master TRUE)
   (song
      (name "songs/nightflight/nightflight")
      (tracks ((drum (0 1 2)) (bass (3))))
   )
   (song_length 183500)
   (year_released 1997)
   (vocal_tonic_note 4.5)
   (genre 'alt rock')
   (album_name "Say \\qHello\\q")
)
"""


def test_parse_top_level_entry() -> None:
    """Entries become arrays named by their leading symbol."""

    root = parse_data_array(SONGS_DTA)

    entries = list(root.arrays())
    assert len(entries) == 1
    entry = entries[0]
    assert entry.name == "nightflight"
    assert isinstance(entry.children[0], Symbol)


def test_node_types() -> None:
    """Strings, symbols, ints and floats keep their own types."""

    entry = parse_data_array(SONGS_DTA).find("nightflight")
    assert entry is not None

    name = entry.find("name")
    assert name is not None and name.value() == "Night Flight"
    assert not isinstance(name.value(), Symbol)

    master = entry.find("master")
    assert master is not None and master.value() == Symbol("TRUE")

    length = entry.find("song_length")
    assert length is not None and length.value() == 183500

    tonic = entry.find("vocal_tonic_note")
    assert tonic is not None and tonic.value() == pytest.approx(4.5)

    genre = entry.find("genre")
    assert genre is not None
    assert isinstance(genre.value(), Symbol)
    assert genre.value() == "alt rock"


def test_nested_lookup_and_quote_escape() -> None:
    """Nested arrays resolve by path and \\q becomes a double quote."""

    entry = parse_data_array(SONGS_DTA).find("nightflight")
    assert entry is not None

    song_name = entry.find_path("song", "name")
    assert song_name is not None
    assert song_name.value() == "songs/nightflight/nightflight"

    album = entry.find("album_name")
    assert album is not None and album.value() == 'Say "Hello"'


def test_bracket_kinds() -> None:
    """Commands and properties are kept apart from plain arrays."""

    root = parse_data_array("(a {print x} [prop 1])")
    entry = root.find("a")
    assert entry is not None

    kinds = [child.kind for child in entry.arrays()]
    assert kinds == [ArrayKind.COMMAND, ArrayKind.PROPERTY]


@pytest.mark.parametrize(
    "text",
    ["(a (b 1)", "(a))", "(a ]", '(a "unterminated)'],
    ids=["missing-close", "extra-close", "mismatch", "unterminated-string"],
)
def test_malformed_arrays_raise(text: str) -> None:
    """Unbalanced or unterminated input is a parse error."""

    with pytest.raises(DtaParseError):
        _ = parse_data_array(text)


def test_error_reports_line_number() -> None:
    """Parse errors point at the offending line."""

    with pytest.raises(DtaParseError) as excinfo:
        _ = parse_data_array("(a\n  (b 1)\n  ]\n)")

    assert excinfo.value.line == 3


def test_decode_rejects_binary_arrays() -> None:
    """Binary DTB payloads are refused rather than misread."""

    with pytest.raises(DtaParseError):
        _ = decode_dta_bytes(b"\x01\x02\x00\x00")


def test_decode_falls_back_to_latin1() -> None:
    """Legacy packages written in Latin-1 still decode."""

    assert decode_dta_bytes('(name "Mot\xf6rhead")'.encode("latin-1")) == '(name "Motörhead")'


def test_reader_adapter_reads_stream() -> None:
    """The adapter decodes a whole binary stream."""

    root = DtaReaderAdapter().read(io.BytesIO(SONGS_DTA.encode("utf-8")))

    assert isinstance(root, DataArray)
    assert root.find("nightflight") is not None
