"""Complete SongInfo records from a package's ``song.ini`` descriptor.

Where: src/songinfo/features/metadata/usecases/song_ini_resolver.py
What: Apply field-name fallbacks, unit conversions and derived defaults to a descriptor section.
Why: Loose-file packages spell the same metadata many ways; callers need one record.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from songinfo.config.settings import AUDIO_NAME, DESCRIPTOR_NAME, EIGHTH_NOTE_HOPO_FREQUENCY
from songinfo.shared.song_info import INFERRED_DIFFICULTY, DrumType, SongInfo

from ..domain import SONG_INI_OPTIONS, SONG_SECTION_NAMES, DescriptorParseOptions
from .duration_fallback import load_song_length_from_audio
from .fields import (
    FieldGroup,
    MappingFieldSource,
    MissingField,
    difficulty_key,
    is_truthy,
    millis_to_seconds,
    parse_int,
)
from .ports import DescriptorParserPort, DurationProbePort
from .resolution_logging import ResolutionEvent, log_resolution_event

__all__ = ["SongIniResolver", "apply_source_difficulty_fallback"]

# Sources whose packages chart guitar only, or guitar and bass, without diff_ keys.
GUITAR_ONLY_SOURCES: Final[frozenset[str]] = frozenset({"gh1"})
GUITAR_AND_BASS_SOURCES: Final[frozenset[str]] = frozenset(
    {"gh2", "gh80s", "gh3", "ghot", "gha"}
)

CUSTOM_SOURCE: Final[str] = "custom"


def apply_source_difficulty_fallback(song: SongInfo) -> None:
    """Mark parts as inferred when the package source implies they are charted."""
    if song.source in GUITAR_ONLY_SOURCES:
        song.part_difficulties["guitar"] = INFERRED_DIFFICULTY
    elif song.source in GUITAR_AND_BASS_SOURCES:
        song.part_difficulties["guitar"] = INFERRED_DIFFICULTY
        song.part_difficulties["bass"] = INFERRED_DIFFICULTY


class SongIniResolver:
    """Fill a SongInfo from the descriptor in its folder, once."""

    def __init__(
        self,
        parser: DescriptorParserPort,
        probe: DurationProbePort,
        *,
        options: DescriptorParseOptions = SONG_INI_OPTIONS,
        descriptor_name: str = DESCRIPTOR_NAME,
        audio_name: str = AUDIO_NAME,
        eighth_note_hopo_frequency: int = EIGHTH_NOTE_HOPO_FREQUENCY,
    ) -> None:
        self._parser: DescriptorParserPort = parser
        self._probe: DurationProbePort = probe
        self._options: DescriptorParseOptions = options
        self._descriptor_name: str = descriptor_name
        self._audio_name: str = audio_name
        self._eighth_note_hopo_frequency: int = eighth_note_hopo_frequency

    def resolve(self, song: SongInfo) -> SongInfo:
        """Complete ``song`` in place and return it.

        A record is only ever read from disk once. A missing descriptor leaves
        the record untouched; every other failure is logged and the record is
        returned in whatever state it reached.
        """
        if song.fetched:
            return song

        folder = Path(song.folder)
        descriptor_path = folder / self._descriptor_name
        if not descriptor_path.is_file():
            return song

        song.fetched = True
        try:
            source = MappingFieldSource(self._parser.parse(descriptor_path, self._options))

            group = next((name for name in SONG_SECTION_NAMES if source.has_group(name)), None)
            if group is None:
                log_resolution_event(
                    logging.ERROR,
                    ResolutionEvent.DESCRIPTOR_MISSING_SECTION,
                    "No `song` section found in `%s`.",
                    folder,
                    package_path=folder,
                )
                return song

            missing = self._apply_fields(song, FieldGroup(source, group))
            if missing is not None:
                log_resolution_event(
                    logging.ERROR,
                    ResolutionEvent.DESCRIPTOR_MISSING_FIELD,
                    "Required key `%s` missing from [%s] in `%s`.",
                    missing.key,
                    missing.group,
                    folder,
                    package_path=folder,
                    field_name=missing.key,
                )
        except Exception as exc:
            log_resolution_event(
                logging.ERROR,
                ResolutionEvent.DESCRIPTOR_ERROR,
                "Failed to parse %s for `%s`.",
                self._descriptor_name,
                folder,
                package_path=folder,
                exc_info=True,
                error_message=str(exc) or type(exc).__name__,
            )

        return song

    def _apply_fields(self, song: SongInfo, fields: FieldGroup) -> MissingField | None:
        name = fields.require("name")
        if isinstance(name, MissingField):
            return name
        song.name = name

        artist = fields.require("artist")
        if isinstance(artist, MissingField):
            return artist
        song.artist = artist

        song.album = fields.get("album")
        song.genre = fields.get("genre")
        song.year = fields.get("year")
        song.loading_phrase = fields.get("loading_phrase")

        charter = fields.first("charter", "frets")
        if charter is not None:
            song.charter = charter

        icon = fields.get("icon")
        if icon is not None and icon != "0":
            if song.source is None:
                song.source = icon
        else:
            song.source = CUSTOM_SOURCE

        song_length = fields.get("song_length")
        if song_length is not None:
            song.song_length = millis_to_seconds(song_length)
        else:
            log_resolution_event(
                logging.WARNING,
                ResolutionEvent.AUDIO_PROBE,
                "No song length found for `%s`. Loading audio file. This might take longer.",
                song.folder,
                package_path=Path(song.folder),
            )
            _ = load_song_length_from_audio(song, self._probe, audio_name=self._audio_name)

        if is_truthy(fields.get("pro_drums")):
            song.drum_type = DrumType.FOUR_LANE
        elif is_truthy(fields.get("five_lane_drums")):
            song.drum_type = DrumType.FIVE_LANE
        else:
            song.drum_type = DrumType.UNKNOWN

        delay = fields.get("delay")
        song.delay = millis_to_seconds(delay) if delay is not None else 0.0

        self._apply_hopo_frequency(song, fields)
        self._apply_difficulties(song, fields)
        return None

    def _apply_hopo_frequency(self, song: SongInfo, fields: FieldGroup) -> None:
        explicit = fields.first("hopo_frequency", "hopofreq")
        if explicit is not None:
            song.hopo_frequency = parse_int(explicit)
        elif is_truthy(fields.get("eighthnote_hopo")):
            song.hopo_frequency = self._eighth_note_hopo_frequency

    def _apply_difficulties(self, song: SongInfo, fields: FieldGroup) -> None:
        # The source fallback only applies when no part had a diff_ key at all.
        found_any = False
        for part in list(song.part_difficulties):
            raw = fields.get(difficulty_key(part))
            if raw is None:
                continue
            song.part_difficulties[part] = parse_int(raw)
            found_any = True

        if not found_any:
            apply_source_difficulty_fallback(song)
