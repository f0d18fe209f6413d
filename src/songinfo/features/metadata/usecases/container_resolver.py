"""Resolve SongInfo records from a container package's ``songs.dta``.

Where: src/songinfo/features/metadata/usecases/container_resolver.py
What: Walk every DTA entry, convert its album-art texture and populate a record per song.
Why: Container packages hold many songs behind one metadata array.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Final

from songinfo.config.settings import CONTAINER_DTA_NAME, CONTAINER_TEXTURE_NAME, TEXTURE_OUTPUT_DIR
from songinfo.shared.song_info import DrumType, SongInfo

from ..domain import XBOX_360_PROFILE, TextureProfile
from .fields import (
    DataArrayFieldSource,
    FieldGroup,
    MissingField,
    millis_to_seconds,
    parse_int,
)
from .ports import BitmapCodecPort, DataArrayReaderPort
from .resolution_logging import ResolutionEvent, log_resolution_event

__all__ = ["SongsDtaResolver", "generated_asset_path"]

CUSTOM_SOURCE: Final[str] = "custom"


def generated_asset_path(song_path: str) -> Path:
    """Map ``songs/<group>/<name>`` to ``songs/<group>/gen/<name>``.

    Raises:
        ValueError: If ``song_path`` has fewer than three segments.
    """
    segments = song_path.split("/")
    if len(segments) < 3:
        raise ValueError(f"unexpected song path: {song_path!r}")
    return Path("songs") / segments[1] / "gen" / segments[2]


class SongsDtaResolver:
    """Read every song a container package describes."""

    def __init__(
        self,
        reader: DataArrayReaderPort,
        codec: BitmapCodecPort,
        *,
        dta_name: str = CONTAINER_DTA_NAME,
        texture_name: str = CONTAINER_TEXTURE_NAME,
        output_dir: Path = TEXTURE_OUTPUT_DIR,
        profile: TextureProfile = XBOX_360_PROFILE,
    ) -> None:
        self._reader: DataArrayReaderPort = reader
        self._codec: BitmapCodecPort = codec
        self._dta_name: str = dta_name
        self._texture_name: str = texture_name
        self._output_dir: Path = output_dir
        self._profile: TextureProfile = profile

    def resolve(self, container_folder: Path) -> list[SongInfo] | None:
        """Return one record per entry, or None if any part of the package fails.

        Textures written before a failure are removed again so a failed
        package leaves nothing behind.
        """
        folder = Path(container_folder)
        written: list[Path] = []
        log_resolution_event(
            logging.DEBUG,
            ResolutionEvent.CONTAINER_START,
            "Reading %s for `%s`.",
            self._dta_name,
            folder,
            package_path=folder,
        )
        try:
            with open(folder / self._dta_name, "rb") as stream:
                root = self._reader.read(stream)

            source = DataArrayFieldSource(root)
            songs: list[SongInfo] = []
            for fields in source.entries():
                song = self._resolve_entry(folder, fields, written)
                if isinstance(song, MissingField):
                    log_resolution_event(
                        logging.ERROR,
                        ResolutionEvent.CONTAINER_ERROR,
                        "Entry `%s` in `%s` is missing required key `%s`.",
                        song.group,
                        folder,
                        song.key,
                        package_path=folder,
                        field_name=song.key,
                    )
                    self._discard(written)
                    return None
                songs.append(song)
        except Exception as exc:
            log_resolution_event(
                logging.ERROR,
                ResolutionEvent.CONTAINER_ERROR,
                "Failed to parse %s for `%s`.",
                self._dta_name,
                folder,
                package_path=folder,
                exc_info=True,
                error_message=str(exc) or type(exc).__name__,
            )
            self._discard(written)
            return None

        log_resolution_event(
            logging.INFO,
            ResolutionEvent.CONTAINER_COMPLETE,
            "Read %d songs from `%s`.",
            len(songs),
            folder,
            package_path=folder,
            song_count=len(songs),
        )
        return songs

    def _resolve_entry(
        self,
        folder: Path,
        fields: FieldGroup,
        written: list[Path],
    ) -> SongInfo | MissingField:
        song_path = fields.require("song.name")
        if isinstance(song_path, MissingField):
            return song_path
        name = fields.require("name")
        if isinstance(name, MissingField):
            return name
        artist = fields.require("artist")
        if isinstance(artist, MissingField):
            return artist

        generated = generated_asset_path(song_path)
        song = SongInfo(folder=folder / generated.parent.parent, name=name, artist=artist)
        song.album = fields.get("album_name")
        song.genre = fields.get("genre")
        song.year = fields.get("year_released")
        song.loading_phrase = fields.get("loading_phrase")
        song.charter = fields.get("author")

        origin = fields.get("game_origin")
        song.source = origin if origin is not None and origin != "0" else CUSTOM_SOURCE

        song_length = fields.get("song_length")
        if song_length is not None:
            song.song_length = millis_to_seconds(song_length)
        else:
            # Containers carry no loose audio track to measure.
            log_resolution_event(
                logging.WARNING,
                ResolutionEvent.CONTAINER_MISSING_LENGTH,
                "Entry `%s` in `%s` has no song_length; leaving it unset.",
                fields.group,
                folder,
                package_path=folder,
                field_name="song_length",
            )

        hopo_threshold = fields.get("hopo_threshold")
        if hopo_threshold is not None:
            song.hopo_frequency = parse_int(hopo_threshold)

        # Container charts are always authored for four-lane drums.
        song.drum_type = DrumType.FOUR_LANE

        song.album_art_path = self._convert_texture(folder / generated / self._texture_name, written)
        song.fetched = True
        return song

    def _convert_texture(self, texture_path: Path, written: list[Path]) -> Path:
        bitmap = self._codec.read_bitmap(texture_path)

        self._output_dir.mkdir(parents=True, exist_ok=True)
        handle, raw_path = tempfile.mkstemp(suffix=".png", dir=self._output_dir)
        os.close(handle)
        target = Path(raw_path)
        written.append(target)

        _ = self._codec.write_bitmap(bitmap, self._profile, target)
        log_resolution_event(
            logging.DEBUG,
            ResolutionEvent.TEXTURE_WRITE,
            "Re-encoded %s to %s.",
            texture_path,
            target,
            package_path=texture_path,
        )
        return target

    @staticmethod
    def _discard(paths: list[Path]) -> None:
        for path in paths:
            path.unlink(missing_ok=True)
