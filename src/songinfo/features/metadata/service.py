"""
Summary: Wire metadata resolvers to their default adapters.
Why: Callers get ready-made entry points while use cases stay adapter-free.
"""

from __future__ import annotations

from functools import cache
from pathlib import Path

from songinfo.config.settings import CONTAINER_DTA_NAME
from songinfo.shared.song_info import SongInfo

from .adapters import (
    ConfigParserDescriptorAdapter,
    DtaReaderAdapter,
    HmxBitmapCodec,
    MutagenDurationProbe,
)
from .usecases import SongIniResolver, SongPackageLoader, SongsDtaResolver


@cache
def default_song_ini_resolver() -> SongIniResolver:
    """Descriptor resolver backed by configparser and mutagen."""
    return SongIniResolver(ConfigParserDescriptorAdapter(), MutagenDurationProbe())


@cache
def default_songs_dta_resolver() -> SongsDtaResolver:
    """Container resolver backed by the DTA reader and the Pillow texture codec."""
    return SongsDtaResolver(DtaReaderAdapter(), HmxBitmapCodec())


def complete_song_info(song: SongInfo) -> SongInfo:
    """Complete ``song`` from its folder's descriptor; see ``SongIniResolver.resolve``."""
    return default_song_ini_resolver().resolve(song)


def parse_songs_dta(container_folder: Path) -> list[SongInfo] | None:
    """Resolve every song in a container package; see ``SongsDtaResolver.resolve``."""
    return default_songs_dta_resolver().resolve(container_folder)


def load_song_package(folder: Path) -> list[SongInfo] | None:
    """Resolve a package folder of either shape."""
    loader = SongPackageLoader(
        default_song_ini_resolver(),
        default_songs_dta_resolver(),
        dta_name=CONTAINER_DTA_NAME,
    )
    return loader.load(folder)


__all__ = [
    "complete_song_info",
    "default_song_ini_resolver",
    "default_songs_dta_resolver",
    "load_song_package",
    "parse_songs_dta",
]
