# Where: songinfo.features.metadata.__init__
# What: Expose metadata resolution entry points and shared dataclasses.
# Why: Provide a cohesive import surface for tools embedding the library.

from songinfo.shared.song_info import DrumType, SongInfo
from .service import (
    complete_song_info,
    default_song_ini_resolver,
    default_songs_dta_resolver,
    load_song_package,
    parse_songs_dta,
)
from .usecases import (
    ResolutionEvent,
    SongIniResolver,
    SongPackageLoader,
    SongsDtaResolver,
)
from .usecases.ports import (
    BitmapCodecPort,
    DataArrayReaderPort,
    DescriptorParserPort,
    DurationProbePort,
)

__all__ = [
    "DrumType",
    "SongInfo",
    "complete_song_info",
    "parse_songs_dta",
    "load_song_package",
    "default_song_ini_resolver",
    "default_songs_dta_resolver",
    "ResolutionEvent",
    "SongIniResolver",
    "SongsDtaResolver",
    "SongPackageLoader",
    "BitmapCodecPort",
    "DataArrayReaderPort",
    "DescriptorParserPort",
    "DurationProbePort",
]
