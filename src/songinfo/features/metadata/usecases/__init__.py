"""
Summary: Package exports for metadata resolution use cases.
Why: Provide a stable import path for wiring code and tests.
"""

from .container_resolver import SongsDtaResolver, generated_asset_path
from .duration_fallback import load_song_length_from_audio
from .fields import (
    DataArrayEntrySource,
    DataArrayFieldSource,
    FieldGroup,
    FieldSource,
    MappingFieldSource,
    MissingField,
    PART_KEY_RENAMES,
    difficulty_key,
    is_truthy,
    millis_to_seconds,
    parse_int,
)
from .package_loader import SongPackageLoader
from .ports import (
    BitmapCodecPort,
    DataArrayReaderPort,
    DescriptorParserPort,
    DurationProbePort,
)
from .resolution_logging import ResolutionEvent, log_resolution_event
from .song_ini_resolver import SongIniResolver, apply_source_difficulty_fallback

__all__ = [
    "BitmapCodecPort",
    "DataArrayEntrySource",
    "DataArrayFieldSource",
    "DataArrayReaderPort",
    "DescriptorParserPort",
    "DurationProbePort",
    "FieldGroup",
    "FieldSource",
    "MappingFieldSource",
    "MissingField",
    "PART_KEY_RENAMES",
    "ResolutionEvent",
    "SongIniResolver",
    "SongPackageLoader",
    "SongsDtaResolver",
    "apply_source_difficulty_fallback",
    "difficulty_key",
    "generated_asset_path",
    "is_truthy",
    "load_song_length_from_audio",
    "log_resolution_event",
    "millis_to_seconds",
    "parse_int",
]
