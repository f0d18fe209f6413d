"""
Summary: Export metadata domain value types.
Why: Give adapters and use cases one shared import path for data shapes.
"""

from .data_array import ArrayKind, DataArray, DtaNode, Symbol
from .descriptor import (
    SONG_INI_OPTIONS,
    SONG_SECTION_NAMES,
    DescriptorParseOptions,
    DescriptorSections,
)
from .texture import XBOX_360_PROFILE, HmxBitmap, TextureEncoding, TextureProfile

__all__ = [
    "ArrayKind",
    "DataArray",
    "DescriptorParseOptions",
    "DescriptorSections",
    "DtaNode",
    "HmxBitmap",
    "SONG_INI_OPTIONS",
    "SONG_SECTION_NAMES",
    "Symbol",
    "TextureEncoding",
    "TextureProfile",
    "XBOX_360_PROFILE",
]
