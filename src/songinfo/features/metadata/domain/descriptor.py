"""
Summary: Parse options and result shape for key/value song descriptors.
Why: Hand parser configuration to each call instead of mutating parser globals.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, TypeAlias

# Ordered section name -> ordered key/value collection. Re-inserting a key
# overwrites the earlier value in place.
DescriptorSections: TypeAlias = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True, slots=True)
class DescriptorParseOptions:
    """Immutable settings for one descriptor parse."""

    allow_duplicate_keys: bool = True
    comment_prefixes: tuple[str, ...] = ("//", ";")
    delimiters: tuple[str, ...] = ("=",)
    encoding: str = "utf-8-sig"
    preserve_key_case: bool = True


SONG_INI_OPTIONS: Final[DescriptorParseOptions] = DescriptorParseOptions()

# Section names tried in order; no other casing is attempted.
SONG_SECTION_NAMES: Final[tuple[str, ...]] = ("song", "Song")


__all__ = [
    "DescriptorParseOptions",
    "DescriptorSections",
    "SONG_INI_OPTIONS",
    "SONG_SECTION_NAMES",
]
