"""Summary: Ports defining metadata resolution dependencies.
Why: Decouple resolvers from concrete parsers and codecs so tests and swaps stay simple."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from ..domain import (
    DataArray,
    DescriptorParseOptions,
    DescriptorSections,
    HmxBitmap,
    TextureProfile,
)


@runtime_checkable
class DescriptorParserPort(Protocol):
    """Port for parsing key/value song descriptors."""

    def parse(self, path: Path, options: DescriptorParseOptions) -> DescriptorSections:
        """Return the ordered sections of the descriptor at ``path``."""
        ...


@runtime_checkable
class DataArrayReaderPort(Protocol):
    """Port for decoding a DTA data array stream."""

    def read(self, stream: BinaryIO) -> DataArray:
        """Decode the whole stream into a root array."""
        ...


@runtime_checkable
class BitmapCodecPort(Protocol):
    """Port for reading container textures and writing local images."""

    def read_bitmap(self, path: Path) -> HmxBitmap:
        """Decode the texture stored at ``path``."""
        ...

    def write_bitmap(self, bitmap: HmxBitmap, profile: TextureProfile, path: Path) -> Path:
        """Re-encode ``bitmap`` for ``profile`` and write it to ``path``."""
        ...


@runtime_checkable
class DurationProbePort(Protocol):
    """Port for measuring audio duration."""

    def probe_duration(self, path: Path) -> float:
        """Return the decoded length of the audio at ``path`` in seconds."""
        ...


__all__ = [
    "BitmapCodecPort",
    "DataArrayReaderPort",
    "DescriptorParserPort",
    "DurationProbePort",
]
