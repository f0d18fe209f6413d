"""
Summary: Texture bitmap model and output profiles for container album art.
Why: Share bitmap metadata between the codec adapter and the container use case.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class TextureEncoding(IntEnum):
    """Pixel encodings found in HMX bitmap headers."""

    RGBA = 3
    DXT1 = 8
    DXT5 = 24
    ATI2 = 32


@dataclass(frozen=True, slots=True)
class TextureProfile:
    """Target-platform settings used when re-encoding a texture."""

    version: int
    platform: str
    # Xbox 360 textures store block data as byte-swapped 16-bit words.
    swap_bytes: bool


XBOX_360_PROFILE: Final[TextureProfile] = TextureProfile(
    version=25,
    platform="x360",
    swap_bytes=True,
)


@dataclass(frozen=True, slots=True)
class HmxBitmap:
    """Decoded HMX bitmap header plus the raw pixel payload."""

    version: int
    bpp: int
    encoding: int
    mip_maps: int
    width: int
    height: int
    bpl: int
    data: bytes


__all__ = ["HmxBitmap", "TextureEncoding", "TextureProfile", "XBOX_360_PROFILE"]
