"""HMX bitmap codec for container album art.

Where: src/songinfo/features/metadata/adapters/hmx_bitmap.py
What: Read ``.png_xbox`` textures and re-encode them as PNG files with Pillow.
Why: Container textures use console block compression nothing else can display.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Final

from PIL import Image

from songinfo.features.metadata.domain import HmxBitmap, TextureEncoding, TextureProfile
from songinfo.features.metadata.usecases.ports import BitmapCodecPort

__all__ = [
    "BitmapDecodeError",
    "HmxBitmapCodec",
    "decode_bitmap",
    "read_bitmap",
    "write_bitmap",
]

# version, bpp, encoding, mip maps, width, height, bytes per line, padding
HEADER: Final[struct.Struct] = struct.Struct("<BBIBHHH19x")
SUPPORTED_VERSION: Final[int] = 1

# encoding -> (Pillow mode, bcn decoder variant, bytes per 4x4 block)
_BLOCK_FORMATS: Final[dict[int, tuple[str, int, int]]] = {
    TextureEncoding.DXT1: ("RGBA", 1, 8),
    TextureEncoding.DXT5: ("RGBA", 3, 16),
    TextureEncoding.ATI2: ("RGB", 5, 16),
}


class BitmapDecodeError(ValueError):
    """Raised when a texture header or payload cannot be decoded."""


def read_bitmap(path: Path) -> HmxBitmap:
    """Read the header and pixel payload of an HMX bitmap file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        BitmapDecodeError: If the header is truncated or unsupported.
    """
    with open(path, "rb") as handle:
        raw = handle.read()

    if len(raw) < HEADER.size:
        raise BitmapDecodeError(f"truncated bitmap header in {path}")

    version, bpp, encoding, mip_maps, width, height, bpl = HEADER.unpack_from(raw)
    if version != SUPPORTED_VERSION:
        raise BitmapDecodeError(f"unsupported bitmap version {version} in {path}")
    if width == 0 or height == 0:
        raise BitmapDecodeError(f"empty bitmap dimensions in {path}")

    return HmxBitmap(
        version=version,
        bpp=bpp,
        encoding=encoding,
        mip_maps=mip_maps,
        width=width,
        height=height,
        bpl=bpl,
        data=raw[HEADER.size :],
    )


def _swap_words(data: bytes) -> bytes:
    swapped = bytearray(data[: len(data) & ~1])
    swapped[0::2], swapped[1::2] = swapped[1::2], swapped[0::2]
    return bytes(swapped)


def decode_bitmap(bitmap: HmxBitmap, profile: TextureProfile) -> Image.Image:
    """Decode the top mip level of ``bitmap`` into a Pillow image.

    Raises:
        BitmapDecodeError: If the encoding is unsupported or the payload is short.
    """
    size = (bitmap.width, bitmap.height)

    if bitmap.encoding == TextureEncoding.RGBA and bitmap.bpp == 32:
        expected = bitmap.width * bitmap.height * 4
        if len(bitmap.data) < expected:
            raise BitmapDecodeError(
                f"RGBA payload too short: {len(bitmap.data)} < {expected} bytes"
            )
        return Image.frombytes("RGBA", size, bitmap.data[:expected])

    block_format = _BLOCK_FORMATS.get(bitmap.encoding)
    if block_format is None:
        raise BitmapDecodeError(
            f"unsupported texture encoding {bitmap.encoding} at {bitmap.bpp} bpp"
        )

    mode, variant, block_bytes = block_format
    expected = max(1, (bitmap.width + 3) // 4) * max(1, (bitmap.height + 3) // 4) * block_bytes
    if len(bitmap.data) < expected:
        raise BitmapDecodeError(
            f"block payload too short: {len(bitmap.data)} < {expected} bytes"
        )

    data = bitmap.data[:expected]
    if profile.swap_bytes:
        data = _swap_words(data)
    return Image.frombytes(mode, size, data, "bcn", variant)


def write_bitmap(bitmap: HmxBitmap, profile: TextureProfile, path: Path) -> Path:
    """Decode ``bitmap`` for ``profile`` and save it to ``path`` as PNG."""
    image = decode_bitmap(bitmap, profile)
    image.save(path, format="PNG")
    return path


class HmxBitmapCodec(BitmapCodecPort):
    """Adapter exposing the module functions through ``BitmapCodecPort``."""

    def read_bitmap(self, path: Path) -> HmxBitmap:
        return read_bitmap(path)

    def write_bitmap(self, bitmap: HmxBitmap, profile: TextureProfile, path: Path) -> Path:
        return write_bitmap(bitmap, profile, path)
