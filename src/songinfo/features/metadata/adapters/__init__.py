"""Adapters implementing metadata resolution ports."""

from .audio_probe import MutagenDurationProbe, probe_duration
from .dta import DtaParseError, DtaReaderAdapter, decode_dta_bytes, parse_data_array
from .hmx_bitmap import BitmapDecodeError, HmxBitmapCodec, decode_bitmap, read_bitmap, write_bitmap
from .ini_descriptor import ConfigParserDescriptorAdapter, parse_descriptor

__all__ = [
    "BitmapDecodeError",
    "ConfigParserDescriptorAdapter",
    "DtaParseError",
    "DtaReaderAdapter",
    "HmxBitmapCodec",
    "MutagenDurationProbe",
    "decode_bitmap",
    "decode_dta_bytes",
    "parse_data_array",
    "parse_descriptor",
    "probe_duration",
    "read_bitmap",
    "write_bitmap",
]
