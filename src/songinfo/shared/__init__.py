# Where: songinfo.shared.__init__
# What: Provide a concise import surface for the shared song record.
# Why: Encourage consistent reuse of the canonical model across features.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .song_info import (
    DEFAULT_PART_DIFFICULTIES,
    INFERRED_DIFFICULTY,
    KNOWN_PARTS,
    NOT_CHARTED,
    DrumType,
    SongInfo,
    default_part_difficulties,
)

__all__ = [
    "DEFAULT_PART_DIFFICULTIES",
    "DrumType",
    "INFERRED_DIFFICULTY",
    "KNOWN_PARTS",
    "NOT_CHARTED",
    "SongInfo",
    "default_part_difficulties",
]
