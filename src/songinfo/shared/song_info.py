# Where: songinfo.shared.song_info
# What: Canonical SongInfo record populated by both package resolvers.
# Why: Keep one metadata representation for descriptor and container packages.

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Final, Mapping


class DrumType(StrEnum):
    """Drum layout a chart was authored for."""

    FOUR_LANE = "four_lane"
    FIVE_LANE = "five_lane"
    UNKNOWN = "unknown"


# Difficulty tier meaning "no chart for this part".
NOT_CHARTED: Final[int] = -1
# Difficulty tier inferred from the package source instead of the descriptor.
INFERRED_DIFFICULTY: Final[int] = -2

KNOWN_PARTS: Final[tuple[str, ...]] = (
    "guitar",
    "bass",
    "drums",
    "keys",
    "vocals",
    "real_guitar",
    "real_bass",
    "real_drums",
    "real_keys",
    "harm_vocals",
)

DEFAULT_PART_DIFFICULTIES: Final[Mapping[str, int]] = MappingProxyType(
    {part: NOT_CHARTED for part in KNOWN_PARTS}
)


def default_part_difficulties() -> dict[str, int]:
    """Return a fresh difficulty mapping covering every known part."""
    return dict(DEFAULT_PART_DIFFICULTIES)


@dataclass
class SongInfo:
    """Metadata for one song package, filled in place by a resolver."""

    folder: Path
    name: str | None = None
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    year: str | None = None
    loading_phrase: str | None = None
    charter: str | None = None
    source: str | None = None
    song_length: float | None = None
    delay: float = 0.0
    hopo_frequency: int | None = None
    drum_type: DrumType = DrumType.UNKNOWN
    part_difficulties: dict[str, int] = field(default_factory=default_part_difficulties)
    album_art_path: Path | None = None
    fetched: bool = False


__all__ = [
    "DEFAULT_PART_DIFFICULTIES",
    "DrumType",
    "INFERRED_DIFFICULTY",
    "KNOWN_PARTS",
    "NOT_CHARTED",
    "SongInfo",
    "default_part_difficulties",
]
