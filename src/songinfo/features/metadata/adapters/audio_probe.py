"""src/songinfo/features/metadata/adapters/audio_probe.py
What: Adapter implementing DurationProbePort with mutagen stream info.
Why: Keep audio decoding out of the descriptor resolver."""

from __future__ import annotations

from pathlib import Path

import mutagen
from mutagen import MutagenError

from songinfo.features.metadata.usecases.ports import DurationProbePort
from songinfo.platform.logging import logger


def probe_duration(path: Path) -> float:
    """Return the stream length of the audio file at ``path`` in seconds.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If mutagen cannot identify or read the stream.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Audio file not found: {path}")

    try:
        audio = mutagen.File(path)
    except MutagenError as exc:
        logger.error("Failed to read audio stream info from %s: %s", path, exc)
        raise ValueError(f"Unreadable audio file: {path}") from exc

    if audio is None or audio.info is None:
        raise ValueError(f"Unsupported audio file: {path}")

    length = float(audio.info.length)
    logger.debug("Probed %s: %.3f seconds", path, length)
    return length


class MutagenDurationProbe(DurationProbePort):
    """Adapter delegating to ``probe_duration``."""

    def probe_duration(self, path: Path) -> float:
        return probe_duration(path)


__all__ = ["MutagenDurationProbe", "probe_duration"]
