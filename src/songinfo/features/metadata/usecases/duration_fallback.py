"""
Summary: Measure song length from the package audio when no explicit length exists.
Why: Isolate the one slow, decode-bound step of descriptor resolution.
"""

from __future__ import annotations

from pathlib import Path

from songinfo.config.settings import AUDIO_NAME
from songinfo.shared.song_info import SongInfo

from .ports import DurationProbePort


def load_song_length_from_audio(
    song: SongInfo,
    probe: DurationProbePort,
    *,
    audio_name: str = AUDIO_NAME,
) -> float:
    """Probe ``song.ogg`` under the package folder and store its length.

    Args:
        song: Record whose ``song_length`` is set.
        probe: Duration reader for the audio track.
        audio_name: File name of the audio track inside the package folder.

    Returns:
        float: The measured length in seconds.

    Raises:
        FileNotFoundError: If the audio track does not exist.
        ValueError: If the audio track cannot be read.
    """
    audio_path = Path(song.folder) / audio_name
    seconds = float(probe.probe_duration(audio_path))
    song.song_length = seconds
    return seconds


__all__ = ["load_song_length_from_audio"]
