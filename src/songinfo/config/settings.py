"""Where: src/songinfo/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current package layouts.
Trade-offs: - Validation is limited to simple emptiness and boundary checks.
"""

from __future__ import annotations

from pathlib import Path

from songinfo.config.config import (
    AUDIO_NAME_DEFAULT,
    CONTAINER_DTA_NAME_DEFAULT,
    DESCRIPTOR_NAME_DEFAULT,
    EIGHTH_NOTE_HOPO_FREQUENCY_DEFAULT,
    config as app_config,
)
from songinfo.config.paths import default_texture_dir
from songinfo.platform.logging import DEFAULT_LOG_FILE, setup_logger

# Logging ---------------------------------------------------------------------

LOG_FILE: Path = app_config.log_file or DEFAULT_LOG_FILE
if app_config.log_file is not None:
    _ = setup_logger(log_file=LOG_FILE)


# Package file names ----------------------------------------------------------

DESCRIPTOR_NAME: str = app_config.descriptor_name or DESCRIPTOR_NAME_DEFAULT
AUDIO_NAME: str = app_config.audio_name or AUDIO_NAME_DEFAULT
CONTAINER_DTA_NAME: str = app_config.container_dta_name or CONTAINER_DTA_NAME_DEFAULT

# Container textures live under each song's generated-assets directory.
CONTAINER_TEXTURE_NAME: str = "_keep.png_xbox"


# Resolution constants --------------------------------------------------------

_eighth_note = getattr(
    app_config, "eighth_note_hopo_frequency", EIGHTH_NOTE_HOPO_FREQUENCY_DEFAULT
)
EIGHTH_NOTE_HOPO_FREQUENCY: int = (
    _eighth_note
    if isinstance(_eighth_note, int) and _eighth_note > 0
    else EIGHTH_NOTE_HOPO_FREQUENCY_DEFAULT
)

TEXTURE_OUTPUT_DIR: Path = default_texture_dir(app_config.texture_output_dir)


__all__ = [
    "LOG_FILE",
    "DESCRIPTOR_NAME",
    "AUDIO_NAME",
    "CONTAINER_DTA_NAME",
    "CONTAINER_TEXTURE_NAME",
    "EIGHTH_NOTE_HOPO_FREQUENCY",
    "TEXTURE_OUTPUT_DIR",
]
