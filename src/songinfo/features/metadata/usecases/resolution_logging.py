"""src/songinfo/features/metadata/usecases/resolution_logging.py
Where: Metadata feature usecases layer.
What: Structured event identifiers and a logging helper for package resolution.
Why: Keep the resolvers lean and give the console handler stable event names.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from songinfo.platform.logging import logger


class ResolutionEvent(StrEnum):
    """Structured event identifiers for song package resolution logs."""

    DESCRIPTOR_MISSING_SECTION = "resolution.descriptor.missing_section"
    DESCRIPTOR_MISSING_FIELD = "resolution.descriptor.missing_field"
    DESCRIPTOR_ERROR = "resolution.descriptor.error"
    AUDIO_PROBE = "resolution.audio.probe"
    CONTAINER_START = "resolution.container.start"
    CONTAINER_COMPLETE = "resolution.container.complete"
    CONTAINER_ERROR = "resolution.container.error"
    CONTAINER_MISSING_LENGTH = "resolution.container.missing_length"
    TEXTURE_WRITE = "resolution.texture.write"


def log_resolution_event(
    level: int,
    event: ResolutionEvent,
    message: str,
    *message_args: object,
    package_path: Path,
    exc_info: bool = False,
    **context: object,
) -> None:
    """Emit ``message`` on the shared logger with the event and package attached."""

    extra: dict[str, object] = {
        "resolution_event": event.value,
        "package_path": str(package_path),
    }
    extra.update(context)
    logger.log(level, message, *message_args, extra=extra, exc_info=exc_info)


__all__ = ["ResolutionEvent", "log_resolution_event"]
