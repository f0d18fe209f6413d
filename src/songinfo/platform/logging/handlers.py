"""Rich console handler for song package resolution logs.

Where: platform/logging/handlers.py
What: Render structured resolution events with icons and compact package paths.
Why: Keep formatting concerns out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SongPathRichHandler(RichHandler):
    """Rich handler that renders package paths in white with coloured separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "resolution.descriptor.missing_section": ("⚠️", "yellow"),
        "resolution.descriptor.missing_field": ("⚠️", "yellow"),
        "resolution.descriptor.error": ("⛔", "red"),
        "resolution.audio.probe": ("🐢", "yellow"),
        "resolution.container.start": ("📦", "cyan"),
        "resolution.container.complete": ("✅", "green"),
        "resolution.container.error": ("❌", "red"),
        "resolution.container.missing_length": ("⚠️", "yellow"),
        "resolution.texture.write": ("🖼️", "magenta"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "resolution.descriptor.missing_section": "No song section in ",
        "resolution.descriptor.missing_field": "Missing required field in ",
        "resolution.descriptor.error": "Failed to parse descriptor for ",
        "resolution.audio.probe": "Probing audio length for ",
        "resolution.container.start": "Reading container ",
        "resolution.container.complete": "Read container ",
        "resolution.container.error": "Failed to read container ",
        "resolution.container.missing_length": "No song length in container ",
        "resolution.texture.write": "Re-encoded texture ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and ellipsis truncation.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Styled, possibly shortened path.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]

        if truncated:
            rendered = "…" + separator + separator.join(parts)
        elif anchor:
            root = anchor.rstrip("\\/") if is_windows else ""
            rendered = root + separator + separator.join(parts)
        else:
            rendered = separator.join(parts) or "."

        text = Text()
        for char in rendered:
            if char in {"/", "\\", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_resolution_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured resolution events with dedicated styling."""

        event = getattr(record, "resolution_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        package_path = getattr(record, "package_path", None)
        if package_path:
            _ = body.append_text(
                self._format_path(str(package_path), base=getattr(record, "base_path", None))
            )

        details: list[str] = []
        song_count = getattr(record, "song_count", None)
        if isinstance(song_count, int):
            details.append(f"songs={song_count}")
        field_name = getattr(record, "field_name", None)
        if field_name:
            details.append(f"field={field_name}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for resolution events."""

        resolution_text = self._render_resolution_message(record)
        if resolution_text is not None:
            return resolution_text

        return super().render_message(record, message)


__all__ = ["SongPathRichHandler"]
