"""Where songinfo keeps its config, logs and re-encoded textures.

Config and logs live beside the checkout (``<repo_root>/config/config.toml``
and ``<repo_root>/logs/songinfo.log``). Container album art is written to the
system temp directory unless ``SONGINFO_TEXTURE_DIR`` or the config file
points elsewhere.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

TEXTURE_DIR_ENV: Final[str] = "SONGINFO_TEXTURE_DIR"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the explicit path, then a non-blank ``env_var``, then the default."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    if env_var:
        raw = (os.environ if env is None else env).get(env_var, "").strip()
        if raw:
            return Path(raw).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first folder holding a root marker.

    Falls back to the working directory for installs outside a checkout.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_file() -> Path:
    return (_detect_repo_root() / "logs" / "songinfo.log").resolve()


def default_texture_dir(explicit_path: Path | None = None) -> Path:
    """Directory receiving PNGs converted from container textures."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=None,
        env_var=TEXTURE_DIR_ENV,
        default_factory=lambda: Path(tempfile.gettempdir()),
    )


__all__ = [
    "TEXTURE_DIR_ENV",
    "default_config_path",
    "default_log_file",
    "default_texture_dir",
    "resolve_overridable_path",
]
