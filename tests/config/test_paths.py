"""Tests for configuration path resolution helpers."""

import tempfile
from pathlib import Path

import pytest

from songinfo.config.paths import (
    TEXTURE_DIR_ENV,
    default_config_path,
    default_log_file,
    default_texture_dir,
    resolve_overridable_path,
)


def test_repo_relative_defaults(portable_repo_root: Path) -> None:
    """Config and logs live under the detected repository root."""

    assert default_config_path() == portable_repo_root / "config" / "config.toml"
    assert default_log_file() == portable_repo_root / "logs" / "songinfo.log"


def test_texture_dir_defaults_to_temp(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TEXTURE_DIR_ENV, raising=False)

    assert default_texture_dir() == Path(tempfile.gettempdir()).resolve()


def test_texture_dir_honors_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    override = tmp_path / "art"
    monkeypatch.setenv(TEXTURE_DIR_ENV, str(override))

    assert default_texture_dir() == override.resolve()
    assert default_texture_dir(tmp_path / "configured") == (tmp_path / "configured").resolve()


def test_blank_environment_value_is_ignored(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"VAR": "   "},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )
    assert resolved == (tmp_path / "default").resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    """An explicit path beats both environment and default."""

    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"VAR": str(tmp_path / "env")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )
    assert resolved == (tmp_path / "explicit").resolve()
