"""
Summary: Architecture checks keeping metadata use cases free of adapter and codec imports.
Why: Resolvers must stay testable against ports without parsers or decoders installed.
"""

from __future__ import annotations

from pathlib import Path

import pytest

FORBIDDEN_IMPORTS: tuple[str, ...] = (
    "songinfo.features.metadata.adapters",
    "from ..adapters",
    "import configparser",
    "import mutagen",
    "from mutagen",
    "from PIL",
    "import PIL",
)


@pytest.mark.parametrize("needle", FORBIDDEN_IMPORTS)
def test_metadata_usecases_do_not_import_adapters(needle: str) -> None:
    """Ensure use case modules reach file formats only through ports."""

    repo_root = Path(__file__).resolve().parents[2]
    usecases_dir = repo_root / "src" / "songinfo" / "features" / "metadata" / "usecases"
    offending_files: list[Path] = []
    for path in usecases_dir.rglob("*.py"):
        contents = path.read_text(encoding="utf-8")
        if needle in contents:
            offending_files.append(path)
    assert offending_files == [], (
        f"Use case modules must not contain `{needle}`; found in: "
        f"{', '.join(str(path.relative_to(repo_root)) for path in offending_files)}"
    )


def test_metadata_domain_is_dependency_free() -> None:
    """Ensure the domain layer imports nothing from other songinfo layers."""

    repo_root = Path(__file__).resolve().parents[2]
    domain_dir = repo_root / "src" / "songinfo" / "features" / "metadata" / "domain"
    offending_files = [
        path
        for path in domain_dir.rglob("*.py")
        if "songinfo." in path.read_text(encoding="utf-8")
    ]
    assert offending_files == []
