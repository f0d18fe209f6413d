"""
Summary: Pick the resolver matching a package's on-disk shape.
Why: Give callers one entry point for loose-file and container packages.
"""

from __future__ import annotations

from pathlib import Path

from songinfo.shared.song_info import SongInfo

from .container_resolver import SongsDtaResolver
from .song_ini_resolver import SongIniResolver


class SongPackageLoader:
    """Route a package folder to the descriptor or container resolver."""

    def __init__(self, song_ini: SongIniResolver, songs_dta: SongsDtaResolver, *, dta_name: str) -> None:
        self._song_ini: SongIniResolver = song_ini
        self._songs_dta: SongsDtaResolver = songs_dta
        self._dta_name: str = dta_name

    def is_container(self, folder: Path) -> bool:
        """Container packages carry a top-level metadata array."""
        return (Path(folder) / self._dta_name).is_file()

    def load(self, folder: Path) -> list[SongInfo] | None:
        """Resolve every song in ``folder``.

        Returns:
            list[SongInfo] | None: One record for a loose-file package, one per
            entry for a container, or None when a container fails to resolve.
        """
        if self.is_container(folder):
            return self._songs_dta.resolve(folder)
        return [self._song_ini.resolve(SongInfo(folder=Path(folder)))]


__all__ = ["SongPackageLoader"]
