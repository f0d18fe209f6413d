"""src/songinfo/features/metadata/adapters/ini_descriptor.py
What: Adapter implementing DescriptorParserPort on top of ``configparser``.
Why: Keep descriptor tokenizing out of the resolver; options arrive per call."""

from __future__ import annotations

import configparser
from pathlib import Path
from typing import Final

from songinfo.features.metadata.domain import DescriptorParseOptions, DescriptorSections
from songinfo.features.metadata.usecases.ports import DescriptorParserPort

# A section name no descriptor can contain, so [DEFAULT] is read literally.
_NO_DEFAULT_SECTION: Final[str] = "\0"


def parse_descriptor(path: Path, options: DescriptorParseOptions) -> DescriptorSections:
    """Parse the descriptor at ``path`` into ordered sections.

    Duplicate keys (and repeated sections) are merged with the last value
    winning when ``options.allow_duplicate_keys`` is set. Only whole-line
    comments starting with one of ``options.comment_prefixes`` are skipped.
    Lines are read independently: leading whitespace never continues the
    previous value, and ``[DEFAULT]`` is an ordinary section.

    Raises:
        configparser.Error: If the file is not a well-formed descriptor.
        OSError: If the file cannot be read.
    """
    parser = configparser.ConfigParser(
        strict=not options.allow_duplicate_keys,
        comment_prefixes=options.comment_prefixes,
        inline_comment_prefixes=None,
        delimiters=options.delimiters,
        interpolation=None,
        allow_no_value=True,
        empty_lines_in_values=False,
        default_section=_NO_DEFAULT_SECTION,
    )
    if options.preserve_key_case:
        parser.optionxform = str  # type: ignore[assignment,method-assign]

    with open(path, encoding=options.encoding) as handle:
        parser.read_file((line.lstrip() for line in handle), source=str(path))

    sections: dict[str, dict[str, str]] = {}
    for section_name in parser.sections():
        sections[section_name] = {
            key: value
            for key, value in parser.items(section_name, raw=True)
            if value is not None
        }
    return sections


class ConfigParserDescriptorAdapter(DescriptorParserPort):
    """Adapter delegating descriptor parsing to ``parse_descriptor``."""

    def parse(self, path: Path, options: DescriptorParseOptions) -> DescriptorSections:
        return parse_descriptor(path, options)


__all__ = ["ConfigParserDescriptorAdapter", "parse_descriptor"]
