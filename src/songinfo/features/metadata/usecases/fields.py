"""Field access shared by the descriptor and container resolvers.

Where: src/songinfo/features/metadata/usecases/fields.py
What: ``try_get`` sources over descriptor sections and DTA trees, plus value parsing helpers.
Why: Both resolvers read fields the same way even though the storage differs.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Protocol, runtime_checkable

from ..domain import DataArray, DescriptorSections

__all__ = [
    "DataArrayEntrySource",
    "DataArrayFieldSource",
    "FieldGroup",
    "FieldSource",
    "MappingFieldSource",
    "MissingField",
    "PART_KEY_RENAMES",
    "difficulty_key",
    "is_truthy",
    "millis_to_seconds",
    "parse_int",
]

# Canonical part name -> descriptor key suffix where the two differ.
PART_KEY_RENAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "real_guitar": "guitar_real",
        "real_bass": "bass_real",
        "real_drums": "drums_real",
        "real_keys": "keys_real",
        "harm_vocals": "vocals_harm",
    }
)

_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?\d+\s*")


@runtime_checkable
class FieldSource(Protocol):
    """Anything that can answer "value for key K in group G"."""

    def try_get(self, group: str, key: str) -> str | None:
        """Return the raw value, or None when the group or key is absent."""
        ...

    def has_group(self, group: str) -> bool:
        """Return whether ``group`` exists at all."""
        ...


@dataclass(frozen=True, slots=True)
class MissingField:
    """A required key that was not present in its group."""

    group: str
    key: str


class MappingFieldSource:
    """Field source over parsed descriptor sections."""

    def __init__(self, sections: DescriptorSections) -> None:
        self._sections: DescriptorSections = sections

    def try_get(self, group: str, key: str) -> str | None:
        section = self._sections.get(group)
        if section is None:
            return None
        return section.get(key)

    def has_group(self, group: str) -> bool:
        return group in self._sections


class DataArrayEntrySource:
    """Field source over a single DTA entry; its only group is the entry name.

    Keys may be dotted to reach nested arrays (``song.name``).
    """

    def __init__(self, entry: DataArray) -> None:
        self._entry: DataArray = entry

    def try_get(self, group: str, key: str) -> str | None:
        if not self.has_group(group):
            return None
        node = self._entry.find_path(*key.split("."))
        if node is None:
            return None
        value = node.value()
        if value is None or isinstance(value, DataArray):
            return None
        return str(value)

    def has_group(self, group: str) -> bool:
        return self._entry.name is not None and self._entry.name == group


class DataArrayFieldSource:
    """Field source over a DTA root; groups are top-level entries.

    Name lookups answer for the first entry with that name. Use ``entries``
    to visit every entry, including ones sharing a name.
    """

    def __init__(self, root: DataArray) -> None:
        self._root: DataArray = root

    def entries(self) -> Iterator[FieldGroup]:
        """Yield a field group bound to each named top-level entry, in order."""
        for entry in self._root.arrays():
            if entry.name is not None:
                yield FieldGroup(DataArrayEntrySource(entry), entry.name)

    def groups(self) -> Iterator[str]:
        """Yield the name of every top-level entry in order."""
        for fields in self.entries():
            yield fields.group

    def try_get(self, group: str, key: str) -> str | None:
        entry = self._root.find(group)
        if entry is None:
            return None
        return DataArrayEntrySource(entry).try_get(group, key)

    def has_group(self, group: str) -> bool:
        return self._root.find(group) is not None


@dataclass(frozen=True, slots=True)
class FieldGroup:
    """A field source bound to one group."""

    source: FieldSource
    group: str

    def get(self, key: str) -> str | None:
        return self.source.try_get(self.group, key)

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def first(self, *keys: str) -> str | None:
        """Return the value of the first key present."""
        for key in keys:
            value = self.get(key)
            if value is not None:
                return value
        return None

    def require(self, key: str) -> str | MissingField:
        value = self.get(key)
        if value is None:
            return MissingField(group=self.group, key=key)
        return value


def is_truthy(value: str | None) -> bool:
    """Descriptor booleans: ``true`` in any casing, or ``1``."""
    if value is None:
        return False
    return value.lower() == "true" or value == "1"


def parse_int(value: str) -> int:
    """Parse a base-10 integer, rejecting anything ``int()`` would loosely accept.

    Raises:
        ValueError: If ``value`` is not an optionally signed run of digits.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer value: {value!r}")
    return int(value)


def millis_to_seconds(value: str) -> float:
    """Convert an integer millisecond string to seconds."""
    return parse_int(value) / 1000


def difficulty_key(part: str) -> str:
    """Descriptor key holding the difficulty tier for ``part``."""
    return "diff_" + PART_KEY_RENAMES.get(part, part)
