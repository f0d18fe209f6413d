"""Token tree for DTA data arrays.

Where: src/songinfo/features/metadata/domain/data_array.py
What: Node types produced by the DTA reader and navigation helpers over them.
Why: Let use cases walk container metadata without depending on the reader.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias


class Symbol(str):
    """Bare or single-quoted DTA symbol, kept distinct from quoted strings."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


class ArrayKind(StrEnum):
    """Bracket style an array was written with."""

    ARRAY = "("
    COMMAND = "{"
    PROPERTY = "["


DtaNode: TypeAlias = "DataArray | Symbol | str | int | float"


@dataclass(slots=True)
class DataArray:
    """An ordered list of nodes; the first child usually names the array."""

    children: list[DtaNode] = field(default_factory=list)
    kind: ArrayKind = ArrayKind.ARRAY

    def __iter__(self) -> Iterator[DtaNode]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    @property
    def name(self) -> str | None:
        """Name of the array taken from its leading symbol or string."""
        if not self.children:
            return None
        head = self.children[0]
        if isinstance(head, str):
            return str(head)
        return None

    def arrays(self) -> Iterator["DataArray"]:
        """Yield nested arrays in order."""
        for child in self.children:
            if isinstance(child, DataArray):
                yield child

    def find(self, key: str) -> "DataArray | None":
        """Return the first nested array named ``key``."""
        for child in self.arrays():
            if child.name == key:
                return child
        return None

    def find_path(self, *keys: str) -> "DataArray | None":
        """Follow nested array names, e.g. ``find_path("song", "name")``."""
        node: DataArray | None = self
        for key in keys:
            if node is None:
                return None
            node = node.find(key)
        return node

    def value(self) -> DtaNode | None:
        """Return the node following the array name, if any."""
        if len(self.children) < 2:
            return None
        return self.children[1]


__all__ = ["ArrayKind", "DataArray", "DtaNode", "Symbol"]
