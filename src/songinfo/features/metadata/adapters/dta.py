"""DTA data array reader.

Where: src/songinfo/features/metadata/adapters/dta.py
What: Tokenize text ``songs.dta`` arrays into a ``DataArray`` tree.
Why: Container metadata is an s-expression style array, not a key/value file.
"""

from __future__ import annotations

import re
from typing import BinaryIO, Final

from songinfo.features.metadata.domain import ArrayKind, DataArray, DtaNode, Symbol
from songinfo.features.metadata.usecases.ports import DataArrayReaderPort

__all__ = ["DtaParseError", "DtaReaderAdapter", "decode_dta_bytes", "parse_data_array"]

_CLOSERS: Final[dict[str, str]] = {"(": ")", "{": "}", "[": "]"}
_DELIMITERS: Final[frozenset[str]] = frozenset("(){}[]\";'")
_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")
_HEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"0x[0-9a-fA-F]+")
_FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?(\d+\.\d*|\.\d+)([eE][+-]?\d+)?")


class DtaParseError(ValueError):
    """Raised when a DTA array cannot be decoded."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line: int | None = line
        super().__init__(f"{message} (line {line})" if line is not None else message)


def decode_dta_bytes(raw: bytes) -> str:
    """Decode DTA text, accepting UTF-8 and falling back to Latin-1.

    Raises:
        DtaParseError: If the payload is a binary (DTB) array.
    """
    if b"\x00" in raw:
        raise DtaParseError("binary DTB arrays are not supported")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def _atom(token: str) -> DtaNode:
    if _INT_PATTERN.fullmatch(token):
        return int(token)
    if _HEX_PATTERN.fullmatch(token):
        return int(token, 16)
    if _FLOAT_PATTERN.fullmatch(token):
        return float(token)
    return Symbol(token)


def parse_data_array(text: str) -> DataArray:
    """Parse DTA source text into a root array holding every top-level node.

    Raises:
        DtaParseError: On unbalanced brackets or unterminated literals.
    """
    root = DataArray()
    stack: list[tuple[DataArray, str, int]] = []
    current = root
    line = 1
    index = 0
    length = len(text)

    while index < length:
        char = text[index]

        if char == "\n":
            line += 1
            index += 1
        elif char.isspace():
            index += 1
        elif char == ";":
            end = text.find("\n", index)
            index = length if end == -1 else end
        elif char in _CLOSERS:
            child = DataArray(kind=ArrayKind(char))
            current.children.append(child)
            stack.append((current, _CLOSERS[char], line))
            current = child
            index += 1
        elif char in ")}]":
            if not stack:
                raise DtaParseError(f"unexpected {char!r}", line)
            parent, expected, _ = stack.pop()
            if char != expected:
                raise DtaParseError(f"expected {expected!r} but found {char!r}", line)
            current = parent
            index += 1
        elif char in "\"'":
            end = text.find(char, index + 1)
            if end == -1:
                raise DtaParseError("unterminated literal", line)
            body = text[index + 1 : end]
            line += body.count("\n")
            # \q is the DTA escape for a double quote inside a string
            if char == '"':
                current.children.append(body.replace("\\q", '"'))
            else:
                current.children.append(Symbol(body))
            index = end + 1
        else:
            end = index
            while end < length and not text[end].isspace() and text[end] not in _DELIMITERS:
                end += 1
            current.children.append(_atom(text[index:end]))
            index = end

    if stack:
        _, expected, opened_at = stack[-1]
        raise DtaParseError(f"missing {expected!r} for array", opened_at)
    return root


class DtaReaderAdapter(DataArrayReaderPort):
    """Adapter reading a whole DTA stream into a tree."""

    def read(self, stream: BinaryIO) -> DataArray:
        return parse_data_array(decode_dta_bytes(stream.read()))
