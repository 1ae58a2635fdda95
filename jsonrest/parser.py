"""Low-level scanning helpers used to split JSON text into its parts.

The scanner works on text that has been stripped of insignificant
whitespace (see :func:`remove_spaces`). Strings are returned raw: escape
sequences are left in place for the caller to decode.
"""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass, field

__all__ = [
    "ValueSubType",
    "JSONType",
    "JSONProperty",
    "Pair",
    "remove_spaces",
    "get_pair",
    "get_value",
    "parse_string",
    "parse_naked_value",
    "validate_naked_value",
    "find_closing_curly",
    "find_closing_bracket",
    "find_closing_quote",
]

_NAKED_CHARS = frozenset(string.ascii_letters + string.digits + ".-")
_WHITESPACE = frozenset("\t \r\n")


class ValueSubType(enum.Enum):
    """Kind of a scalar value."""

    ILLEGAL = enum.auto()
    DOUBLE = enum.auto()
    INT = enum.auto()
    UINT = enum.auto()
    STRING = enum.auto()
    BOOL = enum.auto()


class JSONType(enum.Enum):
    """Kind of a JSON entity found by the scanner."""

    INVALID = enum.auto()
    OBJECT = enum.auto()
    LIST = enum.auto()
    VALUE = enum.auto()


@dataclass
class JSONProperty:
    """A value found in the text, with the number of characters it spans."""

    value: str = ""
    subtype: ValueSubType = ValueSubType.ILLEGAL
    type: JSONType = JSONType.INVALID
    size: int = 0


@dataclass
class Pair:
    """A ``"key":value`` member of an object and the characters it spans."""

    key: str = ""
    val: JSONProperty = field(default_factory=JSONProperty)
    size: int = 0


def find_closing_quote(text: str) -> int | None:
    """Return the length of the quoted string opening ``text``.

    Escaped quotes are skipped. ``None`` is returned when ``text`` does not
    start with a quote or the string is never closed.
    """
    if not text or text[0] != '"':
        return None
    escaped = False
    for index, char in enumerate(text[1:], start=1):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            return index + 1
    return None


def _find_closing(text: str, opening: str, closing: str) -> int | None:
    if not text or text[0] != opening:
        return None
    level = 1
    index = 1
    while index < len(text):
        char = text[index]
        if char == '"':
            length = find_closing_quote(text[index:])
            if length is None:
                return None
            index += length
            continue
        if char == opening:
            level += 1
        elif char == closing:
            level -= 1
        index += 1
        if level == 0:
            return index
    return None


def find_closing_curly(text: str) -> int | None:
    """Return the length of the ``{...}`` block opening ``text``, ignoring braces in strings."""
    return _find_closing(text, "{", "}")


def find_closing_bracket(text: str) -> int | None:
    """Return the length of the ``[...]`` block opening ``text``, ignoring brackets in strings."""
    return _find_closing(text, "[", "]")


def remove_spaces(text: str) -> str:
    """Drop tabs, spaces, CR and LF that are not inside quoted strings.

    An unterminated string makes the whole result empty.
    """
    pieces: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == '"':
            length = find_closing_quote(text[index:])
            if length is None:
                return ""
            pieces.append(text[index:index + length])
            index += length
        else:
            if char not in _WHITESPACE:
                pieces.append(char)
            index += 1
    return "".join(pieces)


def parse_string(text: str) -> str:
    """Return the raw content of the quoted string opening ``text``, or ``""``."""
    if not text or text[0] != '"':
        return ""
    length = find_closing_quote(text)
    if length is None or length < 3:
        return ""
    return text[1:length - 1]


def parse_naked_value(text: str) -> str:
    """Return the leading run of letters, digits, dots and minus signs."""
    end = 0
    for char in text:
        if char not in _NAKED_CHARS:
            break
        end += 1
    return text[:end]


def validate_naked_value(text: str) -> ValueSubType:
    """Classify an unquoted literal as a boolean, a number or illegal."""
    if not text:
        return ValueSubType.ILLEGAL
    if text.lower() in ("true", "false"):
        return ValueSubType.BOOL

    seen_dot = False
    kind = ValueSubType.INT
    for index, char in enumerate(text):
        if char == "-":
            if index != 0:
                return ValueSubType.ILLEGAL
            if kind is not ValueSubType.DOUBLE:
                kind = ValueSubType.UINT
        elif char == ".":
            if seen_dot:
                return ValueSubType.ILLEGAL
            seen_dot = True
            kind = ValueSubType.DOUBLE
        elif not char.isascii() or not char.isdigit():
            return ValueSubType.ILLEGAL
    return kind


def get_value(text: str) -> JSONProperty:
    """Scan the value opening ``text``: an object, a list, a string or a literal."""
    if not text:
        return JSONProperty()
    first = text[0]
    if first in "{[":
        length = find_closing_curly(text) if first == "{" else find_closing_bracket(text)
        if length is None:
            return JSONProperty()
        kind = JSONType.OBJECT if first == "{" else JSONType.LIST
        return JSONProperty(value=text[:length], type=kind, size=length)
    if first == '"':
        value = parse_string(text)
        return JSONProperty(
            value=value,
            subtype=ValueSubType.STRING,
            type=JSONType.VALUE,
            size=len(value) + 2,
        )
    if first in _NAKED_CHARS:
        literal = parse_naked_value(text)
        subtype = validate_naked_value(literal)
        value = "{illegal}" if subtype is ValueSubType.ILLEGAL else literal
        return JSONProperty(
            value=value,
            subtype=subtype,
            type=JSONType.VALUE,
            size=len(literal),
        )
    return JSONProperty()


def get_pair(text: str) -> Pair:
    """Scan the ``"key":value`` member opening ``text``."""
    key = parse_string(text)
    if not key:
        return Pair()
    size = len(key) + 2
    if text[size:size + 1] != ":":
        return Pair(key=key, val=JSONProperty(), size=size)
    size += 1
    val = get_value(text[size:])
    return Pair(key=key, val=val, size=size + val.size)