"""Entities of a JSON tree: objects, lists and scalar values.

A bare :class:`Node` stands for a missing entity. Looking up something that
does not exist yields the shared :data:`INVALID` node, which ignores every
change and reports itself as ``"{invalid}"``, so lookups can be chained
without checks in between.
"""

from __future__ import annotations

import re

from .parser import JSONProperty, JSONType, ValueSubType, get_pair, get_value

__all__ = [
    "Node",
    "ObjectNode",
    "ListNode",
    "ValueNode",
    "INVALID",
    "escape_string",
    "unescape_string",
]

_ESCAPES = {
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\\": "\\\\",
}

_UNESCAPES = {
    "'": "'",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def escape_string(text: str) -> str:
    """Escape quotes, backslashes, CR, LF and tabs for output inside a JSON string."""
    return "".join(_ESCAPES.get(char, char) for char in text)


def unescape_string(text: str) -> str:
    """Decode the escapes ``\\' \\" \\n \\r \\t \\\\``; other backslashes are kept."""
    pieces: list[str] = []
    index = 0
    last = len(text) - 1
    while index <= last:
        char = text[index]
        if char == "\\" and index < last and text[index + 1] in _UNESCAPES:
            pieces.append(_UNESCAPES[text[index + 1]])
            index += 2
            continue
        pieces.append(char)
        index += 1
    return "".join(pieces)


def _format_double(value: float) -> str:
    return "%g" % value


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _indent(level: int) -> str:
    return "\t" * max(level, 0)


def _child_level(level: int) -> int:
    return -1 if level == -1 else level + 1


def _node_for(prop: JSONProperty) -> Node:
    if prop.type is JSONType.OBJECT:
        return ObjectNode(prop.value)
    if prop.type is JSONType.LIST:
        return ListNode(prop.value)
    return ValueNode(prop.value, prop.subtype)


class Node:
    """Base of all entities; a bare instance is a missing entity."""

    def __getitem__(self, key: int | str) -> Node:
        if isinstance(key, int):
            return self._by_index(key)
        if isinstance(key, str):
            return self._by_key(key)
        raise TypeError(f"JSON entities are indexed by int or str, not {type(key).__name__}")

    def _by_index(self, index: int) -> Node:
        return INVALID

    def _by_key(self, key: str) -> Node:
        return INVALID

    def text(self) -> str:
        """Return the value as text, or a marker such as ``"{object}"``."""
        return "{invalid}"

    def is_valid(self) -> bool:
        return False

    def size(self) -> int:
        """Number of members of a list; ``-1`` for everything else."""
        return -1

    def keys(self) -> list[str]:
        """Member names of an object; empty for everything else."""
        return []

    def copy(self) -> Node | None:
        """Return a deep copy, or ``None`` for a missing entity."""
        return None

    def stringify(self, level: int = -1) -> str:
        """Serialise; ``-1`` gives one line, otherwise tab-indented from ``level``."""
        return "{}"

    def add_object(self, name: str = "") -> Node:
        """Add an empty object member and return it."""
        return INVALID

    def add_list(self, name: str = "") -> Node:
        """Add an empty list member and return it."""
        return INVALID

    def add_value(self, value: str | int | float | bool, name: str = "") -> Node:
        """Add a scalar member and return it."""
        return INVALID

    def set_value(self, value: str | int | float | bool) -> None:
        """Replace a scalar's value; ignored by anything that is not a scalar."""

    def to_double(self) -> float:
        return 0.0

    def to_int(self) -> int:
        return 0

    def to_uint(self) -> int:
        return 0

    def to_bool(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.text()


class ValueNode(Node):
    """A scalar: string, number, boolean or an illegal literal."""

    def __init__(self, value: str | int | float | bool, subtype: ValueSubType | None = None) -> None:
        if subtype is None:
            if isinstance(value, bool):
                self._value, self.subtype = ("true" if value else "false"), ValueSubType.BOOL
            elif isinstance(value, int):
                self._value, self.subtype = str(value), ValueSubType.UINT
            elif isinstance(value, float):
                self._value, self.subtype = _format_double(value), ValueSubType.DOUBLE
            elif isinstance(value, str):
                self._value, self.subtype = unescape_string(value), ValueSubType.STRING
            else:
                raise TypeError(f"unsupported JSON value type: {type(value).__name__}")
            return
        if not isinstance(value, str):
            raise TypeError("a value with an explicit subtype must be given as text")
        self.subtype = subtype
        self._value = value.lower() if subtype is ValueSubType.BOOL else unescape_string(value)

    @classmethod
    def _raw(cls, value: str, subtype: ValueSubType) -> ValueNode:
        node = cls.__new__(cls)
        node._value = value
        node.subtype = subtype
        return node

    def text(self) -> str:
        return self._value

    def is_valid(self) -> bool:
        return True

    def copy(self) -> ValueNode:
        return ValueNode._raw(self._value, self.subtype)

    def stringify(self, level: int = -1) -> str:
        if self.subtype in (ValueSubType.STRING, ValueSubType.ILLEGAL):
            return f'"{escape_string(self._value)}"'
        return self._value

    def set_value(self, value: str | int | float | bool) -> None:
        if isinstance(value, bool):
            self._value, self.subtype = ("true" if value else "false"), ValueSubType.BOOL
        elif isinstance(value, int):
            self._value, self.subtype = str(value), ValueSubType.INT
        elif isinstance(value, float):
            self._value, self.subtype = _format_double(value), ValueSubType.DOUBLE
        elif isinstance(value, str):
            self._value, self.subtype = unescape_string(value), ValueSubType.STRING
        else:
            raise TypeError(f"unsupported JSON value type: {type(value).__name__}")

    def to_double(self) -> float:
        return _leading_float(self._value)

    def to_int(self) -> int:
        return _leading_int(self._value)

    def to_uint(self) -> int:
        return _leading_int(self._value) & 0xFFFFFFFF

    def to_bool(self) -> bool:
        return self._value.lower() == "true"


class ListNode(Node):
    """An ordered list of entities."""

    def __init__(self, text: str = "[]") -> None:
        self._members: list[Node] = []
        self._parse(text)

    def _parse(self, text: str) -> None:
        if not text or text[0] != "[":
            return
        rest = text[1:]
        index = 1
        while index < len(text):
            prop = get_value(rest)
            if prop.type is JSONType.INVALID:
                break
            self._members.append(_node_for(prop))
            separator = rest[prop.size:prop.size + 1]
            if separator == "]" or separator != ",":
                break
            index += prop.size + 1
            rest = text[index:]

    def _by_index(self, index: int) -> Node:
        if 0 <= index < len(self._members):
            return self._members[index]
        return INVALID

    def text(self) -> str:
        return "{list}"

    def is_valid(self) -> bool:
        return True

    def size(self) -> int:
        return len(self._members)

    def copy(self) -> ListNode:
        duplicate = ListNode()
        duplicate._members = [member.copy() for member in self._members]
        return duplicate

    def stringify(self, level: int = -1) -> str:
        newline = "" if level == -1 else "\r\n"
        child = _child_level(level)
        parts = ["[", newline]
        for position, member in enumerate(self._members):
            parts.append(_indent(level))
            parts.append(member.stringify(child))
            if position < len(self._members) - 1:
                parts.append(",")
            parts.append(newline)
        parts.append(_indent(level - 1))
        parts.append("]")
        return "".join(parts)

    def add_object(self, name: str = "") -> Node:
        item = ObjectNode()
        self._members.append(item)
        return item

    def add_list(self, name: str = "") -> Node:
        item = ListNode()
        self._members.append(item)
        return item

    def add_value(self, value: str | int | float | bool, name: str = "") -> Node:
        item = ValueNode(value)
        self._members.append(item)
        return item


class ObjectNode(Node):
    """A collection of named entities."""

    def __init__(self, text: str = "{}") -> None:
        self._members: dict[str, Node] = {}
        self._parse(text)

    def _parse(self, text: str) -> None:
        if not text or text[0] != "{":
            return
        rest = text[1:]
        index = 1
        while index < len(text):
            pair = get_pair(rest)
            if pair.val.type is JSONType.INVALID:
                break
            self._members[pair.key] = _node_for(pair.val)
            separator = rest[pair.size:pair.size + 1]
            if separator == "}" or separator != ",":
                break
            index += pair.size + 1
            rest = text[index:]

    def generate_key(self) -> str:
        """Return an unused name of the form ``key<n>``, starting from the member count."""
        counter = len(self._members)
        while f"key{counter}" in self._members:
            counter += 1
        return f"key{counter}"

    def _by_key(self, key: str) -> Node:
        return self._members.get(key, INVALID)

    def text(self) -> str:
        return "{object}"

    def is_valid(self) -> bool:
        return True

    def keys(self) -> list[str]:
        return list(self._members)

    def copy(self) -> ObjectNode:
        duplicate = ObjectNode()
        duplicate._members = {key: member.copy() for key, member in self._members.items()}
        return duplicate

    def stringify(self, level: int = -1) -> str:
        newline = "" if level == -1 else "\r\n"
        child = _child_level(level)
        parts = ["{", newline]
        items = list(self._members.items())
        for position, (key, member) in enumerate(items):
            parts.append(_indent(level))
            parts.append(f'"{key}" : ')
            parts.append(member.stringify(child))
            if position < len(items) - 1:
                parts.append(",")
            parts.append(newline)
        parts.append(_indent(level - 1))
        parts.append("}")
        return "".join(parts)

    def _store(self, name: str, item: Node) -> Node:
        self._members[name or self.generate_key()] = item
        return item

    def add_object(self, name: str = "") -> Node:
        return self._store(name, ObjectNode())

    def add_list(self, name: str = "") -> Node:
        return self._store(name, ListNode())

    def add_value(self, value: str | int | float | bool, name: str = "") -> Node:
        return self._store(name, ValueNode(value))


INVALID = Node()
"""The shared node returned for every lookup that finds nothing."""