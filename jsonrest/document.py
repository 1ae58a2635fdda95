"""A JSON document: the owner of a tree of entities.

A :class:`JSON` with nothing in it behaves like a missing entity. It reads
as ``"{invalid}"``, serialises as ``"{}"`` and ignores value changes. The
first ``add_*`` call makes it an object. :meth:`JSON.parse` replaces
whatever it holds with the object found in the text.
"""

from __future__ import annotations

import re
from pathlib import Path

from .nodes import INVALID, Node, ObjectNode
from .parser import remove_spaces

__all__ = ["JSON", "json_path_query"]

_INDEXED_SEGMENT = re.compile(r"(.+)\[([0-9]*)\]")


class JSON:
    """Root of a JSON tree; lookups return the entities of the tree."""

    def __init__(self) -> None:
        self._root: Node | None = None

    def __getitem__(self, key: int | str) -> Node:
        if self._root is None:
            return INVALID[key]
        return self._root[key]

    def __str__(self) -> str:
        return self.text()

    def assign(self, other: JSON | Node) -> None:
        """Replace the content with a deep copy of ``other``."""
        source = other._root if isinstance(other, JSON) else other
        self._root = source.copy() if source is not None else None

    def set_value(self, value: str | int | float | bool) -> None:
        """Change the value of a scalar root; ignored for anything else."""
        if self._root is not None:
            self._root.set_value(value)

    def text(self) -> str:
        """Return the root as text, or ``"{invalid}"`` when empty."""
        return self._root.text() if self._root is not None else "{invalid}"

    def is_valid(self) -> bool:
        return self._root is not None and self._root.is_valid()

    def size(self) -> int:
        """Number of members of a list root; ``-1`` otherwise."""
        return self._root.size() if self._root is not None else -1

    def keys(self) -> list[str]:
        """Member names of an object root; empty otherwise."""
        return self._root.keys() if self._root is not None else []

    def copy(self) -> JSON:
        """Return an independent deep copy of this document."""
        duplicate = JSON()
        duplicate.assign(self)
        return duplicate

    def to_double(self) -> float:
        return self._root.to_double() if self._root is not None else 0.0

    def to_int(self) -> int:
        return self._root.to_int() if self._root is not None else 0

    def to_uint(self) -> int:
        return self._root.to_uint() if self._root is not None else 0

    def to_bool(self) -> bool:
        return self._root.to_bool() if self._root is not None else False

    def parse(self, text: str) -> None:
        """Replace the content with the object described by ``text``."""
        self._root = ObjectNode(remove_spaces(text))

    def parse_file(self, filename: str | Path) -> None:
        """Parse the contents of ``filename``; raises :class:`OSError` if it cannot be read."""
        with open(filename, encoding="utf-8") as handle:
            self.parse(handle.read())

    def stringify(self, formatted: bool = False) -> str:
        """Serialise the document, tab-indented over several lines when ``formatted``."""
        if self._root is None:
            return "{}"
        return self._root.stringify(1 if formatted else -1)

    def _container(self) -> Node:
        if self._root is None:
            self._root = ObjectNode()
        return self._root

    def add_object(self, name: str = "") -> Node:
        """Add an empty object member and return it."""
        return self._container().add_object(name)

    def add_list(self, name: str = "") -> Node:
        """Add an empty list member and return it."""
        return self._container().add_list(name)

    def add_value(self, value: str | int | float | bool, name: str = "") -> Node:
        """Add a scalar member and return it."""
        return self._container().add_value(value, name)


def json_path_query(document: JSON | Node, query: str) -> JSON | Node:
    """Follow a path such as ``"key2/sub3[1]/sub3.3"`` from ``document``.

    Segments are separated by ``/``; a segment ending in ``[n]`` selects
    member ``n`` of the named list. Missing entities give the invalid node.
    An empty index such as ``"name[]"`` raises :class:`ValueError`.
    """
    node: JSON | Node = document
    for segment in (part for part in query.split("/") if part):
        match = _INDEXED_SEGMENT.search(segment)
        if match:
            node = node[match.group(1)][int(match.group(2))]
        else:
            node = node[segment]
    return node