"""Declared request parameters and the values read from a query string."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass

__all__ = ["RESTParameter", "RESTParameters"]

_LINE_ENDS = frozenset(" \r\n")


@dataclass(frozen=True)
class RESTParameter:
    """Description of a parameter that a callback accepts."""

    name: str
    description: str
    required: bool = True
    type: str = "string"
    location: str = "query"
    default: str = ""


class RESTParameters:
    """Values of the registered parameters found in a query string.

    Reading stops at the first space, CR or LF. Names that are not in
    ``registered`` are ignored; a later occurrence of a name wins.
    """

    def __init__(self, params: str, registered: Container[str]) -> None:
        self._values: dict[str, str] = {}
        key: list[str] = []
        value: list[str] = []
        in_key = True

        def store() -> None:
            name = "".join(key)
            if name in registered:
                self._values[name] = "".join(value)
            key.clear()
            value.clear()

        position = 0
        while position < len(params) and params[position] != " ":
            char = params[position]
            if char == "=":
                in_key = False
            elif char in "&\r\n":
                store()
                in_key = True
            else:
                (key if in_key else value).append(char)
            position += 1
            if position == len(params) or params[position] in _LINE_ENDS:
                store()
                break

    def get(self, key: str) -> str:
        """Return the value given for ``key``, or ``""`` when it was absent."""
        return self._values.get(key, "")