"""Callbacks that serve REST routes, with their declared parameters."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .document import JSON
from .engine import ResponseCode
from .nodes import Node
from .parameters import RESTParameter, RESTParameters

__all__ = ["RESTContext", "RESTCallBack"]


@dataclass
class RESTContext:
    """What a handler receives; it may change ``response_code``."""

    return_data: JSON | Node
    params: RESTParameters
    data: str
    matches: re.Match[str] | None
    response_code: ResponseCode | int = ResponseCode.OK
    user_data: Any = None


class RESTCallBack:
    """A handler for a route together with its description and parameters."""

    def __init__(self, handler: Callable[[RESTContext], None], description: str) -> None:
        self.handler = handler
        self.description = description
        self._params: dict[str, RESTParameter] = {}

    @property
    def parameters(self) -> dict[str, RESTParameter]:
        """Declared parameters by name."""
        return dict(self._params)

    def add_param(
        self,
        name: str,
        description: str,
        required: bool = True,
        type: str = "string",
        location: str = "query",
        default: str = "",
    ) -> None:
        """Declare a parameter; a name already declared keeps its first declaration."""
        self._params.setdefault(
            name, RESTParameter(name, description, required, type, location, default)
        )

    def get_description(self, document: JSON | Node) -> None:
        """Write the description and the parameter list into ``document``."""
        document.add_value(self.description, "description")
        params = document.add_list("params")
        for name, param in self._params.items():
            entry = params.add_object("param")
            entry.add_value(name, "name")
            entry.add_value(param.description, "description")

    def get_swagger_description(self, document: JSON | Node) -> None:
        """Write a Swagger operation object into ``document``."""
        document.add_value(self.description, "summary")
        document.add_value(self.description, "description")
        if not self._params:
            return
        params = document.add_list("parameters")
        for name, param in self._params.items():
            entry = params.add_object("param")
            entry.add_value(name, "name")
            entry.add_value(param.description, "description")
            entry.add_value(param.type, "type")
            entry.add_value(param.location, "in")
            entry.add_value(param.required, "required")
            if param.default:
                entry.add_value(param.default, "default")

    def call(
        self,
        document: JSON | Node,
        param_string: str,
        data: str,
        matches: re.Match[str] | None,
        user_data: Any = None,
    ) -> ResponseCode | int:
        """Check required query parameters, run the handler and return its code."""
        params = RESTParameters(param_string, self._params)
        for name, param in self._params.items():
            if param.required and param.location == "query" and not params.get(name):
                print(f"Missing mandatory parameter {name}", file=sys.stderr)
                document.add_value(f"Missing required parameter {name}", "error")
                return ResponseCode.BAD_REQUEST

        context = RESTContext(document, params, data, matches, ResponseCode.OK, user_data)
        self.handler(context)
        return context.response_code