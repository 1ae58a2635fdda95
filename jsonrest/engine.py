"""Routing of REST requests to registered callbacks."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .document import JSON
from .nodes import Node

if TYPE_CHECKING:
    from .callback import RESTCallBack

__all__ = ["ResponseCode", "RESTEngine"]


class ResponseCode(enum.IntEnum):
    """Outcome of a REST call."""

    OK = 0
    CREATED = 1
    ACCEPTED = 2
    BAD_REQUEST = 3
    FORBIDDEN = 4
    NOT_FOUND = 5
    METHOD_NOT_ALLOWED = 6
    NOT_IMPLEMENTED = 7
    SERVICE_UNAVAILABLE = 8


@dataclass
class _Resource:
    uri: str
    pattern: re.Pattern[str]
    callback: RESTCallBack


class RESTEngine:
    """Dispatches requests to callbacks by HTTP method and URI pattern.

    URIs are regular expressions that must match the whole request path.
    Methods are compared without regard to case.
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, list[_Resource]] = {}

    def add_callback(self, uri: str, method: str, callback: RESTCallBack) -> None:
        """Route ``method`` requests whose path matches ``uri`` to ``callback``."""
        resource = _Resource(uri, re.compile(uri), callback)
        self._callbacks.setdefault(method.upper(), []).append(resource)

    def remove_callback(self, callback: RESTCallBack) -> None:
        """Stop routing to ``callback``; once per method it is registered under."""
        for resources in self._callbacks.values():
            for position, resource in enumerate(resources):
                if resource.callback is callback:
                    del resources[position]
                    break

    def invoke(
        self,
        document: JSON | Node,
        url: str,
        method: str,
        data: str = "",
        user_data: Any = None,
    ) -> ResponseCode | int:
        """Call the first callback whose pattern matches ``url`` and return its code."""
        resources = self._callbacks.get(method.upper())
        if resources is None:
            return ResponseCode.METHOD_NOT_ALLOWED

        path, separator, query = url.partition("?")
        if not separator:
            path = url.split(" ", 1)[0]
            query = ""

        for resource in resources:
            match = resource.pattern.fullmatch(path)
            if match:
                return resource.callback.call(document, query, data, match, user_data)
        return ResponseCode.NOT_FOUND

    def _routes(self):
        for method in sorted(self._callbacks):
            for resource in self._callbacks[method]:
                yield method, resource

    def document_interface(self, document: JSON | Node) -> None:
        """Describe every route in an ``"api"`` list of ``document``."""
        document.add_list("api")
        for method, resource in self._routes():
            entry = document["api"].add_object()
            resource.callback.get_description(entry)
            entry.add_value(resource.uri, "path")
            entry.add_value(method.upper(), "method")

    def document_swagger_interface(
        self,
        document: JSON | Node,
        version: str,
        title: str,
        description: str,
        schemes: str,
        host: str,
        base_path: str,
    ) -> None:
        """Fill ``document`` with a Swagger 2.0 description of the routes."""
        document.add_value(2.0, "swagger")

        info = document.add_object("info")
        info.add_value(version, "version")
        info.add_value(title, "title")
        info.add_value(description, "descrition")

        document.add_value(schemes, "schemes")
        document.add_value(host, "host")
        document.add_value(base_path, "basePath")

        paths = document.add_object("paths")
        for method, resource in self._routes():
            path = paths.add_object(resource.uri)
            endpoint = path.add_object(method.lower())
            resource.callback.get_swagger_description(endpoint)