"""Lenient JSON document tree, REST dispatch engine, hashing and small utilities."""

__version__ = "1.2.0"

__all__ = [
    "callback",
    "document",
    "encoding",
    "engine",
    "hashing",
    "logs",
    "nodes",
    "parameters",
    "parser",
    "ringbuffer",
    "sha",
]