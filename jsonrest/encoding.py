"""Base64 encoding."""

from __future__ import annotations

import base64

__all__ = ["base64_encode"]


def base64_encode(data: bytes | bytearray | memoryview) -> str:
    """Encode ``data`` with the standard alphabet and ``=`` padding."""
    return base64.b64encode(bytes(data)).decode("ascii")