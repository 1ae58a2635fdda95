"""Pluggable process-wide logging sink."""

from __future__ import annotations

import abc
import sys

__all__ = ["Logger", "ConsoleLogger", "set_logger", "get_logger", "log"]


class Logger(abc.ABC):
    """Destination for log messages."""

    @abc.abstractmethod
    def log(self, message: str) -> None:
        """Record ``message``."""


class ConsoleLogger(Logger):
    """Writes messages to standard output as they are, with no newline added."""

    def log(self, message: str) -> None:
        sys.stdout.write(message)


_logger: Logger | None = None


def set_logger(logger: Logger | None) -> Logger | None:
    """Install ``logger`` as the sink and return the previous one.

    ``None`` disables logging. Anything else must have a callable ``log``
    method, otherwise ``TypeError`` is raised and the sink is left unchanged.
    """
    global _logger
    if logger is not None and not callable(getattr(logger, "log", None)):
        raise TypeError(
            f"logger must provide a callable 'log' method, got {type(logger).__name__}"
        )
    previous = _logger
    _logger = logger
    return previous


def get_logger() -> Logger | None:
    """Return the installed sink, if any."""
    return _logger


def log(message: object) -> None:
    """Send ``message`` to the installed sink; do nothing when there is none."""
    if _logger is not None:
        _logger.log(str(message))