"""Sink-specific exception classes."""

from .base import SeverityLogError


class SinkError(SeverityLogError):
    """Base exception for output sink errors."""

    pass


class SinkWriteError(SinkError):
    """Raised when a sink fails to write a serialized record."""

    pass


class SinkClosedError(SinkError):
    """Raised when writing to a sink that has been closed."""

    pass
