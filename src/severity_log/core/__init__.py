"""Core module containing cross-cutting concerns."""

from .config import Settings, get_settings
from .exceptions import (
    ConfigurationError,
    SeverityLogError,
    SinkClosedError,
    SinkError,
    SinkWriteError,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "SeverityLogError",
    "ConfigurationError",
    "SinkError",
    "SinkWriteError",
    "SinkClosedError",
]
