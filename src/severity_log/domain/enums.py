"""Domain enums for log severity."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Ordered severity of a log request, from least to most urgent."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Integer rank used for threshold comparison (debug=0 .. error=3)."""
        return _RANKS[self]

    @classmethod
    def lowest(cls) -> Severity:
        """Return the least urgent severity."""
        return cls.DEBUG

    @classmethod
    def parse(cls, value: Any) -> Severity | None:
        """Parse a severity from a member or a case-insensitive name.

        Args:
            value: Severity member or string such as ``"WARN"`` or ``"warning"``

        Returns:
            Matching Severity, or None when the value is not recognized
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        normalized = value.strip().lower()
        if normalized in _ALIASES:
            return _ALIASES[normalized]

        for severity in cls:
            if severity.value == normalized:
                return severity

        return None

    @classmethod
    def coerce(cls, value: Any, default: Severity) -> Severity:
        """Parse a severity, falling back to ``default`` when unrecognized."""
        parsed = cls.parse(value)
        return default if parsed is None else parsed


_RANKS: dict[Severity, int] = {
    Severity.DEBUG: 0,
    Severity.INFO: 1,
    Severity.WARN: 2,
    Severity.ERROR: 3,
}

_ALIASES: dict[str, Severity] = {
    "warning": Severity.WARN,
}


class OutputFormat(str, Enum):
    """Supported serialization formats for emitted records."""

    JSON = "json"
    TEXT = "text"


class SinkType(str, Enum):
    """Supported output sink kinds."""

    STDOUT = "stdout"
    STDERR = "stderr"
    FILE = "file"
    HTTP = "http"
    MEMORY = "memory"
