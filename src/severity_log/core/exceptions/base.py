"""Base exception classes for severity-log."""

from typing import Any


class SeverityLogError(Exception):
    """Base exception for all package errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message}. Details: {self.details}"
        return self.message


class ConfigurationError(SeverityLogError):
    """Raised when a logger or sink cannot be built from its configuration."""

    pass
