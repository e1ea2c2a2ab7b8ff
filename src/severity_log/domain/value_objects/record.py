"""Value objects describing an emitted log record."""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..enums import Severity


@dataclass(frozen=True)
class ErrorDetail:
    """Error information attached to a record.

    Both fields are opaque text; the stack is passed through untouched.
    """

    message: str
    stack: str = ""

    @classmethod
    def from_error(cls, error: Any) -> ErrorDetail:
        """Build error detail from an error-like value.

        Args:
            error: Exception, ErrorDetail, mapping with ``message``/``stack``
                keys, or any other object (stringified into ``message``)

        Returns:
            ErrorDetail instance
        """
        if isinstance(error, ErrorDetail):
            return error

        if isinstance(error, BaseException):
            return cls(
                message=str(error),
                stack="".join(traceback.format_exception(type(error), error, error.__traceback__)),
            )

        if isinstance(error, Mapping):
            message = error.get("message")
            stack = error.get("stack")
            return cls(
                message="" if message is None else str(message),
                stack="" if stack is None else str(stack),
            )

        return cls(message=str(error))

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "stack": self.stack}


@dataclass(frozen=True)
class LogRecord:
    """A single structured log event, created at emission time."""

    timestamp: datetime
    level: Severity
    message: str
    error: ErrorDetail | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping; ``error`` is omitted when not supplied."""
        data: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "message": self.message,
        }
        if self.error is not None:
            data["error"] = self.error.to_dict()
        return data
