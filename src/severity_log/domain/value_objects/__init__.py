"""Domain value objects."""

from .record import ErrorDetail, LogRecord

__all__ = [
    "ErrorDetail",
    "LogRecord",
]
