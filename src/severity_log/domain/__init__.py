"""Domain layer: severities and record value objects."""

from .enums import OutputFormat, Severity, SinkType
from .value_objects import ErrorDetail, LogRecord

__all__ = [
    "Severity",
    "OutputFormat",
    "SinkType",
    "ErrorDetail",
    "LogRecord",
]
