"""
severity-log: a level-filtered structured logger.

Build one logger at process start and pass it to the code that logs::

    from severity_log import create_logger

    logger = create_logger()
    logger.warn("disk almost full")
    logger.error("upload failed", error=exc)
"""

from .application import DEFAULT_THRESHOLD, LevelFilteredLogger
from .core.config import Settings, get_settings, setup_diagnostics
from .core.container import Container, create_logger
from .core.exceptions import (
    ConfigurationError,
    SeverityLogError,
    SinkClosedError,
    SinkError,
    SinkWriteError,
)
from .domain import ErrorDetail, LogRecord, OutputFormat, Severity, SinkType
from .infrastructure import (
    FileSink,
    HttpSink,
    HttpSinkConfig,
    MemorySink,
    OutputSink,
    RecordRenderer,
    SinkFactory,
    StreamSink,
)

__version__ = "1.0.0"

__all__ = [
    # Logger
    "LevelFilteredLogger",
    "DEFAULT_THRESHOLD",
    "create_logger",
    "Container",
    # Domain
    "Severity",
    "OutputFormat",
    "SinkType",
    "LogRecord",
    "ErrorDetail",
    # Serialization and sinks
    "RecordRenderer",
    "OutputSink",
    "StreamSink",
    "FileSink",
    "HttpSink",
    "HttpSinkConfig",
    "MemorySink",
    "SinkFactory",
    # Configuration
    "Settings",
    "get_settings",
    "setup_diagnostics",
    # Exceptions
    "SeverityLogError",
    "ConfigurationError",
    "SinkError",
    "SinkWriteError",
    "SinkClosedError",
]
