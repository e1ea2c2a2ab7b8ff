"""Diagnostic logging setup for the severity-log package itself.

Records produced by a LevelFilteredLogger go to its sink; this module only
configures where the package's own warnings (dropped HTTP deliveries, CLI
errors) are reported. Diagnostics always go to stderr.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum

import structlog
from structlog.processors import JSONRenderer, TimeStamper, add_log_level


class DiagnosticsLevel(str, Enum):
    """Supported levels for package diagnostics."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def setup_diagnostics(level: DiagnosticsLevel | str = DiagnosticsLevel.WARNING) -> None:
    """Route package diagnostics to stderr and configure structlog.

    Args:
        level: Minimum level for diagnostics
    """
    level_value = DiagnosticsLevel(level.upper())

    package_logger = logging.getLogger("severity_log")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level_value.value)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            add_log_level,
            TimeStamper(fmt="iso", utc=True),
            JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_diagnostics_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger for package diagnostics."""
    return structlog.stdlib.get_logger(name)
