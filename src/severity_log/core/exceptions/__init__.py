"""Exception hierarchy for severity-log.

The logger itself never raises for unrecognized severities; these errors
cover configuration problems and sink failures.
"""

from .base import ConfigurationError, SeverityLogError
from .infrastructure import SinkClosedError, SinkError, SinkWriteError

__all__ = [
    "SeverityLogError",
    "ConfigurationError",
    "SinkError",
    "SinkWriteError",
    "SinkClosedError",
]
