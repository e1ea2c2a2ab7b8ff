"""Configuration for severity-log."""

from .config import Settings, get_settings
from .logging import DiagnosticsLevel, get_diagnostics_logger, setup_diagnostics

__all__ = [
    "Settings",
    "get_settings",
    "DiagnosticsLevel",
    "setup_diagnostics",
    "get_diagnostics_logger",
]
