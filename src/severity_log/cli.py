"""
Command line interface for severity-log.

Usage:
    severity-log emit warn "disk almost full"            # one JSON line on stdout
    severity-log emit error "failed" --error-message boom
    severity-log check debug --threshold info            # exit 1: filtered
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from pydantic import ValidationError

from .core.config import Settings, get_diagnostics_logger, get_settings, setup_diagnostics
from .core.container import create_logger
from .core.exceptions import SeverityLogError, SinkError
from .domain.enums import OutputFormat, Severity, SinkType
from .infrastructure.sinks import MemorySink

EXIT_OK = 0
EXIT_FILTERED = 1
EXIT_CONFIG_ERROR = 2
EXIT_WRITE_ERROR = 3

SEVERITY_CHOICES = [severity.value for severity in Severity] + ["warning"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="severity-log", description="Emit level-filtered structured log records")
    subparsers = parser.add_subparsers(dest="command", required=True)

    emit = subparsers.add_parser("emit", help="Emit one record if it passes the threshold")
    emit.add_argument("level", help=f"Record severity ({', '.join(SEVERITY_CHOICES)})")
    emit.add_argument("message", help="Record message")
    emit.add_argument("--error-message", default=None, help="Attach an error with this message")
    emit.add_argument("--error-stack", default=None, help="Stack text for the attached error")
    _add_threshold_argument(emit)
    emit.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Output format (default: LOG_FORMAT or json)",
    )
    emit.add_argument(
        "--sink",
        choices=[SinkType.STDOUT.value, SinkType.STDERR.value, SinkType.FILE.value],
        default=None,
        help="Output sink (default: LOG_SINK or stdout)",
    )
    emit.add_argument("--file-path", default=None, help="Log file path for the file sink")

    check = subparsers.add_parser("check", help="Exit 0 if a level would be logged, 1 otherwise")
    check.add_argument("level", help=f"Severity to check ({', '.join(SEVERITY_CHOICES)})")
    _add_threshold_argument(check)

    return parser


def _add_threshold_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--threshold",
        default=None,
        help="Minimum severity to emit (default: LOG_LEVEL or info)",
    )


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, Any] = {}
    if args.threshold is not None:
        overrides["LOG_LEVEL"] = args.threshold
    if getattr(args, "format", None) is not None:
        overrides["LOG_FORMAT"] = args.format
    if getattr(args, "sink", None) is not None:
        overrides["LOG_SINK"] = args.sink
    if getattr(args, "file_path", None) is not None:
        overrides["LOG_FILE_PATH"] = args.file_path
    return get_settings(**overrides)


def _emit(args: argparse.Namespace, settings: Settings) -> int:
    error: dict[str, str] | None = None
    if args.error_message is not None or args.error_stack is not None:
        error = {"message": args.error_message or "", "stack": args.error_stack or ""}

    logger = create_logger(settings)
    try:
        logger.log(args.level, args.message, error)
    finally:
        logger.sink.close()
    return EXIT_OK


def _check(args: argparse.Namespace, settings: Settings) -> int:
    # never writes, so the configured sink is not opened
    logger = create_logger(settings, sink=MemorySink())
    return EXIT_OK if logger.should_log(args.level) else EXIT_FILTERED


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the command line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_diagnostics()
    diagnostics = get_diagnostics_logger("severity_log.cli")

    try:
        settings = _load_settings(args)
        settings.setup_diagnostics()
        if args.command == "emit":
            return _emit(args, settings)
        return _check(args, settings)
    except ValidationError as e:
        diagnostics.error("Invalid configuration", errors=e.errors(include_url=False))
        return EXIT_CONFIG_ERROR
    except SinkError as e:
        diagnostics.error("Failed to write record", error_code=e.error_code, error=str(e))
        return EXIT_WRITE_ERROR
    except SeverityLogError as e:
        diagnostics.error("Logger setup failed", error_code=e.error_code, error=str(e))
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
