"""Factory for creating output sinks based on configuration."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ...core.config import Settings
from ...core.exceptions import ConfigurationError
from ...domain.enums import OutputFormat, SinkType
from .base_sink import OutputSink
from .file_sink import FileSink
from .http_sink import HttpSink, HttpSinkConfig
from .memory_sink import MemorySink
from .stream_sink import StreamSink

logger = logging.getLogger(__name__)


class SinkFactory:
    """Factory for creating output sinks."""

    @staticmethod
    def create_sink(sink_type: SinkType | str, config: dict[str, Any] | None = None) -> OutputSink:
        """Create an output sink by type.

        Args:
            sink_type: Sink kind (stdout, stderr, file, http, memory)
            config: Sink-specific options

        Returns:
            Configured output sink

        Raises:
            ConfigurationError: If the sink type is unknown or its options are invalid
        """
        config = config or {}
        try:
            kind = SinkType(str(sink_type).lower()) if not isinstance(sink_type, SinkType) else sink_type
        except ValueError as e:
            raise ConfigurationError(f"Unsupported sink type: {sink_type}", details={"sink": str(sink_type)}) from e

        try:
            if kind == SinkType.STDOUT:
                sink: OutputSink = StreamSink.stdout()
            elif kind == SinkType.STDERR:
                sink = StreamSink.stderr()
            elif kind == SinkType.FILE:
                sink = SinkFactory._create_file_sink(config)
            elif kind == SinkType.HTTP:
                sink = SinkFactory._create_http_sink(config)
            else:
                sink = MemorySink()
        except ConfigurationError:
            raise
        except (ValidationError, TypeError, OSError) as e:
            raise ConfigurationError(
                f"Failed to create {kind.value} sink: {e}", details={"sink": kind.value}
            ) from e

        logger.debug("Created %s sink", kind.value)
        return sink

    @staticmethod
    def _create_file_sink(config: dict[str, Any]) -> FileSink:
        """Create file sink.

        Args:
            config: Must contain ``file_path``; may set ``max_file_size`` and ``backup_count``
        """
        if "file_path" not in config:
            raise ConfigurationError("Missing 'file_path' for file sink", details={"sink": "file"})
        return FileSink(**config)

    @staticmethod
    def _create_http_sink(config: dict[str, Any]) -> HttpSink:
        """Create HTTP sink.

        Args:
            config: HttpSinkConfig fields; ``url`` is required
        """
        if not config.get("url"):
            raise ConfigurationError("Missing 'url' for http sink", details={"sink": "http"})
        return HttpSink(HttpSinkConfig(**config))

    @staticmethod
    def create_sink_from_settings(settings: Settings) -> OutputSink:
        """Create the sink selected by application settings."""
        config: dict[str, Any] = {}
        if settings.LOG_SINK == SinkType.FILE:
            config = {
                "file_path": settings.LOG_FILE_PATH,
                "max_file_size": settings.LOG_MAX_FILE_SIZE,
                "backup_count": settings.LOG_BACKUP_COUNT,
            }
        elif settings.LOG_SINK == SinkType.HTTP:
            config = {
                "url": settings.LOG_HTTP_URL,
                "timeout": settings.LOG_HTTP_TIMEOUT,
                "queue_size": settings.LOG_HTTP_QUEUE_SIZE,
                "content_type": "application/json" if settings.LOG_FORMAT == OutputFormat.JSON else "text/plain",
            }
        return SinkFactory.create_sink(settings.LOG_SINK, config)
