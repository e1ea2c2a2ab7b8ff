"""Level-filtered structured logger."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from ..domain.enums import Severity
from ..domain.value_objects import ErrorDetail, LogRecord
from ..infrastructure.serialization import RecordRenderer
from ..infrastructure.sinks import OutputSink, StreamSink

DEFAULT_THRESHOLD = Severity.INFO

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class LevelFilteredLogger:
    """Emit structured records at or above a fixed severity threshold.

    The threshold is fixed for the lifetime of an instance; build a new
    logger (see ``with_threshold``) to change it. Each accepted call builds
    one record, renders it to a single line and hands it to the sink with
    one ``write``. Rejected calls have no effect at all.

    Unrecognized severities never raise: as a request level they rank as
    the lowest severity, and as a threshold they fall back to ``info``.
    """

    __slots__ = ("_threshold", "_sink", "_renderer", "_clock")

    def __init__(
        self,
        threshold: Severity | str = DEFAULT_THRESHOLD,
        sink: OutputSink | None = None,
        renderer: RecordRenderer | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize logger.

        Args:
            threshold: Minimum severity to emit
            sink: Destination for serialized records, defaults to stdout
            renderer: Record serializer, defaults to JSON
            clock: Timestamp source, defaults to the current UTC time
        """
        self._threshold = Severity.coerce(threshold, DEFAULT_THRESHOLD)
        self._sink = sink if sink is not None else StreamSink.stdout()
        self._renderer = renderer or RecordRenderer()
        self._clock = clock or utc_now

    @property
    def threshold(self) -> Severity:
        return self._threshold

    @property
    def sink(self) -> OutputSink:
        return self._sink

    @property
    def renderer(self) -> RecordRenderer:
        return self._renderer

    def with_threshold(self, threshold: Severity | str) -> LevelFilteredLogger:
        """Return a new logger with another threshold, sharing sink, renderer and clock."""
        return LevelFilteredLogger(threshold, self._sink, self._renderer, self._clock)

    def should_log(self, level: Severity | str) -> bool:
        """Check whether a request at ``level`` would be emitted."""
        return _resolve_level(level).rank >= self._threshold.rank

    def log(self, level: Severity | str, message: str, error: Any = None) -> None:
        """Emit a record if ``level`` passes the threshold.

        Args:
            level: Severity of the request
            message: Human-readable message
            error: Optional error-like value (exception, ErrorDetail, or a
                mapping with ``message`` and ``stack`` keys)
        """
        severity = _resolve_level(level)
        if severity.rank < self._threshold.rank:
            return

        record = LogRecord(
            timestamp=self._clock(),
            level=severity,
            message=str(message),
            error=None if error is None else ErrorDetail.from_error(error),
        )
        self._sink.write(self._renderer.render(record))

    def debug(self, message: str, error: Any = None) -> None:
        self.log(Severity.DEBUG, message, error)

    def info(self, message: str, error: Any = None) -> None:
        self.log(Severity.INFO, message, error)

    def warn(self, message: str, error: Any = None) -> None:
        self.log(Severity.WARN, message, error)

    warning = warn

    def error(self, message: str, error: Any = None) -> None:
        self.log(Severity.ERROR, message, error)

    def __repr__(self) -> str:
        return f"LevelFilteredLogger(threshold={self._threshold.value!r}, sink={self._sink!r})"


def _resolve_level(level: Severity | str) -> Severity:
    return Severity.coerce(level, Severity.lowest())
