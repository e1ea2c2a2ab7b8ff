"""Base output sink interface and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from ...core.exceptions import SinkClosedError


class OutputSink(ABC):
    """Abstract base class for all output sinks.

    A sink receives one serialized record per ``write`` call and must write
    it as a single unit, even under concurrent callers.
    """

    def __init__(self, name: str) -> None:
        """Initialize the sink.

        Args:
            name: Human-readable name for this sink
        """
        self.name = name
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, line: str) -> None:
        """Deliver one serialized record.

        Args:
            line: Serialized record without a trailing newline

        Raises:
            SinkClosedError: If the sink has been closed
            SinkWriteError: If the underlying destination fails
        """
        if self._closed:
            raise SinkClosedError(f"{self.name} sink is closed", details={"sink": self.name})
        self._write(line)

    @abstractmethod
    def _write(self, line: str) -> None:
        """Write a single record to the destination."""
        pass

    def close(self) -> None:
        """Release resources held by the sink. Safe to call twice."""
        self._closed = True

    def __enter__(self) -> OutputSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, closed={self._closed})"
