"""Sink writing records to a text stream such as stdout."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from ...core.exceptions import SinkWriteError
from .base_sink import OutputSink


class StreamSink(OutputSink):
    """Write one line per record to a text stream."""

    def __init__(self, stream: TextIO | None = None, name: str = "stream") -> None:
        """Initialize stream sink.

        Args:
            stream: Target stream, defaults to ``sys.stdout`` resolved at write time
            name: Sink name used in errors and diagnostics
        """
        super().__init__(name)
        self._stream = stream
        self._lock = threading.Lock()

    @classmethod
    def stdout(cls) -> StreamSink:
        return cls(None, name="stdout")

    @classmethod
    def stderr(cls) -> StreamSink:
        return cls(sys.stderr, name="stderr")

    @property
    def stream(self) -> TextIO:
        # stdout is looked up lazily so redirection (and pytest capture) applies
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        stream = self.stream
        with self._lock:
            try:
                stream.write(line + "\n")
                stream.flush()
            except (OSError, ValueError) as e:
                raise SinkWriteError(
                    f"Failed to write to {self.name}: {e}",
                    details={"sink": self.name},
                ) from e
