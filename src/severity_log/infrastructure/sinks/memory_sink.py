"""In-memory sink for testing and embedding."""

from __future__ import annotations

import json
import threading
from typing import Any

from .base_sink import OutputSink


class MemorySink(OutputSink):
    """Collect serialized records in a list."""

    def __init__(self, name: str = "memory") -> None:
        super().__init__(name)
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def _write(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> list[str]:
        """Snapshot of written lines, oldest first."""
        with self._lock:
            return list(self._lines)

    def records(self) -> list[dict[str, Any]]:
        """Decode written lines, assuming the JSON format."""
        return [json.loads(line) for line in self.lines]

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)
