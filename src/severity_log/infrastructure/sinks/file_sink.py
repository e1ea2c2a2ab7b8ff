"""Rotating file sink."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ...core.exceptions import SinkWriteError
from .base_sink import OutputSink


class _RaisingRotatingFileHandler(RotatingFileHandler):
    """Rotating handler that surfaces write failures instead of printing them."""

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        raise SinkWriteError(
            f"Failed to write to {self.baseFilename}",
            details={"path": self.baseFilename},
        ) from sys.exc_info()[1]


class FileSink(OutputSink):
    """Append records to a file, rotating it when it grows too large."""

    def __init__(
        self,
        file_path: str | Path,
        max_file_size: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        name: str = "file",
    ) -> None:
        """Initialize file sink.

        Args:
            file_path: Log file path; parent directories are created
            max_file_size: Size in bytes that triggers rotation
            backup_count: Number of rotated files to keep
            name: Sink name used in errors and diagnostics
        """
        super().__init__(name)
        self.file_path = Path(file_path)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        # The handler lock serializes emission, one record per line.
        self._handler = _RaisingRotatingFileHandler(
            filename=str(self.file_path),
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding="utf-8",
            delay=True,
        )
        self._handler.setFormatter(logging.Formatter("%(message)s"))

    def _write(self, line: str) -> None:
        record = logging.makeLogRecord({"msg": line, "levelno": logging.INFO, "levelname": "INFO"})
        self._handler.handle(record)

    def close(self) -> None:
        if not self._closed:
            self._handler.close()
        super().close()
