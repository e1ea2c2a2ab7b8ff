"""Sink delivering records to a remote log collector over HTTP."""

from __future__ import annotations

import logging
import queue
import threading

import httpx
from pydantic import BaseModel, Field, field_validator

from .base_sink import OutputSink

logger = logging.getLogger(__name__)

_STOP = object()


class HttpSinkConfig(BaseModel):
    """Configuration for the HTTP sink."""

    url: str
    timeout: float = Field(default=5.0, gt=0)
    queue_size: int = Field(default=1000, ge=1)
    content_type: str = "application/json"
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL that httpx can send to."""
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid collector URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("Collector URL must be an absolute http or https URL")
        return v


class HttpSink(OutputSink):
    """POST each record to a collector from a background worker.

    ``write`` only enqueues the line; delivery is fire-and-forget. Failed
    deliveries, records dropped on a full queue and records still queued
    when ``close`` gives up waiting are reported through the package logger
    and counted in ``dropped``. The worker owns the client and closes it
    when it exits.
    """

    def __init__(
        self,
        config: HttpSinkConfig,
        client: httpx.Client | None = None,
        name: str = "http",
    ) -> None:
        """Initialize HTTP sink and start its worker thread.

        Args:
            config: HTTP sink configuration
            client: Optional preconfigured httpx client (tests pass a mock transport)
            name: Sink name used in diagnostics
        """
        super().__init__(name)
        self.config = config
        self._client = client or httpx.Client(timeout=config.timeout)
        self._queue: queue.Queue[object] = queue.Queue(maxsize=config.queue_size)
        self._dropped = 0
        self._dropped_lock = threading.Lock()
        # held across the closed check and the enqueue, and while closing
        self._state_lock = threading.Lock()
        self._worker = threading.Thread(target=self._run, name=f"{name}-sink-worker", daemon=True)
        self._worker.start()

    @property
    def dropped(self) -> int:
        with self._dropped_lock:
            return self._dropped

    def write(self, line: str) -> None:
        with self._state_lock:
            super().write(line)

    def _write(self, line: str) -> None:
        try:
            self._queue.put_nowait(line)
        except queue.Full:
            self._record_drop()
            logger.warning("HTTP sink queue full, dropping record", extra={"sink": self.name})

    def _run(self) -> None:
        try:
            while True:
                item = self._queue.get()
                try:
                    if item is _STOP:
                        return
                    self._deliver(str(item))
                finally:
                    self._queue.task_done()
        finally:
            self._client.close()

    def _deliver(self, line: str) -> None:
        headers = {"Content-Type": self.config.content_type, **self.config.headers}
        try:
            response = self._client.post(self.config.url, content=line.encode("utf-8"), headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._record_drop()
            logger.warning(
                "Log collector rejected record: HTTP %s",
                e.response.status_code,
                extra={"sink": self.name},
            )
        except httpx.HTTPError as e:
            self._record_drop()
            logger.warning("Failed to deliver record to log collector: %s", e, extra={"sink": self.name})
        except Exception:
            self._record_drop()
            logger.exception("Unexpected error delivering record to log collector", extra={"sink": self.name})

    def _record_drop(self, count: int = 1) -> None:
        with self._dropped_lock:
            self._dropped += count

    def _discard_pending(self) -> int:
        """Remove queued records without delivering them; returns how many."""
        discarded = 0
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            if item is not _STOP:
                discarded += 1
            self._queue.task_done()
        self._record_drop(discarded)
        return discarded

    def flush(self) -> None:
        """Block until every queued record has been attempted."""
        self._queue.join()

    def close(self) -> None:
        """Drain queued records and stop the worker.

        Waits up to ``timeout`` for queue space and up to twice ``timeout``
        for the worker. Records still queued after that are dropped.
        """
        with self._state_lock:
            if self._closed:
                return
            super().close()

        discarded = 0
        try:
            self._queue.put(_STOP, timeout=self.config.timeout)
        except queue.Full:
            discarded += self._discard_pending()
            self._queue.put_nowait(_STOP)

        self._worker.join(timeout=self.config.timeout * 2)
        if self._worker.is_alive():
            discarded += self._discard_pending()
            self._queue.put_nowait(_STOP)

        if discarded:
            logger.warning(
                "HTTP sink closed with %d undelivered records",
                discarded,
                extra={"sink": self.name},
            )
