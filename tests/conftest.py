"""
Pytest configuration and shared fixtures for severity-log tests.

Every test runs in a temporary working directory with the LOG_* environment
variables cleared, so settings never pick up a developer's ``.env`` file.
"""

import logging
import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog
from freezegun import freeze_time

from severity_log import LevelFilteredLogger, MemorySink, Severity

FIXED_TIMESTAMP = datetime(2025, 8, 26, 10, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear logger environment variables and work in a temp directory."""
    for key in list(os.environ):
        if key.upper().startswith("LOG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_diagnostics() -> Generator[None, None, None]:
    """Undo diagnostics configuration made by the CLI."""
    yield
    package_logger = logging.getLogger("severity_log")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()


@pytest.fixture
def memory_sink() -> MemorySink:
    """In-memory sink capturing serialized records."""
    return MemorySink()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Timestamp source always returning the same instant."""
    return lambda: FIXED_TIMESTAMP


@pytest.fixture
def make_logger(memory_sink: MemorySink, fixed_clock: Callable[[], datetime]) -> Callable[..., LevelFilteredLogger]:
    """Factory building loggers that write to the shared memory sink."""

    def _make(threshold: Severity | str = Severity.INFO) -> LevelFilteredLogger:
        return LevelFilteredLogger(threshold, sink=memory_sink, clock=fixed_clock)

    return _make


@pytest.fixture
def frozen_time() -> Generator[None, None, None]:
    """Freeze time for deterministic timestamps."""
    with freeze_time(FIXED_TIMESTAMP):
        yield


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: integration test")
