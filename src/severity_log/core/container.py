"""Dependency injection container for severity-log.

The container is the composition root: build it once at process start,
take ``container.logger()`` and pass that instance to the code that logs.
"""

from __future__ import annotations

from collections.abc import Iterator

from dependency_injector import containers, providers

from ..application import LevelFilteredLogger
from ..infrastructure.serialization import RecordRenderer
from ..infrastructure.sinks import OutputSink, SinkFactory
from .config import Settings


def init_sink(settings: Settings) -> Iterator[OutputSink]:
    """Create the configured sink and close it on resource shutdown."""
    sink = SinkFactory.create_sink_from_settings(settings)
    try:
        yield sink
    finally:
        sink.close()


class Container(containers.DeclarativeContainer):
    """Main DI container for the logger."""

    settings = providers.Singleton(Settings)

    sink = providers.Resource(init_sink, settings=settings)

    renderer = providers.Singleton(RecordRenderer, fmt=settings.provided.LOG_FORMAT)

    logger = providers.Singleton(
        LevelFilteredLogger,
        threshold=settings.provided.LOG_LEVEL,
        sink=sink,
        renderer=renderer,
    )


def create_logger(settings: Settings | None = None, sink: OutputSink | None = None) -> LevelFilteredLogger:
    """Build a logger without a container.

    Args:
        settings: Settings to use, loaded from the environment when omitted
        sink: Explicit sink, overriding the one selected by settings

    Returns:
        Configured LevelFilteredLogger
    """
    settings = settings or Settings()
    return LevelFilteredLogger(
        threshold=settings.LOG_LEVEL,
        sink=sink if sink is not None else SinkFactory.create_sink_from_settings(settings),
        renderer=RecordRenderer(settings.LOG_FORMAT),
    )
