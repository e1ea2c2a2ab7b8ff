"""Infrastructure: serialization and output sinks."""

from .serialization import RecordRenderer
from .sinks import FileSink, HttpSink, HttpSinkConfig, MemorySink, OutputSink, SinkFactory, StreamSink

__all__ = [
    "RecordRenderer",
    "OutputSink",
    "StreamSink",
    "FileSink",
    "HttpSink",
    "HttpSinkConfig",
    "MemorySink",
    "SinkFactory",
]
