"""Output sinks receiving serialized records."""

from .base_sink import OutputSink
from .factory import SinkFactory
from .file_sink import FileSink
from .http_sink import HttpSink, HttpSinkConfig
from .memory_sink import MemorySink
from .stream_sink import StreamSink

__all__ = [
    "OutputSink",
    "StreamSink",
    "FileSink",
    "HttpSink",
    "HttpSinkConfig",
    "MemorySink",
    "SinkFactory",
]
