"""Record serialization to line-oriented text."""

from __future__ import annotations

from typing import Any

from structlog.processors import JSONRenderer
from structlog.types import EventDict

from ...domain.enums import OutputFormat
from ...domain.value_objects import LogRecord


class RecordRenderer:
    """Serialize log records to exactly one line of text."""

    def __init__(self, fmt: OutputFormat | str = OutputFormat.JSON) -> None:
        """Initialize renderer.

        Args:
            fmt: Output format, ``json`` (default) or ``text``
        """
        self.format = OutputFormat(fmt)
        self._json_renderer = JSONRenderer(ensure_ascii=False)

    def render(self, record: LogRecord) -> str:
        """Render a record without a trailing newline."""
        event_dict: EventDict = record.to_dict()
        if self.format == OutputFormat.JSON:
            return self._json_renderer(None, record.level.value, event_dict)
        return self._text_renderer(event_dict)

    @staticmethod
    def _text_renderer(event_dict: EventDict) -> str:
        """Render a record as a single human-readable line."""
        msg_parts: list[str] = [
            str(event_dict.get("timestamp", "")),
            str(event_dict.get("level", "")).upper(),
            _escape(event_dict.get("message", "")),
        ]

        error = event_dict.get("error")
        if error:
            msg_parts.append(f"error={_escape(error['message'])}")
            if error["stack"]:
                msg_parts.append(f"stack={_escape(error['stack'])}")

        return " | ".join(msg_parts)


def _escape(value: Any) -> str:
    # keeps the text form on a single line
    return str(value).replace("\\", "\\\\").replace("\r", "\\r").replace("\n", "\\n")
