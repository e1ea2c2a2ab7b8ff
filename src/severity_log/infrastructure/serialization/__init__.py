"""Record serialization."""

from .renderer import RecordRenderer

__all__ = ["RecordRenderer"]
