"""Application layer: the level-filtered logger."""

from .level_filtered_logger import DEFAULT_THRESHOLD, LevelFilteredLogger

__all__ = [
    "LevelFilteredLogger",
    "DEFAULT_THRESHOLD",
]
