"""Custom exceptions for the condensing pipeline and its collaborators."""
from condenser.core.intervals import MalformedCueError

__all__ = [
    "MalformedCueError",
    "SubtitleLoadError",
    "DecodeError",
    "ConfigError",
]


class SubtitleLoadError(Exception):
    """Raised when a subtitle file cannot be read or parsed."""


class DecodeError(Exception):
    """Raised when a media file cannot be decoded to a signal."""


class ConfigError(Exception):
    """Raised when the YAML configuration file cannot be loaded."""
