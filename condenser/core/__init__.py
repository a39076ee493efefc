"""
Core pipeline for the condensed audio maker.

This package hosts pure, side-effect-free logic: cue normalization and
merging, segment extraction and WAV encoding. File and decoder I/O live in
``condenser.services`` and ``condenser.audio_utils``.
"""

__all__ = [
    "Cue",
    "MalformedCueError",
    "Interval",
    "Signal",
    "validate_cues",
    "normalize",
    "merge",
    "total_duration",
    "extract",
    "window_sample_bounds",
    "encode_wav",
    "WAV_HEADER_SIZE",
    "plan_windows",
    "condense",
    "format_seconds",
]

from .intervals import Cue, MalformedCueError, Interval, validate_cues, normalize, merge, total_duration
from .extraction import Signal, extract, window_sample_bounds
from .wav import encode_wav, WAV_HEADER_SIZE
from .pipeline import plan_windows, condense
from .timeutils import format_seconds
