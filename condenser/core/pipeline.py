"""End-to-end condensing of one file: cues + signal -> WAV bytes."""
from __future__ import annotations

from typing import Iterable, List

from .extraction import Signal, extract
from .intervals import (
    DEFAULT_MERGE_GAP,
    DEFAULT_PADDING,
    Cue,
    Interval,
    merge,
    normalize,
    validate_cues,
)
from .wav import encode_wav


def plan_windows(cues: Iterable[Cue], padding: float = DEFAULT_PADDING,
                 merge_gap: float = DEFAULT_MERGE_GAP) -> List[Interval]:
    """Validate, pad and merge cues into dialogue windows."""
    return merge(normalize(validate_cues(cues), padding), merge_gap)


def condense(cues: Iterable[Cue], signal: Signal, padding: float = DEFAULT_PADDING,
             merge_gap: float = DEFAULT_MERGE_GAP) -> bytes:
    """Return the condensed dialogue audio of ``signal`` as WAV bytes.

    An empty cue set yields a header-only WAV file.
    """
    windows = plan_windows(cues, padding, merge_gap)
    return encode_wav(extract(signal, windows))
