"""Cue normalization and dialogue window merging.

Pure functions over explicit inputs: cues are padded into intervals, then the
intervals are coalesced into sorted, strictly disjoint dialogue windows.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence
import math


class MalformedCueError(ValueError):
    """Raised when a cue has a non-finite timestamp or ``end <= start``."""


DEFAULT_PADDING = 0.5
DEFAULT_MERGE_GAP = 0.0


@dataclass(frozen=True)
class Cue:
    """Time span of one subtitle event, in seconds."""

    start: float
    end: float


@dataclass
class Interval:
    """Padded cue span; a merged interval is a dialogue window."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start


def validate_cues(cues: Iterable[Cue]) -> List[Cue]:
    """Reject cues that would produce a negative or empty window.

    Returns the cues as a list. Raises ``MalformedCueError`` naming the first
    offending cue.
    """
    checked: List[Cue] = []
    for index, cue in enumerate(cues):
        if not (math.isfinite(cue.start) and math.isfinite(cue.end)):
            raise MalformedCueError(
                f"Cue {index} has a non-finite timestamp ({cue.start!r}, {cue.end!r})"
            )
        if cue.start < 0:
            raise MalformedCueError(f"Cue {index} starts before zero ({cue.start})")
        if cue.end <= cue.start:
            raise MalformedCueError(
                f"Cue {index} ends before it starts ({cue.start} -> {cue.end})"
            )
        checked.append(cue)
    return checked


def normalize(cues: Iterable[Cue], padding: float = DEFAULT_PADDING) -> List[Interval]:
    """Pad every cue on both sides, keeping input order.

    The start is clamped at zero; the end is left unbounded and is handled by
    the extractor. Malformed cues are passed through unchanged.
    """
    if not math.isfinite(padding) or padding < 0:
        raise ValueError(f"padding must be a finite number >= 0, got {padding}")
    return [
        Interval(start=max(0.0, cue.start - padding), end=cue.end + padding)
        for cue in cues
    ]


def merge(intervals: Sequence[Interval], gap: float = DEFAULT_MERGE_GAP) -> List[Interval]:
    """Coalesce intervals into sorted, strictly disjoint windows.

    Greedy linear scan over a stable sort by start. An interval joins the
    current window when it starts no later than ``window.end + gap``; the
    extended end is carried forward, so bridging is transitive. With the
    default ``gap`` of 0 only overlapping or touching intervals merge.

    The input intervals are not modified.
    """
    if not math.isfinite(gap) or gap < 0:
        raise ValueError(f"gap must be a finite number >= 0, got {gap}")
    if not intervals:
        return []

    ordered = sorted(intervals, key=lambda interval: interval.start)
    current = Interval(ordered[0].start, ordered[0].end)
    merged: List[Interval] = []

    for interval in ordered[1:]:
        if interval.start <= current.end + gap:
            current.end = max(current.end, interval.end)
        else:
            merged.append(current)
            current = Interval(interval.start, interval.end)

    merged.append(current)
    return merged


def total_duration(windows: Iterable[Interval]) -> float:
    """Sum of window durations in seconds."""
    return sum(window.duration for window in windows)
