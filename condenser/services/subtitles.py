"""Subtitle loading via ``pysubs2``.

Format tokenization (SRT, WebVTT, ASS/SSA) is left to pysubs2; this module
only turns its millisecond events into ``Cue`` values for the core pipeline.
"""
from __future__ import annotations

from typing import Iterable, List, Optional
import logging

import pysubs2

from condenser.core import Cue
from .errors import SubtitleLoadError

logger = logging.getLogger(__name__)


def cues_from_events(events: Iterable[pysubs2.SSAEvent]) -> List[Cue]:
    """Convert parsed events to cues in file order.

    ASS comment lines and zero-length events are skipped. Reversed events
    (end before start) are kept so pipeline validation rejects the file.
    """
    cues: List[Cue] = []
    skipped = 0
    for event in events:
        if event.is_comment:
            continue
        if event.end == event.start:
            skipped += 1
            continue
        cues.append(Cue(start=event.start / 1000, end=event.end / 1000))
    if skipped:
        logger.warning("Skipped %d subtitle event(s) with no duration", skipped)
    return cues


def load_cues(path: str, encoding: str = "utf-8") -> List[Cue]:
    """Load cues from a subtitle file; the format is detected by pysubs2."""
    logger.info("Loading subtitles: %s", path)
    try:
        subs = pysubs2.load(str(path), encoding=encoding)
    except Exception as e:
        logger.error("Failed to load subtitles from %s: %s", path, e)
        raise SubtitleLoadError(str(e)) from e
    cues = cues_from_events(subs)
    logger.debug("Loaded %d cues from %s", len(cues), path)
    return cues


def cues_from_text(text: str, format_: Optional[str] = None) -> List[Cue]:
    """Parse subtitle text held in memory (``format_`` e.g. ``"srt"``, ``"vtt"``, ``"ass"``)."""
    try:
        subs = pysubs2.SSAFile.from_string(text, format_=format_)
    except Exception as e:
        raise SubtitleLoadError(str(e)) from e
    return cues_from_events(subs)
