"""Per-episode orchestration: subtitles + media file -> condensed WAV file.

Each episode runs the pipeline on its own inputs; a failure is recorded for
that episode and the remaining ones still run.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable
import logging

from condenser import audio_utils
from condenser.core import (
    encode_wav,
    extract,
    plan_windows,
    total_duration,
)
from condenser.core.intervals import DEFAULT_MERGE_GAP, DEFAULT_PADDING
from . import subtitles

logger = logging.getLogger(__name__)

OUTPUT_NAME_TEMPLATE = "condensed_audio_episode_{index}.wav"


@dataclass(frozen=True)
class Episode:
    media_path: str
    subtitle_path: str
    output_path: str


def default_output_name(index: int) -> str:
    """File name for the ``index``-th (1-based) episode of a run."""
    return OUTPUT_NAME_TEMPLATE.format(index=index)


def condense_episode(episode: Episode, padding: float = DEFAULT_PADDING,
                     merge_gap: float = DEFAULT_MERGE_GAP) -> Dict[str, Any]:
    """Condense one episode and write the WAV file.

    Raises the typed service errors (``SubtitleLoadError``, ``DecodeError``,
    ``MalformedCueError``) or ``OSError`` on failure.
    """
    cues = subtitles.load_cues(episode.subtitle_path)
    windows = plan_windows(cues, padding, merge_gap)
    logger.info("%s: %d cues merged into %d windows",
                episode.subtitle_path, len(cues), len(windows))

    signal = audio_utils.load_signal(episode.media_path)
    condensed = extract(signal, windows)
    blob = encode_wav(condensed)
    audio_utils.write_blob(blob, episode.output_path)
    logger.info("Wrote %s (%d bytes)", episode.output_path, len(blob))

    return {
        "media": episode.media_path,
        "subtitles": episode.subtitle_path,
        "output": episode.output_path,
        "windows": len(windows),
        "source_duration": signal.duration,
        "duration": condensed.duration,
        "dialogue_duration": total_duration(windows),
        "bytes": len(blob),
    }


def condense_episodes(episodes: Iterable[Episode], padding: float = DEFAULT_PADDING,
                      merge_gap: float = DEFAULT_MERGE_GAP) -> Dict[str, Any]:
    """Condense several episodes, isolating failures per episode.

    Returns a summary dict with ``condensed`` and ``failed`` counts, the
    per-episode ``results`` and the ``errors`` of failed episodes.
    """
    summary: Dict[str, Any] = {
        "condensed": 0,
        "failed": 0,
        "results": [],
        "errors": [],
    }

    for episode in episodes:
        try:
            result = condense_episode(episode, padding=padding, merge_gap=merge_gap)
        except Exception as e:
            logger.error("Episode %s failed: %s", episode.media_path, e)
            summary["failed"] += 1
            summary["errors"].append({
                "media": episode.media_path,
                "subtitles": episode.subtitle_path,
                "error": str(e),
            })
            continue
        summary["condensed"] += 1
        summary["results"].append(result)

    return summary
